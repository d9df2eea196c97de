from sqlalchemy import Column, Integer, Boolean, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


class ContentMixin(TimestampMixin):
    """Columns shared by every admin-managed content table."""

    id = Column(Integer, primary_key=True, index=True)
    active = Column(Boolean, nullable=False, default=True)


class OrderedMixin:
    # "order" is quoted by SQLAlchemy; sort is (order, id)
    order = Column("order", Integer, nullable=False, default=0, index=True)
