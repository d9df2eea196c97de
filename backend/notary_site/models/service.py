from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin


class Service(ContentMixin, Base):
    __tablename__ = "services"
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
