from sqlalchemy import JSON, Column, DateTime, Integer, String, func
from notary_site.models.base import Base


class ServiceRequest(Base):
    __tablename__ = "service_requests"
    id = Column(Integer, primary_key=True, index=True)
    request_type = Column(String(100), nullable=False, index=True)  # e.g. "certidao-de-protesto"
    request_name = Column(String(255), nullable=False)  # form title shown to staff
    form_data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
