from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin


class Information(ContentMixin, Base):
    __tablename__ = "information"
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
