from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin


class Page(ContentMixin, Base):
    __tablename__ = "pages"
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    content = Column(Text, nullable=False)
