from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin


class NewsItem(ContentMixin, Base):
    __tablename__ = "news"
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)  # rich text (HTML), sanitized by the client editor
    image_url = Column(String(500), nullable=True)
