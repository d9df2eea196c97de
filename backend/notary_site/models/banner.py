from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin, OrderedMixin


class Banner(ContentMixin, OrderedMixin, Base):
    __tablename__ = "banners"
    title = Column(String(255), nullable=False)
    # Text to allow long CDN or tracking URLs
    image_url = Column(Text, nullable=False)
    link = Column(Text, nullable=True)
