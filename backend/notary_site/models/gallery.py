from sqlalchemy import Column, String, Text
from notary_site.models.base import Base, ContentMixin, OrderedMixin


class GalleryItem(ContentMixin, OrderedMixin, Base):
    __tablename__ = "gallery"
    title = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)  # image | video
    media_url = Column(String(500), nullable=False)  # image path or video URL
    description = Column(Text, nullable=True)
