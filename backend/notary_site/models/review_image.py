from sqlalchemy import Column, String
from notary_site.models.base import Base, ContentMixin, OrderedMixin


class ReviewImage(ContentMixin, OrderedMixin, Base):
    __tablename__ = "review_images"
    image_url = Column(String(500), nullable=False)
