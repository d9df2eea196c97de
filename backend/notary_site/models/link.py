from sqlalchemy import Column, String
from notary_site.models.base import Base, ContentMixin, OrderedMixin


class Link(ContentMixin, OrderedMixin, Base):
    __tablename__ = "links"
    name = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
