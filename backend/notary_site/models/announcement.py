from sqlalchemy import Column, Text
from notary_site.models.base import Base, ContentMixin


class Announcement(ContentMixin, Base):
    __tablename__ = "announcements"
    text = Column(Text, nullable=False)
