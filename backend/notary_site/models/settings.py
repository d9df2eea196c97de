from sqlalchemy import Column, Integer, String, Text
from notary_site.models.base import Base, TimestampMixin


class SiteSettings(TimestampMixin, Base):
    __tablename__ = "site_settings"
    id = Column(Integer, primary_key=True)
    browser_tab_name = Column(String(255), nullable=True)
    main_logo = Column(String(500), nullable=True)
    footer_logo = Column(String(500), nullable=True)
    requests_email = Column(String(255), nullable=True)  # inbox for form submissions


class Contacts(TimestampMixin, Base):
    __tablename__ = "contacts"
    id = Column(Integer, primary_key=True)
    whatsapp = Column(String(50), nullable=True)
    phone = Column(String(50), nullable=True)
    emails = Column(Text, nullable=True)  # comma separated
    address = Column(Text, nullable=True)
    business_hours = Column(Text, nullable=True)


class SocialMedia(TimestampMixin, Base):
    __tablename__ = "social_media"
    id = Column(Integer, primary_key=True)
    youtube = Column(String(500), nullable=True)
    instagram = Column(String(500), nullable=True)
    facebook = Column(String(500), nullable=True)
    tiktok = Column(String(500), nullable=True)


class Scripts(TimestampMixin, Base):
    __tablename__ = "scripts"
    id = Column(Integer, primary_key=True)
    google_tag_manager = Column(Text, nullable=True)
    facebook_pixel = Column(Text, nullable=True)
    google_analytics = Column(Text, nullable=True)
