from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from notary_site.schemas.common import (
    Name,
    NonEmptyStr,
    OptionalAbsoluteUrl,
    OptionalUrlOrPath,
    Phone,
    RequestType,
)


class SiteSettingsIn(BaseModel):
    browser_tab_name: Optional[str] = Field(default=None, max_length=255)
    main_logo: OptionalUrlOrPath = None
    footer_logo: OptionalUrlOrPath = None
    requests_email: Optional[EmailStr] = None


class SiteSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    browser_tab_name: Optional[str]
    main_logo: Optional[str]
    footer_logo: Optional[str]
    requests_email: Optional[str]
    updated_at: datetime


class ContactsIn(BaseModel):
    whatsapp: Optional[str] = Field(default=None, max_length=50)
    phone: Optional[str] = Field(default=None, max_length=50)
    emails: Optional[str] = None
    address: Optional[str] = None
    business_hours: Optional[str] = None


class ContactsOut(ContactsIn):
    model_config = ConfigDict(from_attributes=True)

    updated_at: datetime


class SocialMediaIn(BaseModel):
    youtube: OptionalAbsoluteUrl = None
    instagram: OptionalAbsoluteUrl = None
    facebook: OptionalAbsoluteUrl = None
    tiktok: OptionalAbsoluteUrl = None


class SocialMediaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    youtube: Optional[str]
    instagram: Optional[str]
    facebook: Optional[str]
    tiktok: Optional[str]
    updated_at: datetime


class ScriptsIn(BaseModel):
    google_tag_manager: Optional[str] = None
    facebook_pixel: Optional[str] = None
    google_analytics: Optional[str] = None


class ScriptsOut(ScriptsIn):
    model_config = ConfigDict(from_attributes=True)

    updated_at: datetime


class ContactMessageIn(BaseModel):
    name: Name
    email: EmailStr
    phone: Phone
    message: NonEmptyStr


class ContactMessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    message: str
    read: bool
    created_at: datetime


class ServiceRequestIn(BaseModel):
    """A filled-in public request form (certificates, deeds).

    ``request_type`` is the machine key of the form, ``request_name`` its display
    title; the answers are kept as submitted in ``form_data``.
    """

    request_type: RequestType
    request_name: Name
    form_data: Dict[str, Any]


class ServiceRequestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    request_type: str
    request_name: str
    form_data: Dict[str, Any]
    created_at: datetime
