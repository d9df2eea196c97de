import re
from typing import Annotated, ClassVar, Optional, Tuple
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, BeforeValidator, StringConstraints, ValidationInfo, field_validator

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _check_absolute_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc or " " in value:
        raise ValueError("must be an absolute http(s) URL")
    return value


def _check_url_or_path(value: str) -> str:
    # uploads are stored as site-relative paths such as /uploads/banners/x.jpg
    if value.startswith("/") and not value.startswith("//") and " " not in value:
        return value
    return _check_absolute_url(value)


def _check_slug(value: str) -> str:
    if not SLUG_RE.match(value):
        raise ValueError("must contain lowercase letters, digits and single hyphens only")
    return value


# max_length values mirror the String(n) columns the fields are stored in
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]
AbsoluteUrl = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500), AfterValidator(_check_absolute_url)
]
UrlOrPath = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500), AfterValidator(_check_url_or_path)
]
Slug = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=255), AfterValidator(_check_slug)
]
RequestType = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=100), AfterValidator(_check_slug)
]


class PartialUpdate(BaseModel):
    """Base for PATCH bodies: any field may be omitted, required ones may not be nulled."""

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.required_fields:
            raise ValueError("may not be null")
        return value


def blank_to_none(value):
    # admin forms submit "" for untouched optional inputs
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalUrlOrPath = Annotated[Optional[UrlOrPath], BeforeValidator(blank_to_none)]
OptionalAbsoluteUrl = Annotated[Optional[AbsoluteUrl], BeforeValidator(blank_to_none)]
