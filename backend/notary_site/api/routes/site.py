"""Single-row site configuration (settings, contacts, social media, tracking scripts).

Reads are public; writes upsert the one row and need a session.
"""
from typing import Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_user
from notary_site.db.session import get_db
from notary_site.models.settings import Contacts, Scripts, SiteSettings, SocialMedia
from notary_site.schemas import site as s
from notary_site.services.store import utcnow

router = APIRouter()

SINGLETONS = [
    ("site-settings", "settings", SiteSettings, s.SiteSettingsIn, s.SiteSettingsOut),
    ("contacts", "contacts", Contacts, s.ContactsIn, s.ContactsOut),
    ("social-media", "social_media", SocialMedia, s.SocialMediaIn, s.SocialMediaOut),
    ("scripts", "scripts", Scripts, s.ScriptsIn, s.ScriptsOut),
]


def _register(path: str, key: str, model, in_schema: Type[BaseModel], out_schema: Type[BaseModel]) -> None:
    def _dump(obj):
        return out_schema.model_validate(obj).model_dump(mode="json") if obj is not None else None

    @router.get(f"/{path}", response_model=dict, name=f"get_{key}")
    def read_singleton(db: Session = Depends(get_db)):
        return {key: _dump(db.query(model).order_by(model.id.asc()).first())}

    @router.put(f"/{path}", response_model=dict, name=f"update_{key}", dependencies=[Depends(get_current_user)])
    def write_singleton(payload: in_schema, db: Session = Depends(get_db)):
        obj = db.query(model).order_by(model.id.asc()).first()
        if obj is None:
            obj = model()
            db.add(obj)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(obj, field, value)
        obj.updated_at = utcnow()
        db.commit()
        db.refresh(obj)
        return {key: _dump(obj)}


for _entry in SINGLETONS:
    _register(*_entry)
