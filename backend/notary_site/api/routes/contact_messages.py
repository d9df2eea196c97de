import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_user
from notary_site.core.errors import NotFoundError
from notary_site.db.session import get_db
from notary_site.models.contact_message import ContactMessage
from notary_site.schemas.site import ContactMessageIn, ContactMessageOut
from notary_site.services.store import utcnow

logger = logging.getLogger(__name__)

router = APIRouter()


def _get(db: Session, message_id: int) -> ContactMessage:
    m = db.query(ContactMessage).filter(ContactMessage.id == message_id).first()
    if not m:
        raise NotFoundError("contact message", message_id)
    return m


@router.post("/contact-messages", status_code=status.HTTP_201_CREATED, response_model=dict)
def submit_message(payload: ContactMessageIn, db: Session = Depends(get_db)):
    """Public contact form. Attachments and the notification e-mail are handled elsewhere."""
    m = ContactMessage(**payload.model_dump(), read=False, created_at=utcnow())
    db.add(m)
    db.commit()
    db.refresh(m)
    logger.info("Contact message %s received", m.id)
    return {"contact_message": ContactMessageOut.model_validate(m).model_dump(mode="json")}


@router.get("/admin/contact-messages", response_model=dict, dependencies=[Depends(get_current_user)])
def list_messages(db: Session = Depends(get_db)):
    items = db.query(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()
    return {"contact_messages": [ContactMessageOut.model_validate(m).model_dump(mode="json") for m in items]}


@router.patch("/contact-messages/{message_id}/toggle-read", response_model=dict, dependencies=[Depends(get_current_user)])
def toggle_read(message_id: int, db: Session = Depends(get_db)):
    m = _get(db, message_id)
    m.read = not m.read
    db.commit()
    db.refresh(m)
    return {"contact_message": ContactMessageOut.model_validate(m).model_dump(mode="json")}


@router.delete("/contact-messages/{message_id}", response_model=dict, dependencies=[Depends(get_current_user)])
def delete_message(message_id: int, db: Session = Depends(get_db)):
    db.delete(_get(db, message_id))
    db.commit()
    return {"status": "deleted"}
