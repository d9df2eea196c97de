from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_user
from notary_site.db.session import get_db
from notary_site.models.contact_message import ContactMessage
from notary_site.models.service_request import ServiceRequest
from notary_site.services.catalog import RESOURCES
from notary_site.services.content import ResourceService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=dict)
def dashboard_stats(db: Session = Depends(get_db)):
    """Counters for the admin landing page.

    Returns:
        messages: {total, unread}
        service_requests: {total}
        resources: {<collection key>: {total, active}} for every content type
    """
    total_messages = db.query(func.count(ContactMessage.id)).scalar() or 0
    unread = db.query(func.count(ContactMessage.id)).filter(ContactMessage.read == False).scalar() or 0  # noqa: E712
    requests = db.query(func.count(ServiceRequest.id)).scalar() or 0
    resources = {}
    for resource in RESOURCES:
        store = ResourceService(resource).store
        resources[resource.collection_key] = {
            "total": store.count(db),
            "active": store.count(db, active=True),
        }
    return {
        "messages": {"total": total_messages, "unread": unread},
        "service_requests": {"total": requests},
        "resources": resources,
    }
