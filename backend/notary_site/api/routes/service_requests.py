"""Request forms (certificates, deeds) filled in on the public site.

Submission is anonymous; staff list and remove requests from the admin panel.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_user
from notary_site.core.errors import NotFoundError
from notary_site.db.session import get_db
from notary_site.models.service_request import ServiceRequest
from notary_site.schemas.site import ServiceRequestIn, ServiceRequestOut
from notary_site.services.store import utcnow

logger = logging.getLogger(__name__)

router = APIRouter()


def _dump(r: ServiceRequest) -> dict:
    return ServiceRequestOut.model_validate(r).model_dump(mode="json")


@router.post("/service-requests", status_code=status.HTTP_201_CREATED, response_model=dict)
def submit_request(payload: ServiceRequestIn, db: Session = Depends(get_db)):
    r = ServiceRequest(**payload.model_dump(), created_at=utcnow())
    db.add(r)
    db.commit()
    db.refresh(r)
    logger.info("Service request %s received (%s)", r.id, r.request_type)
    return {"service_request": _dump(r)}


@router.get("/admin/service-requests", response_model=dict, dependencies=[Depends(get_current_user)])
def list_requests(request_type: Optional[str] = None, db: Session = Depends(get_db)):
    q = db.query(ServiceRequest)
    if request_type:
        q = q.filter(ServiceRequest.request_type == request_type.lower())
    items = q.order_by(ServiceRequest.created_at.desc(), ServiceRequest.id.desc()).all()
    return {"service_requests": [_dump(r) for r in items]}


@router.get("/admin/service-requests/{request_id}", response_model=dict, dependencies=[Depends(get_current_user)])
def get_request(request_id: int, db: Session = Depends(get_db)):
    r = db.query(ServiceRequest).filter(ServiceRequest.id == request_id).first()
    if not r:
        raise NotFoundError("service request", request_id)
    return {"service_request": _dump(r)}


@router.delete("/service-requests/{request_id}", response_model=dict, dependencies=[Depends(get_current_user)])
def delete_request(request_id: int, db: Session = Depends(get_db)):
    r = db.query(ServiceRequest).filter(ServiceRequest.id == request_id).first()
    if not r:
        raise NotFoundError("service request", request_id)
    db.delete(r)
    db.commit()
    return {"status": "deleted"}
