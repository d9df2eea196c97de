"""Router factories for the generic content resources.

``build_public_router`` exposes the unauthenticated read side, ``build_admin_router``
the session-guarded write side. Both are instantiated once per ``Resource`` in the
catalogue (see ``api.router``).
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_user
from notary_site.db.session import get_db
from notary_site.schemas.content import ReorderRequest
from notary_site.services.content import Resource, ResourceService


def build_public_router(resource: Resource) -> APIRouter:
    service = ResourceService(resource)
    router = APIRouter(tags=[resource.path])

    @router.get(f"/{resource.path}", response_model=dict, name=f"list_{resource.collection_key}")
    def public_list(db: Session = Depends(get_db)):
        return {resource.collection_key: [service.serialize(o) for o in service.public_list(db)]}

    if resource.lookup_field:
        @router.get(f"/{resource.path}/{{key}}", response_model=dict, name=f"get_{resource.item_key}")
        def public_get(key: str, db: Session = Depends(get_db)):
            return {resource.item_key: service.serialize(service.get_public(db, key))}

    return router


def build_admin_router(resource: Resource) -> APIRouter:
    service = ResourceService(resource)
    router = APIRouter(tags=[resource.path], dependencies=[Depends(get_current_user)])
    create_schema = resource.create_schema
    update_schema = resource.update_schema

    @router.get(f"/admin/{resource.path}", response_model=dict, name=f"admin_list_{resource.collection_key}")
    def admin_list(db: Session = Depends(get_db)):
        return {resource.collection_key: [service.serialize(o) for o in service.admin_list(db)]}

    @router.get(f"/admin/{resource.path}/{{item_id}}", response_model=dict, name=f"admin_get_{resource.item_key}")
    def admin_get(item_id: int, db: Session = Depends(get_db)):
        return {resource.item_key: service.serialize(service.get(db, item_id))}

    @router.post(
        f"/{resource.path}",
        status_code=status.HTTP_201_CREATED,
        response_model=dict,
        name=f"create_{resource.item_key}",
    )
    def create_item(payload: create_schema, db: Session = Depends(get_db)):
        return {resource.item_key: service.serialize(service.create(db, payload))}

    if resource.sortable:
        # registered before /{item_id} routes so "reorder" never parses as an id
        @router.post(f"/{resource.path}/reorder", response_model=dict, name=f"reorder_{resource.collection_key}")
        def reorder_items(payload: ReorderRequest, db: Session = Depends(get_db)):
            return {resource.collection_key: [service.serialize(o) for o in service.reorder(db, payload.ids)]}

    # PUT kept for older admin clients; PATCH is the canonical partial update
    @router.api_route(
        f"/{resource.path}/{{item_id}}",
        methods=["PATCH", "PUT"],
        response_model=dict,
        name=f"update_{resource.item_key}",
    )
    def update_item(item_id: int, payload: update_schema, db: Session = Depends(get_db)):
        return {resource.item_key: service.serialize(service.update(db, item_id, payload))}

    @router.patch(f"/{resource.path}/{{item_id}}/toggle", response_model=dict, name=f"toggle_{resource.item_key}")
    def toggle_item(item_id: int, db: Session = Depends(get_db)):
        return {resource.item_key: service.serialize(service.toggle_active(db, item_id))}

    @router.delete(f"/{resource.path}/{{item_id}}", response_model=dict, name=f"delete_{resource.item_key}")
    def delete_item(item_id: int, db: Session = Depends(get_db)):
        service.delete(db, item_id)
        return {"status": "deleted"}

    return router
