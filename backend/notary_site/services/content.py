"""Generic content resource module.

A ``Resource`` describes one admin-manageable entity type (model, schemas, URL path,
JSON keys). ``ResourceService`` applies the listing/ordering/visibility policy on top
of a ``ResourceStore`` and is shared by the public and admin routers.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from notary_site.core.errors import ConflictError, NotFoundError, ValidationError
from notary_site.services.store import ResourceStore

logger = logging.getLogger(__name__)


@dataclass
class Resource:
    path: str  # URL segment, e.g. "review-images"
    collection_key: str  # JSON key for lists, e.g. "review_images"
    item_key: str  # JSON key for a single entity, e.g. "review_image"
    model: Any
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    out_schema: Type[BaseModel]
    lookup_field: Optional[str] = None  # public lookup key instead of id (pages -> slug)
    unique_fields: tuple = ()
    newest_first: bool = False
    label: str = field(default="")

    def __post_init__(self):
        if not self.label:
            self.label = self.item_key.replace("_", " ")

    @property
    def sortable(self) -> bool:
        return hasattr(self.model, "order")


class ResourceService:
    def __init__(self, resource: Resource):
        self.resource = resource
        self.store = ResourceStore(resource.model, resource.label)

    def _ordering(self):
        model = self.resource.model
        if self.resource.sortable:
            return [asc(model.order), asc(model.id)]
        if self.resource.newest_first:
            return [desc(model.created_at), desc(model.id)]
        return [asc(model.created_at), asc(model.id)]

    def serialize(self, obj) -> dict:
        return self.resource.out_schema.model_validate(obj).model_dump(mode="json")

    # Reads

    def public_list(self, db: Session) -> List[Any]:
        return self.store.list(db, active=True, order_by=self._ordering())

    def admin_list(self, db: Session) -> List[Any]:
        return self.store.list(db, order_by=self._ordering())

    def get(self, db: Session, item_id: int):
        return self.store.get(db, item_id)

    def get_public(self, db: Session, key: Any):
        """Active entity by its public lookup key; inactive ones are reported as missing."""
        lookup = self.resource.lookup_field
        if lookup == "slug" and isinstance(key, str):
            # slugs are stored lowercased
            key = key.lower()
        obj =self.store.get_by(db, lookup, key) if lookup else self.store.get(db, key)
        if not obj.active:
            raise NotFoundError(self.resource.label, key)
        return obj

    # Writes

    def create(self, db: Session, payload: BaseModel):
        data = payload.model_dump()
        self._check_unique(db, data)
        return self.store.create(db, data)

    def update(self, db: Session, item_id: int, payload: BaseModel):
        data = payload.model_dump(exclude_unset=True)
        self.store.get(db, item_id)
        self._check_unique(db, data, exclude_id=item_id)
        return self.store.update(db, item_id, data)

    def delete(self, db: Session, item_id: int) -> None:
        self.store.delete(db, item_id)

    def toggle_active(self, db: Session, item_id: int):
        obj = self.store.get(db, item_id)
        return self.store.update(db, item_id, {"active": not obj.active})

    def reorder(self, db: Session, ids: List[int]) -> List[Any]:
        if not self.resource.sortable:
            raise ValidationError(f"{self.resource.label} cannot be reordered", {"ids": "resource has no order"})
        existing = set(self.store.ids(db))
        if len(ids) != len(set(ids)):
            raise ValidationError("Duplicate ids in reorder request", {"ids": "ids must be unique"})
        missing = existing - set(ids)
        unknown = set(ids) - existing
        if missing or unknown:
            problems = []
            if missing:
                problems.append("missing " + ", ".join(str(i) for i in sorted(missing)))
            if unknown:
                problems.append("unknown " + ", ".join(str(i) for i in sorted(unknown)))
            raise ValidationError("Reorder ids must match existing rows exactly", {"ids": "; ".join(problems)})
        self.store.assign_orders(db, {item_id: index for index, item_id in enumerate(ids)})
        logger.info("Reordered %d %s rows", len(ids), self.resource.label)
        return self.admin_list(db)

    def _check_unique(self, db: Session, data: dict, exclude_id: Optional[int] = None) -> None:
        for name in self.resource.unique_fields:
            if name in data and self.store.exists(db, name, data[name], exclude_id=exclude_id):
                raise ConflictError(f"{self.resource.label} with {name} '{data[name]}' already exists", field=name)
