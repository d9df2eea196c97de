import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notary_site.core.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class ResourceStore:
    """Single-table persistence for one content model.

    Every mutating call commits its own transaction; ``assign_orders`` is the only
    multi-row write and commits once for the whole batch.
    """

    def __init__(self, model, label: str):
        self.model = model
        self.label = label

    def list(self, db: Session, active: Optional[bool] = None, order_by: Iterable = ()) -> List[Any]:
        q = db.query(self.model)
        if active is not None:
            q = q.filter(self.model.active == active)
        return q.order_by(*order_by).all()

    def count(self, db: Session, active: Optional[bool] = None) -> int:
        q = db.query(self.model)
        if active is not None:
            q = q.filter(self.model.active == active)
        return q.count()

    def ids(self, db: Session) -> List[int]:
        return [row_id for (row_id,) in db.query(self.model.id).all()]

    def get(self, db: Session, item_id: int):
        obj = db.query(self.model).filter(self.model.id == item_id).first()
        if obj is None:
            raise NotFoundError(self.label, item_id)
        return obj

    def get_by(self, db: Session, field: str, value: Any):
        obj = db.query(self.model).filter(getattr(self.model, field) == value).first()
        if obj is None:
            raise NotFoundError(self.label, value)
        return obj

    def exists(self, db: Session, field: str, value: Any, exclude_id: Optional[int] = None) -> bool:
        q = db.query(self.model.id).filter(getattr(self.model, field) == value)
        if exclude_id is not None:
            q = q.filter(self.model.id != exclude_id)
        return q.first() is not None

    def create(self, db: Session, data: Dict[str, Any]):
        now = utcnow()
        obj = self.model(**data, created_at=now, updated_at=now)
        db.add(obj)
        self._commit(db)
        db.refresh(obj)
        logger.info("Created %s id=%s", self.label, obj.id)
        return obj

    def update(self, db: Session, item_id: int, data: Dict[str, Any]):
        obj = self.get(db, item_id)
        for key, value in data.items():
            setattr(obj, key, value)
        obj.updated_at = utcnow()
        self._commit(db)
        db.refresh(obj)
        return obj

    def delete(self, db: Session, item_id: int) -> None:
        obj = self.get(db, item_id)
        db.delete(obj)
        self._commit(db)
        logger.info("Deleted %s id=%s", self.label, item_id)

    def assign_orders(self, db: Session, positions: Dict[int, int]) -> None:
        now = utcnow()
        try:
            for obj in db.query(self.model).filter(self.model.id.in_(list(positions))).all():
                obj.order = positions[obj.id]
                obj.updated_at = now
            db.commit()
        except Exception:
            db.rollback()
            raise

    def _commit(self, db: Session) -> None:
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("Integrity violation on %s: %s", self.label, exc.orig)
            raise ConflictError(f"{self.label} conflicts with an existing record")
