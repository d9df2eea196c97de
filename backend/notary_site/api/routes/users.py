from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notary_site.api.deps import require_admin
from notary_site.core.errors import ConflictError, NotFoundError, ValidationError
from notary_site.core.security import get_password_hash
from notary_site.db.session import get_db
from notary_site.models.user import User
from notary_site.schemas.auth import UserCreate, UserOut, UserUpdate

router = APIRouter()


def _ensure_free(db: Session, username: Optional[str], email: Optional[str], exclude_id: Optional[int] = None):
    for field, value in (("username", username), ("email", email)):
        if value is None:
            continue
        q = db.query(User).filter(getattr(User, field) == value)
        if exclude_id is not None:
            q = q.filter(User.id != exclude_id)
        if q.first():
            raise ConflictError(f"{field} already in use", field=field)


@router.get("", response_model=dict)
def list_users(db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    users = db.query(User).order_by(User.id.asc()).all()
    return {"users": [UserOut.model_validate(u) for u in users]}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=dict)
def create_user(payload: UserCreate, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    username = payload.username.lower()
    email = payload.email.lower()
    _ensure_free(db, username, email)
    user = User(
        username=username,
        email=email,
        full_name=payload.full_name,
        hashed_password=get_password_hash(payload.password),
        is_admin=payload.is_admin,
        is_active=payload.is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return {"user": UserOut.model_validate(user)}


@router.api_route("/{user_id}", methods=["PATCH", "PUT"], response_model=dict)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db), _admin: User = Depends(require_admin)):
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user", user_id)
    data = payload.model_dump(exclude_unset=True)
    if "username" in data:
        data["username"] = data["username"].lower()
    if "email" in data:
        data["email"] = data["email"].lower()
    _ensure_free(db, data.get("username"), data.get("email"), exclude_id=user_id)
    if "password" in data:
        data["hashed_password"] = get_password_hash(data.pop("password"))
    for key, value in data.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return {"user": UserOut.model_validate(user)}


@router.delete("/{user_id}", response_model=dict)
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    if admin.id == user_id:
        raise ValidationError("You cannot delete your own account", {"id": "cannot delete the signed-in user"})
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user", user_id)
    db.delete(user)
    db.commit()
    return {"status": "deleted"}
