import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from notary_site.api.deps import get_current_session, get_current_user, get_settings
from notary_site.core.config import Settings
from notary_site.core.errors import ForbiddenError, UnauthorizedError
from notary_site.core.security import (
    create_session_token,
    new_session_id,
    session_expiry,
    verify_password,
)
from notary_site.db.session import get_db
from notary_site.models.user import User, UserSession
from notary_site.schemas.auth import LoginRequest, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=dict)
def login(payload: LoginRequest, response: Response, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Check credentials and open a server-side session.

    Unknown user and wrong password both answer 401 with the same message and set no
    cookie. A deactivated account answers 403.
    """
    username = payload.username.lower()
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(payload.password, user.hashed_password):
        logger.warning("Failed login for username=%s", username)
        raise UnauthorizedError("Incorrect username or password")
    if not user.is_active:
        raise ForbiddenError("User is blocked")

    now = datetime.now(tz=timezone.utc)
    # drop this user's stale sessions while we are here
    db.query(UserSession).filter(UserSession.user_id == user.id, UserSession.expires_at <= now).delete(
        synchronize_session=False
    )
    expires_at = session_expiry(settings, now)
    session = UserSession(id=new_session_id(), user_id=user.id, expires_at=expires_at)
    db.add(session)
    db.commit()

    token = create_session_token(settings, user.id, session.id, expires_at)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    logger.info("User %s logged in", user.username)
    return {"user": UserOut.model_validate(user)}


@router.post("/logout", response_model=dict)
def logout(
    response: Response,
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    db.delete(session)
    db.commit()
    response.delete_cookie(settings.session_cookie_name)
    return {"status": "ok"}


@router.get("/me", response_model=dict)
def me(user: User = Depends(get_current_user)):
    return {"user": UserOut.model_validate(user)}
