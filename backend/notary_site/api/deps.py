from datetime import datetime, timezone
import jwt
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from notary_site.core.config import Settings
from notary_site.core.errors import ForbiddenError, UnauthorizedError
from notary_site.core.security import decode_session_token
from notary_site.db.session import get_db
from notary_site.models.user import User, UserSession


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_current_session(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserSession:
    """Resolve the session cookie to a live server-side session.

    The signed token is the only credential; any failure leaves the caller anonymous.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise UnauthorizedError()
    try:
        payload = decode_session_token(settings, token)
    except jwt.PyJWTError:
        raise UnauthorizedError("Invalid or expired session")
    sid = payload.get("sid")
    sub = payload.get("sub")
    if not sid or not sub:
        raise UnauthorizedError("Invalid or expired session")
    session = db.query(UserSession).filter(UserSession.id == sid).first()
    if session is None or str(session.user_id) != sub:
        raise UnauthorizedError("Invalid or expired session")
    if as_utc(session.expires_at) <= datetime.now(tz=timezone.utc):
        db.delete(session)
        db.commit()
        raise UnauthorizedError("Session expired")
    return session


def get_current_user(
    session: UserSession = Depends(get_current_session),
    db: Session = Depends(get_db),
) -> User:
    user = db.query(User).filter(User.id == session.user_id).first()
    if user is None or not user.is_active:
        raise UnauthorizedError("Invalid or expired session")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise ForbiddenError("Administrators only")
    return user


SESSION_GUARDS = (get_current_session, get_current_user, require_admin)


def route_requires_session(route) -> bool:
    """True when any dependency of the route (router-level ones included) is a session guard."""
    dependant = getattr(route, "dependant", None)
    stack = list(dependant.dependencies) if dependant is not None else []
    while stack:
        dep = stack.pop()
        if dep.call in SESSION_GUARDS:
            return True
        stack.extend(dep.dependencies)
    return False


def has_valid_session(request: Request) -> bool:
    """Run the session checks outside dependency injection.

    FastAPI decodes a JSON body before it resolves dependencies, so a malformed body
    on a guarded route reaches the validation handler without the guard having run.
    """
    db = request.app.state.session_factory()
    try:
        session = get_current_session(request, db, request.app.state.settings)
        get_current_user(session, db)
    except UnauthorizedError:
        return False
    finally:
        db.close()
    return True
