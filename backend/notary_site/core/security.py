from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import uuid
import jwt
from passlib.context import CryptContext

from notary_site.core.config import Settings

# Prefer argon2, keep bcrypt so hashes imported from the previous site still verify
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def new_session_id() -> str:
    return uuid.uuid4().hex


def session_expiry(settings: Settings, now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(tz=timezone.utc)
    return now + timedelta(minutes=settings.session_expire_minutes)


def create_session_token(settings: Settings, user_id: int, session_id: str, expires_at: datetime) -> str:
    to_encode: dict[str, Any] = {"sub": str(user_id), "sid": session_id, "exp": expires_at}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(settings: Settings, token: str) -> dict[str, Any]:
    """Decode and verify a session token.

    Raises jwt.PyJWTError if the signature is wrong or the token expired.
    """
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
