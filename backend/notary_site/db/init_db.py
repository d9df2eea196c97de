import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from notary_site.core.config import Settings
from notary_site.core.security import get_password_hash
from notary_site.models import (  # noqa: F401
    announcement,
    banner,
    contact_message,
    gallery,
    information,
    link,
    news,
    page,
    review_image,
    service,
    service_request,
    settings as settings_models,
    user,
)
from notary_site.models.base import Base
from notary_site.models.user import User

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def seed_admin(session_factory: sessionmaker, settings: Settings) -> None:
    """Create the bootstrap administrator if it does not exist yet (idempotent)."""
    username = (settings.seed_admin_username or "admin").lower()
    email = (settings.seed_admin_email or "admin@example.com").lower()
    password = settings.seed_admin_password or "Admin1234!"

    db = session_factory()
    try:
        admin = db.query(User).filter(User.username == username).first()
        if admin:
            return
        admin = User(
            username=username,
            email=email,
            full_name="Administrator",
            hashed_password=get_password_hash(password),
            is_admin=True,
            is_active=True,
        )
        db.add(admin)
        db.commit()
        logger.info("Seeded administrator '%s'", username)
    finally:
        db.close()
