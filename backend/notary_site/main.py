import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notary_site.api.router import api_router
from notary_site.core.config import Settings, settings as default_settings
from notary_site.core.errors import register_error_handlers
from notary_site.db.init_db import create_tables, seed_admin
from notary_site.db.session import make_engine, make_session_factory
from notary_site.middleware.logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


def run_migrations(settings: Settings) -> None:
    """Apply Alembic migrations to head (production only, AUTO_APPLY_MIGRATIONS=1).

    Safe to run repeatedly; a failure is logged and the app keeps serving so the
    migration can be retried manually.
    """
    from alembic import command
    from alembic.config import Config

    root = Path(__file__).resolve().parents[1]
    alembic_ini = root / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("alembic.ini not found at %s, skipping migrations", alembic_ini)
        return
    cfg = Config(str(alembic_ini))
    # Ensure script_location resolves correctly when launched from arbitrary CWD
    cfg.set_main_option("script_location", str(root / "alembic"))
    cfg.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
    try:
        logger.info("Applying Alembic migrations -> head")
        command.upgrade(cfg, "head")
    except Exception:
        logger.exception("Migration failed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = make_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    if settings.is_prod and settings.auto_apply_migrations:
        run_migrations(settings)
    elif settings.auto_create_tables:
        create_tables(engine)
    if not settings.is_prod:
        seed_admin(app.state.session_factory, settings)
    logger.info("%s started (env=%s)", settings.app_name, settings.env)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database pool disposed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
