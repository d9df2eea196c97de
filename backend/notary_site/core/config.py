from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    app_name: str = Field(default="Notary Site API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    secret_key: str = Field(default="devsecret", alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    session_expire_minutes: int = Field(default=60 * 12, alias="SESSION_EXPIRE_MINUTES")
    session_cookie_name: str = Field(default="notary_session", alias="SESSION_COOKIE_NAME")
    session_cookie_secure: bool = Field(default=False, alias="SESSION_COOKIE_SECURE")
    database_url: str = Field(default="sqlite:///./notary_site.db", alias="DATABASE_URL")
    # create_all on startup; production relies on Alembic instead
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")
    auto_apply_migrations: bool = Field(default=True, alias="AUTO_APPLY_MIGRATIONS")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma separated or JSON list of allowed CORS origins")
    # Seed admin (dev/demo convenience)
    seed_admin_username: Optional[str] = Field(default=None, alias="SEED_ADMIN_USERNAME")
    seed_admin_email: Optional[str] = Field(default=None, alias="SEED_ADMIN_EMAIL")
    seed_admin_password: Optional[str] = Field(default=None, alias="SEED_ADMIN_PASSWORD")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        populate_by_name = True

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            try:
                import json
                loaded = json.loads(s)
                if isinstance(loaded, list):
                    return [str(e).strip() for e in loaded if str(e).strip()]
            except ValueError:
                pass
        return [e.strip() for e in s.split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback dev defaults if none provided
        if not items:
            return ["http://localhost:5173", "http://127.0.0.1:5173"]
        # Dev convenience: ensure both localhost and 127.0.0.1 variants for same ports
        augmented = set(items)
        for origin in items:
            if origin.startswith("http://localhost:"):
                augmented.add("http://127.0.0.1:" + origin.rsplit(":", 1)[1])
            if origin.startswith("http://127.0.0.1:"):
                augmented.add("http://localhost:" + origin.rsplit(":", 1)[1])
        return sorted(augmented)

    @property
    def is_prod(self) -> bool:
        return self.env.lower() == "prod"


settings = Settings()  # type: ignore
