from pathlib import Path
from typing import Literal

from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "StreetEats API"
    app_env: str = "development"
    app_port: int = 5000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite for local dev, any async SQLAlchemy URL in production)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./streeteats.db",
        alias="DATABASE_URL",
    )

    # Grievance attachments
    upload_dir: Path = Field(default=Path("uploads"), alias="UPLOAD_DIR")
    max_attachment_size_mb: int | None = Field(
        default=None, alias="MAX_ATTACHMENT_SIZE_MB",
    )  # unset = no cap

    # Accounts
    credential_scheme: Literal["plaintext", "salted_sha256"] = Field(
        default="salted_sha256", alias="CREDENTIAL_SCHEME",
    )
    login_requires_verification: bool = Field(
        default=False, alias="LOGIN_REQUIRES_VERIFICATION",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_attachment_size_bytes(self) -> int | None:
        if self.max_attachment_size_mb is None:
            return None
        return self.max_attachment_size_mb * 1024 * 1024

settings = Settings()

def get_settings(request: Request) -> Settings:
    """FastAPI dependency: the settings the running app was built with."""
    return request.app.state.settings
