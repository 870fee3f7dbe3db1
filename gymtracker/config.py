"""Runtime configuration for gymtracker.

Values come from the environment (optionally a local `.env` file).
"""

import logging
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

AUTH_MODES = ("demo", "jwt")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Application settings."""

    auth_mode: str = Field("demo", description="Identity provider: 'demo' or 'jwt'")
    demo_user_id: str = Field("demo-user-123", description="Subject injected by the demo identity")
    demo_user_email: str = Field("demo@example.com", description="Email injected by the demo identity")
    jwt_secret_key: str = Field("change-me-in-production", description="HMAC secret for bearer tokens")
    jwt_algorithm: str = Field("HS256", description="JWT signing algorithm")
    log_level: str = Field("INFO", description="Root log level")
    host: str = Field("0.0.0.0", description="Bind address for the development server")
    port: int = Field(8000, description="Bind port for the development server")
    reload: bool = Field(False, description="Enable uvicorn auto-reload")


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


def get_settings() -> Settings:
    """Build settings from the current environment.

    Raises:
        ValueError: If GYMTRACKER_AUTH_MODE is not a known mode
    """
    auth_mode = os.getenv("GYMTRACKER_AUTH_MODE", "demo").lower()
    if auth_mode not in AUTH_MODES:
        raise ValueError(f"Unknown GYMTRACKER_AUTH_MODE '{auth_mode}' (expected one of {', '.join(AUTH_MODES)})")

    return Settings(
        auth_mode=auth_mode,
        demo_user_id=os.getenv("DEMO_USER_ID", "demo-user-123"),
        demo_user_email=os.getenv("DEMO_USER_EMAIL", "demo@example.com"),
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me-in-production"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=_env_bool("RELOAD"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
