"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.firebase_project_id)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FIREBASE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Firebase / Firestore
    # -------------------------------------------------------------------------
    firebase_project_id: Optional[str] = Field(
        default=None,
        description="Firebase project id (token audience and Firestore project)",
    )
    google_application_credentials: Optional[str] = Field(
        default=None,
        description="Path to a service account JSON file. "
        "Application Default Credentials are used when unset.",
    )
    firestore_database: str = Field(
        default="(default)",
        description="Firestore database id",
    )

    # -------------------------------------------------------------------------
    # Authentication - Firebase ID tokens
    # -------------------------------------------------------------------------
    firebase_jwks_url: str = Field(
        default=FIREBASE_JWKS_URL,
        description="JWKS endpoint used to verify Firebase ID token signatures",
    )

    @property
    def firebase_token_issuer(self) -> Optional[str]:
        """Expected ``iss`` claim of Firebase ID tokens."""
        if not self.firebase_project_id:
            return None
        return f"https://securetoken.google.com/{self.firebase_project_id}"

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Workout assembly
    # -------------------------------------------------------------------------
    workout_assembly_rollback: bool = Field(
        default=True,
        description="Delete the placeholder workout and created exercises "
        "when assembly fails part way",
    )
    workout_assembly_max_workers: int = Field(
        default=4,
        ge=1,
        description="Thread pool size for concurrent exercise creation",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def firestore_configured(self) -> bool:
        """True when enough configuration exists to open a Firestore client."""
        return bool(self.firebase_project_id)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
