"""
SHELFKIT - Configuration Management
Centralized configuration using Pydantic Settings with environment variables
"""
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Helper settings loaded from environment variables.

    Every field can be overridden with a ``SHELFKIT_``-prefixed variable
    or a ``.env`` file. Defaults match the mobile application's behaviour.
    """

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    APP_NAME: str = "Shelfkit"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="production", description="Environment: development, staging, production")

    # =========================================================================
    # LOCALE FORMATTING
    # =========================================================================
    DEFAULT_LOCALE: str = Field(default="es_ES", description="Locale used when callers pass none")
    DEFAULT_CURRENCY_SYMBOL: str = Field(default="€", description="Symbol attached to formatted prices")
    PRICE_DECIMAL_DIGITS: int = Field(default=2, ge=0, le=6, description="Fraction digits for prices")

    # =========================================================================
    # IMAGE SETTINGS
    # =========================================================================
    MAX_IMAGE_SIZE_BYTES: int = Field(default=5 * 1024 * 1024, gt=0, description="Max image size (bytes)")
    ALLOWED_IMAGE_EXTENSIONS: List[str] = Field(
        default=["jpg", "jpeg", "png", "gif", "bmp"],
        description="Extensions accepted as images"
    )
    AI_IMAGE_EXTENSIONS: List[str] = Field(
        default=["jpg", "jpeg", "png"],
        description="Extensions accepted by the AI image pipeline"
    )
    UNIQUE_IMAGE_EXTENSION: str = Field(default="jpg", description="Extension of generated image names")

    @field_validator("ALLOWED_IMAGE_EXTENSIONS", "AI_IMAGE_EXTENSIONS", mode="before")
    @classmethod
    def normalize_extensions(cls, v):
        """Accept comma-separated strings and strip dots / case"""
        if isinstance(v, str):
            v = v.split(",")
        return [ext.strip().lstrip(".").lower() for ext in v if ext.strip()]

    # =========================================================================
    # DEVICE SETTINGS
    # =========================================================================
    CONNECTIVITY_CHECK_HOST: str = Field(default="google.com", description="Host resolved by the connectivity check")
    CONNECTIVITY_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0, description="Connectivity check timeout")

    # =========================================================================
    # LOGGING SETTINGS
    # =========================================================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="text", description="Log format: text or json")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return str(v).upper()

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="SHELFKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once
    and reused across the helpers.

    Returns:
        Settings: Settings instance
    """
    return Settings()


# Export settings instance
settings = get_settings()
