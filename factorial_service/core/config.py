"""
Factorial Service Configuration

Configuration management with environment variable support.
Every value has a secure default so the service starts without a .env file.
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation and secure defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Environment settings
    ENVIRONMENT: str = Field(
        default="development", description="Application environment"
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # API configuration
    API_HOST: str = Field(default="127.0.0.1", description="API server host")
    API_PORT: int = Field(default=8080, ge=1, le=65535, description="API server port")

    # Cache backend configuration
    CACHE_BACKEND: str = Field(
        default="redis", description="Cache backend: 'redis' or 'memory'"
    )
    REDIS_URL: str = Field(
        default="redis://127.0.0.1:6379/", description="Redis connection URL"
    )
    REDIS_CONNECTION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Redis connect timeout in seconds"
    )
    REDIS_OPERATION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Redis command timeout in seconds"
    )

    # Factorial computation limits
    UPPER_FACTORIAL_LIMIT: int = Field(
        default=100_000, ge=0, description="Largest accepted input number"
    )
    DEFAULT_CACHE_EXPIRATION_TIME: int = Field(
        default=10 * 60 * 60,
        gt=0,
        le=86400 * 365,
        description="Cache entry TTL in seconds",
    )

    # Circuit breaker settings
    CIRCUIT_BREAKER_FAILURE_THRESHOLD: int = Field(
        default=5, ge=1, le=20, description="Circuit breaker failure threshold"
    )
    CIRCUIT_BREAKER_RECOVERY_TIMEOUT: float = Field(
        default=30.0,
        ge=1,
        le=300,
        description="Circuit breaker recovery timeout in seconds",
    )

    # OpenTelemetry resource naming
    OTEL_SERVICE_NAME: str = Field(
        default="factorial-service", description="OpenTelemetry service name"
    )
    OTEL_SERVICE_VERSION: str = Field(
        default="0.1.0", description="OpenTelemetry service version"
    )

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("CACHE_BACKEND")
    @classmethod
    def validate_cache_backend(cls, v):
        allowed = ["redis", "memory"]
        if v.lower() not in allowed:
            raise ValueError(f"CACHE_BACKEND must be one of: {allowed}")
        return v.lower()

    @field_validator("REDIS_URL")
    @classmethod
    def validate_redis_url(cls, v):
        """Validate Redis URL scheme."""
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError("REDIS_URL must be a redis://, rediss:// or unix:// URL")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    # Alias properties for snake_case usage
    @property
    def upper_factorial_limit(self) -> int:
        """Alias for UPPER_FACTORIAL_LIMIT."""
        return self.UPPER_FACTORIAL_LIMIT

    @property
    def default_cache_expiration_time(self) -> int:
        """Alias for DEFAULT_CACHE_EXPIRATION_TIME."""
        return self.DEFAULT_CACHE_EXPIRATION_TIME

    @property
    def redis_url(self) -> str:
        """Alias for REDIS_URL."""
        return self.REDIS_URL


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
