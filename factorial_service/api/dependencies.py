from fastapi import Depends, Request

from ..core.config import Settings
from ..domain.factorial.repository_interfaces import FactorialCacheStore
from ..domain.factorial.validation import InputValidator
from ..domain.factorial.value_objects import TTL
from ..services.factorial.factorial_cache_service import FactorialCacheService


def settings_provider(request: Request) -> Settings:
    """Provide the settings the application was created with."""
    return request.app.state.settings


def cache_store_provider(request: Request) -> FactorialCacheStore:
    """Provide the process-wide cache store created during startup."""
    return request.app.state.cache_store


def input_validator_provider(
    settings: Settings = Depends(settings_provider),
) -> InputValidator:
    return InputValidator(limit=settings.UPPER_FACTORIAL_LIMIT)


def factorial_service_provider(
    store: FactorialCacheStore = Depends(cache_store_provider),
    settings: Settings = Depends(settings_provider),
) -> FactorialCacheService:
    return FactorialCacheService(
        store=store, ttl=TTL(settings.DEFAULT_CACHE_EXPIRATION_TIME)
    )
