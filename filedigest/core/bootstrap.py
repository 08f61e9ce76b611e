"""
Application bootstrap for filedigest.

Initializes the DI container with the logger and hashing service.
Call once at application startup; library use works without it.
"""

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.services import HashingService

_initialized = False


def bootstrap() -> ServiceContainer:
    """
    Bootstrap the filedigest application.

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer) -> None:
    """Register core application services."""
    from ..services.hashing import DefaultHashingService
    from ..services.logging import FiledigestLogger
    from .settings import load_settings

    def create_logger() -> ILogger:
        return FiledigestLogger.from_config(load_settings().logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(HashingService, factory=DefaultHashingService)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
