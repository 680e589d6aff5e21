"""
Simple factory for service singletons.

The **Factory pattern** centralises service construction, and the class-level
cache gives the process a single `CoffeeShop` (Singleton pattern) without a
module-level global. Callers fetch the shop once at startup and pass it on
explicitly.

Benefits:
  - Single point of change for constructor args (delays from Settings).
  - Repeated `get_coffee_shop()` calls return the same instance.
  - Easy to swap for testing: `configure()` or `reset()` clears the cache.
"""

from coffee_shop.config import Settings, get_settings
from coffee_shop.services.preparation import PreparationService
from coffee_shop.services.shop import CoffeeShop


class ServiceFactory:
    """Lazily creates and caches service instances (class-level singletons)."""

    _settings: Settings | None = None
    _preparation: PreparationService | None = None
    _shop: CoffeeShop | None = None

    @classmethod
    def configure(cls, settings: Settings) -> None:
        """Use `settings` for services created from now on."""
        cls.reset()
        cls._settings = settings

    @classmethod
    def reset(cls) -> None:
        cls._settings = None
        cls._preparation = None
        cls._shop = None

    @classmethod
    def get_settings(cls) -> Settings:
        if cls._settings is None:
            cls._settings = get_settings()
        return cls._settings

    @classmethod
    def get_preparation_service(cls) -> PreparationService:
        if cls._preparation is None:
            cls._preparation = PreparationService(delays=cls.get_settings().delays())
        return cls._preparation

    @classmethod
    def get_coffee_shop(cls) -> CoffeeShop:
        if cls._shop is None:
            cls._shop = CoffeeShop(cls.get_preparation_service())
        return cls._shop
