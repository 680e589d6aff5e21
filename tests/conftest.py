"""Shared pytest fixtures for coffee shop tests."""

import asyncio

import pytest

from coffee_shop.config import get_settings
from coffee_shop.domain.builder import OrderBuilder
from coffee_shop.domain.models import CoffeeType, MilkType, Order, SyrupType
from coffee_shop.services.factory import ServiceFactory
from coffee_shop.services.preparation import PreparationService
from coffee_shop.services.shop import CoffeeShop


class FakeSleep:
    """Records requested waits instead of sleeping.

    `cancel_on` is the 1-based wait that raises asyncio.CancelledError.
    """

    def __init__(self, cancel_on: int | None = None) -> None:
        self.calls: list[float] = []
        self.cancel_on = cancel_on

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.cancel_on is not None and len(self.calls) == self.cancel_on:
            raise asyncio.CancelledError()


@pytest.fixture(autouse=True)
def clean_singletons(monkeypatch):
    """Keep cached settings and services from leaking between tests."""
    for var in ("COFFEE_SHOP_INITIAL_DELAY", "COFFEE_SHOP_MILK_DELAY", "COFFEE_SHOP_SYRUP_DELAY", "COFFEE_SHOP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    ServiceFactory.reset()
    yield
    get_settings.cache_clear()
    ServiceFactory.reset()


@pytest.fixture
def announcements() -> list[str]:
    return []


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def make_sleep():
    """Build a FakeSleep, optionally cancelling on a given wait."""
    return FakeSleep


@pytest.fixture
def shop(announcements: list[str], fake_sleep: FakeSleep) -> CoffeeShop:
    """A shop whose status lines land in `announcements` and that never really waits."""
    preparation = PreparationService(sleep=fake_sleep, announce=announcements.append)
    return CoffeeShop(preparation, announce=announcements.append)


@pytest.fixture
def espresso_order() -> Order:
    return (
        OrderBuilder()
        .with_coffee(CoffeeType.ESPRESSO)
        .with_milk(MilkType.WHOLE)
        .with_syrup(SyrupType.VANILLA)
        .build()
    )
