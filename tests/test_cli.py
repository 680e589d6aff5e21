"""Tests for settings and the command-line demo."""

import asyncio

import pytest

from coffee_shop import cli
from coffee_shop.config import Settings, get_settings
from coffee_shop.domain.errors import InvalidIngredientError
from coffee_shop.domain.models import PreparationDelays
from coffee_shop.services.factory import ServiceFactory

RENDERED = "Coffee: Espresso, Milk: Whole milk, Syrup: Vanilla syrup"


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.delays() == PreparationDelays(initial=2.0, milk=1.0, syrup=1.0)
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("COFFEE_SHOP_MILK_DELAY", "0.25")
        monkeypatch.setenv("COFFEE_SHOP_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.milk_delay == 0.25
        assert settings.log_level == "DEBUG"

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Settings(initial_delay=-1)


class TestRunDemo:
    def test_default_scenario(self, shop, announcements):
        asyncio.run(cli.run_demo(shop))

        assert announcements.count(f"Order accepted: {RENDERED}") == 2
        assert announcements.count(f"Your coffee is ready: {RENDERED}") == 2
        assert announcements.count("Coffee Espresso is ready!") == 2
        assert announcements[5] == f"Your coffee is ready: {RENDERED}"

    def test_custom_ingredients(self, shop, announcements):
        asyncio.run(cli.run_demo(shop, coffee="cappuccino", ingredients="custom"))
        assert announcements[0] == "Order accepted: Coffee: Cappuccino, Milk: Almond milk, Syrup: Caramel syrup"

    def test_unknown_coffee_fails_fast(self, shop, announcements):
        with pytest.raises(InvalidIngredientError):
            asyncio.run(cli.run_demo(shop, coffee="latte"))
        assert announcements == []


class TestMain:
    def test_prints_demo_to_stdout(self, capsys):
        cli.main(["--no-delay"])

        out = capsys.readouterr().out.splitlines()
        assert out[0] == f"Order accepted: {RENDERED}"
        assert out.count(f"Your coffee is ready: {RENDERED}") == 2
        assert len(out) == 12

    def test_no_delay_configures_shop(self, capsys):
        cli.main(["--no-delay", "--coffee", "cappuccino"])
        capsys.readouterr()
        assert ServiceFactory.get_coffee_shop().preparation.delays == PreparationDelays(initial=0, milk=0, syrup=0)

    def test_construction_failure_exits_nonzero(self, monkeypatch, capsys):
        def broken(_style):
            raise InvalidIngredientError("coffee style", "latte")

        monkeypatch.setattr(cli, "create_coffee", broken)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--no-delay"])
        assert exc_info.value.code == 1

    def test_rejects_unknown_choice(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--coffee", "latte"])
        assert exc_info.value.code == 2
