"""
CLI demo — walks one order through every creational pattern.

  1. Singleton:        fetch the one CoffeeShop from ServiceFactory
  2. Factory Method:   create_coffee("espresso")
  3. Abstract Factory: CappuccinoIngredientsFactory -> whole milk, vanilla syrup
  4. Builder:          OrderBuilder assembles the Order
  5. Prototype:        order.clone() is placed and served a second time

Status lines go to stdout; diagnostics are logged to stderr.

Usage:
    # The default scenario (espresso, whole milk, vanilla syrup):
    python -m coffee_shop.cli

    # Other choices, without the simulated waits:
    python -m coffee_shop.cli --coffee cappuccino --ingredients custom --no-delay
"""

import argparse
import asyncio
import logging
import sys

from coffee_shop.config import get_settings
from coffee_shop.domain.builder import OrderBuilder
from coffee_shop.domain.errors import CoffeeShopError
from coffee_shop.domain.factories import IngredientProfile, create_coffee, get_ingredients_factory
from coffee_shop.domain.models import CoffeeType
from coffee_shop.services.factory import ServiceFactory
from coffee_shop.services.shop import CoffeeShop

logger = logging.getLogger(__name__)


async def run_demo(shop: CoffeeShop, coffee: str = "espresso", ingredients: str = "cappuccino") -> None:
    coffee_variant = create_coffee(coffee)
    ingredients_factory = get_ingredients_factory(ingredients)

    order = (
        OrderBuilder()
        .with_coffee(coffee_variant)
        .with_milk(ingredients_factory.create_milk())
        .with_syrup(ingredients_factory.create_syrup())
        .build()
    )
    await shop.place_order(order)
    shop.serve_order(order)

    cloned_order = order.clone()
    await shop.place_order(cloned_order)
    shop.serve_order(cloned_order)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Order a coffee, one design pattern at a time")
    parser.add_argument(
        "--coffee", default=CoffeeType.ESPRESSO.value, choices=[c.value for c in CoffeeType], help="Coffee style"
    )
    parser.add_argument(
        "--ingredients",
        default=IngredientProfile.CAPPUCCINO.value,
        choices=[p.value for p in IngredientProfile],
        help="Milk and syrup profile",
    )
    parser.add_argument("--no-delay", action="store_true", help="Skip the simulated preparation waits")
    parser.add_argument("--log-level", default=None, help="Logging level (default from COFFEE_SHOP_LOG_LEVEL)")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.no_delay:
        settings = settings.model_copy(update={"initial_delay": 0.0, "milk_delay": 0.0, "syrup_delay": 0.0})
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    ServiceFactory.configure(settings)
    shop = ServiceFactory.get_coffee_shop()
    try:
        asyncio.run(run_demo(shop, args.coffee, args.ingredients))
    except CoffeeShopError:
        logger.exception("Could not complete the demo")
        sys.exit(1)


if __name__ == "__main__":
    main()
