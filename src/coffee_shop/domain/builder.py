"""
Order builder (Builder pattern).

A mutable accumulator scoped to one construction: choose the three
ingredients with chainable setters, then `build()` validates completeness
and hands back a frozen `Order`.
"""

from coffee_shop.domain.errors import IncompleteOrderError
from coffee_shop.domain.models import CoffeeType, MilkType, Order, SyrupType


class OrderBuilder:
    """Collects coffee, milk and syrup choices for a single order.

    Example:
        order = OrderBuilder().with_coffee(espresso).with_milk(milk).with_syrup(syrup).build()
    """

    def __init__(self) -> None:
        self.coffee: CoffeeType | None = None
        self.milk: MilkType | None = None
        self.syrup: SyrupType | None = None

    def with_coffee(self, coffee: CoffeeType) -> "OrderBuilder":
        self.coffee = coffee
        return self

    def with_milk(self, milk: MilkType) -> "OrderBuilder":
        self.milk = milk
        return self

    def with_syrup(self, syrup: SyrupType) -> "OrderBuilder":
        self.syrup = syrup
        return self

    def reset(self) -> "OrderBuilder":
        self.coffee = self.milk = self.syrup = None
        return self

    def build(self) -> Order:
        missing = tuple(
            name
            for name, value in (("coffee", self.coffee), ("milk", self.milk), ("syrup", self.syrup))
            if value is None
        )
        if missing:
            raise IncompleteOrderError(missing)
        return Order(coffee=self.coffee, milk=self.milk, syrup=self.syrup)
