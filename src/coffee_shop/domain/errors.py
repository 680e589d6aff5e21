"""
Domain errors.

Construction failures (`InvalidIngredientError`, `IncompleteOrderError`) are
programming errors in the caller and are never recovered. Only
`PreparationInterrupted` is caught, by the shop, which reports it and moves on.
"""

from coffee_shop.domain.models import Order, PreparationState


class CoffeeShopError(Exception):
    """Base class for every error raised by the coffee shop."""


class InvalidIngredientError(CoffeeShopError, ValueError):
    """An unknown coffee style or ingredient profile was requested."""

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind}: {value!r}")


class IncompleteOrderError(CoffeeShopError):
    """`OrderBuilder.build()` was called before every field was chosen."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"Order is missing: {', '.join(missing)}")


class PreparationInterrupted(CoffeeShopError):
    """A preparation wait was cancelled; the remaining steps were skipped."""

    def __init__(self, order: Order, state: PreparationState) -> None:
        self.order = order
        self.state = state
        super().__init__(f"Preparation interrupted at {state.value} for order: {order}")
