"""
Domain models for the coffee shop demo.

Ingredient variants are small closed sets, so each is a (str, Enum) whose
value is the lookup tag and whose `display_name` is what customers see.

`Order` is a frozen Pydantic v2 model: once the builder produces it nothing
can be reassigned, which is what makes `clone()` a plain value copy
(Prototype pattern) with no shared mutable state.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CoffeeType(str, Enum):
    """Coffee styles produced by the coffee factory."""

    ESPRESSO = "espresso"
    CAPPUCCINO = "cappuccino"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class MilkType(str, Enum):
    WHOLE = "whole"
    ALMOND = "almond"

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} milk"


class SyrupType(str, Enum):
    VANILLA = "vanilla"
    CARAMEL = "caramel"

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} syrup"


class PreparationState(str, Enum):
    """Steps of the preparation sequence, in the order they are reached."""

    IDLE = "IDLE"
    ADDING_MILK = "ADDING_MILK"
    ADDING_SYRUP = "ADDING_SYRUP"
    READY = "READY"


# ── Order value object ───────────────────────────────────────────────


class Order(BaseModel):
    """One coffee + one milk + one syrup.

    Build it with `OrderBuilder`; the builder checks that all three fields
    are chosen before constructing one.
    """

    model_config = ConfigDict(frozen=True)

    coffee: CoffeeType
    milk: MilkType
    syrup: SyrupType

    def clone(self) -> "Order":
        """Return an independent copy equal to this order in every field."""
        return self.model_copy()

    def __str__(self) -> str:
        return (
            f"Coffee: {self.coffee.display_name}, "
            f"Milk: {self.milk.display_name}, "
            f"Syrup: {self.syrup.display_name}"
        )


class PreparationDelays(BaseModel):
    """Seconds to wait before each preparation step."""

    initial: float = Field(default=2.0, ge=0)  # before the milk goes in
    milk: float = Field(default=1.0, ge=0)     # before the syrup goes in
    syrup: float = Field(default=1.0, ge=0)    # before the coffee is ready


class PreparationResult(BaseModel):
    """Snapshot of how far preparation of an order got."""

    order: Order
    state: PreparationState
    interrupted: bool = False
