"""
Ingredient factories (Factory Method + Abstract Factory).

Variants are a closed set, so each factory is a lookup table plus one
dispatch function rather than a class per variant. The abstract factory is
kept as a Protocol: anything with `create_milk()` and `create_syrup()` can
stand in for an ingredients factory (structural subtyping, no inheritance).
"""

from enum import Enum
from typing import Protocol

from coffee_shop.domain.errors import InvalidIngredientError
from coffee_shop.domain.models import CoffeeType, MilkType, SyrupType


class IngredientProfile(str, Enum):
    """Named milk + syrup combinations."""

    CAPPUCCINO = "cappuccino"  # whole milk, vanilla syrup
    CUSTOM = "custom"          # almond milk, caramel syrup


MILK_BY_PROFILE: dict[IngredientProfile, MilkType] = {
    IngredientProfile.CAPPUCCINO: MilkType.WHOLE,
    IngredientProfile.CUSTOM: MilkType.ALMOND,
}
SYRUP_BY_PROFILE: dict[IngredientProfile, SyrupType] = {
    IngredientProfile.CAPPUCCINO: SyrupType.VANILLA,
    IngredientProfile.CUSTOM: SyrupType.CARAMEL,
}


def _lookup(enum_cls: type[Enum], value: object, kind: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise InvalidIngredientError(kind, value)


def create_coffee(style: CoffeeType | str) -> CoffeeType:
    """Return the coffee variant for a style, e.g. "espresso" or "Cappuccino"."""
    return _lookup(CoffeeType, style, "coffee style")


def create_milk(profile: IngredientProfile | str) -> MilkType:
    return MILK_BY_PROFILE[_lookup(IngredientProfile, profile, "ingredient profile")]


def create_syrup(profile: IngredientProfile | str) -> SyrupType:
    return SYRUP_BY_PROFILE[_lookup(IngredientProfile, profile, "ingredient profile")]


# ── Abstract factory ─────────────────────────────────────────────────


class IngredientsFactory(Protocol):
    """Interface for producing a matching milk and syrup."""

    def create_milk(self) -> MilkType: ...

    def create_syrup(self) -> SyrupType: ...


class _ProfileIngredientsFactory:
    profile: IngredientProfile

    def create_milk(self) -> MilkType:
        return create_milk(self.profile)

    def create_syrup(self) -> SyrupType:
        return create_syrup(self.profile)


class CappuccinoIngredientsFactory(_ProfileIngredientsFactory):
    """Whole milk and vanilla syrup."""

    profile = IngredientProfile.CAPPUCCINO


class CustomIngredientsFactory(_ProfileIngredientsFactory):
    """Almond milk and caramel syrup."""

    profile = IngredientProfile.CUSTOM


INGREDIENTS_FACTORIES: dict[IngredientProfile, type[_ProfileIngredientsFactory]] = {
    IngredientProfile.CAPPUCCINO: CappuccinoIngredientsFactory,
    IngredientProfile.CUSTOM: CustomIngredientsFactory,
}


def get_ingredients_factory(profile: IngredientProfile | str) -> IngredientsFactory:
    factory_cls = INGREDIENTS_FACTORIES[_lookup(IngredientProfile, profile, "ingredient profile")]
    return factory_cls()
