"""Domain exceptions for energy balance."""

from .domain_errors import (
    ActivityNotFoundError,
    ActivityProviderError,
    AggregationReadError,
    CustomFoodNotFoundError,
    CustomMealNotFoundError,
    EnergyBalanceError,
    FoodLogNotFoundError,
    InvalidInputError,
    PersistenceError,
    ProfileAlreadyExistsError,
    UnknownUserError,
)

__all__ = [
    "EnergyBalanceError",
    "InvalidInputError",
    "UnknownUserError",
    "AggregationReadError",
    "PersistenceError",
    "FoodLogNotFoundError",
    "ActivityNotFoundError",
    "ActivityProviderError",
    "ProfileAlreadyExistsError",
    "CustomFoodNotFoundError",
    "CustomMealNotFoundError",
]
