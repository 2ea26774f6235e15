"""Domain exceptions for energy balance."""

from typing import Optional


class EnergyBalanceError(Exception):
    """Base exception for energy balance domain errors."""

    pass


class InvalidInputError(EnergyBalanceError):
    """Raised when an input is outside its valid domain.

    Never retried: the caller must correct the input.
    """

    pass


class UnknownUserError(EnergyBalanceError):
    """Raised when an operation references a user with no profile."""

    def __init__(self, user_id: str):
        super().__init__(f"Unknown user: {user_id}")
        self.user_id = user_id


class AggregationReadError(EnergyBalanceError):
    """Raised when a ledger or profile read fails during aggregation."""

    def __init__(self, user_id: str, date: str, source: str):
        super().__init__(
            f"Failed to read {source} for user {user_id} on {date}"
        )
        self.user_id = user_id
        self.date = date
        self.source = source


class PersistenceError(EnergyBalanceError):
    """Raised when writing a daily energy balance fails.

    The previously stored row (if any) is left unchanged.
    """

    def __init__(self, user_id: str, date: str):
        super().__init__(
            f"Failed to persist energy balance for user {user_id} on {date}"
        )
        self.user_id = user_id
        self.date = date


class FoodLogNotFoundError(EnergyBalanceError):
    """Raised when a food log entry cannot be found for the user."""

    def __init__(self, entry_id: str):
        super().__init__(f"Food log entry not found: {entry_id}")
        self.entry_id = entry_id


class ActivityProviderError(EnergyBalanceError):
    """Raised when the remote activity provider rejects or fails a request."""

    pass


class ProfileAlreadyExistsError(EnergyBalanceError):
    """Raised when creating a profile for a user that already has one."""

    def __init__(self, user_id: str):
        super().__init__(f"Profile already exists for user: {user_id}")
        self.user_id = user_id


class ActivityNotFoundError(EnergyBalanceError):
    """Raised when an activity entry cannot be found for the user."""

    def __init__(self, entry_id: str):
        super().__init__(f"Activity entry not found: {entry_id}")
        self.entry_id = entry_id


class CustomFoodNotFoundError(EnergyBalanceError):
    """Raised when a saved food cannot be found for the user."""

    def __init__(self, food_id: str):
        super().__init__(f"Custom food not found: {food_id}")
        self.food_id = food_id


class CustomMealNotFoundError(EnergyBalanceError):
    """Raised when a saved meal (or one of its components) cannot be found."""

    def __init__(self, meal_id: str, component_id: Optional[str] = None):
        detail = f" (component {component_id})" if component_id else ""
        super().__init__(f"Custom meal not found: {meal_id}{detail}")
        self.meal_id = meal_id
        self.component_id = component_id
