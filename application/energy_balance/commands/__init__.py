"""CQRS Commands for energy balance domain."""

from .create_custom_food import CreateCustomFoodCommand, CreateCustomFoodHandler
from .create_custom_meal import CreateCustomMealCommand, CreateCustomMealHandler
from .create_profile import CreateProfileCommand, CreateProfileHandler
from .delete_activity import DeleteActivityCommand, DeleteActivityHandler
from .delete_custom_food import DeleteCustomFoodCommand, DeleteCustomFoodHandler
from .delete_custom_meal import DeleteCustomMealCommand, DeleteCustomMealHandler
from .delete_food_log import DeleteFoodLogCommand, DeleteFoodLogHandler
from .log_activity import LogActivityCommand, LogActivityHandler, LogActivityResult
from .log_food import LogFoodCommand, LogFoodHandler, LogFoodResult
from .log_saved_food import (
    LogCustomFoodCommand,
    LogCustomFoodHandler,
    LogMealCommand,
    LogMealHandler,
    LogMealResult,
)
from .meal_components import (
    AddMealComponentCommand,
    AddMealComponentHandler,
    MealComponentSpec,
    RemoveMealComponentCommand,
    RemoveMealComponentHandler,
    UpdateMealComponentCommand,
    UpdateMealComponentHandler,
)
from .sync_activities import (
    SyncActivitiesCommand,
    SyncActivitiesHandler,
    SyncActivitiesResult,
)
from .update_food_log import (
    UpdateFoodLogCommand,
    UpdateFoodLogHandler,
    UpdateFoodLogResult,
)
from .update_profile import (
    UpdateProfileCommand,
    UpdateProfileHandler,
    UpdateProfileResult,
)

__all__ = [
    # Profile
    "CreateProfileCommand",
    "CreateProfileHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
    "UpdateProfileResult",
    # Food log
    "LogFoodCommand",
    "LogFoodHandler",
    "LogFoodResult",
    "UpdateFoodLogCommand",
    "UpdateFoodLogHandler",
    "UpdateFoodLogResult",
    "DeleteFoodLogCommand",
    "DeleteFoodLogHandler",
    # Saved foods and meals
    "CreateCustomFoodCommand",
    "CreateCustomFoodHandler",
    "DeleteCustomFoodCommand",
    "DeleteCustomFoodHandler",
    "CreateCustomMealCommand",
    "CreateCustomMealHandler",
    "DeleteCustomMealCommand",
    "DeleteCustomMealHandler",
    "MealComponentSpec",
    "AddMealComponentCommand",
    "AddMealComponentHandler",
    "UpdateMealComponentCommand",
    "UpdateMealComponentHandler",
    "RemoveMealComponentCommand",
    "RemoveMealComponentHandler",
    "LogCustomFoodCommand",
    "LogCustomFoodHandler",
    "LogMealCommand",
    "LogMealHandler",
    "LogMealResult",
    # Activities
    "SyncActivitiesCommand",
    "SyncActivitiesHandler",
    "SyncActivitiesResult",
    "LogActivityCommand",
    "LogActivityHandler",
    "LogActivityResult",
    "DeleteActivityCommand",
    "DeleteActivityHandler",
]
