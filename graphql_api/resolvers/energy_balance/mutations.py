"""Mutation resolvers for energy balance domain.

These resolvers execute CQRS commands; every write that touches a ledger
or a profile ends with the affected daily balances recomputed:
- createUserProfile / updateUserProfile
- logFood / updateFoodLog / deleteFoodLog
- logActivity / deleteActivity / syncStravaActivities
- recomputeEnergyBalance: force a recompute of one date
- createCustomFood / deleteCustomFood
- createCustomMeal / deleteCustomMeal and its component edits
- logCustomFood / logMeal: log from saved foods and meals
"""

from datetime import date as date_type, datetime
from typing import List, Optional
from uuid import UUID

import strawberry

from application.energy_balance.commands.create_custom_food import (
    CreateCustomFoodCommand,
    CreateCustomFoodHandler,
)
from application.energy_balance.commands.create_custom_meal import (
    CreateCustomMealCommand,
    CreateCustomMealHandler,
)
from application.energy_balance.commands.create_profile import (
    CreateProfileCommand,
    CreateProfileHandler,
)
from application.energy_balance.commands.delete_activity import (
    DeleteActivityCommand,
    DeleteActivityHandler,
)
from application.energy_balance.commands.delete_custom_food import (
    DeleteCustomFoodCommand,
    DeleteCustomFoodHandler,
)
from application.energy_balance.commands.delete_custom_meal import (
    DeleteCustomMealCommand,
    DeleteCustomMealHandler,
)
from application.energy_balance.commands.delete_food_log import (
    DeleteFoodLogCommand,
    DeleteFoodLogHandler,
)
from application.energy_balance.commands.log_activity import (
    LogActivityCommand,
    LogActivityHandler,
)
from application.energy_balance.commands.log_food import LogFoodCommand, LogFoodHandler
from application.energy_balance.commands.log_saved_food import (
    LogCustomFoodCommand,
    LogCustomFoodHandler,
    LogMealCommand,
    LogMealHandler,
)
from application.energy_balance.commands.meal_components import (
    AddMealComponentCommand,
    AddMealComponentHandler,
    MealComponentSpec,
    RemoveMealComponentCommand,
    RemoveMealComponentHandler,
    UpdateMealComponentCommand,
    UpdateMealComponentHandler,
)
from application.energy_balance.commands.sync_activities import (
    SyncActivitiesCommand,
    SyncActivitiesHandler,
)
from application.energy_balance.commands.update_food_log import (
    UpdateFoodLogCommand,
    UpdateFoodLogHandler,
)
from application.energy_balance.commands.update_profile import (
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from domain.energy_balance.core.exceptions.domain_errors import InvalidInputError
from graphql_api.context import require_dependencies
from graphql_api.types_energy_balance import (
    CreateCustomFoodInput,
    CreateCustomMealInput,
    CreateProfileInput,
    CustomFoodType,
    CustomMealType,
    DailyEnergyBalanceType,
    LogActivityInput,
    LogActivityResultType,
    LogCustomFoodInput,
    LogFoodInput,
    LogFoodResultType,
    LogMealInput,
    LogMealResultType,
    MealComponentInput,
    SyncActivitiesResultType,
    UpdateFoodLogInput,
    UpdateFoodLogResultType,
    UpdateMealComponentInput,
    UpdateProfileInput,
    UserProfileType,
)

from .mappers import (
    map_activity,
    map_balance,
    map_custom_food,
    map_custom_meal,
    map_food_entry,
    map_profile,
)


def _parse_id(value: str, field_name: str) -> UUID:
    try:
        return UUID(str(value))
    except ValueError as e:
        raise InvalidInputError(f"{field_name} is not a valid ID: {value!r}") from e


def _component_spec(component: MealComponentInput) -> MealComponentSpec:
    return MealComponentSpec(
        quantity=component.quantity,
        custom_food_id=(
            _parse_id(component.custom_food_id, "customFoodId")
            if component.custom_food_id is not None
            else None
        ),
        usda_fdc_id=component.usda_fdc_id,
        food_name=component.food_name,
        brand_name=component.brand_name,
        calories=component.calories,
        protein=component.protein,
        carbs=component.carbs,
        fat=component.fat,
        serving_size=component.serving_size,
        serving_unit=component.serving_unit,
    )


@strawberry.type
class EnergyBalanceMutations:
    """Mutations for profiles, food log and activities."""

    @strawberry.mutation
    async def create_user_profile(
        self, info: strawberry.types.Info, input: CreateProfileInput
    ) -> UserProfileType:
        """Create a profile; BMR/TDEE are derived when all inputs are given.

        Example:
            mutation {
              energyBalance {
                createUserProfile(input: {
                  userId: "user123"
                  weightKg: "70"
                  heightCm: "175"
                  age: 30
                  sex: "male"
                  activityLevel: "moderately_active"
                }) { bmr tdee }
              }
            }
        """
        profile_store, calculator = require_dependencies(
            info.context, "profile_store", "metabolic_calculator"
        )
        handler = CreateProfileHandler(profile_store, calculator)
        profile = await handler.handle(
            CreateProfileCommand(
                user_id=input.user_id,
                weight_kg=input.weight_kg,
                height_cm=input.height_cm,
                age=input.age,
                sex=input.sex,
                activity_level=input.activity_level,
            )
        )
        return map_profile(profile)

    @strawberry.mutation
    async def update_user_profile(
        self, info: strawberry.types.Info, input: UpdateProfileInput
    ) -> UserProfileType:
        """Update physical inputs; recent balances follow a baseline change."""
        profile_store, calculator, controller = require_dependencies(
            info.context, "profile_store", "metabolic_calculator", "summary_controller"
        )
        handler = UpdateProfileHandler(profile_store, calculator, controller)
        result = await handler.handle(
            UpdateProfileCommand(
                user_id=input.user_id,
                weight_kg=input.weight_kg,
                height_cm=input.height_cm,
                age=input.age,
                sex=input.sex,
                activity_level=input.activity_level,
            )
        )
        return map_profile(result.profile)

    @strawberry.mutation
    async def log_food(
        self, info: strawberry.types.Info, input: LogFoodInput
    ) -> LogFoodResultType:
        """Log a food entry and return the refreshed day."""
        food_ledger, profile_store, controller = require_dependencies(
            info.context, "food_ledger", "profile_store", "summary_controller"
        )
        handler = LogFoodHandler(food_ledger, profile_store, controller)
        result = await handler.handle(
            LogFoodCommand(
                user_id=input.user_id,
                food_name=input.food_name,
                calories=input.calories,
                protein=input.protein,
                carbs=input.carbs,
                fat=input.fat,
                consumed_at=input.consumed_at,
                servings=input.servings,
                meal_type=input.meal_type,
                brand_name=input.brand_name,
                fiber=input.fiber,
                sugar=input.sugar,
                sodium=input.sodium,
                usda_fdc_id=input.usda_fdc_id,
            )
        )
        return LogFoodResultType(
            entry=map_food_entry(result.entry), balance=map_balance(result.balance)
        )

    @strawberry.mutation
    async def update_food_log(
        self, info: strawberry.types.Info, input: UpdateFoodLogInput
    ) -> UpdateFoodLogResultType:
        """Edit a food entry; both old and new day are refreshed when it moves."""
        food_ledger, controller = require_dependencies(
            info.context, "food_ledger", "summary_controller"
        )
        handler = UpdateFoodLogHandler(food_ledger, controller)
        result = await handler.handle(
            UpdateFoodLogCommand(
                entry_id=_parse_id(input.entry_id, "entryId"),
                user_id=input.user_id,
                food_name=input.food_name,
                calories=input.calories,
                protein=input.protein,
                carbs=input.carbs,
                fat=input.fat,
                servings=input.servings,
                consumed_at=input.consumed_at,
                meal_type=input.meal_type,
                brand_name=input.brand_name,
                fiber=input.fiber,
                sugar=input.sugar,
                sodium=input.sodium,
            )
        )
        return UpdateFoodLogResultType(
            entry=map_food_entry(result.entry),
            balances=[map_balance(row) for row in result.balances],
        )

    @strawberry.mutation
    async def delete_food_log(
        self, info: strawberry.types.Info, entry_id: strawberry.ID, user_id: str
    ) -> DailyEnergyBalanceType:
        """Delete a food entry and return the refreshed day."""
        food_ledger, controller = require_dependencies(
            info.context, "food_ledger", "summary_controller"
        )
        handler = DeleteFoodLogHandler(food_ledger, controller)
        row = await handler.handle(
            DeleteFoodLogCommand(entry_id=_parse_id(entry_id, "entryId"), user_id=user_id)
        )
        return map_balance(row)

    @strawberry.mutation
    async def log_activity(
        self, info: strawberry.types.Info, input: LogActivityInput
    ) -> LogActivityResultType:
        """Log a manual exercise session and return the refreshed day."""
        activity_ledger, profile_store, controller, estimator = require_dependencies(
            info.context,
            "activity_ledger",
            "profile_store",
            "summary_controller",
            "calorie_estimator",
        )
        handler = LogActivityHandler(activity_ledger, profile_store, controller, estimator)
        result = await handler.handle(
            LogActivityCommand(
                user_id=input.user_id,
                activity_type=input.activity_type,
                duration_s=input.duration_s,
                started_at=input.started_at,
                calories=input.calories,
                distance_m=input.distance_m,
                name=input.name,
            )
        )
        return LogActivityResultType(
            entry=map_activity(result.entry), balance=map_balance(result.balance)
        )

    @strawberry.mutation
    async def delete_activity(
        self, info: strawberry.types.Info, entry_id: strawberry.ID, user_id: str
    ) -> List[DailyEnergyBalanceType]:
        """Delete an activity and return the refreshed days."""
        activity_ledger, controller = require_dependencies(
            info.context, "activity_ledger", "summary_controller"
        )
        handler = DeleteActivityHandler(activity_ledger, controller)
        rows = await handler.handle(
            DeleteActivityCommand(entry_id=_parse_id(entry_id, "entryId"), user_id=user_id)
        )
        return [map_balance(row) for row in rows]

    @strawberry.mutation
    async def sync_strava_activities(
        self,
        info: strawberry.types.Info,
        user_id: str,
        access_token: str,
        after: Optional[datetime] = None,
    ) -> SyncActivitiesResultType:
        """Import activities from Strava with an already obtained token."""
        deps = require_dependencies(
            info.context,
            "activity_provider_factory",
            "activity_ledger",
            "profile_store",
            "summary_controller",
            "calorie_estimator",
        )
        provider_factory, activity_ledger, profile_store, controller, estimator = deps
        async with provider_factory() as provider:
            handler = SyncActivitiesHandler(
                provider, activity_ledger, profile_store, controller, estimator
            )
            result = await handler.handle(
                SyncActivitiesCommand(user_id=user_id, access_token=access_token, after=after)
            )
        return SyncActivitiesResultType(
            inserted=result.inserted,
            updated=result.updated,
            estimated=result.estimated,
            balances=[map_balance(row) for row in result.balances],
        )

    @strawberry.mutation
    async def recompute_energy_balance(
        self, info: strawberry.types.Info, user_id: str, date: date_type
    ) -> DailyEnergyBalanceType:
        """Recompute and store the balance of one date."""
        (controller,) = require_dependencies(info.context, "summary_controller")
        row = await controller.upsert(user_id, date)
        return map_balance(row)

    @strawberry.mutation
    async def create_custom_food(
        self, info: strawberry.types.Info, input: CreateCustomFoodInput
    ) -> CustomFoodType:
        """Save a food with its nutrition per serving."""
        food_store, profile_store = require_dependencies(
            info.context, "custom_food_store", "profile_store"
        )
        handler = CreateCustomFoodHandler(food_store, profile_store)
        food = await handler.handle(
            CreateCustomFoodCommand(
                user_id=input.user_id,
                name=input.name,
                calories=input.calories,
                serving_size=input.serving_size,
                serving_unit=input.serving_unit,
                protein=input.protein,
                carbs=input.carbs,
                fat=input.fat,
                brand=input.brand,
                fiber=input.fiber,
                sugar=input.sugar,
                sodium=input.sodium,
                is_favorite=input.is_favorite,
            )
        )
        return map_custom_food(food)

    @strawberry.mutation
    async def delete_custom_food(
        self, info: strawberry.types.Info, food_id: strawberry.ID, user_id: str
    ) -> int:
        """Delete a saved food. Returns how many meals were unlinked from it."""
        food_store, meal_store = require_dependencies(
            info.context, "custom_food_store", "custom_meal_store"
        )
        handler = DeleteCustomFoodHandler(food_store, meal_store)
        return await handler.handle(
            DeleteCustomFoodCommand(food_id=_parse_id(food_id, "foodId"), user_id=user_id)
        )

    @strawberry.mutation
    async def create_custom_meal(
        self, info: strawberry.types.Info, input: CreateCustomMealInput
    ) -> CustomMealType:
        """Save a meal from saved or USDA foods.

        Example:
            mutation {
              energyBalance {
                createCustomMeal(input: {
                  userId: "user123"
                  name: "Breakfast"
                  components: [{customFoodId: "...", quantity: "2"}]
                }) { totalCalories }
              }
            }
        """
        meal_store, food_store, profile_store = require_dependencies(
            info.context, "custom_meal_store", "custom_food_store", "profile_store"
        )
        handler = CreateCustomMealHandler(meal_store, food_store, profile_store)
        meal = await handler.handle(
            CreateCustomMealCommand(
                user_id=input.user_id,
                name=input.name,
                description=input.description,
                is_favorite=input.is_favorite,
                components=tuple(_component_spec(c) for c in input.components),
            )
        )
        return map_custom_meal(meal)

    @strawberry.mutation
    async def add_meal_component(
        self,
        info: strawberry.types.Info,
        meal_id: strawberry.ID,
        user_id: str,
        component: MealComponentInput,
    ) -> CustomMealType:
        """Add a food to a saved meal; totals are recomputed."""
        meal_store, food_store = require_dependencies(
            info.context, "custom_meal_store", "custom_food_store"
        )
        handler = AddMealComponentHandler(meal_store, food_store)
        meal = await handler.handle(
            AddMealComponentCommand(
                meal_id=_parse_id(meal_id, "mealId"),
                user_id=user_id,
                component=_component_spec(component),
            )
        )
        return map_custom_meal(meal)

    @strawberry.mutation
    async def update_meal_component(
        self, info: strawberry.types.Info, input: UpdateMealComponentInput
    ) -> CustomMealType:
        (meal_store,) = require_dependencies(info.context, "custom_meal_store")
        handler = UpdateMealComponentHandler(meal_store)
        meal = await handler.handle(
            UpdateMealComponentCommand(
                meal_id=_parse_id(input.meal_id, "mealId"),
                user_id=input.user_id,
                component_id=_parse_id(input.component_id, "componentId"),
                quantity=input.quantity,
                calories=input.calories,
                protein=input.protein,
                carbs=input.carbs,
                fat=input.fat,
            )
        )
        return map_custom_meal(meal)

    @strawberry.mutation
    async def remove_meal_component(
        self,
        info: strawberry.types.Info,
        meal_id: strawberry.ID,
        component_id: strawberry.ID,
        user_id: str,
    ) -> CustomMealType:
        (meal_store,) = require_dependencies(info.context, "custom_meal_store")
        handler = RemoveMealComponentHandler(meal_store)
        meal = await handler.handle(
            RemoveMealComponentCommand(
                meal_id=_parse_id(meal_id, "mealId"),
                user_id=user_id,
                component_id=_parse_id(component_id, "componentId"),
            )
        )
        return map_custom_meal(meal)

    @strawberry.mutation
    async def delete_custom_meal(
        self, info: strawberry.types.Info, meal_id: strawberry.ID, user_id: str
    ) -> bool:
        """Delete a saved meal; entries already logged from it stay."""
        (meal_store,) = require_dependencies(info.context, "custom_meal_store")
        await DeleteCustomMealHandler(meal_store).handle(
            DeleteCustomMealCommand(meal_id=_parse_id(meal_id, "mealId"), user_id=user_id)
        )
        return True

    @strawberry.mutation
    async def log_custom_food(
        self, info: strawberry.types.Info, input: LogCustomFoodInput
    ) -> LogFoodResultType:
        """Log servings of a saved food and return the refreshed day."""
        food_ledger, food_store, profile_store, controller = require_dependencies(
            info.context,
            "food_ledger",
            "custom_food_store",
            "profile_store",
            "summary_controller",
        )
        handler = LogCustomFoodHandler(food_ledger, food_store, profile_store, controller)
        result = await handler.handle(
            LogCustomFoodCommand(
                user_id=input.user_id,
                food_id=_parse_id(input.food_id, "foodId"),
                consumed_at=input.consumed_at,
                servings=input.servings,
                meal_type=input.meal_type,
            )
        )
        return LogFoodResultType(
            entry=map_food_entry(result.entry), balance=map_balance(result.balance)
        )

    @strawberry.mutation
    async def log_meal(
        self, info: strawberry.types.Info, input: LogMealInput
    ) -> LogMealResultType:
        """Log one entry per meal component and return the refreshed day."""
        food_ledger, meal_store, profile_store, controller = require_dependencies(
            info.context,
            "food_ledger",
            "custom_meal_store",
            "profile_store",
            "summary_controller",
        )
        handler = LogMealHandler(food_ledger, meal_store, profile_store, controller)
        result = await handler.handle(
            LogMealCommand(
                user_id=input.user_id,
                meal_id=_parse_id(input.meal_id, "mealId"),
                consumed_at=input.consumed_at,
                servings=input.servings,
                meal_type=input.meal_type,
            )
        )
        return LogMealResultType(
            entries=[map_food_entry(entry) for entry in result.entries],
            balance=map_balance(result.balance),
        )
