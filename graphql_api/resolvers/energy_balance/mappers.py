"""Mapping from domain objects to GraphQL types."""

from typing import Optional
from uuid import UUID

import strawberry

from application.energy_balance.queries.get_balance_statistics import (
    BalanceStatistics,
)
from domain.energy_balance.core.entities.activity_entry import ActivityEntry
from domain.energy_balance.core.entities.custom_food import CustomFood
from domain.energy_balance.core.entities.custom_meal import CustomMeal, MealComponent
from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.entities.user_profile import UserProfile
from graphql_api.types_energy_balance import (
    ActivityEntryType,
    BalanceStatisticsType,
    CustomFoodType,
    CustomMealType,
    DailyEnergyBalanceType,
    FoodLogEntryType,
    MealComponentType,
    UserProfileType,
)


def map_balance(row: DailyEnergyBalance) -> DailyEnergyBalanceType:
    return DailyEnergyBalanceType(
        user_id=row.user_id,
        date=row.date,
        calories_consumed=row.calories_consumed,
        protein_consumed=row.protein_consumed,
        carbs_consumed=row.carbs_consumed,
        fat_consumed=row.fat_consumed,
        calories_burned_baseline=row.calories_burned_baseline,
        calories_burned_exercise=row.calories_burned_exercise,
        total_burned=row.total_burned,
        net_calories=row.net_calories,
        updated_at=row.updated_at,
    )


def map_statistics(stats: BalanceStatistics) -> BalanceStatisticsType:
    return BalanceStatisticsType(
        start_date=stats.start,
        end_date=stats.end,
        days_recorded=stats.days_recorded,
        avg_calories_consumed=stats.avg_calories_consumed,
        avg_protein=stats.avg_protein,
        avg_carbs=stats.avg_carbs,
        avg_fat=stats.avg_fat,
        avg_calories_burned=stats.avg_calories_burned,
        avg_net_calories=stats.avg_net_calories,
        total_exercise_minutes=stats.total_exercise_minutes,
    )


def map_profile(profile: UserProfile) -> UserProfileType:
    return UserProfileType(
        user_id=profile.user_id,
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        age=profile.age,
        sex=profile.sex.value if profile.sex else None,
        activity_level=profile.activity_level.value if profile.activity_level else None,
        bmr=profile.bmr.value if profile.bmr else None,
        tdee=profile.tdee.value if profile.tdee else None,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def map_food_entry(entry: FoodLogEntry) -> FoodLogEntryType:
    return FoodLogEntryType(
        id=strawberry.ID(str(entry.entry_id)),
        user_id=entry.user_id,
        food_name=entry.food_name,
        calories=entry.calories,
        protein=entry.protein,
        carbs=entry.carbs,
        fat=entry.fat,
        servings=entry.servings,
        consumed_at=entry.consumed_at,
        meal_type=entry.meal_type.value if entry.meal_type else None,
        brand_name=entry.brand_name,
        fiber=entry.fiber,
        sugar=entry.sugar,
        sodium=entry.sodium,
        usda_fdc_id=entry.usda_fdc_id,
        custom_food_id=_optional_id(entry.custom_food_id),
        custom_meal_id=_optional_id(entry.custom_meal_id),
    )


def map_activity(entry: ActivityEntry) -> ActivityEntryType:
    return ActivityEntryType(
        id=strawberry.ID(str(entry.entry_id)),
        user_id=entry.user_id,
        external_id=entry.external_id,
        activity_type=entry.activity_type,
        calories=entry.calories,
        duration_s=entry.duration_s,
        started_at=entry.started_at,
        source=entry.source.value,
        distance_m=entry.distance_m,
        name=entry.name,
    )


def map_custom_food(food: CustomFood) -> CustomFoodType:
    return CustomFoodType(
        id=strawberry.ID(str(food.food_id)),
        user_id=food.user_id,
        name=food.name,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        serving_size=food.serving_size,
        serving_unit=food.serving_unit,
        is_favorite=food.is_favorite,
        created_at=food.created_at,
        updated_at=food.updated_at,
        brand=food.brand,
        fiber=food.fiber,
        sugar=food.sugar,
        sodium=food.sodium,
    )


def map_meal_component(component: MealComponent) -> MealComponentType:
    return MealComponentType(
        id=strawberry.ID(str(component.component_id)),
        food_name=component.food_name,
        calories=component.calories,
        protein=component.protein,
        carbs=component.carbs,
        fat=component.fat,
        serving_size=component.serving_size,
        serving_unit=component.serving_unit,
        quantity=component.quantity,
        custom_food_id=_optional_id(component.custom_food_id),
        usda_fdc_id=component.usda_fdc_id,
        brand_name=component.brand_name,
    )


def map_custom_meal(meal: CustomMeal) -> CustomMealType:
    return CustomMealType(
        id=strawberry.ID(str(meal.meal_id)),
        user_id=meal.user_id,
        name=meal.name,
        is_favorite=meal.is_favorite,
        components=[map_meal_component(c) for c in meal.components],
        total_calories=meal.total_calories,
        total_protein=meal.total_protein,
        total_carbs=meal.total_carbs,
        total_fat=meal.total_fat,
        created_at=meal.created_at,
        updated_at=meal.updated_at,
        description=meal.description,
    )


def _optional_id(value: Optional[UUID]) -> Optional[strawberry.ID]:
    return None if value is None else strawberry.ID(str(value))
