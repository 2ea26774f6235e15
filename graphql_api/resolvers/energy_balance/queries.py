"""Query resolvers for energy balance domain.

These resolvers are pure reads; they never trigger a recompute:
- dailyEnergyBalance: Stored balance for one date (null if never computed)
- energyBalanceRange: Stored balances over a date range (gaps omitted)
- energyBalanceStatistics: Averages over a period
- userProfile: Profile with derived BMR/TDEE
- customFoods / customMeals: Saved foods and meals, sorted by name
"""

from datetime import date as date_type
from typing import List, Optional

import strawberry

from application.energy_balance.queries.get_balance_range import (
    GetBalanceRangeQuery,
    GetBalanceRangeQueryHandler,
)
from application.energy_balance.queries.get_balance_statistics import (
    GetBalanceStatisticsQuery,
    GetBalanceStatisticsQueryHandler,
)
from application.energy_balance.queries.get_daily_balance import (
    GetDailyBalanceQuery,
    GetDailyBalanceQueryHandler,
)
from application.energy_balance.queries.get_profile import (
    GetProfileQuery,
    GetProfileQueryHandler,
)
from application.energy_balance.queries.get_saved_foods import (
    GetCustomFoodsQuery,
    GetCustomFoodsQueryHandler,
    GetCustomMealsQuery,
    GetCustomMealsQueryHandler,
)
from graphql_api.context import require_dependencies
from graphql_api.types_energy_balance import (
    BalanceStatisticsType,
    CustomFoodType,
    CustomMealType,
    DailyEnergyBalanceType,
    UserProfileType,
)

from .mappers import (
    map_balance,
    map_custom_food,
    map_custom_meal,
    map_profile,
    map_statistics,
)


@strawberry.type
class EnergyBalanceQueries:
    """Queries for daily energy balances and profiles."""

    @strawberry.field
    async def daily_energy_balance(
        self, info: strawberry.types.Info, user_id: str, date: date_type
    ) -> Optional[DailyEnergyBalanceType]:
        """Stored balance of a user on one date.

        Example:
            query {
              energyBalance {
                dailyEnergyBalance(userId: "user123", date: "2024-01-15") {
                  caloriesConsumed
                  totalBurned
                  netCalories
                }
              }
            }
        """
        (controller,) = require_dependencies(info.context, "summary_controller")

        handler = GetDailyBalanceQueryHandler(controller)
        row = await handler.handle(GetDailyBalanceQuery(user_id=user_id, date=date))
        return map_balance(row) if row else None

    @strawberry.field
    async def energy_balance_range(
        self,
        info: strawberry.types.Info,
        user_id: str,
        start_date: date_type,
        end_date: date_type,
    ) -> List[DailyEnergyBalanceType]:
        """Stored balances with date in [startDate, endDate], ascending."""
        (controller,) = require_dependencies(info.context, "summary_controller")

        handler = GetBalanceRangeQueryHandler(controller)
        rows = await handler.handle(
            GetBalanceRangeQuery(user_id=user_id, start=start_date, end=end_date)
        )
        return [map_balance(row) for row in rows]

    @strawberry.field
    async def energy_balance_statistics(
        self,
        info: strawberry.types.Info,
        user_id: str,
        start_date: date_type,
        end_date: date_type,
    ) -> BalanceStatisticsType:
        """Averages over stored balances and total exercise minutes."""
        controller, activity_ledger = require_dependencies(
            info.context, "summary_controller", "activity_ledger"
        )
        handler = GetBalanceStatisticsQueryHandler(controller, activity_ledger)
        stats = await handler.handle(
            GetBalanceStatisticsQuery(user_id=user_id, start=start_date, end=end_date)
        )
        return map_statistics(stats)

    @strawberry.field
    async def user_profile(
        self, info: strawberry.types.Info, user_id: str
    ) -> Optional[UserProfileType]:
        """Profile of a user, null when none exists."""
        (profile_store,) = require_dependencies(info.context, "profile_store")

        profile = await GetProfileQueryHandler(profile_store).handle(
            GetProfileQuery(user_id=user_id)
        )
        return map_profile(profile) if profile else None

    @strawberry.field
    async def custom_foods(
        self, info: strawberry.types.Info, user_id: str, favorites_only: bool = False
    ) -> List[CustomFoodType]:
        """Saved foods of a user, sorted by name."""
        (food_store,) = require_dependencies(info.context, "custom_food_store")

        foods = await GetCustomFoodsQueryHandler(food_store).handle(
            GetCustomFoodsQuery(user_id=user_id, favorites_only=favorites_only)
        )
        return [map_custom_food(food) for food in foods]

    @strawberry.field
    async def custom_meals(
        self, info: strawberry.types.Info, user_id: str, favorites_only: bool = False
    ) -> List[CustomMealType]:
        """Saved meals of a user with their components and totals.

        Example:
            query {
              energyBalance {
                customMeals(userId: "user123") {
                  name
                  totalCalories
                  components { foodName quantity }
                }
              }
            }
        """
        (meal_store,) = require_dependencies(info.context, "custom_meal_store")

        meals = await GetCustomMealsQueryHandler(meal_store).handle(
            GetCustomMealsQuery(user_id=user_id, favorites_only=favorites_only)
        )
        return [map_custom_meal(meal) for meal in meals]
