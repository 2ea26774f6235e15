"""CQRS Queries for energy balance domain."""

from .get_balance_range import GetBalanceRangeQuery, GetBalanceRangeQueryHandler
from .get_balance_statistics import (
    BalanceStatistics,
    GetBalanceStatisticsQuery,
    GetBalanceStatisticsQueryHandler,
)
from .get_daily_balance import GetDailyBalanceQuery, GetDailyBalanceQueryHandler
from .get_profile import GetProfileQuery, GetProfileQueryHandler
from .get_saved_foods import (
    GetCustomFoodsQuery,
    GetCustomFoodsQueryHandler,
    GetCustomMealsQuery,
    GetCustomMealsQueryHandler,
)

__all__ = [
    "GetDailyBalanceQuery",
    "GetDailyBalanceQueryHandler",
    "GetBalanceRangeQuery",
    "GetBalanceRangeQueryHandler",
    "GetBalanceStatisticsQuery",
    "GetBalanceStatisticsQueryHandler",
    "BalanceStatistics",
    "GetProfileQuery",
    "GetProfileQueryHandler",
    "GetCustomFoodsQuery",
    "GetCustomFoodsQueryHandler",
    "GetCustomMealsQuery",
    "GetCustomMealsQueryHandler",
]
