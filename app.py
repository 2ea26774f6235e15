from __future__ import annotations

# Standard library
import datetime
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, Final

# Third-party
import strawberry
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

load_dotenv()

# Local application imports
from application.energy_balance.orchestrators.summary_controller import (  # noqa: E402
    SummaryController,
)
from domain.energy_balance.activity.calorie_estimator import (  # noqa: E402
    ActivityCalorieEstimator,
)
from domain.energy_balance.aggregation.aggregator import (  # noqa: E402
    EnergyBalanceAggregator,
)
from domain.energy_balance.calculation.metabolic_calculator import (  # noqa: E402
    MetabolicCalculator,
)
from graphql_api.context import create_context  # noqa: E402
from graphql_api.resolvers.energy_balance import (  # noqa: E402
    EnergyBalanceMutations,
    EnergyBalanceQueries,
)
from graphql_api.schema import create_schema  # noqa: E402
from infrastructure.concurrency.keyed_lock import KeyedLock  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_baseline_fallback_kcal,
    get_log_level,
    get_profile_recompute_window_days,
    get_repository_backend,
)
from infrastructure.external_apis.strava.client import StravaActivityClient  # noqa: E402
from infrastructure.persistence.factory import (  # noqa: E402
    ensure_mongo_indexes,
    get_activity_ledger,
    get_custom_food_store,
    get_custom_meal_store,
    get_food_ledger,
    get_profile_store,
    get_summary_repository,
    reset_repositories,
)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

APP_VERSION = get_app_version()


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Daily energy balance queries")  # type: ignore[misc]
    def energy_balance(self) -> EnergyBalanceQueries:
        """Energy balance read queries (CQRS).

        Example:
            query {
              energyBalance {
                dailyEnergyBalance(userId: "user123", date: "2024-01-15") {
                  netCalories
                }
                userProfile(userId: "user123") { bmr tdee }
              }
            }
        """
        return EnergyBalanceQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Energy balance mutations")  # type: ignore[misc]
    def energy_balance(self) -> EnergyBalanceMutations:
        """Profile, food log and activity mutations (CQRS).

        Example:
            mutation {
              energyBalance {
                logFood(input: {...}) { balance { caloriesConsumed } }
              }
            }
        """
        return EnergyBalanceMutations()


schema = create_schema()


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: ensure MongoDB indexes at start, release them on exit."""
    logger = _logging.getLogger("startup")
    logger.info(
        "startup.config",
        extra={
            "repository_backend": get_repository_backend(),
            "baseline_fallback_kcal": get_baseline_fallback_kcal(),
            "profile_window_days": get_profile_recompute_window_days(),
            "version": APP_VERSION,
        },
    )
    await ensure_mongo_indexes()
    logger.info("lifespan.ready", extra={"status": "serving"})
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    reset_repositories()


app = FastAPI(
    title="Energy Balance Service",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# ============================================
# GraphQL Context Setup
# ============================================

# Singletons shared across requests.
# REPOSITORY_BACKEND selects "inmemory" (default) or "mongodb".
_profile_store = get_profile_store()
_food_ledger = get_food_ledger()
_activity_ledger = get_activity_ledger()
_custom_food_store = get_custom_food_store()
_custom_meal_store = get_custom_meal_store()
_summary_repository = get_summary_repository()

_metabolic_calculator = MetabolicCalculator()
_calorie_estimator = ActivityCalorieEstimator()

_aggregator = EnergyBalanceAggregator(
    profile_store=_profile_store,
    food_ledger=_food_ledger,
    activity_ledger=_activity_ledger,
    baseline_fallback_kcal=get_baseline_fallback_kcal(),
)
_summary_controller = SummaryController(
    aggregator=_aggregator,
    summary_repository=_summary_repository,
    key_lock=KeyedLock(),
    profile_window_days=get_profile_recompute_window_days(),
)


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies."""
    return create_context(
        profile_store=_profile_store,
        food_ledger=_food_ledger,
        activity_ledger=_activity_ledger,
        summary_controller=_summary_controller,
        metabolic_calculator=_metabolic_calculator,
        calorie_estimator=_calorie_estimator,
        activity_provider_factory=StravaActivityClient,
        custom_food_store=_custom_food_store,
        custom_meal_store=_custom_meal_store,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
