"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repositories (profiles, food log, activities, saved foods and meals)
- Summary controller (single recompute path for daily balances)
- Domain services (metabolic calculator, calorie estimator)
- Activity provider factory (remote activity source)
"""

from typing import Any, AsyncContextManager, Callable, List, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.energy_balance.orchestrators.summary_controller import (
    SummaryController,
)
from domain.energy_balance.activity.calorie_estimator import ActivityCalorieEstimator
from domain.energy_balance.calculation.metabolic_calculator import MetabolicCalculator
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger
from domain.energy_balance.core.ports.activity_provider import IActivityProvider
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.ports.profile_store import IProfileStore

ActivityProviderFactory = Callable[[], AsyncContextManager[IActivityProvider]]


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        profile_store: User profile persistence
        food_ledger: Food log persistence
        activity_ledger: Activity persistence
        summary_controller: Recomputes and reads daily balances
        metabolic_calculator: BMR/TDEE calculation
        calorie_estimator: MET-based activity calorie estimation
        activity_provider_factory: Creates a remote activity client
            (used as ``async with factory() as provider``)
        custom_food_store: Saved food persistence
        custom_meal_store: Saved meal persistence
        request: FastAPI request object
    """

    def __init__(
        self,
        profile_store: IProfileStore,
        food_ledger: IFoodLedger,
        activity_ledger: IActivityLedger,
        summary_controller: SummaryController,
        metabolic_calculator: MetabolicCalculator,
        calorie_estimator: ActivityCalorieEstimator,
        activity_provider_factory: Optional[ActivityProviderFactory] = None,
        custom_food_store: Optional[ICustomFoodStore] = None,
        custom_meal_store: Optional[ICustomMealStore] = None,
        request: Optional[Request] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.profile_store = profile_store
        self.food_ledger = food_ledger
        self.activity_ledger = activity_ledger
        self.summary_controller = summary_controller
        self.metabolic_calculator = metabolic_calculator
        self.calorie_estimator = calorie_estimator
        self.activity_provider_factory = activity_provider_factory
        self.custom_food_store = custom_food_store
        self.custom_meal_store = custom_meal_store
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Args:
            key: Dependency name (e.g., "summary_controller")

        Returns:
            Dependency instance or None if not found
        """
        return getattr(self, key, None)


def create_context(
    profile_store: IProfileStore,
    food_ledger: IFoodLedger,
    activity_ledger: IActivityLedger,
    summary_controller: SummaryController,
    metabolic_calculator: Optional[MetabolicCalculator] = None,
    calorie_estimator: Optional[ActivityCalorieEstimator] = None,
    activity_provider_factory: Optional[ActivityProviderFactory] = None,
    custom_food_store: Optional[ICustomFoodStore] = None,
    custom_meal_store: Optional[ICustomMealStore] = None,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     profile_store=InMemoryProfileStore(),
        ...     food_ledger=InMemoryFoodLedger(),
        ...     activity_ledger=InMemoryActivityLedger(),
        ...     summary_controller=controller,
        ... )
    """
    return GraphQLContext(
        profile_store=profile_store,
        food_ledger=food_ledger,
        activity_ledger=activity_ledger,
        summary_controller=summary_controller,
        metabolic_calculator=metabolic_calculator or MetabolicCalculator(),
        calorie_estimator=calorie_estimator or ActivityCalorieEstimator(),
        activity_provider_factory=activity_provider_factory,
        custom_food_store=custom_food_store,
        custom_meal_store=custom_meal_store,
        request=request,
    )


def require_dependencies(context: Any, *names: str) -> List[Any]:
    """Fetch named dependencies from a resolver context.

    Raises:
        RuntimeError: If any of them is missing
    """
    deps = [context.get(name) for name in names]
    missing = [name for name, dep in zip(names, deps) if dep is None]
    if missing:
        raise RuntimeError(f"Missing dependencies in GraphQL context: {', '.join(missing)}")
    return deps
