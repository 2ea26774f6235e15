"""Unit tests for saved food and meal commands."""

from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest
import pytest_asyncio

from application.energy_balance.commands.create_custom_food import (
    CreateCustomFoodCommand,
    CreateCustomFoodHandler,
)
from application.energy_balance.commands.create_custom_meal import (
    CreateCustomMealCommand,
    CreateCustomMealHandler,
)
from application.energy_balance.commands.delete_custom_food import (
    DeleteCustomFoodCommand,
    DeleteCustomFoodHandler,
)
from application.energy_balance.commands.delete_custom_meal import (
    DeleteCustomMealCommand,
    DeleteCustomMealHandler,
)
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
from application.energy_balance.queries.get_saved_foods import (
    GetCustomFoodsQuery,
    GetCustomFoodsQueryHandler,
    GetCustomMealsQuery,
    GetCustomMealsQueryHandler,
)
from domain.energy_balance.core.entities.custom_meal import CustomMeal
from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import (
    CustomFoodNotFoundError,
    CustomMealNotFoundError,
    InvalidInputError,
    UnknownUserError,
)

DAY = date(2024, 1, 15)
LUNCH = datetime(2024, 1, 15, 12, 30)

RICE = MealComponentSpec(
    usda_fdc_id="169756",
    food_name="White rice, cooked",
    calories=130,
    protein=Decimal("2.7"),
    carbs=Decimal(28),
    fat=Decimal("0.3"),
    serving_size="100",
    serving_unit="g",
)


@pytest_asyncio.fixture
async def chicken(custom_food_store, profile_store, complete_profile):
    handler = CreateCustomFoodHandler(custom_food_store, profile_store)
    return await handler.handle(
        CreateCustomFoodCommand(
            user_id="user123",
            name="Grilled chicken",
            calories=165,
            serving_size="100",
            serving_unit="g",
            protein=Decimal(31),
            fat=Decimal("3.6"),
        )
    )


@pytest_asyncio.fixture
async def lunch(custom_meal_store, custom_food_store, profile_store, chicken):
    handler = CreateCustomMealHandler(custom_meal_store, custom_food_store, profile_store)
    return await handler.handle(
        CreateCustomMealCommand(
            user_id="user123",
            name="Chicken and rice",
            components=(
                MealComponentSpec(custom_food_id=chicken.food_id, quantity=Decimal("1.5")),
                RICE,
            ),
        )
    )


class TestCustomFoods:
    @pytest.mark.asyncio
    async def test_create(self, custom_food_store, chicken):
        stored = await custom_food_store.get(chicken.food_id)

        assert stored == chicken
        assert stored.protein == Decimal(31)

    @pytest.mark.asyncio
    async def test_create_unknown_user(self, custom_food_store, profile_store):
        handler = CreateCustomFoodHandler(custom_food_store, profile_store)

        with pytest.raises(UnknownUserError):
            await handler.handle(
                CreateCustomFoodCommand(
                    user_id="ghost",
                    name="Toast",
                    calories=80,
                    serving_size="1",
                    serving_unit="slice",
                )
            )

        assert custom_food_store.count() == 0

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, custom_food_store, profile_store, chicken):
        handler = CreateCustomFoodHandler(custom_food_store, profile_store)
        await handler.handle(
            CreateCustomFoodCommand(
                user_id="user123",
                name="Almonds",
                calories=164,
                serving_size="28",
                serving_unit="g",
                is_favorite=True,
            )
        )
        query = GetCustomFoodsQueryHandler(custom_food_store)

        every = await query.handle(GetCustomFoodsQuery(user_id="user123"))
        favorites = await query.handle(
            GetCustomFoodsQuery(user_id="user123", favorites_only=True)
        )

        assert [f.name for f in every] == ["Almonds", "Grilled chicken"]
        assert [f.name for f in favorites] == ["Almonds"]

    @pytest.mark.asyncio
    async def test_delete_unlinks_meals(
        self, custom_food_store, custom_meal_store, chicken, lunch
    ):
        handler = DeleteCustomFoodHandler(custom_food_store, custom_meal_store)

        unlinked = await handler.handle(
            DeleteCustomFoodCommand(food_id=chicken.food_id, user_id="user123")
        )

        assert unlinked == 1
        assert await custom_food_store.get(chicken.food_id) is None
        meal = await custom_meal_store.get(lunch.meal_id)
        assert meal.components[0].custom_food_id is None
        assert meal.components[0].food_name == "Grilled chicken"
        assert meal.total_calories == lunch.total_calories

    @pytest.mark.asyncio
    async def test_delete_someone_elses_food(
        self, custom_food_store, custom_meal_store, chicken
    ):
        handler = DeleteCustomFoodHandler(custom_food_store, custom_meal_store)

        with pytest.raises(CustomFoodNotFoundError):
            await handler.handle(
                DeleteCustomFoodCommand(food_id=chicken.food_id, user_id="intruder")
            )

        assert await custom_food_store.get(chicken.food_id) is not None


class TestCustomMeals:
    @pytest.mark.asyncio
    async def test_create_copies_values_and_totals(self, lunch, chicken):
        assert lunch.components[0].custom_food_id == chicken.food_id
        assert lunch.components[0].food_name == "Grilled chicken"
        assert lunch.components[1].usda_fdc_id == "169756"
        # 165 × 1.5 + 130 = 377.5
        assert lunch.total_calories == 378
        assert lunch.total_protein == Decimal("49.2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "spec,match",
        [
            (MealComponentSpec(), "exactly one"),
            (
                MealComponentSpec(custom_food_id=uuid4(), usda_fdc_id="169756"),
                "exactly one",
            ),
            (MealComponentSpec(usda_fdc_id="169756", food_name="Rice"), "missing"),
        ],
    )
    async def test_invalid_component_spec(
        self, custom_meal_store, custom_food_store, profile_store, complete_profile, spec, match
    ):
        handler = CreateCustomMealHandler(custom_meal_store, custom_food_store, profile_store)

        with pytest.raises(InvalidInputError, match=match):
            await handler.handle(
                CreateCustomMealCommand(user_id="user123", name="Bad", components=(spec,))
            )

        assert custom_meal_store.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_custom_food(
        self, custom_meal_store, custom_food_store, profile_store, complete_profile
    ):
        handler = CreateCustomMealHandler(custom_meal_store, custom_food_store, profile_store)

        with pytest.raises(CustomFoodNotFoundError):
            await handler.handle(
                CreateCustomMealCommand(
                    user_id="user123",
                    name="Ghost meal",
                    components=(MealComponentSpec(custom_food_id=uuid4()),),
                )
            )

    @pytest.mark.asyncio
    async def test_add_component_recomputes_totals(
        self, custom_meal_store, custom_food_store, lunch
    ):
        handler = AddMealComponentHandler(custom_meal_store, custom_food_store)

        meal = await handler.handle(
            AddMealComponentCommand(
                meal_id=lunch.meal_id,
                user_id="user123",
                component=MealComponentSpec(
                    usda_fdc_id="170000",
                    food_name="Olive oil",
                    calories=119,
                    protein=0,
                    carbs=0,
                    fat=Decimal("13.5"),
                    serving_size="1",
                    serving_unit="tbsp",
                ),
            )
        )

        assert meal.total_calories == 497
        stored = await custom_meal_store.get(lunch.meal_id)
        assert len(stored.components) == 3
        assert stored.total_calories == 497

    @pytest.mark.asyncio
    async def test_update_component_recomputes_totals(self, custom_meal_store, lunch):
        handler = UpdateMealComponentHandler(custom_meal_store)

        meal = await handler.handle(
            UpdateMealComponentCommand(
                meal_id=lunch.meal_id,
                user_id="user123",
                component_id=lunch.components[1].component_id,
                quantity=Decimal(2),
            )
        )

        # 165 × 1.5 + 130 × 2 = 507.5
        assert meal.total_calories == 508
        assert (await custom_meal_store.get(lunch.meal_id)).total_calories == 508

    def test_update_requires_a_field(self):
        with pytest.raises(InvalidInputError, match="At least one field"):
            UpdateMealComponentCommand(
                meal_id=uuid4(), user_id="user123", component_id=uuid4()
            )

    @pytest.mark.asyncio
    async def test_remove_component_recomputes_totals(self, custom_meal_store, lunch):
        handler = RemoveMealComponentHandler(custom_meal_store)

        meal = await handler.handle(
            RemoveMealComponentCommand(
                meal_id=lunch.meal_id,
                user_id="user123",
                component_id=lunch.components[0].component_id,
            )
        )

        assert [c.food_name for c in meal.components] == ["White rice, cooked"]
        assert meal.total_calories == 130

    @pytest.mark.asyncio
    async def test_edit_someone_elses_meal(self, custom_meal_store, lunch):
        handler = RemoveMealComponentHandler(custom_meal_store)

        with pytest.raises(CustomMealNotFoundError):
            await handler.handle(
                RemoveMealComponentCommand(
                    meal_id=lunch.meal_id,
                    user_id="intruder",
                    component_id=lunch.components[0].component_id,
                )
            )

    @pytest.mark.asyncio
    async def test_delete_meal(self, custom_meal_store, lunch):
        handler = DeleteCustomMealHandler(custom_meal_store)

        await handler.handle(DeleteCustomMealCommand(meal_id=lunch.meal_id, user_id="user123"))

        meals = await GetCustomMealsQueryHandler(custom_meal_store).handle(
            GetCustomMealsQuery(user_id="user123")
        )
        assert meals == []


class TestLogCustomFood:
    @pytest.mark.asyncio
    async def test_log_refreshes_day(
        self, food_ledger, custom_food_store, profile_store, controller, chicken
    ):
        handler = LogCustomFoodHandler(food_ledger, custom_food_store, profile_store, controller)

        result = await handler.handle(
            LogCustomFoodCommand(
                user_id="user123", food_id=chicken.food_id, consumed_at=LUNCH, servings=2
            )
        )

        assert result.entry.custom_food_id == chicken.food_id
        assert result.entry.food_name == "Grilled chicken"
        assert result.balance.calories_consumed == 330
        assert result.balance.protein_consumed == Decimal(62)

    @pytest.mark.asyncio
    async def test_unknown_food(
        self, food_ledger, custom_food_store, profile_store, controller, complete_profile
    ):
        handler = LogCustomFoodHandler(food_ledger, custom_food_store, profile_store, controller)

        with pytest.raises(CustomFoodNotFoundError):
            await handler.handle(
                LogCustomFoodCommand(user_id="user123", food_id=uuid4(), consumed_at=LUNCH)
            )

        assert food_ledger.count() == 0


class TestLogMeal:
    @pytest.mark.asyncio
    async def test_meal_expands_into_entries(
        self, food_ledger, custom_meal_store, profile_store, controller, lunch, chicken
    ):
        handler = LogMealHandler(food_ledger, custom_meal_store, profile_store, controller)

        result = await handler.handle(
            LogMealCommand(
                user_id="user123",
                meal_id=lunch.meal_id,
                consumed_at=LUNCH,
                servings=2,
                meal_type="lunch",
            )
        )

        assert len(result.entries) == 2
        assert food_ledger.count() == 2
        chicken_entry, rice_entry = result.entries
        assert chicken_entry.servings == Decimal(3)
        assert chicken_entry.custom_food_id == chicken.food_id
        assert rice_entry.servings == Decimal(2)
        assert rice_entry.usda_fdc_id == "169756"
        assert {e.custom_meal_id for e in result.entries} == {lunch.meal_id}
        # 165 × 3 + 130 × 2
        assert result.balance.calories_consumed == 755
        assert await controller.fetch("user123", DAY) == result.balance

    @pytest.mark.asyncio
    async def test_empty_meal_rejected(
        self, food_ledger, custom_meal_store, profile_store, controller, complete_profile
    ):
        meal = CustomMeal.create(user_id="user123", name="Nothing")
        await custom_meal_store.save(meal)
        handler = LogMealHandler(food_ledger, custom_meal_store, profile_store, controller)

        with pytest.raises(InvalidInputError, match="no components"):
            await handler.handle(
                LogMealCommand(user_id="user123", meal_id=meal.meal_id, consumed_at=LUNCH)
            )

        assert await controller.fetch("user123", DAY) is None

    @pytest.mark.asyncio
    async def test_invalid_servings_writes_nothing(
        self, food_ledger, custom_meal_store, profile_store, controller, lunch
    ):
        handler = LogMealHandler(food_ledger, custom_meal_store, profile_store, controller)

        with pytest.raises(InvalidInputError):
            await handler.handle(
                LogMealCommand(
                    user_id="user123", meal_id=lunch.meal_id, consumed_at=LUNCH, servings=0
                )
            )

        assert food_ledger.count() == 0

    @pytest.mark.asyncio
    async def test_failed_add_still_recomputes_day(
        self, food_ledger, custom_meal_store, profile_store, controller, lunch
    ):
        original_add = food_ledger.add
        calls = 0

        async def flaky_add(entry):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise ConnectionError("ledger unavailable")
            await original_add(entry)

        food_ledger.add = flaky_add
        handler = LogMealHandler(food_ledger, custom_meal_store, profile_store, controller)

        with pytest.raises(ConnectionError):
            await handler.handle(
                LogMealCommand(user_id="user123", meal_id=lunch.meal_id, consumed_at=LUNCH)
            )

        row = await controller.fetch("user123", DAY)
        # 165 × 1.5 = 247.5
        assert row.calories_consumed == 248

    @pytest.mark.asyncio
    async def test_someone_elses_meal(
        self, food_ledger, custom_meal_store, profile_store, controller, lunch
    ):
        await profile_store.save(UserProfile(user_id="intruder"))
        handler = LogMealHandler(food_ledger, custom_meal_store, profile_store, controller)

        with pytest.raises(CustomMealNotFoundError):
            await handler.handle(
                LogMealCommand(user_id="intruder", meal_id=lunch.meal_id, consumed_at=LUNCH)
            )
