"""Integration tests for the energy balance GraphQL API over HTTP.

The app singletons live for the whole session, so each test uses its
own user ID.
"""

from typing import Any, Dict, Optional
from uuid import uuid4

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


async def _gql(
    client: AsyncClient, query: str, variables: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


CREATE_PROFILE = """
mutation Create($input: CreateProfileInput!) {
  energyBalance {
    createUserProfile(input: $input) { userId bmr tdee activityLevel }
  }
}
"""

LOG_FOOD = """
mutation Log($input: LogFoodInput!) {
  energyBalance {
    logFood(input: $input) {
      entry { id foodName }
      balance { date caloriesConsumed caloriesBurnedBaseline netCalories }
    }
  }
}
"""

DAILY_BALANCE = """
query Daily($userId: String!, $date: Date!) {
  energyBalance {
    dailyEnergyBalance(userId: $userId, date: $date) {
      caloriesConsumed
      proteinConsumed
      totalBurned
      netCalories
    }
  }
}
"""


async def _create_profile(client: AsyncClient, user_id: str) -> Dict[str, Any]:
    return await _gql(
        client,
        CREATE_PROFILE,
        {
            "input": {
                "userId": user_id,
                "weightKg": "70",
                "heightCm": "175",
                "age": 30,
                "sex": "male",
                "activityLevel": "moderately_active",
            }
        },
    )


@pytest.mark.asyncio
async def test_health_and_version(client: AsyncClient) -> None:
    health = await client.get("/health")
    version = await client.get("/version")

    assert health.status_code == 200
    assert health.json() == {"status": "ok"}
    assert version.status_code == 200
    assert "version" in version.json()


@pytest.mark.asyncio
async def test_create_profile(client: AsyncClient) -> None:
    user_id = f"user-{uuid4()}"

    body = await _create_profile(client, user_id)

    assert "errors" not in body
    profile = body["data"]["energyBalance"]["createUserProfile"]
    assert profile["userId"] == user_id
    assert profile["bmr"] == "1648.75"
    assert profile["tdee"] == "2555.5625"


@pytest.mark.asyncio
async def test_log_food_then_read_daily_balance(client: AsyncClient) -> None:
    user_id = f"user-{uuid4()}"
    await _create_profile(client, user_id)

    logged = await _gql(
        client,
        LOG_FOOD,
        {
            "input": {
                "userId": user_id,
                "foodName": "Oatmeal",
                "calories": 150,
                "protein": "5",
                "carbs": "27",
                "fat": "2.5",
                "consumedAt": "2024-01-15T08:00:00",
                "servings": "2",
                "mealType": "breakfast",
            }
        },
    )

    assert "errors" not in logged
    balance = logged["data"]["energyBalance"]["logFood"]["balance"]
    assert balance["date"] == "2024-01-15"
    assert balance["caloriesConsumed"] == 300
    assert balance["caloriesBurnedBaseline"] == 2556
    assert balance["netCalories"] == 300 - 2556

    daily = await _gql(client, DAILY_BALANCE, {"userId": user_id, "date": "2024-01-15"})

    row = daily["data"]["energyBalance"]["dailyEnergyBalance"]
    assert row["caloriesConsumed"] == 300
    assert row["proteinConsumed"] == "10"
    assert row["totalBurned"] == 2556


@pytest.mark.asyncio
async def test_daily_balance_never_computed_is_null(client: AsyncClient) -> None:
    body = await _gql(
        client, DAILY_BALANCE, {"userId": f"user-{uuid4()}", "date": "2024-01-15"}
    )

    assert "errors" not in body
    assert body["data"]["energyBalance"]["dailyEnergyBalance"] is None


@pytest.mark.asyncio
async def test_log_food_unknown_user_returns_error(client: AsyncClient) -> None:
    body = await _gql(
        client,
        LOG_FOOD,
        {
            "input": {
                "userId": f"ghost-{uuid4()}",
                "foodName": "Apple",
                "calories": 95,
                "protein": "0.5",
                "carbs": "25",
                "fat": "0.3",
                "consumedAt": "2024-01-15T10:00:00",
            }
        },
    )

    assert body["data"] is None
    assert "Unknown user" in body["errors"][0]["message"]


CREATE_CUSTOM_MEAL = """
mutation CreateMeal($input: CreateCustomMealInput!) {
  energyBalance {
    createCustomMeal(input: $input) { id totalCalories components { foodName quantity } }
  }
}
"""

LOG_MEAL = """
mutation LogMeal($input: LogMealInput!) {
  energyBalance {
    logMeal(input: $input) {
      entries { foodName servings customMealId }
      balance { caloriesConsumed }
    }
  }
}
"""


@pytest.mark.asyncio
async def test_log_saved_meal(client: AsyncClient) -> None:
    user_id = f"user-{uuid4()}"
    await _create_profile(client, user_id)

    created = await _gql(
        client,
        CREATE_CUSTOM_MEAL,
        {
            "input": {
                "userId": user_id,
                "name": "Rice bowl",
                "components": [
                    {
                        "usdaFdcId": "169756",
                        "foodName": "White rice, cooked",
                        "calories": 130,
                        "protein": "2.7",
                        "carbs": "28",
                        "fat": "0.3",
                        "servingSize": "100",
                        "servingUnit": "g",
                        "quantity": "1.5",
                    }
                ],
            }
        },
    )

    assert "errors" not in created
    meal = created["data"]["energyBalance"]["createCustomMeal"]
    assert meal["totalCalories"] == 195

    logged = await _gql(
        client,
        LOG_MEAL,
        {
            "input": {
                "userId": user_id,
                "mealId": meal["id"],
                "consumedAt": "2024-01-15T12:00:00",
                "servings": "2",
            }
        },
    )

    assert "errors" not in logged
    result = logged["data"]["energyBalance"]["logMeal"]
    assert result["entries"] == [
        {"foodName": "White rice, cooked", "servings": "3.0", "customMealId": meal["id"]}
    ]
    assert result["balance"]["caloriesConsumed"] == 390
