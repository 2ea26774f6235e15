"""MongoDB implementation of ICustomMealStore.

Components are embedded in the meal document. Cached totals are written
for listing but recomputed from the components when a meal is loaded.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.custom_meal import CustomMeal, MealComponent
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore

from .base import MongoBaseRepository


class MongoCustomMealStore(MongoBaseRepository[CustomMeal], ICustomMealStore):
    """MongoDB implementation of the saved meal store."""

    @property
    def collection_name(self) -> str:
        return "custom_meals"

    def to_document(self, entity: CustomMeal) -> Dict[str, Any]:
        meal = entity
        return {
            "_id": str(meal.meal_id),
            "user_id": meal.user_id,
            "name": meal.name,
            "description": meal.description,
            "is_favorite": meal.is_favorite,
            "components": [self._component_to_document(c) for c in meal.components],
            "total_calories": meal.total_calories,
            "total_protein": self.decimal_to_str(meal.total_protein),
            "total_carbs": self.decimal_to_str(meal.total_carbs),
            "total_fat": self.decimal_to_str(meal.total_fat),
            "created_at": self.datetime_to_iso(meal.created_at),
            "updated_at": self.datetime_to_iso(meal.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> CustomMeal:
        return CustomMeal(
            meal_id=UUID(doc["_id"]),
            user_id=doc["user_id"],
            name=doc["name"],
            description=doc.get("description"),
            is_favorite=bool(doc.get("is_favorite", False)),
            components=[self._component_from_document(c) for c in doc.get("components", [])],
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
            updated_at=self.iso_to_utc_datetime(doc["updated_at"]),
        )

    def _component_to_document(self, component: MealComponent) -> Dict[str, Any]:
        return {
            "component_id": str(component.component_id),
            "custom_food_id": self.uuid_to_str(component.custom_food_id),
            "usda_fdc_id": component.usda_fdc_id,
            "food_name": component.food_name,
            "brand_name": component.brand_name,
            "quantity": self.decimal_to_str(component.quantity),
            "serving_size": component.serving_size,
            "serving_unit": component.serving_unit,
            "calories": component.calories,
            "protein": self.decimal_to_str(component.protein),
            "carbs": self.decimal_to_str(component.carbs),
            "fat": self.decimal_to_str(component.fat),
            "created_at": self.datetime_to_iso(component.created_at),
        }

    def _component_from_document(self, doc: Dict[str, Any]) -> MealComponent:
        return MealComponent(
            component_id=UUID(doc["component_id"]),
            custom_food_id=self.str_to_uuid(doc.get("custom_food_id")),
            usda_fdc_id=doc.get("usda_fdc_id"),
            food_name=doc["food_name"],
            brand_name=doc.get("brand_name"),
            quantity=self.str_to_decimal(doc.get("quantity", "1")),
            serving_size=doc["serving_size"],
            serving_unit=doc["serving_unit"],
            calories=int(doc["calories"]),
            protein=self.str_to_decimal(doc["protein"]),
            carbs=self.str_to_decimal(doc["carbs"]),
            fat=self.str_to_decimal(doc["fat"]),
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
        )

    async def get(self, meal_id: UUID) -> Optional[CustomMeal]:
        doc = await self._find_one({"_id": str(meal_id)})
        return self.from_document(doc) if doc else None

    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomMeal]:
        query: Dict[str, Any] = {"user_id": user_id}
        if favorites_only:
            query["is_favorite"] = True
        docs = await self._find_many(query, sort=[("name", 1)])
        return [self.from_document(doc) for doc in docs]

    async def list_using_food(self, user_id: str, food_id: UUID) -> List[CustomMeal]:
        docs = await self._find_many(
            {"user_id": user_id, "components.custom_food_id": str(food_id)}
        )
        return [self.from_document(doc) for doc in docs]

    async def save(self, meal: CustomMeal) -> None:
        document = self.to_document(meal)
        await self._replace_one({"_id": document["_id"]}, document, upsert=True)

    async def delete(self, meal_id: UUID) -> bool:
        return await self._delete_one({"_id": str(meal_id)}) > 0

    async def ensure_indexes(self) -> None:
        await self._create_index([("user_id", 1), ("name", 1)], name="idx_user_name")
        await self._create_index([("user_id", 1), ("is_favorite", 1)], name="idx_user_favorite")
        await self._create_index(
            [("user_id", 1), ("components.custom_food_id", 1)], name="idx_user_component_food"
        )
