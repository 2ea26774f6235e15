"""MongoDB implementation of ICustomFoodStore."""

from typing import Any, Dict, List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.custom_food import CustomFood
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore

from .base import MongoBaseRepository


class MongoCustomFoodStore(MongoBaseRepository[CustomFood], ICustomFoodStore):
    """MongoDB implementation of the saved food store."""

    @property
    def collection_name(self) -> str:
        return "custom_foods"

    def to_document(self, entity: CustomFood) -> Dict[str, Any]:
        food = entity
        return {
            "_id": str(food.food_id),
            "user_id": food.user_id,
            "name": food.name,
            "brand": food.brand,
            "calories": food.calories,
            "protein": self.decimal_to_str(food.protein),
            "carbs": self.decimal_to_str(food.carbs),
            "fat": self.decimal_to_str(food.fat),
            "fiber": self.decimal_to_str(food.fiber),
            "sugar": self.decimal_to_str(food.sugar),
            "sodium": self.decimal_to_str(food.sodium),
            "serving_size": food.serving_size,
            "serving_unit": food.serving_unit,
            "is_favorite": food.is_favorite,
            "created_at": self.datetime_to_iso(food.created_at),
            "updated_at": self.datetime_to_iso(food.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> CustomFood:
        return CustomFood(
            food_id=UUID(doc["_id"]),
            user_id=doc["user_id"],
            name=doc["name"],
            brand=doc.get("brand"),
            calories=int(doc["calories"]),
            protein=self.str_to_decimal(doc.get("protein", "0")),
            carbs=self.str_to_decimal(doc.get("carbs", "0")),
            fat=self.str_to_decimal(doc.get("fat", "0")),
            fiber=self.str_to_decimal(doc.get("fiber")),
            sugar=self.str_to_decimal(doc.get("sugar")),
            sodium=self.str_to_decimal(doc.get("sodium")),
            serving_size=doc["serving_size"],
            serving_unit=doc["serving_unit"],
            is_favorite=bool(doc.get("is_favorite", False)),
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
            updated_at=self.iso_to_utc_datetime(doc["updated_at"]),
        )

    async def get(self, food_id: UUID) -> Optional[CustomFood]:
        doc = await self._find_one({"_id": str(food_id)})
        return self.from_document(doc) if doc else None

    async def list_for_user(
        self, user_id: str, favorites_only: bool = False
    ) -> List[CustomFood]:
        query: Dict[str, Any] = {"user_id": user_id}
        if favorites_only:
            query["is_favorite"] = True
        docs = await self._find_many(query, sort=[("name", 1)])
        return [self.from_document(doc) for doc in docs]

    async def save(self, food: CustomFood) -> None:
        document = self.to_document(food)
        await self._replace_one({"_id": document["_id"]}, document, upsert=True)

    async def delete(self, food_id: UUID) -> bool:
        return await self._delete_one({"_id": str(food_id)}) > 0

    async def ensure_indexes(self) -> None:
        await self._create_index([("user_id", 1), ("name", 1)], name="idx_user_name")
        await self._create_index([("user_id", 1), ("is_favorite", 1)], name="idx_user_favorite")
