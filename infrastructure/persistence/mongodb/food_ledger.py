"""MongoDB implementation of IFoodLedger."""

from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from domain.energy_balance.core.entities.food_log_entry import FoodLogEntry
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.value_objects.meal_type import MealType

from .base import MongoBaseRepository


class MongoFoodLedger(MongoBaseRepository[FoodLogEntry], IFoodLedger):
    """MongoDB implementation of the food ledger.

    ``log_date`` is denormalized into each document so that per-day reads
    are a single indexed equality match.
    """

    @property
    def collection_name(self) -> str:
        return "food_logs"

    def to_document(self, entity: FoodLogEntry) -> Dict[str, Any]:
        entry = entity
        return {
            "_id": str(entry.entry_id),
            "user_id": entry.user_id,
            "log_date": self.date_to_iso(entry.log_date),
            "food_name": entry.food_name,
            "brand_name": entry.brand_name,
            "meal_type": entry.meal_type.value if entry.meal_type else None,
            "calories": entry.calories,
            "protein": self.decimal_to_str(entry.protein),
            "carbs": self.decimal_to_str(entry.carbs),
            "fat": self.decimal_to_str(entry.fat),
            "fiber": self.decimal_to_str(entry.fiber),
            "sugar": self.decimal_to_str(entry.sugar),
            "sodium": self.decimal_to_str(entry.sodium),
            "servings": self.decimal_to_str(entry.servings),
            "usda_fdc_id": entry.usda_fdc_id,
            "custom_food_id": self.uuid_to_str(entry.custom_food_id),
            "custom_meal_id": self.uuid_to_str(entry.custom_meal_id),
            "consumed_at": self.datetime_to_iso(entry.consumed_at),
            "created_at": self.datetime_to_iso(entry.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> FoodLogEntry:
        return FoodLogEntry(
            entry_id=UUID(doc["_id"]),
            user_id=doc["user_id"],
            food_name=doc["food_name"],
            brand_name=doc.get("brand_name"),
            meal_type=MealType(doc["meal_type"]) if doc.get("meal_type") else None,
            calories=int(doc["calories"]),
            protein=self.str_to_decimal(doc["protein"]),
            carbs=self.str_to_decimal(doc["carbs"]),
            fat=self.str_to_decimal(doc["fat"]),
            fiber=self.str_to_decimal(doc.get("fiber")),
            sugar=self.str_to_decimal(doc.get("sugar")),
            sodium=self.str_to_decimal(doc.get("sodium")),
            servings=self.str_to_decimal(doc.get("servings", "1")),
            usda_fdc_id=doc.get("usda_fdc_id"),
            custom_food_id=self.str_to_uuid(doc.get("custom_food_id")),
            custom_meal_id=self.str_to_uuid(doc.get("custom_meal_id")),
            consumed_at=self.iso_to_datetime(doc["consumed_at"]),
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
        )

    async def list_for_date(self, user_id: str, day: date) -> List[FoodLogEntry]:
        docs = await self._find_many(
            {"user_id": user_id, "log_date": self.date_to_iso(day)},
            sort=[("consumed_at", 1)],
        )
        return [self.from_document(doc) for doc in docs]

    async def add(self, entry: FoodLogEntry) -> None:
        await self._insert_one(self.to_document(entry))

    async def get(self, entry_id: UUID) -> Optional[FoodLogEntry]:
        doc = await self._find_one({"_id": str(entry_id)})
        return self.from_document(doc) if doc else None

    async def update(self, entry: FoodLogEntry) -> None:
        document = self.to_document(entry)
        matched = await self._replace_one({"_id": document["_id"]}, document)
        if matched == 0:
            raise ValueError(f"Food log entry {entry.entry_id} does not exist")

    async def delete(self, entry_id: UUID) -> bool:
        return await self._delete_one({"_id": str(entry_id)}) > 0

    async def ensure_indexes(self) -> None:
        await self._create_index([("user_id", 1), ("log_date", 1)], name="idx_user_date")
