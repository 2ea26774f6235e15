"""MongoDB implementation of ISummaryRepository."""

from datetime import date
from typing import Any, Dict, List, Optional

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.ports.summary_repository import ISummaryRepository

from .base import MongoBaseRepository


class MongoSummaryRepository(MongoBaseRepository[DailyEnergyBalance], ISummaryRepository):
    """MongoDB store of daily energy balance rows.

    One document per ``(user_id, date)``, keyed ``"{user_id}:{date}"``.
    Writes use ``replace_one`` so a row is never partially updated.
    Derived totals are stored alongside the components for reporting
    queries; they are recomputed from the components on read.
    """

    @property
    def collection_name(self) -> str:
        return "daily_energy_balances"

    @staticmethod
    def document_id(user_id: str, day: date) -> str:
        return f"{user_id}:{day.isoformat()}"

    def to_document(self, entity: DailyEnergyBalance) -> Dict[str, Any]:
        row = entity
        return {
            "_id": self.document_id(row.user_id, row.date),
            "user_id": row.user_id,
            "date": self.date_to_iso(row.date),
            "calories_consumed": row.calories_consumed,
            "protein_consumed": self.decimal_to_str(row.protein_consumed),
            "carbs_consumed": self.decimal_to_str(row.carbs_consumed),
            "fat_consumed": self.decimal_to_str(row.fat_consumed),
            "calories_burned_baseline": row.calories_burned_baseline,
            "calories_burned_exercise": row.calories_burned_exercise,
            "total_burned": row.total_burned,
            "net_calories": row.net_calories,
            "updated_at": self.datetime_to_iso(row.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> DailyEnergyBalance:
        return DailyEnergyBalance(
            user_id=doc["user_id"],
            date=self.iso_to_date(doc["date"]),
            calories_consumed=int(doc["calories_consumed"]),
            protein_consumed=self.str_to_decimal(doc["protein_consumed"]),
            carbs_consumed=self.str_to_decimal(doc["carbs_consumed"]),
            fat_consumed=self.str_to_decimal(doc["fat_consumed"]),
            calories_burned_baseline=int(doc["calories_burned_baseline"]),
            calories_burned_exercise=int(doc["calories_burned_exercise"]),
            updated_at=self.iso_to_utc_datetime(doc["updated_at"]),
        )

    async def put(self, balance: DailyEnergyBalance) -> None:
        document = self.to_document(balance)
        await self._replace_one({"_id": document["_id"]}, document, upsert=True)

    async def get(self, user_id: str, day: date) -> Optional[DailyEnergyBalance]:
        doc = await self._find_one({"_id": self.document_id(user_id, day)})
        return self.from_document(doc) if doc else None

    async def get_range(
        self, user_id: str, start: date, end: date
    ) -> List[DailyEnergyBalance]:
        # ISO dates compare lexicographically in calendar order
        docs = await self._find_many(
            {
                "user_id": user_id,
                "date": {"$gte": self.date_to_iso(start), "$lte": self.date_to_iso(end)},
            },
            sort=[("date", 1)],
        )
        return [self.from_document(doc) for doc in docs]

    async def ensure_indexes(self) -> None:
        await self._create_index([("user_id", 1), ("date", 1)], name="idx_user_date")
