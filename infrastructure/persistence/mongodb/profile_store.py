"""MongoDB implementation of IProfileStore."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from domain.energy_balance.core.entities.user_profile import UserProfile
from domain.energy_balance.core.exceptions.domain_errors import (
    InvalidInputError,
    UnknownUserError,
)
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.value_objects.activity_level import ActivityLevel
from domain.energy_balance.core.value_objects.biological_sex import BiologicalSex
from domain.energy_balance.core.value_objects.bmr import BMR
from domain.energy_balance.core.value_objects.tdee import TDEE

from .base import MongoBaseRepository


class MongoProfileStore(MongoBaseRepository[UserProfile], IProfileStore):
    """MongoDB implementation of the user profile store."""

    @property
    def collection_name(self) -> str:
        return "user_profiles"

    def to_document(self, entity: UserProfile) -> Dict[str, Any]:
        profile = entity
        return {
            "_id": profile.user_id,
            "user_id": profile.user_id,
            "weight_kg": self.decimal_to_str(profile.weight_kg),
            "height_cm": self.decimal_to_str(profile.height_cm),
            "age": profile.age,
            "sex": profile.sex.value if profile.sex else None,
            "activity_level": profile.activity_level.value if profile.activity_level else None,
            "bmr": self.decimal_to_str(profile.bmr.value) if profile.bmr else None,
            "tdee": self.decimal_to_str(profile.tdee.value) if profile.tdee else None,
            "created_at": self.datetime_to_iso(profile.created_at),
            "updated_at": self.datetime_to_iso(profile.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> UserProfile:
        # Unknown activity levels raise InvalidInputError, as everywhere else
        bmr = self.str_to_decimal(doc.get("bmr"))
        tdee = self.str_to_decimal(doc.get("tdee"))
        return UserProfile(
            user_id=doc["user_id"],
            weight_kg=self.str_to_decimal(doc.get("weight_kg")),
            height_cm=self.str_to_decimal(doc.get("height_cm")),
            age=doc.get("age"),
            sex=BiologicalSex.parse(doc["sex"]) if doc.get("sex") else None,
            activity_level=(
                ActivityLevel.parse(doc["activity_level"])
                if doc.get("activity_level")
                else None
            ),
            bmr=BMR(bmr) if bmr is not None else None,
            tdee=TDEE(tdee) if tdee is not None else None,
            created_at=self.iso_to_utc_datetime(doc["created_at"]),
            updated_at=self.iso_to_utc_datetime(doc["updated_at"]),
        )

    async def get_profile(self, user_id: str) -> UserProfile:
        doc = await self._find_one({"_id": user_id})
        if doc is None:
            raise UnknownUserError(user_id)
        return self.from_document(doc)

    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update).

        Raises:
            InvalidInputError: If BMR/TDEE presence does not match the inputs
        """
        profile.check_metrics()
        document = self.to_document(profile)
        await self._replace_one({"_id": document["_id"]}, document, upsert=True)

    async def save_derived_metabolics(
        self, user_id: str, bmr: Optional[BMR], tdee: Optional[TDEE]
    ) -> None:
        if (bmr is None) != (tdee is None):
            raise InvalidInputError("BMR and TDEE must be stored together")
        matched = await self._update_one(
            {"_id": user_id},
            {
                "$set": {
                    "bmr": self.decimal_to_str(bmr.value) if bmr else None,
                    "tdee": self.decimal_to_str(tdee.value) if tdee else None,
                    "updated_at": self.datetime_to_iso(datetime.now(timezone.utc)),
                }
            },
        )
        if matched == 0:
            raise UnknownUserError(user_id)

    async def exists(self, user_id: str) -> bool:
        doc = await self._find_one({"_id": user_id}, projection={"_id": 1})
        return doc is not None
