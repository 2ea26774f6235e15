"""Shared plumbing for the MongoDB adapters.

Each adapter maps one domain type to one collection. This base holds the
motor collection handle, value codecs and the collection calls, which log
and re-raise on failure.

Decimals are stored as strings so that no binary float rounding creeps
into stored quantities.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ReturnDocument

from infrastructure.config import get_mongodb_database

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base for the energy balance MongoDB adapters.

    Subclasses provide:
    - collection_name
    - to_document(): entity -> document
    - from_document(): document -> entity

    Driver errors are logged and re-raised unchanged; translating them
    into domain errors is the caller's job.
    """

    def __init__(self, client: AsyncIOMotorClient, database_name: Optional[str] = None):
        """
        Args:
            client: Shared motor client (owned by the repository factory)
            database_name: Database name (default: MONGODB_DATABASE)
        """
        self._client = client
        self._collection = client[database_name or get_mongodb_database()][self.collection_name]
        logger.info(
            "mongo.repository_ready",
            extra={"repository": type(self).__name__, "collection": self.collection_name},
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Raises:
            InvalidInputError: If the document holds values the domain rejects
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create the indexes this adapter's queries rely on (idempotent)."""
        pass

    # --- codecs ---

    @staticmethod
    def decimal_to_str(value: Optional[Decimal]) -> Optional[str]:
        return None if value is None else str(value)

    @staticmethod
    def str_to_decimal(value: Optional[Any]) -> Optional[Decimal]:
        return None if value is None else Decimal(str(value))

    @staticmethod
    def uuid_to_str(value: Optional[UUID]) -> Optional[str]:
        return None if value is None else str(value)

    @staticmethod
    def str_to_uuid(value: Optional[str]) -> Optional[UUID]:
        return None if value is None else UUID(value)

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        # Naive local times stay naive: their calendar date is what counts
        return dt.isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        return datetime.fromisoformat(iso_str)

    @staticmethod
    def iso_to_utc_datetime(iso_str: str) -> datetime:
        """Parse an audit timestamp, assuming UTC when no offset is stored."""
        parsed = datetime.fromisoformat(iso_str)
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def date_to_iso(day: date) -> str:
        return day.isoformat()

    @staticmethod
    def iso_to_date(iso_str: str) -> date:
        return date.fromisoformat(iso_str)

    # --- collection calls ---

    def _log_failure(self, operation: str, error: Exception, filter_dict: Any = None) -> None:
        logger.error(
            "mongo.operation_failed",
            extra={
                "operation": operation,
                "collection": self.collection_name,
                "filter": filter_dict,
                "error": str(error),
            },
        )

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        projection: Optional[Dict[str, int]] = None,
    ) -> Optional[Dict[str, Any]]:
        try:
            return await self._collection.find_one(filter_dict, projection)
        except Exception as e:
            self._log_failure("find_one", e, filter_dict)
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Documents matching ``filter_dict``, optionally sorted and capped."""
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except Exception as e:
            self._log_failure("find", e, filter_dict)
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            self._log_failure("insert_one", e, {"_id": document.get("_id")})
            raise

    async def _replace_one(
        self,
        filter_dict: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> int:
        """Replace a whole document. Returns the matched count (0 or 1)."""
        try:
            result = await self._collection.replace_one(filter_dict, document, upsert=upsert)
        except Exception as e:
            self._log_failure("replace_one", e, filter_dict)
            raise
        return result.matched_count

    async def _update_one(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> int:
        """Apply an update operator document. Returns the matched count."""
        try:
            result = await self._collection.update_one(filter_dict, update_dict)
        except Exception as e:
            self._log_failure("update_one", e, filter_dict)
            raise
        return result.matched_count

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_one(filter_dict)
        except Exception as e:
            self._log_failure("delete_one", e, filter_dict)
            raise
        return result.deleted_count

    async def _find_one_and_update(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
        upsert: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """Atomically update one document. Returns it as it was before."""
        try:
            return await self._collection.find_one_and_update(
                filter_dict,
                update_dict,
                upsert=upsert,
                return_document=ReturnDocument.BEFORE,
            )
        except Exception as e:
            self._log_failure("find_one_and_update", e, filter_dict)
            raise

    async def _create_index(
        self,
        keys: List[Tuple[str, int]],
        name: str,
        unique: bool = False,
    ) -> None:
        try:
            await self._collection.create_index(keys, name=name, unique=unique)
        except Exception as e:
            self._log_failure("create_index", e, {"index": name})
            raise
        logger.info(
            "mongo.index_ready",
            extra={"collection": self.collection_name, "index": name, "unique": unique},
        )
