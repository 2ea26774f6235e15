"""Repository Factory for Persistence Layer.

Environment-based repository selection with graceful fallback to in-memory.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

MongoDB repositories share one motor client per process.

Usage:
    from infrastructure.persistence.factory import get_summary_repository

    repo = get_summary_repository()  # Singleton, inmemory or mongodb
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.energy_balance.core.ports.activity_ledger import IActivityLedger
from domain.energy_balance.core.ports.custom_food_store import ICustomFoodStore
from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore
from domain.energy_balance.core.ports.food_ledger import IFoodLedger
from domain.energy_balance.core.ports.profile_store import IProfileStore
from domain.energy_balance.core.ports.summary_repository import ISummaryRepository
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory.activity_ledger import InMemoryActivityLedger
from infrastructure.persistence.in_memory.custom_food_store import InMemoryCustomFoodStore
from infrastructure.persistence.in_memory.custom_meal_store import InMemoryCustomMealStore
from infrastructure.persistence.in_memory.food_ledger import InMemoryFoodLedger
from infrastructure.persistence.in_memory.profile_store import InMemoryProfileStore
from infrastructure.persistence.in_memory.summary_repository import (
    InMemorySummaryRepository,
)
from infrastructure.persistence.mongodb.activity_ledger import MongoActivityLedger
from infrastructure.persistence.mongodb.base import MongoBaseRepository
from infrastructure.persistence.mongodb.custom_food_store import MongoCustomFoodStore
from infrastructure.persistence.mongodb.custom_meal_store import MongoCustomMealStore
from infrastructure.persistence.mongodb.food_ledger import MongoFoodLedger
from infrastructure.persistence.mongodb.profile_store import MongoProfileStore
from infrastructure.persistence.mongodb.summary_repository import (
    MongoSummaryRepository,
)

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient] = None
_profile_store: Optional[IProfileStore] = None
_food_ledger: Optional[IFoodLedger] = None
_activity_ledger: Optional[IActivityLedger] = None
_summary_repository: Optional[ISummaryRepository] = None
_custom_food_store: Optional[ICustomFoodStore] = None
_custom_meal_store: Optional[ICustomMealStore] = None


def _use_mongodb() -> bool:
    """
    Check REPOSITORY_BACKEND.

    Raises:
        ValueError: If REPOSITORY_BACKEND=mongodb but MONGODB_URI not set
    """
    if get_repository_backend() != "mongodb":
        return False
    if not get_mongodb_uri():
        raise ValueError(
            "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
            "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
        )
    return True


def _get_mongo_client() -> AsyncIOMotorClient:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(get_mongodb_uri())
        logger.info("MongoDB client created")
    return _mongo_client


def create_profile_store() -> IProfileStore:
    """Create profile store based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoProfileStore(client=_get_mongo_client())
    return InMemoryProfileStore()


def create_food_ledger() -> IFoodLedger:
    """Create food ledger based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoFoodLedger(client=_get_mongo_client())
    return InMemoryFoodLedger()


def create_activity_ledger() -> IActivityLedger:
    """Create activity ledger based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoActivityLedger(client=_get_mongo_client())
    return InMemoryActivityLedger()


def create_summary_repository() -> ISummaryRepository:
    """Create daily balance repository based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoSummaryRepository(client=_get_mongo_client())
    return InMemorySummaryRepository()


def create_custom_food_store() -> ICustomFoodStore:
    """Create saved food store based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoCustomFoodStore(client=_get_mongo_client())
    return InMemoryCustomFoodStore()


def create_custom_meal_store() -> ICustomMealStore:
    """Create saved meal store based on REPOSITORY_BACKEND env var."""
    if _use_mongodb():
        return MongoCustomMealStore(client=_get_mongo_client())
    return InMemoryCustomMealStore()


def get_profile_store() -> IProfileStore:
    """Get singleton profile store instance."""
    global _profile_store
    if _profile_store is None:
        _profile_store = create_profile_store()
    return _profile_store


def get_food_ledger() -> IFoodLedger:
    """Get singleton food ledger instance."""
    global _food_ledger
    if _food_ledger is None:
        _food_ledger = create_food_ledger()
    return _food_ledger


def get_activity_ledger() -> IActivityLedger:
    """Get singleton activity ledger instance."""
    global _activity_ledger
    if _activity_ledger is None:
        _activity_ledger = create_activity_ledger()
    return _activity_ledger


def get_summary_repository() -> ISummaryRepository:
    """Get singleton daily balance repository instance."""
    global _summary_repository
    if _summary_repository is None:
        _summary_repository = create_summary_repository()
    return _summary_repository


def get_custom_food_store() -> ICustomFoodStore:
    """Get singleton saved food store instance."""
    global _custom_food_store
    if _custom_food_store is None:
        _custom_food_store = create_custom_food_store()
    return _custom_food_store


def get_custom_meal_store() -> ICustomMealStore:
    """Get singleton saved meal store instance."""
    global _custom_meal_store
    if _custom_meal_store is None:
        _custom_meal_store = create_custom_meal_store()
    return _custom_meal_store


def reset_repositories() -> None:
    """Reset singleton instances.

    Useful for testing to force re-creation with different env vars.
    """
    global _mongo_client, _profile_store, _food_ledger
    global _activity_ledger, _summary_repository
    global _custom_food_store, _custom_meal_store
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _profile_store = None
    _food_ledger = None
    _activity_ledger = None
    _summary_repository = None
    _custom_food_store = None
    _custom_meal_store = None


async def ensure_mongo_indexes() -> None:
    """Create the indexes of every MongoDB adapter.

    No-op for the in-memory backend. Index creation is idempotent, so this
    runs on every start-up.
    """
    if not _use_mongodb():
        return
    repositories = (
        get_profile_store(),
        get_food_ledger(),
        get_activity_ledger(),
        get_summary_repository(),
        get_custom_food_store(),
        get_custom_meal_store(),
    )
    for repository in repositories:
        if isinstance(repository, MongoBaseRepository):
            await repository.ensure_indexes()
    logger.info("MongoDB indexes ensured")
