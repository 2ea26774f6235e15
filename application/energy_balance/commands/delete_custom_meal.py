"""DeleteCustomMealCommand - remove a saved meal and its components."""

import logging
from dataclasses import dataclass
from uuid import UUID

from domain.energy_balance.core.ports.custom_meal_store import ICustomMealStore

from .meal_components import load_meal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteCustomMealCommand:
    meal_id: UUID
    user_id: str


class DeleteCustomMealHandler:
    """Handler for DeleteCustomMealCommand.

    Food log entries expanded from the meal stay in the ledger.
    """

    def __init__(self, meal_store: ICustomMealStore):
        self._meals = meal_store

    async def handle(self, command: DeleteCustomMealCommand) -> None:
        """
        Raises:
            CustomMealNotFoundError: If the meal is unknown or not the user's
        """
        await load_meal(self._meals, command.meal_id, command.user_id)
        await self._meals.delete(command.meal_id)
        logger.info(
            "Custom meal deleted",
            extra={"user_id": command.user_id, "meal_id": str(command.meal_id)},
        )
