"""DeleteFoodLogCommand - remove a food entry and refresh its day."""

import logging
from dataclasses import dataclass
from uuid import UUID

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.exceptions.domain_errors import FoodLogNotFoundError
from domain.energy_balance.core.ports.food_ledger import IFoodLedger

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteFoodLogCommand:
    """Command to delete a food entry owned by ``user_id``."""

    entry_id: UUID
    user_id: str


class DeleteFoodLogHandler:
    """Handler for DeleteFoodLogCommand.

    The day's row is kept and recomputed; it holds zeros when the deleted
    entry was the last one.
    """

    def __init__(self, food_ledger: IFoodLedger, controller: SummaryController):
        self._food = food_ledger
        self._controller = controller

    async def handle(self, command: DeleteFoodLogCommand) -> DailyEnergyBalance:
        """
        Handle food entry deletion command.

        Returns:
            Refreshed balance of the entry's day

        Raises:
            FoodLogNotFoundError: If the entry does not exist for the user
        """
        entry = await self._food.get(command.entry_id)
        if entry is None or entry.user_id != command.user_id:
            raise FoodLogNotFoundError(str(command.entry_id))

        await self._food.delete(entry.entry_id)
        logger.info(
            "Food log deleted",
            extra={
                "user_id": entry.user_id,
                "entry_id": str(entry.entry_id),
                "date": entry.log_date.isoformat(),
            },
        )
        return await self._controller.recompute_for_food_change(
            entry.user_id, entry.log_date
        )
