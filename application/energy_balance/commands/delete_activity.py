"""DeleteActivityCommand - remove an exercise session and refresh its day."""

import logging
from dataclasses import dataclass
from typing import List
from uuid import UUID

from domain.energy_balance.core.entities.daily_energy_balance import (
    DailyEnergyBalance,
)
from domain.energy_balance.core.exceptions.domain_errors import ActivityNotFoundError
from domain.energy_balance.core.ports.activity_ledger import IActivityLedger

from ..orchestrators.summary_controller import SummaryController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteActivityCommand:
    """Command to delete an activity entry owned by ``user_id``."""

    entry_id: UUID
    user_id: str


class DeleteActivityHandler:
    """Handler for DeleteActivityCommand."""

    def __init__(self, activity_ledger: IActivityLedger, controller: SummaryController):
        self._activities = activity_ledger
        self._controller = controller

    async def handle(self, command: DeleteActivityCommand) -> List[DailyEnergyBalance]:
        """
        Handle activity deletion command.

        Raises:
            ActivityNotFoundError: If the entry does not exist for the user
        """
        entry = await self._activities.get(command.entry_id)
        if entry is None or entry.user_id != command.user_id:
            raise ActivityNotFoundError(str(command.entry_id))

        await self._activities.delete(entry.entry_id)
        logger.info(
            "Activity deleted",
            extra={
                "user_id": entry.user_id,
                "entry_id": str(entry.entry_id),
                "date": entry.log_date.isoformat(),
            },
        )
        return await self._controller.recompute_for_activity_change(
            entry.user_id, [entry.log_date]
        )
