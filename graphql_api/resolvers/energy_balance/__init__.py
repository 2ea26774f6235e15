"""Energy balance resolvers."""

from .mutations import EnergyBalanceMutations
from .queries import EnergyBalanceQueries

__all__ = ["EnergyBalanceQueries", "EnergyBalanceMutations"]
