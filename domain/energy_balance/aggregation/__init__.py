"""Daily energy balance aggregation."""

from .aggregator import DEFAULT_BASELINE_FALLBACK_KCAL, EnergyBalanceAggregator

__all__ = ["EnergyBalanceAggregator", "DEFAULT_BASELINE_FALLBACK_KCAL"]
