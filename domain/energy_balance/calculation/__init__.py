"""Calculation services for energy balance."""

from .bmr_service import BMRService
from .metabolic_calculator import MetabolicCalculator, MetabolicMetrics
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "MetabolicCalculator",
    "MetabolicMetrics",
]
