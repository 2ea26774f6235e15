"""Orchestrators for energy balance workflows."""

from .summary_controller import SummaryController

__all__ = ["SummaryController"]
