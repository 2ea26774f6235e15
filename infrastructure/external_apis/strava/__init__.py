"""Strava API client."""

from .client import StravaActivityClient

__all__ = ["StravaActivityClient"]
