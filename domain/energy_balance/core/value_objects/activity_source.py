"""ActivitySource value object."""

from enum import Enum


class ActivitySource(str, Enum):
    """Origin of an activity entry (synced from Strava or entered manually)."""

    STRAVA = "strava"
    MANUAL = "manual"
