"""Exercise-related domain services."""

from .calorie_estimator import ActivityCalorieEstimator

__all__ = ["ActivityCalorieEstimator"]
