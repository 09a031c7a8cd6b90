"""Personalized daily calorie target estimation."""

from calorie_estimator.estimator import estimate
from calorie_estimator.models import (
    NOT_READY,
    BiometricInput,
    EstimationResult,
    GoalInput,
    LifestyleInput,
    NotReady,
)
from calorie_estimator.units import resolve_height_cm

__all__ = [
    "NOT_READY",
    "BiometricInput",
    "EstimationResult",
    "GoalInput",
    "LifestyleInput",
    "NotReady",
    "estimate",
    "resolve_height_cm",
]
