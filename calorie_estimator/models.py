"""Data models for the calorie estimator."""

from dataclasses import dataclass, field
from typing import Optional

from calorie_estimator.units import resolve_height_cm


@dataclass(frozen=True)
class BiometricInput:
    """Physical attributes used by the resting burn formula.

    Height is given either directly in centimeters (``height_unit="metric"``)
    or as a feet/inches pair (``height_unit="imperial"``).
    """
    sex: str  # "male" or "female"
    age: Optional[int]
    weight_kg: Optional[float]
    height_cm: Optional[float] = None
    height_unit: str = "metric"
    height_feet: Optional[float] = None
    height_inches: Optional[float] = None

    def resolved_height_cm(self) -> float:
        """Height in centimeters, or 0 when it cannot be resolved."""
        return resolve_height_cm(
            self.height_unit,
            cm=self.height_cm,
            feet=self.height_feet,
            inches=self.height_inches,
        )


@dataclass(frozen=True)
class LifestyleInput:
    """Lifestyle factors that shift the final calorie target."""
    sleep_quality: str = "optimal"  # less_than_six, six_to_seven, optimal
    stress_level: str = "low"  # low, moderate, high
    water_intake: str = "ideal"  # low, adequate, ideal
    food_quality: str = "balanced"  # high_protein, balanced, high_processed
    medical_conditions: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class GoalInput:
    """Weight goal and activity level."""
    target_goal: str  # maintenance, moderate_loss, aggressive_loss, moderate_gain
    activity_level: str  # sedentary, light, moderate, active


@dataclass(frozen=True)
class TargetComposition:
    """Goal-adjusted targets and the timeline narrative."""
    goal_deficit: int
    base_target_calories: int
    final_target_calories: int
    daily_deficit: int
    timeline_message: str
    weeks_to_goal: Optional[float] = None


@dataclass(frozen=True)
class EstimationResult:
    """Complete output of one estimation pass."""
    resting_burn: int
    total_daily_burn: int
    base_target_calories: int
    lifestyle_adjustment: int
    final_target_calories: int
    timeline_message: str
    tips: tuple = ()
    goal_deficit: int = 0
    weeks_to_goal: Optional[float] = None
    adjustment_breakdown: tuple = ()  # ((category, kcal), ...)

    def breakdown_dict(self) -> dict:
        return dict(self.adjustment_breakdown)


@dataclass(frozen=True)
class NotReady:
    """Returned instead of a result while biometrics are incomplete or invalid."""
    message: str = "Please enter your Age, Weight, and Height."


NOT_READY = NotReady()
