"""Calorie calculation engine.

Uses:
- Mifflin-St Jeor equation for resting burn (BMR)
- Activity and food-quality multipliers for total daily burn (TDEE)
- Fixed goal deficits and linear lifestyle offsets for the final target

Every table lookup falls back to a neutral value (x1.0, or 0 kcal) when the
key is unknown; activity falls back to the sedentary multiplier.

References:
- Mifflin MD, St Jeor ST, et al. (1990). "A new predictive equation for
  resting energy expenditure in healthy individuals." Am J Clin Nutr.
"""

import logging
import math
from typing import Iterable

from calorie_estimator.config import (
    ACTIVITY_MULTIPLIERS,
    AGE_COEFFICIENT,
    DAYS_PER_WEEK,
    DEFAULT_ACTIVITY_MULTIPLIER,
    DEFAULT_FOOD_MULTIPLIER,
    FOOD_QUALITY_MULTIPLIERS,
    GOAL_DEFICITS,
    HEIGHT_COEFFICIENT,
    KCAL_PER_POUND,
    MEDICAL_ADJUSTMENTS,
    MIN_AGE_YEARS,
    MIN_HEIGHT_CM,
    NO_MEDICAL_CONDITION,
    SEX_CONSTANTS,
    SLEEP_ADJUSTMENTS,
    STRESS_ADJUSTMENTS,
    TIMELINE_GOAL_POUNDS,
    WATER_ADJUSTMENTS,
    WEIGHT_COEFFICIENT,
)
from calorie_estimator.models import BiometricInput, LifestyleInput, TargetComposition
from calorie_estimator.units import to_number

logger = logging.getLogger(__name__)

# Reserved resting burn value meaning "inputs incomplete"
RESTING_BURN_NOT_READY = 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up."""
    return int(math.floor(value + 0.5))


# --- Table lookups ---

def activity_multiplier(activity_level: str) -> float:
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def food_multiplier(food_quality: str) -> float:
    return FOOD_QUALITY_MULTIPLIERS.get(food_quality, DEFAULT_FOOD_MULTIPLIER)


def goal_deficit(target_goal: str) -> int:
    return GOAL_DEFICITS.get(target_goal, 0)


def sleep_adjustment(sleep_quality: str) -> int:
    return SLEEP_ADJUSTMENTS.get(sleep_quality, 0)


def stress_adjustment(stress_level: str) -> int:
    return STRESS_ADJUSTMENTS.get(stress_level, 0)


def water_adjustment(water_intake: str) -> int:
    return WATER_ADJUSTMENTS.get(water_intake, 0)


def selected_medical_conditions(conditions: Iterable[str]) -> set:
    """Selected conditions other than the "none apply" option."""
    return {c for c in (conditions or ()) if c != NO_MEDICAL_CONDITION}


def medical_adjustment(conditions: Iterable[str]) -> int:
    """Sum the offsets of every selected condition (uncapped)."""
    return sum(MEDICAL_ADJUSTMENTS.get(c, 0) for c in selected_medical_conditions(conditions))


# --- Pipeline steps ---

def calculate_resting_burn(biometrics: BiometricInput) -> int:
    """Calculate resting burn (BMR) using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161

    Returns RESTING_BURN_NOT_READY (0) when age is under 15, weight is not
    positive, height is under 100 cm, or any of them is not a number.
    """
    age = to_number(biometrics.age)
    weight = to_number(biometrics.weight_kg)
    height = biometrics.resolved_height_cm()

    if age is None or weight is None or weight <= 0 or height < MIN_HEIGHT_CM or age < MIN_AGE_YEARS:
        logger.debug("Resting burn not ready: age=%r weight=%r height=%r",
                     biometrics.age, biometrics.weight_kg, height)
        return RESTING_BURN_NOT_READY

    bmr = WEIGHT_COEFFICIENT * weight + HEIGHT_COEFFICIENT * height - AGE_COEFFICIENT * age
    bmr += SEX_CONSTANTS.get(biometrics.sex, SEX_CONSTANTS["female"])
    resting_burn = round_half_up(bmr)

    # 0 is reserved; negative results pass through.
    if resting_burn == RESTING_BURN_NOT_READY:
        logger.debug("Resting burn formula gave exactly 0, treating as not ready")
        return RESTING_BURN_NOT_READY
    return resting_burn


def calculate_total_daily_burn(resting_burn: int, activity_level: str, food_quality: str) -> int:
    """Calculate total daily burn (TDEE).

    TDEE = BMR × activity multiplier × food quality multiplier, rounded once.
    """
    return round_half_up(resting_burn * activity_multiplier(activity_level) * food_multiplier(food_quality))


def calculate_lifestyle_breakdown(lifestyle: LifestyleInput) -> dict:
    """Per-category lifestyle offsets in kcal/day."""
    return {
        "sleep": sleep_adjustment(lifestyle.sleep_quality),
        "stress": stress_adjustment(lifestyle.stress_level),
        "water": water_adjustment(lifestyle.water_intake),
        "medical": medical_adjustment(lifestyle.medical_conditions),
    }


def calculate_lifestyle_adjustment(lifestyle: LifestyleInput) -> int:
    """Total linear lifestyle adjustment in kcal/day."""
    return sum(calculate_lifestyle_breakdown(lifestyle).values())


def _timeline(target_goal: str, daily_deficit: int) -> tuple:
    """Return (message, weeks) for the goal; weeks is None outside a loss goal."""
    if "loss" in target_goal:
        if daily_deficit > 0:
            total_deficit_needed = TIMELINE_GOAL_POUNDS * KCAL_PER_POUND
            weeks = total_deficit_needed / daily_deficit / DAYS_PER_WEEK
            return (
                f"Achieving this target aims for a {TIMELINE_GOAL_POUNDS}lb loss "
                f"in approximately {weeks:.1f} weeks.",
                weeks,
            )
        return "You are currently aiming for maintenance or gain.", None
    if "gain" in target_goal:
        surplus = round_half_up(abs(daily_deficit))
        return f"Targeting a surplus of {surplus:,} kcal/day to support gaining weight.", None
    return "This target aims to keep your weight stable (maintenance).", None


def compose_target(total_daily_burn: int, target_goal: str, lifestyle_adjustment: int) -> TargetComposition:
    """Combine daily burn, goal deficit and lifestyle offsets into the target.

    Steps:
    1. base target = TDEE − goal deficit
    2. final target = base target + lifestyle adjustment
    3. daily deficit = TDEE − final target + lifestyle adjustment, which
       always equals the goal deficit
    4. timeline narrative, branched on "loss" / "gain" in the goal name
    """
    deficit = goal_deficit(target_goal)
    base_target = total_daily_burn - deficit
    final_target = base_target + lifestyle_adjustment
    daily_deficit = total_daily_burn - final_target + lifestyle_adjustment

    message, weeks = _timeline(target_goal or "", daily_deficit)
    return TargetComposition(
        goal_deficit=deficit,
        base_target_calories=base_target,
        final_target_calories=final_target,
        daily_deficit=daily_deficit,
        timeline_message=message,
        weeks_to_goal=weeks,
    )
