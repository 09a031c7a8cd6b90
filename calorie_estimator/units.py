"""Unit conversion utilities for imperial/metric input.

Forms may collect height as feet/inches and weight in pounds; the
calculations always work in metric (kg, cm).
"""

import logging
import math
from typing import Optional

from calorie_estimator.config import MIN_HEIGHT_CM

logger = logging.getLogger(__name__)

# Conversion constants
LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

METRIC = "metric"
IMPERIAL = "imperial"
UNIT_SYSTEMS = (METRIC, IMPERIAL)

UNRESOLVED_HEIGHT = 0.0


def to_number(value) -> Optional[float]:
    """Coerce a form value to float, or None if it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / LBS_PER_KG


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def ft_in_to_cm(feet: float, inches: float) -> float:
    """Convert feet and inches to centimeters."""
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def cm_to_ft_in(cm: float) -> tuple:
    """Convert centimeters to (feet, inches)."""
    total_inches = cm / CM_PER_INCH
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = int(round(total_inches % INCHES_PER_FOOT))
    if inches == 12:
        feet += 1
        inches = 0
    return feet, inches


def resolve_height_cm(unit: str, cm=None, feet=None, inches=None) -> float:
    """Normalize a height entry to centimeters.

    Metric heights below the formula's minimum and any non-numeric field
    resolve to ``UNRESOLVED_HEIGHT`` (0) instead of raising, so a half-filled
    form simply reads as "not ready". Unknown unit flags are treated as metric.
    """
    if unit == IMPERIAL:
        feet_value = to_number(feet)
        inches_value = to_number(inches)
        if feet_value is None or inches_value is None:
            logger.debug("Unresolved imperial height: feet=%r inches=%r", feet, inches)
            return UNRESOLVED_HEIGHT
        return ft_in_to_cm(feet_value, inches_value)

    cm_value = to_number(cm)
    if cm_value is None or cm_value < MIN_HEIGHT_CM:
        logger.debug("Unresolved metric height: cm=%r", cm)
        return UNRESOLVED_HEIGHT
    return cm_value
