"""Application configuration and constants."""

import logging
import os
from types import MappingProxyType

# Logging
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(value) -> str:
    """Upper-cased level name, or DEFAULT_LOG_LEVEL if logging does not know it."""
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(os.environ.get("CALORIE_ESTIMATOR_LOG_LEVEL"))

# Mifflin-St Jeor coefficients (metric)
WEIGHT_COEFFICIENT = 10
HEIGHT_COEFFICIENT = 6.25
AGE_COEFFICIENT = 5
SEX_CONSTANTS = MappingProxyType({
    "male": 5,
    "female": -161,
})

# Minimum inputs accepted by the resting burn formula
MIN_AGE_YEARS = 15
MIN_HEIGHT_CM = 100

# Activity level multipliers for total daily burn
ACTIVITY_MULTIPLIERS = MappingProxyType({
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
})
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# Food quality multipliers (thermic effect of food), applied to total daily burn
FOOD_QUALITY_MULTIPLIERS = MappingProxyType({
    "high_protein": 1.03,
    "balanced": 1.0,
    "high_processed": 0.97,
})
DEFAULT_FOOD_MULTIPLIER = 1.0

# Daily kcal subtracted from total daily burn per goal (negative = surplus)
GOAL_DEFICITS = MappingProxyType({
    "maintenance": 0,
    "moderate_loss": 500,
    "aggressive_loss": 750,
    "moderate_gain": -250,
})

# Lifestyle offsets (kcal/day added to the final target)
SLEEP_ADJUSTMENTS = MappingProxyType({
    "less_than_six": 100,
    "six_to_seven": 50,
    "optimal": 0,
})
STRESS_ADJUSTMENTS = MappingProxyType({
    "low": 0,
    "moderate": 75,
    "high": 150,
})
WATER_ADJUSTMENTS = MappingProxyType({
    "low": 75,
    "adequate": 25,
    "ideal": 0,
})
NO_MEDICAL_CONDITION = "none_apply"
MEDICAL_ADJUSTMENTS = MappingProxyType({
    NO_MEDICAL_CONDITION: 0,
    "hypothyroid": 150,
    "pcos": 100,
    "insulin_resistance": 80,
    "appetite_meds": 120,
})

# Timeline estimate
KCAL_PER_POUND = 3500
TIMELINE_GOAL_POUNDS = 5
DAYS_PER_WEEK = 7

# Default selections for the front ends
DEFAULT_SEX = "male"
DEFAULT_ACTIVITY = "moderate"
DEFAULT_FOOD_QUALITY = "balanced"
DEFAULT_GOAL = "moderate_loss"
DEFAULT_SLEEP = "optimal"
DEFAULT_STRESS = "low"
DEFAULT_WATER = "ideal"

# Human-readable option descriptions
ACTIVITY_DESCRIPTIONS = {
    "sedentary": "Little or no exercise",
    "light": "Light exercise 1-3 days/week",
    "moderate": "Moderate exercise 3-5 days/week",
    "active": "Hard exercise 6-7 days/week",
}

FOOD_QUALITY_DESCRIPTIONS = {
    "high_protein": "Mostly whole foods, high protein",
    "balanced": "Balanced mix",
    "high_processed": "Mostly processed foods",
}

GOAL_DESCRIPTIONS = {
    "maintenance": "Maintain current weight",
    "moderate_loss": "500 kcal/day deficit",
    "aggressive_loss": "750 kcal/day deficit",
    "moderate_gain": "250 kcal/day surplus",
}

SLEEP_DESCRIPTIONS = {
    "less_than_six": "Less than 6 hours",
    "six_to_seven": "6-7 hours",
    "optimal": "7-9 hours",
}

STRESS_DESCRIPTIONS = {
    "low": "Low",
    "moderate": "Moderate",
    "high": "High",
}

WATER_DESCRIPTIONS = {
    "low": "Less than 1 liter",
    "adequate": "1-2 liters",
    "ideal": "2+ liters",
}

MEDICAL_DESCRIPTIONS = {
    NO_MEDICAL_CONDITION: "None apply",
    "hypothyroid": "Hypothyroidism",
    "pcos": "PCOS",
    "insulin_resistance": "Insulin resistance",
    "appetite_meds": "Appetite-affecting medication",
}
