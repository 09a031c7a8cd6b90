"""Personalized advice derived from the lifestyle adjustments."""

from calorie_estimator.calculator import (
    food_multiplier,
    selected_medical_conditions,
    sleep_adjustment,
    stress_adjustment,
    water_adjustment,
)
from calorie_estimator.models import LifestyleInput

SLEEP_TIP = "**Improve Sleep**: Poor sleep (less than 7 hours) makes you hungrier. Aim for 7-9 hours."
STRESS_TIP = "**Manage Stress**: High stress can cause your body to hold onto weight. Find time to relax."
WATER_TIP = (
    "**Drink Water**: Low water intake can cause your body to mistake thirst for hunger. "
    "Increase your fluid intake."
)
FOOD_QUALITY_TIP = (
    "**Eat Better**: Prioritize protein and whole foods to boost the calories your body "
    "burns during digestion."
)
MEDICAL_TIP = (
    "**Doctor Check**: Because of your **Medical Conditions**, weight change may be slower. "
    "Consult a doctor or dietitian."
)
GREAT_START_TIP = "**Great Start!** Your lifestyle factors are currently supporting your goal. Keep it up!"
MONITOR_TIP_TEMPLATE = (
    "**Monitor Closely**: Your lifestyle factors added {adjustment} kcal to your target. "
    "Focus on fixing sleep, stress, and water intake."
)


def generate_tips(lifestyle: LifestyleInput, total_adjustment: int) -> tuple:
    """Build the ordered list of tips.

    Order: sleep, stress, water, food quality, medical, then one closing tip
    (none when the total adjustment is negative).
    """
    tips = []
    if sleep_adjustment(lifestyle.sleep_quality) > 0:
        tips.append(SLEEP_TIP)
    if stress_adjustment(lifestyle.stress_level) > 0:
        tips.append(STRESS_TIP)
    if water_adjustment(lifestyle.water_intake) > 0:
        tips.append(WATER_TIP)
    if food_multiplier(lifestyle.food_quality) < 1.0:
        tips.append(FOOD_QUALITY_TIP)
    if selected_medical_conditions(lifestyle.medical_conditions):
        tips.append(MEDICAL_TIP)

    if total_adjustment == 0:
        tips.append(GREAT_START_TIP)
    elif total_adjustment > 0:
        tips.append(MONITOR_TIP_TEMPLATE.format(adjustment=total_adjustment))
    return tuple(tips)
