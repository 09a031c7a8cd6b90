"""The estimation pipeline: biometrics, goal and lifestyle in, calorie target out."""

import logging
from typing import Union

from calorie_estimator.calculator import (
    RESTING_BURN_NOT_READY,
    calculate_lifestyle_breakdown,
    calculate_resting_burn,
    calculate_total_daily_burn,
    compose_target,
)
from calorie_estimator.models import (
    NOT_READY,
    BiometricInput,
    EstimationResult,
    GoalInput,
    LifestyleInput,
    NotReady,
)
from calorie_estimator.tips import generate_tips

logger = logging.getLogger(__name__)


def estimate(
    biometrics: BiometricInput,
    lifestyle: LifestyleInput,
    goal: GoalInput,
) -> Union[EstimationResult, NotReady]:
    """Calculate the personalized daily calorie target.

    Steps:
    1. Resting burn via Mifflin-St Jeor (stops with NOT_READY if incomplete)
    2. Total daily burn from activity and food quality multipliers
    3. Lifestyle adjustment from sleep, stress, water and medical offsets
    4. Base and final target plus timeline narrative
    5. Tips
    """
    resting_burn = calculate_resting_burn(biometrics)
    if resting_burn == RESTING_BURN_NOT_READY:
        logger.info("Estimation skipped: biometrics incomplete")
        return NOT_READY

    total_daily_burn = calculate_total_daily_burn(
        resting_burn, goal.activity_level, lifestyle.food_quality,
    )
    breakdown = calculate_lifestyle_breakdown(lifestyle)
    lifestyle_adjustment = sum(breakdown.values())
    target = compose_target(total_daily_burn, goal.target_goal, lifestyle_adjustment)

    logger.debug(
        "bmr=%s tdee=%s deficit=%s adjustment=%s final=%s",
        resting_burn, total_daily_burn, target.goal_deficit,
        lifestyle_adjustment, target.final_target_calories,
    )

    return EstimationResult(
        resting_burn=resting_burn,
        total_daily_burn=total_daily_burn,
        base_target_calories=target.base_target_calories,
        lifestyle_adjustment=lifestyle_adjustment,
        final_target_calories=target.final_target_calories,
        timeline_message=target.timeline_message,
        tips=generate_tips(lifestyle, lifestyle_adjustment),
        goal_deficit=target.goal_deficit,
        weeks_to_goal=target.weeks_to_goal,
        adjustment_breakdown=tuple(breakdown.items()),
    )
