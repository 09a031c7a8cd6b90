"""Plain-text formatting of estimation results for display."""

from calorie_estimator.calculator import RESTING_BURN_NOT_READY
from calorie_estimator.models import EstimationResult

BMR_PROMPT = "Enter metrics above to calculate BMR."


def plain_text(text: str) -> str:
    """Drop the markdown bold markers used in tips."""
    return text.replace("**", "")


def format_resting_burn(resting_burn: int) -> str:
    if resting_burn == RESTING_BURN_NOT_READY:
        return BMR_PROMPT
    return f"BMR = {resting_burn:,} Calories/day"


def format_base_target_label(goal_deficit: int) -> str:
    """Describe how the base target relates to daily burn, e.g. "Burn - 500 kcal"."""
    if goal_deficit >= 0:
        return f"Burn - {goal_deficit} kcal"
    return f"Burn + {abs(goal_deficit)} kcal"


def format_adjustment(lifestyle_adjustment: int) -> str:
    sign = "+" if lifestyle_adjustment >= 0 else ""
    return f"{sign}{lifestyle_adjustment} kcal/day"


def format_result(result: EstimationResult) -> str:
    """Format an estimation result for terminal display."""
    lines = [
        format_resting_burn(result.resting_burn),
        f"Total Daily Burn:     {result.total_daily_burn:,} kcal",
        f"Goal Target:          {result.base_target_calories:,} kcal "
        f"(Base: {format_base_target_label(result.goal_deficit)})",
        f"Lifestyle Adjustment: {format_adjustment(result.lifestyle_adjustment)}",
        f"Final Target:         {result.final_target_calories:,} kcal/day",
        "",
        result.timeline_message,
    ]
    if result.tips:
        lines.append("")
        lines.append("Tips:")
        lines.extend(f"  - {plain_text(tip)}" for tip in result.tips)
    return "\n".join(lines)
