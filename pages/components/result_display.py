"""Result display components for Streamlit pages."""

import streamlit as st
from calorie_estimator.models import EstimationResult
from calorie_estimator.report import format_adjustment, format_base_target_label


def render_targets(result: EstimationResult):
    """Render the burn and target numbers as metrics.

    Args:
        result: EstimationResult to display
    """
    st.markdown("### Your Daily Targets")
    cols = st.columns(4)
    cols[0].metric("Resting Burn", f"{result.resting_burn:,} kcal")
    cols[1].metric("Total Daily Burn", f"{result.total_daily_burn:,} kcal")
    cols[2].metric(
        "Goal Target",
        f"{result.base_target_calories:,} kcal",
        help=f"Base: {format_base_target_label(result.goal_deficit)}",
    )
    cols[3].metric(
        "Final Target",
        f"{result.final_target_calories:,} kcal",
        delta=format_adjustment(result.lifestyle_adjustment),
        # Positive adjustments render red
        delta_color="inverse",
    )


def render_timeline(result: EstimationResult):
    st.markdown("### Timeline")
    st.info(result.timeline_message)


def render_tips(result: EstimationResult):
    """Render tips in their fixed order."""
    st.markdown("### Tips")
    for tip in result.tips:
        st.markdown(f"- {tip}")
