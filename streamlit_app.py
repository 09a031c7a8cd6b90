"""Streamlit frontend for the Calorie Estimator.

Main entry point for the multi-page Streamlit application. Every widget
change reruns the script, so results are recomputed on each input change.
"""

import streamlit as st

from calorie_estimator.calculator import RESTING_BURN_NOT_READY, calculate_resting_burn
from calorie_estimator.config import (
    ACTIVITY_DESCRIPTIONS,
    DEFAULT_ACTIVITY,
    DEFAULT_FOOD_QUALITY,
    DEFAULT_GOAL,
    DEFAULT_SLEEP,
    DEFAULT_STRESS,
    DEFAULT_WATER,
    FOOD_QUALITY_DESCRIPTIONS,
    GOAL_DESCRIPTIONS,
    MEDICAL_DESCRIPTIONS,
    MIN_AGE_YEARS,
    SLEEP_DESCRIPTIONS,
    STRESS_DESCRIPTIONS,
    WATER_DESCRIPTIONS,
)
from calorie_estimator.estimator import estimate
from calorie_estimator.models import BiometricInput, GoalInput, LifestyleInput, NotReady
from calorie_estimator.report import format_resting_burn
from calorie_estimator.units import IMPERIAL, METRIC, kg_to_lbs, lbs_to_kg
from pages.components.charts import create_adjustment_bar_chart, create_target_waterfall
from pages.components.result_display import render_targets, render_timeline, render_tips

st.set_page_config(
    page_title="Calorie Estimator",
    page_icon="🔥",
    layout="wide",
    initial_sidebar_state="expanded"
)


def _select(label: str, options: dict, default: str, **kwargs) -> str:
    keys = list(options.keys())
    return st.selectbox(
        label,
        keys,
        index=keys.index(default),
        format_func=lambda key: options[key],
        **kwargs
    )


# Sidebar: inputs
with st.sidebar:
    st.markdown("## 🔥 Calorie Estimator")
    st.markdown("---")

    st.markdown("### Your Metrics")
    units = st.radio("Units", [METRIC, IMPERIAL], horizontal=True, format_func=str.capitalize)
    sex = st.selectbox("Sex", ["male", "female"], format_func=str.capitalize)
    age = st.number_input("Age (years)", min_value=0, max_value=120, value=None, step=1,
                          help=f"Must be {MIN_AGE_YEARS} or older")

    if units == IMPERIAL:
        weight_lbs = st.number_input("Weight (lbs)", min_value=0.0, value=None, step=0.5)
        if weight_lbs:
            st.caption(f"≈ {lbs_to_kg(weight_lbs):.1f} kg")
        ft_col, in_col = st.columns(2)
        with ft_col:
            feet = st.number_input("Feet", min_value=0, max_value=8, value=None, step=1)
        with in_col:
            inches = st.number_input("Inches", min_value=0, max_value=11, value=0, step=1)
        biometrics = BiometricInput(
            sex=sex,
            age=age,
            weight_kg=lbs_to_kg(weight_lbs) if weight_lbs is not None else None,
            height_unit=IMPERIAL,
            height_feet=feet,
            height_inches=inches,
        )
    else:
        weight_kg = st.number_input("Weight (kg)", min_value=0.0, value=None, step=0.5)
        if weight_kg:
            st.caption(f"≈ {kg_to_lbs(weight_kg):.1f} lbs")
        height_cm = st.number_input("Height (cm)", min_value=0.0, value=None, step=0.5)
        biometrics = BiometricInput(
            sex=sex,
            age=age,
            weight_kg=weight_kg,
            height_cm=height_cm,
            height_unit=METRIC,
        )

    st.markdown("### Activity & Goal")
    activity = _select("Activity Level", ACTIVITY_DESCRIPTIONS, DEFAULT_ACTIVITY)
    goal = _select("Goal", GOAL_DESCRIPTIONS, DEFAULT_GOAL)

    st.markdown("### Lifestyle")
    food = _select("Food Quality", FOOD_QUALITY_DESCRIPTIONS, DEFAULT_FOOD_QUALITY)
    sleep = _select("Sleep", SLEEP_DESCRIPTIONS, DEFAULT_SLEEP)
    stress = _select("Stress", STRESS_DESCRIPTIONS, DEFAULT_STRESS)
    water = _select("Water Intake", WATER_DESCRIPTIONS, DEFAULT_WATER)
    medical = st.multiselect(
        "Medical Conditions",
        list(MEDICAL_DESCRIPTIONS.keys()),
        format_func=lambda key: MEDICAL_DESCRIPTIONS[key],
        help="Select all that apply"
    )

# Main page
st.title("🔥 Daily Calorie Target")

resting_burn = calculate_resting_burn(biometrics)
if resting_burn == RESTING_BURN_NOT_READY:
    st.caption(format_resting_burn(resting_burn))
else:
    st.markdown(f"**{format_resting_burn(resting_burn)}**")

result = estimate(
    biometrics,
    LifestyleInput(
        sleep_quality=sleep,
        stress_level=stress,
        water_intake=water,
        food_quality=food,
        medical_conditions=frozenset(medical),
    ),
    GoalInput(target_goal=goal, activity_level=activity),
)

if isinstance(result, NotReady):
    st.warning(f"⚠️ {result.message}")
    st.stop()

render_targets(result)

col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(create_target_waterfall(result), use_container_width=True)
with col2:
    st.plotly_chart(create_adjustment_bar_chart(result), use_container_width=True)

render_timeline(result)
render_tips(result)

st.markdown("---")
st.caption("💡 **Tip:** Resting burn uses the Mifflin-St Jeor equation. All numbers are estimates; consult a professional for medical advice.")
