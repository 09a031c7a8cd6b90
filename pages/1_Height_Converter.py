"""Height Converter Page.

Resolve a height entry to centimeters before the rest of the form is filled.
"""

import streamlit as st
from calorie_estimator.config import MIN_HEIGHT_CM
from calorie_estimator.units import IMPERIAL, METRIC, UNRESOLVED_HEIGHT, cm_to_ft_in, resolve_height_cm

st.set_page_config(page_title="Height Converter | Calorie Estimator", page_icon="📏", layout="wide")
st.title("📏 Height Converter")

unit = st.radio("Enter height in", [IMPERIAL, METRIC], horizontal=True, format_func=str.capitalize)

if unit == IMPERIAL:
    ft_col, in_col = st.columns(2)
    with ft_col:
        feet = st.number_input("Feet", min_value=0, max_value=8, value=5, step=1)
    with in_col:
        inches = st.number_input("Inches", min_value=0, max_value=11, value=10, step=1)
    height_cm = resolve_height_cm(IMPERIAL, feet=feet, inches=inches)
else:
    cm = st.number_input("Centimeters", min_value=0.0, value=177.8, step=0.5)
    height_cm = resolve_height_cm(METRIC, cm=cm)

if height_cm == UNRESOLVED_HEIGHT:
    st.warning(f"⚠️ Height must be at least {MIN_HEIGHT_CM} cm")
else:
    ft, inch = cm_to_ft_in(height_cm)
    col1, col2 = st.columns(2)
    col1.metric("Centimeters", f"{height_cm:.1f} cm")
    col2.metric("Feet / Inches", f"{ft}'{inch}\"")
    if height_cm < MIN_HEIGHT_CM:
        st.caption(f"Heights under {MIN_HEIGHT_CM} cm cannot be used for the estimate.")
