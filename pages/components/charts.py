"""Chart components using Plotly for data visualization."""

import plotly.graph_objects as go
import plotly.express as px
import pandas as pd
from calorie_estimator.models import EstimationResult

CATEGORY_LABELS = {
    "sleep": "Sleep",
    "stress": "Stress",
    "water": "Water",
    "medical": "Medical",
}


def adjustment_frame(result: EstimationResult) -> pd.DataFrame:
    """Lifestyle adjustment breakdown as a (Category, kcal) frame."""
    rows = [
        (CATEGORY_LABELS.get(category, category.title()), kcal)
        for category, kcal in result.adjustment_breakdown
    ]
    return pd.DataFrame(rows, columns=['Category', 'kcal'])


def create_adjustment_bar_chart(result: EstimationResult):
    """Create bar chart of lifestyle offsets per category.

    Args:
        result: EstimationResult with adjustment_breakdown

    Returns:
        Plotly figure
    """
    df = adjustment_frame(result)

    if df.empty or not df['kcal'].any():
        # Return empty chart if nothing was added
        fig = go.Figure()
        fig.add_annotation(
            text="No lifestyle adjustments",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    fig = px.bar(
        df,
        x='Category',
        y='kcal',
        title='Lifestyle Adjustments',
        color='Category',
        color_discrete_sequence=['#FF6B6B', '#4ECDC4', '#FFE66D', '#A06CD5']
    )

    fig.update_layout(
        xaxis_title="",
        yaxis_title="kcal/day",
        showlegend=False
    )

    return fig


def create_target_waterfall(result: EstimationResult):
    """Create waterfall from total daily burn to the final target.

    Args:
        result: EstimationResult

    Returns:
        Plotly figure
    """
    fig = go.Figure(go.Waterfall(
        orientation="v",
        measure=["absolute", "relative", "relative", "total"],
        x=["Daily Burn", "Goal", "Lifestyle", "Final Target"],
        y=[
            result.total_daily_burn,
            -result.goal_deficit,
            result.lifestyle_adjustment,
            0,
        ],
        text=[
            f"{result.total_daily_burn:,}",
            f"{-result.goal_deficit:+,}",
            f"{result.lifestyle_adjustment:+,}",
            f"{result.final_target_calories:,}",
        ],
        textposition="outside",
        decreasing={'marker': {'color': '#4ECDC4'}},
        increasing={'marker': {'color': '#FF6B6B'}},
        totals={'marker': {'color': '#2E86AB'}},
    ))

    fig.update_layout(
        title="From Daily Burn to Target",
        yaxis_title="kcal/day",
        showlegend=False
    )

    return fig
