import plotly.graph_objects as go

from heart_form.schemas.prediction import PredictionResult
from heart_form.schemas.ui_state import UIState

HIGH_RISK_COLOR = "#ef4444"
LOW_RISK_COLOR = "#22c55e"
NEUTRAL_COLOR = "#9ca3af"


def format_percentage(probability: float) -> str:
    """Format a probability as a percentage with one decimal, e.g. 0.82 -> '82.0%'"""
    return f"{probability * 100:.1f}%"


def bar_fraction(probability: float) -> float:
    """Clamp a probability to [0, 1] for progress bars"""
    return min(max(probability, 0.0), 1.0)


def risk_headline(result: PredictionResult) -> str:
    return "High Risk Detected" if result.prediction == 1 else "Low Risk Detected"


def risk_color(result: PredictionResult) -> str:
    return HIGH_RISK_COLOR if result.prediction == 1 else LOW_RISK_COLOR


def heart_color(ui_state: UIState) -> str:
    # only a result colours the heart
    if ui_state.status != "result":
        return NEUTRAL_COLOR
    return risk_color(ui_state.result)


def build_risk_gauge(result: PredictionResult) -> go.Figure:
    """Gauge of the positive probability, coloured by predicted class"""
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=bar_fraction(result.probability.positive) * 100,
        number={'suffix': "%", 'valueformat': ".1f"},
        title={'text': "Risk Level"},
        gauge={
            'axis': {'range': [0, 100]},
            'bar': {'color': risk_color(result)},
            'steps': [
                {'range': [0, 50], 'color': "#f0fdf4"},
                {'range': [50, 100], 'color': "#fef2f2"},
            ],
        },
    ))

    fig.update_layout(
        height=250,
        margin=dict(l=20, r=20, t=50, b=10)
    )

    return fig
