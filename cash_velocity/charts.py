from __future__ import annotations

import altair as alt

from cash_velocity.types import SimulationResult

SERIES_LABELS = {"traditional": "Traditional", "fast": "Fast-cycle"}
SERIES_COLORS = {"Traditional": "#4b5563", "Fast-cycle": "#10b981"}


def plot_series(result: SimulationResult, height: int = 300) -> alt.Chart:
    """Indexed growth of both models, month on x and index on y."""

    df = result.monthly.rename(columns=SERIES_LABELS)
    labels = list(SERIES_COLORS)
    base = alt.Chart(df).encode(
        x=alt.X(
            "month:Q",
            title="Month",
            scale=alt.Scale(domain=[0, int(df["month"].max())]),
            axis=alt.Axis(tickMinStep=1, labelPadding=6, titlePadding=10),
        )
    )
    folded = base.transform_fold(labels, as_=["Series", "Index"]).transform_calculate(
        IndexLabel="format(datum.Index, '.1f') + 'x'"
    )
    color = alt.Color(
        "Series:N",
        scale=alt.Scale(domain=labels, range=[SERIES_COLORS[k] for k in labels]),
        title=None,
        legend=alt.Legend(orient="bottom"),
    )
    tooltip = [
        alt.Tooltip("month:Q", title="Month"),
        alt.Tooltip("Series:N"),
        alt.Tooltip("IndexLabel:N", title="Index"),
    ]

    area = folded.mark_area(opacity=0.12, interpolate="monotone").encode(
        y=alt.Y(
            "Index:Q",
            stack=None,
            scale=alt.Scale(zero=False),
            axis=alt.Axis(title="Revenue index", labelExpr="format(datum.value, '.1f') + 'x'"),
        ),
        color=color,
    )
    line = folded.mark_line(strokeWidth=2.5, interpolate="monotone").encode(
        y=alt.Y("Index:Q", stack=None),
        color=color,
        tooltip=tooltip,
    )

    return alt.layer(area, line).properties(height=height, padding={"bottom": 20, "left": 5, "right": 5, "top": 5})
