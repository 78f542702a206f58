"""
Static rendering of a simulation result, used for image export.
"""

import io
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MultipleLocator

from cash_velocity.charts import SERIES_COLORS
from cash_velocity.types import SimulationResult


def render_png(result: SimulationResult, title: Optional[str] = None, dpi: int = 200) -> bytes:
    """Draw both indexed series with matplotlib and return PNG bytes.

    Parameters
    ----------
    result : SimulationResult
        Output of `simulate`.
    title : Optional[str]
        Chart title. Defaults to the headline multiplier.
    dpi : int
        Output resolution.

    Returns
    -------
    bytes
        The encoded PNG image.
    """

    df = result.monthly
    if title is None:
        title = f"{result.multiplier:.1f}x faster growth over {int(df['month'].iloc[-1])} months"

    fig, ax = plt.subplots(figsize=(8, 4.5))
    try:
        for col, label in (("traditional", "Traditional"), ("fast", "Fast-cycle")):
            color = SERIES_COLORS[label]
            ax.plot(df["month"], df[col], linewidth=2.2, label=label, color=color)
            ax.fill_between(df["month"], 1.0, df[col], color=color, alpha=0.12)

        ax.set_title(title)
        ax.set_xlabel("Month")
        ax.set_ylabel("Revenue index")
        ax.xaxis.set_major_locator(MultipleLocator(1))
        ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: f"{v:.1f}x"))
        ax.set_xlim(df["month"].min(), df["month"].max())

        ax.grid(True, linestyle=":", alpha=0.5)
        ax.legend(loc="upper left")
        fig.tight_layout()

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=dpi)
        return buf.getvalue()
    finally:
        plt.close(fig)
