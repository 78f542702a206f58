"""
End-to-end walkthrough (visual).

Run with:
    streamlit run scripts/e2e_walkthrough.py

Tip: set breakpoints anywhere in cash_velocity/*
"""

import os

import numpy as np
import pandas as pd
import streamlit as st

from cash_velocity.charts import plot_series
from cash_velocity.model import GROWTH_CAP, derive_rates, simulate_growth
from cash_velocity.plot_utils import render_png
from cash_velocity.types import SimulationInputs

VISUALIZE = os.getenv("E2E_VISUALIZE", "1") != "0"

SCENARIOS = {
    "A: mid margin, mid ROAS, Net 45": SimulationInputs(0.50, 3.0, 45),
    "B: best case, Net 90": SimulationInputs(0.80, 6.0, 90),
    "C: thin margin, weak ROAS, Net 30": SimulationInputs(0.20, 1.5, 30),
    "Flat: ROAS at break-even": SimulationInputs(0.50, 1.0, 45),
}


def _assert(cond: bool, msg: str) -> None:
    if not cond:
        raise AssertionError(msg)


def main() -> None:
    st.set_page_config(page_title="E2E Walkthrough", layout="wide")
    st.title("Cash Velocity: End-to-End Walkthrough")

    finals: dict[str, float] = {}
    for i, (name, inputs) in enumerate(SCENARIOS.items(), start=1):
        st.subheader(f"{i}) {name}")

        rates = derive_rates(inputs.contribution_margin, inputs.roas, inputs.net_terms_days)
        st.write(rates.__dict__)
        _assert(0.0 <= rates.growth_per_cycle <= GROWTH_CAP, "Growth per cycle out of bounds")

        result = simulate_growth(inputs)
        m = result.monthly
        if VISUALIZE:
            st.altair_chart(plot_series(result), use_container_width=True)
            st.dataframe(m)
        st.write(result.summary)

        _assert(len(m) == 13 and m["month"].tolist() == list(range(13)), "Expected months 0..12")
        _assert(bool((np.diff(m["traditional"]) >= 0).all()), "Traditional series must not decrease")
        _assert(bool((np.diff(m["fast"]) >= 0).all()), "Fast-cycle series must not decrease")
        _assert(result.multiplier >= 1.0, "Fast-cycle should never trail traditional")
        finals[name] = result.summary["final_fast"]

    st.subheader(f"{len(SCENARIOS) + 1}) Scenario comparison")
    st.dataframe(pd.Series(finals, name="final_fast").to_frame())
    _assert(finals["B: best case, Net 90"] > finals["A: mid margin, mid ROAS, Net 45"], "B should beat A")
    _assert(finals["A: mid margin, mid ROAS, Net 45"] > finals["C: thin margin, weak ROAS, Net 30"], "A should beat C")
    _assert(finals["Flat: ROAS at break-even"] == 1.0, "Break-even ROAS should stay flat")

    st.subheader(f"{len(SCENARIOS) + 2}) Image export")
    png = render_png(simulate_growth(SCENARIOS["A: mid margin, mid ROAS, Net 45"]))
    st.write({"png_bytes": len(png)})
    if VISUALIZE:
        st.image(png)


if __name__ == "__main__":
    main()
