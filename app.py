import streamlit as st
from streamlit.logger import get_logger

from cash_velocity.charts import plot_series
from cash_velocity.model import simulate_growth
from cash_velocity.plot_utils import render_png
from cash_velocity.types import (
    CONTRIBUTION_MARGIN_RANGE,
    CONTRIBUTION_MARGIN_STEP,
    NET_TERMS_OPTIONS,
    ROAS_RANGE,
    ROAS_STEP,
    SimulationInputs,
    SimulationResult,
)
from cash_velocity.ui import ASSUMPTIONS_TEXT, DISCLAIMER_TEXT
from cash_velocity.ui import comparison_markdown as ui_comparison_markdown
from cash_velocity.ui import format_index, format_net_terms, format_percent, format_roas
from cash_velocity.ui import inject_brand_styles as ui_inject_brand_styles
from cash_velocity.ui import render_brand_header as ui_render_brand_header

APP_TITLE = "The Cash Velocity Calculator"
APP_TAGLINE = "Same product. Same marketing. See what happens when your cash compounds faster."
CHART_TITLE = "Revenue Growth, 12 Months"
CHART_SUBTITLE = "Indexed to starting revenue (1.0x)"
EXPORT_FILE_NAME = "cash-velocity"

# MUST be the first Streamlit call:
st.set_page_config(
    page_title=APP_TITLE,
    layout="centered",
    page_icon="📈",
)

# Streamlit logger (appears in deployment logs)
logger = get_logger(__name__)
logger.info("App startup: cash velocity calculator")


def slider_state(label: str, *, key: str, default_value, **kwargs):
    kwargs["key"] = key
    if key not in st.session_state:
        kwargs["value"] = default_value
    return st.slider(label, **kwargs)


def sidebar_inputs() -> SimulationInputs:
    st.sidebar.header("Your business")
    defaults = SimulationInputs()

    cm = slider_state(
        "Contribution margin",
        min_value=CONTRIBUTION_MARGIN_RANGE[0],
        max_value=CONTRIBUTION_MARGIN_RANGE[1],
        default_value=defaults.contribution_margin,
        step=CONTRIBUTION_MARGIN_STEP,
        format="%0.2f",
        key="cm",
        help="Share of revenue left after variable costs, available to reinvest.",
    )
    st.sidebar.caption(format_percent(cm))

    roas = slider_state(
        "ROAS",
        min_value=ROAS_RANGE[0],
        max_value=ROAS_RANGE[1],
        default_value=defaults.roas,
        step=ROAS_STEP,
        format="%0.1f",
        key="roas",
        help="Revenue generated per dollar of ad spend.",
    )
    st.sidebar.caption(format_roas(roas))

    options = list(NET_TERMS_OPTIONS)
    net_terms = st.sidebar.selectbox(
        "Supplier terms",
        options,
        index=options.index(defaults.net_terms_days),
        format_func=format_net_terms,
        key="net_terms",
    )

    # Widgets already bound the values; clamping only guards against stale session state
    return SimulationInputs(contribution_margin=cm, roas=roas, net_terms_days=net_terms).clamped()


def render_headline(result: SimulationResult) -> None:
    summary = result.summary
    col1, col2, col3 = st.columns(3)
    col1.metric("Fast-cycle growth vs traditional", format_index(summary["multiplier"]), help="faster growth")
    col2.metric("Traditional at month 12", format_index(summary["final_traditional"]))
    col3.metric("Fast-cycle at month 12", format_index(summary["final_fast"]))


def render_downloads(result: SimulationResult) -> None:
    c1, c2 = st.columns(2)
    with c1:
        try:
            png = render_png(result)
        except Exception as e:
            logger.exception("Chart export failed")
            st.error(f"Failed to render image: {e}")
        else:
            st.download_button(
                "Download chart (.png)",
                data=png,
                file_name=f"{EXPORT_FILE_NAME}.png",
                mime="image/png",
                key="export_png_btn",
            )
    with c2:
        st.download_button(
            "Download series (.csv)",
            data=result.monthly.to_csv(index=False).encode("utf-8"),
            file_name=f"{EXPORT_FILE_NAME}.csv",
            mime="text/csv",
            key="export_csv_btn",
        )


ui_inject_brand_styles()
ui_render_brand_header(APP_TITLE, APP_TAGLINE)

inputs = sidebar_inputs()
logger.info(f"Simulating with {inputs}")
result = simulate_growth(inputs)
logger.info(f"Result summary: {result.summary}")

render_headline(result)
st.subheader(CHART_TITLE)
st.caption(CHART_SUBTITLE)
st.altair_chart(plot_series(result), use_container_width=True)
render_downloads(result)

with st.expander("Monthly details", expanded=False):
    st.dataframe(result.monthly.rename(columns={"month": "Month", "traditional": "Traditional", "fast": "Fast-cycle"}))

st.subheader("Assumptions")
st.caption(ASSUMPTIONS_TEXT)
st.caption(DISCLAIMER_TEXT)

st.markdown("**The only difference is how fast your inventory turns into cash you can reinvest.**")

st.subheader("What changes")
st.markdown(ui_comparison_markdown())
