from __future__ import annotations

import streamlit as st

COMPARISON_ROWS = [
    (
        "Time to first sale",
        "8-12 weeks after production (ocean freight + customs + warehouse inbound)",
        "2-3 days after production (ships direct from the factory region)",
    ),
    (
        "When you pay tariffs",
        "Upfront on the entire shipment, before a single unit sells",
        "Per order, as customers buy, funded by incoming revenue",
    ),
    (
        "Cash conversion",
        "Cash locked 3-5 months per cycle. You pay the factory and wait.",
        "Cash returns in weeks. With Net 45+, revenue often arrives before the factory payment is due.",
    ),
    (
        "Scaling marketing",
        "Limited by cash tied up in transit inventory and bulk tariffs",
        "Revenue flows back fast to fund more ad spend",
    ),
    (
        "Expanding to new regions",
        "Warehouse, customs broker and 3PL in each region. Months of overhead.",
        "One central hub ships globally. Launch a new market in days.",
    ),
    (
        "Inventory risk",
        "Large bulk orders. If demand shifts you're stuck with dead stock.",
        "Smaller, faster batches. Test demand before going deep on inventory.",
    ),
]

ASSUMPTIONS_TEXT = (
    "Revenue is reinvested into marketing each cycle. Marketing takes ~3 weeks to convert to sales. "
    "Ad efficiency decays 4% monthly as spend scales (rising CPAs, audience saturation). "
    "The traditional model uses ~3.5-month cash cycles (ocean freight + customs + inbound). "
    "The fast-cycle model uses ~1-month cycles; longer supplier terms let orders overlap, "
    "shortening the cycle further (never below ~3 weeks)."
)

DISCLAIMER_TEXT = (
    "This shows the power of faster cash cycles, not a guarantee of exact results. "
    "Actual growth depends on your product, market, and execution."
)


def inject_brand_styles() -> None:
    st.markdown(
        """
        <style>
        :root { --brand-accent: #10b981; --brand-muted: #4b5563; --brand-bg: #0a0b0f; --brand-text: #e5e7eb; }
        html, body, .stApp { font-family: Helvetica, Arial, sans-serif; color: var(--brand-text); }
        .stApp { background-color: var(--brand-bg) !important; }
        h1, h2, h3, h4, h5, h6 { color: #ffffff; letter-spacing: -0.01em; }
        [data-testid="stMetricValue"] { color: var(--brand-accent); font-weight: 800; }
        .stDownloadButton>button { background-color: #1a1b24; color: #9ca3af; border: 1px solid #2a2b35; border-radius: 6px; }
        .stDownloadButton>button:hover { border-color: var(--brand-accent); color: var(--brand-accent); }
        .stApp header { background: transparent; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_brand_header(title: str, tagline: str) -> None:
    st.markdown(
        f"<div style='text-align:center;padding-top:8px;'><h1 style='margin-bottom:0;'>{title}</h1>"
        f"<p style='color:#6b7280;'>{tagline}</p></div>",
        unsafe_allow_html=True,
    )
    st.divider()


def format_index(value: float) -> str:
    return f"{value:.1f}x"


def format_percent(value: float) -> str:
    return f"{round(value * 100):.0f}%"


def format_roas(value: float) -> str:
    return f"{value:.1f}x"


def format_net_terms(days: int) -> str:
    return f"Net {int(days)}"


def comparison_markdown() -> str:
    lines = ["| | Traditional | Fast-cycle |", "|---|---|---|"]
    for label, old_way, new_way in COMPARISON_ROWS:
        lines.append(f"| **{label}** | {old_way} | {new_way} |")
    return "\n".join(lines)
