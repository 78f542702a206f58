from __future__ import annotations

import math

import numpy as np

from cash_velocity.types import IndexedPoint, RateProfile, SimulationInputs, SimulationResult

HORIZON_MONTHS = 12

# Per-cycle growth = min(GROWTH_CAP, GROWTH_EFFICIENCY * excess_return ** GROWTH_EXPONENT)
GROWTH_EXPONENT = 0.7
GROWTH_EFFICIENCY = 0.14
GROWTH_CAP = 0.35

# Cycle lengths in months
TRADITIONAL_CYCLE_MONTHS = 3.5
FAST_CYCLE_BASE_MONTHS = 1.0
FAST_CYCLE_FLOOR_MONTHS = 0.75
BASE_NET_TERMS_DAYS = 30
CYCLE_MONTHS_SAVED_PER_TERM_DAY = 0.004

# Channel efficiency decays 4% per month, compounding
MONTHLY_DECAY = 0.96


def _round2(value: float) -> float:
    # Half-up, so 1.005 -> 1.01 rather than banker's rounding
    return math.floor(value * 100.0 + 0.5) / 100.0


def derive_rates(contribution_margin: float, roas: float, net_terms_days: int) -> RateProfile:
    """Turn unit economics and supplier terms into monthly growth rates.

    Both models share the same growth per cycle; they differ only in how long a
    cycle takes. Longer supplier terms let the fast model place the next order
    before paying for the current one, which shortens its effective cycle.
    """

    excess_return = max(float(contribution_margin) * (float(roas) - 1.0), 0.0)
    growth_per_cycle = min(GROWTH_CAP, GROWTH_EFFICIENCY * excess_return**GROWTH_EXPONENT)

    fast_cycle = max(
        FAST_CYCLE_FLOOR_MONTHS,
        FAST_CYCLE_BASE_MONTHS - (float(net_terms_days) - BASE_NET_TERMS_DAYS) * CYCLE_MONTHS_SAVED_PER_TERM_DAY,
    )

    return RateProfile(
        growth_per_cycle=growth_per_cycle,
        traditional_cycle_months=TRADITIONAL_CYCLE_MONTHS,
        fast_cycle_months=fast_cycle,
        traditional_monthly_rate=growth_per_cycle / TRADITIONAL_CYCLE_MONTHS,
        fast_monthly_rate=growth_per_cycle / fast_cycle,
    )


def compound_series(rates: RateProfile) -> SimulationResult:
    """Compound both models month by month from a common 1.0 baseline.

    Each month's index is rounded to cents before it feeds the next month, so the
    displayed series is exactly the accumulated one.
    """

    traditional_idx = 1.0
    fast_idx = 1.0
    series = [IndexedPoint(month=0, traditional=traditional_idx, fast=fast_idx)]

    for m in np.arange(1, HORIZON_MONTHS + 1):
        decay = MONTHLY_DECAY ** float(m - 1)
        traditional_idx = _round2(traditional_idx * (1.0 + rates.traditional_monthly_rate * decay))
        fast_idx = _round2(fast_idx * (1.0 + rates.fast_monthly_rate * decay))
        series.append(IndexedPoint(month=int(m), traditional=traditional_idx, fast=fast_idx))

    if traditional_idx == 1.0 and fast_idx == 1.0:
        multiplier = 1.0
    else:
        multiplier = fast_idx / traditional_idx

    return SimulationResult(series=tuple(series), multiplier=multiplier)


def simulate(contribution_margin: float, roas: float, net_terms_days: int) -> SimulationResult:
    """Run the 12-month traditional vs fast-cycle comparison."""

    return compound_series(derive_rates(contribution_margin, roas, net_terms_days))


def simulate_growth(input_params: SimulationInputs) -> SimulationResult:
    return simulate(input_params.contribution_margin, input_params.roas, input_params.net_terms_days)
