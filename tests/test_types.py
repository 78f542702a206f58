import math

import pytest

from cash_velocity.model import simulate
from cash_velocity.types import (
    CONTRIBUTION_MARGIN_RANGE,
    NET_TERMS_OPTIONS,
    ROAS_RANGE,
    SimulationInputs,
)


def test_simulation_inputs_defaults():
    s = SimulationInputs()
    assert CONTRIBUTION_MARGIN_RANGE[0] <= s.contribution_margin <= CONTRIBUTION_MARGIN_RANGE[1]
    assert ROAS_RANGE[0] <= s.roas <= ROAS_RANGE[1]
    assert s.net_terms_days in NET_TERMS_OPTIONS


def test_clamped_pulls_into_ui_ranges():
    s = SimulationInputs(contribution_margin=0.05, roas=12.0, net_terms_days=50).clamped()
    assert s.contribution_margin == CONTRIBUTION_MARGIN_RANGE[0]
    assert s.roas == ROAS_RANGE[1]
    assert s.net_terms_days == 45

    inside = SimulationInputs(0.35, 2.2, 90)
    assert inside.clamped() == inside


@pytest.mark.parametrize("field", ["contribution_margin", "roas", "net_terms_days"])
def test_clamped_rejects_non_finite(field):
    bad = SimulationInputs(**{field: math.nan})
    with pytest.raises(ValueError, match=field):
        bad.clamped()
    with pytest.raises(ValueError):
        SimulationInputs(**{field: math.inf}).clamped()


def test_result_views():
    result = simulate(0.5, 3.0, 45)
    df = result.monthly
    assert list(df.columns) == ["month", "traditional", "fast"]
    assert len(df) == 13
    assert df["month"].is_monotonic_increasing

    summary = result.summary
    assert summary["final_traditional"] == df["traditional"].iloc[-1]
    assert summary["final_fast"] == df["fast"].iloc[-1]
    assert summary["multiplier"] == result.multiplier
