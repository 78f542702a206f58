import math
from dataclasses import dataclass, replace

import pandas as pd

# Bounds the UI exposes. The model itself accepts anything non-negative.
CONTRIBUTION_MARGIN_RANGE = (0.20, 0.80)
CONTRIBUTION_MARGIN_STEP = 0.05
ROAS_RANGE = (1.5, 6.0)
ROAS_STEP = 0.1
NET_TERMS_OPTIONS = (30, 45, 60, 90)


@dataclass(frozen=True)
class SimulationInputs:
    contribution_margin: float = 0.50  # 50%
    roas: float = 3.0  # 3.0x
    net_terms_days: int = 45

    def clamped(self) -> "SimulationInputs":
        """Return a copy pulled into the ranges the calculator exposes.

        Margin and ROAS are clamped to their slider bounds; net terms snap to the
        nearest supported option.
        """

        for name in ("contribution_margin", "roas", "net_terms_days"):
            value = float(getattr(self, name))
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")

        lo, hi = CONTRIBUTION_MARGIN_RANGE
        cm = min(max(float(self.contribution_margin), lo), hi)
        lo, hi = ROAS_RANGE
        roas = min(max(float(self.roas), lo), hi)
        terms = min(NET_TERMS_OPTIONS, key=lambda opt: abs(opt - float(self.net_terms_days)))
        return replace(self, contribution_margin=cm, roas=roas, net_terms_days=int(terms))


@dataclass(frozen=True)
class RateProfile:
    growth_per_cycle: float
    traditional_cycle_months: float
    fast_cycle_months: float
    traditional_monthly_rate: float
    fast_monthly_rate: float


@dataclass(frozen=True)
class IndexedPoint:
    month: int
    traditional: float
    fast: float


@dataclass(frozen=True)
class SimulationResult:
    series: tuple[IndexedPoint, ...]
    multiplier: float

    @property
    def monthly(self) -> pd.DataFrame:
        return pd.DataFrame(
            [[p.month, p.traditional, p.fast] for p in self.series],
            columns=["month", "traditional", "fast"],
        )

    @property
    def summary(self) -> dict[str, float]:
        last = self.series[-1]
        return {
            "final_traditional": float(last.traditional),
            "final_fast": float(last.fast),
            "multiplier": float(self.multiplier),
        }
