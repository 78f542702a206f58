from cash_velocity.model import derive_rates, simulate, simulate_growth
from cash_velocity.types import IndexedPoint, RateProfile, SimulationInputs, SimulationResult

__all__ = [
    "IndexedPoint",
    "RateProfile",
    "SimulationInputs",
    "SimulationResult",
    "derive_rates",
    "simulate",
    "simulate_growth",
]
