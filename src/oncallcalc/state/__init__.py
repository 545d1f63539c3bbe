"""Pay-period state and its persistence, kept outside the engine."""

from oncallcalc.state.period import PayPeriodState
from oncallcalc.state.store import StateStore, state_from_dict, state_to_dict

__all__ = [
    "PayPeriodState",
    "StateStore",
    "state_from_dict",
    "state_to_dict",
]
