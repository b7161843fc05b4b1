"""Testing support – fakes and generators.

``hypothesis`` ships with the ``test`` extra; importing this package without it
fails at import time.
"""

from citydir.testing.fakes import FakeClock, FrozenClock, ScriptedEventSource
from citydir.testing.generators import EventSummaryBuilder, event_summary_strategy, filter_state_strategy

__all__ = [
    "EventSummaryBuilder",
    "FakeClock",
    "FrozenClock",
    "ScriptedEventSource",
    "event_summary_strategy",
    "filter_state_strategy",
]
