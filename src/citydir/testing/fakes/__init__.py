"""Testing fakes – in-memory doubles for application ports."""
from citydir.testing.fakes.clock import FakeClock
from citydir.testing.fakes.source import ScriptedEventSource
from citydir.kernel.time import FrozenClock

__all__ = ["FakeClock", "FrozenClock", "ScriptedEventSource"]
