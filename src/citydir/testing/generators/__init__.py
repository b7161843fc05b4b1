"""Testing generators – builders and hypothesis strategies."""
from citydir.testing.generators.builder import EventSummaryBuilder
from citydir.testing.generators.strategies import event_summary_strategy, filter_state_strategy

__all__ = ["EventSummaryBuilder", "event_summary_strategy", "filter_state_strategy"]
