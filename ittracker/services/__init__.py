"""Services for the IT request tracker."""

from . import phase_model
from . import aggregate_stats
from .request_store import RequestStore, get_request_store
from .tracked_item_store import TrackedItemStore, get_tracked_item_store
from .report_store import MonthlyReportStore, get_report_store, default_report
from .sample_data import sample_requests

__all__ = [
    "phase_model",
    "aggregate_stats",
    "RequestStore",
    "get_request_store",
    "TrackedItemStore",
    "get_tracked_item_store",
    "MonthlyReportStore",
    "get_report_store",
    "default_report",
    "sample_requests",
]
