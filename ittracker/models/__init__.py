"""Data models for the IT request tracker."""

from .common import (
    Stage,
    Priority,
    PhaseStatus,
    FeasibilityStatus,
    ApprovalStatus,
    TestStatus,
    UATStatus,
    DeploymentType,
    Environment,
    Outcome,
    FinalStatus,
)
from .request import DevelopmentRequest, RequestDraft, RequestFilter
from .tracked_item import (
    TrackerPhase,
    ItemType,
    Severity,
    ItemStatus,
    Document,
    DocumentDraft,
    TrackedItem,
    TrackedItemDraft,
)
from .report import SECTION_KEYS, RAGStatus, MonthlyReport, MonthOption
from .stats import (
    PhaseProgress,
    PhaseActivity,
    BreakdownEntry,
    MonthlyStats,
    DashboardOverview,
    MISSummary,
)
from .error import ErrorResponse

__all__ = [
    # Enums
    "Stage",
    "Priority",
    "PhaseStatus",
    "FeasibilityStatus",
    "ApprovalStatus",
    "TestStatus",
    "UATStatus",
    "DeploymentType",
    "Environment",
    "Outcome",
    "FinalStatus",
    # Request models
    "DevelopmentRequest",
    "RequestDraft",
    "RequestFilter",
    # Tracked item models
    "TrackerPhase",
    "ItemType",
    "Severity",
    "ItemStatus",
    "Document",
    "DocumentDraft",
    "TrackedItem",
    "TrackedItemDraft",
    # Report models
    "SECTION_KEYS",
    "RAGStatus",
    "MonthlyReport",
    "MonthOption",
    # Stats models
    "PhaseProgress",
    "PhaseActivity",
    "BreakdownEntry",
    "MonthlyStats",
    "DashboardOverview",
    "MISSummary",
    # Error model
    "ErrorResponse",
]
