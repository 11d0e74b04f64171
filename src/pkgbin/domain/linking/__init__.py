"""Global binary link reconciliation."""

from __future__ import annotations

from .ownership import OwnershipVerifier, is_within
from .plan import destination_for, plan_reconciliation
from .reconciler import BinaryLinkReconciler
from .snapshot import BinarySnapshotter
from .types import (
    BIN_DIR_NAME,
    BinarySet,
    LinkChange,
    LinkOutcome,
    LinkResult,
    OwnershipDecision,
    ReconciliationPlan,
    ReconciliationReport,
    RegistryLocation,
)

__all__ = [
    "BIN_DIR_NAME",
    "BinaryLinkReconciler",
    "BinarySet",
    "BinarySnapshotter",
    "LinkChange",
    "LinkOutcome",
    "LinkResult",
    "OwnershipDecision",
    "OwnershipVerifier",
    "ReconciliationPlan",
    "ReconciliationReport",
    "RegistryLocation",
    "destination_for",
    "is_within",
    "plan_reconciliation",
]
