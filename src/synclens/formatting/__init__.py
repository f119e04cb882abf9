"""
Rendering of sync events into log text.

Components:
    - labels: Error code and deletion reason labels
    - table: Column-oriented event tables rendered with rich
    - dispatcher: Per-event field selection and message assembly
"""

from .dispatcher import FormattedEvent, SyncEventFormatter
from .labels import deletion_reason_label, error_label
from .table import EventTable

__all__ = [
    "EventTable",
    "FormattedEvent",
    "SyncEventFormatter",
    "deletion_reason_label",
    "error_label",
]
