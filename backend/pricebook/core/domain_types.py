"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DataPointId, ProviderId wrap integer primary keys
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DataPointId = NewType("DataPointId", int)
ProviderId = NewType("ProviderId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ModalMode(str, Enum):
    """Data point modal modes — decides POST vs PUT on submit."""
    ADD = "add"
    EDIT = "edit"


class LoadName(str, Enum):
    """The three independent loads fired when the page mounts."""
    DATA_POINTS = "data_points"
    PROVIDERS = "providers"
    ASSET_CLASSES = "asset_classes"
