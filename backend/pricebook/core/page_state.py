"""Page State — in-memory UI state and transitions for the data points page.

Invariants:
    - data_points is replaced wholesale on reload (no incremental or optimistic update)
    - Each mount load owns one slot in load_errors; slots never overwrite each other
    - error is the most recently recorded load error (single visible message)
    - The draft is reset to defaults on add and after a successful save

Design Decisions:
    - Dataclass with transition methods: pure, deterministic, testable without mocks
    - load_errors is an insertion-ordered dict; re-recording a slot moves it to the end,
      so error keeps the "last failure wins" display while every failure stays inspectable
"""

from dataclasses import dataclass, field

from pricebook.core.data_points import (
    DataPointFilters, default_draft, draft_from_record, filter_data_points,
)
from pricebook.core.domain_types import LoadName, ModalMode


@dataclass
class PageState:
    """Data points page state — pure dataclass, no IO."""

    data_points: list[dict] = field(default_factory=list)
    providers: list[dict] = field(default_factory=list)
    asset_classes: list[str] = field(default_factory=list)
    filters: DataPointFilters = field(default_factory=DataPointFilters)

    # Modal
    draft: dict = field(default_factory=default_draft)
    modal_open: bool = False
    modal_mode: ModalMode = ModalMode.ADD

    loading: bool = False
    load_errors: dict[LoadName, str] = field(default_factory=dict)

    @property
    def error(self) -> str | None:
        if not self.load_errors:
            return None
        return list(self.load_errors.values())[-1]

    @property
    def filtered_data_points(self) -> list[dict]:
        return filter_data_points(self.data_points, self.filters)

    def record_load_error(self, load: LoadName, message: str) -> None:
        self.load_errors.pop(load, None)
        self.load_errors[load] = message

    def clear_load_error(self, load: LoadName) -> None:
        self.load_errors.pop(load, None)

    def open_add(self) -> None:
        self.draft = default_draft()
        self.modal_mode = ModalMode.ADD
        self.modal_open = True

    def open_edit(self, record: dict) -> None:
        self.draft = draft_from_record(record)
        self.modal_mode = ModalMode.EDIT
        self.modal_open = True

    def set_draft_field(self, name: str, value: object) -> None:
        self.draft = {**self.draft, name: value}

    def close_modal(self) -> None:
        self.modal_open = False

    def finish_save(self) -> None:
        """Close the modal and reset the draft after a successful submit."""
        self.modal_open = False
        self.draft = default_draft()
