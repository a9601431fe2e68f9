"""Data Points Page — orchestrates loads, the add/edit modal and deletes over the HTTP API.

Invariants:
    - mount() fires the three loads concurrently; a failing load never blocks the others
    - Every mutation is followed by a full reload of the data point list
    - Validation failures surface all messages in one alert; nothing is sent
    - Mutation failures surface a generic alert and leave state unchanged
    - No retry, no cancellation

Design Decisions:
    - Impure shell around core.page_state.PageState: this class only does IO and
      delegates every state change to PageState methods
    - fetch_api, confirm, alert injected: ApiClient in production, fakes in tests;
      confirm/alert stand in for the browser's window.confirm/alert
    - Load failures keep the server's message text; mutation failures are generic
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Protocol

from pricebook.core.data_points import (
    DataPointFilters, build_submit_payload, validate_data_point,
)
from pricebook.core.domain_types import DataPointId, LoadName, ModalMode
from pricebook.core.page_state import PageState

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this data point?"
SAVE_FAILED_MESSAGE = "Failed to save data point"
DELETE_FAILED_MESSAGE = "Failed to delete data point"

_LOAD_FALLBACK_MESSAGES = {
    LoadName.DATA_POINTS: "Failed to load data points",
    LoadName.PROVIDERS: "Failed to load providers",
    LoadName.ASSET_CLASSES: "Failed to load asset classes",
}


class FetchApi(Protocol):
    """Structural contract for the HTTP collaborator (ApiClient satisfies it)."""
    def __call__(
        self, path: str, method: str = "GET", json: Any = None,
    ) -> Awaitable[Any]: ...


class DataPointsPage:
    """Page controller for managing pricing data points."""

    def __init__(
        self,
        fetch_api: FetchApi,
        confirm: Callable[[str], bool],
        alert: Callable[[str], None],
        state: PageState | None = None,
    ):
        self._fetch_api = fetch_api
        self._confirm = confirm
        self._alert = alert
        self.state = state or PageState()

    # ─── Loads ───────────────────────────────────────────────────

    async def mount(self) -> None:
        """Run the three initial loads concurrently."""
        await asyncio.gather(
            self.load_data_points(),
            self.load_providers(),
            self.load_asset_classes(),
        )

    def _load_failed(self, load: LoadName, exc: Exception) -> None:
        logger.error(
            f"{_LOAD_FALLBACK_MESSAGES[load]}: {exc}", extra={"load": load.value},
        )
        self.state.record_load_error(
            load, str(exc) or _LOAD_FALLBACK_MESSAGES[load],
        )

    async def load_data_points(self) -> None:
        self.state.loading = True
        try:
            data = await self._fetch_api("/dataPoints")
            self.state.data_points = list(data or [])
            self.state.clear_load_error(LoadName.DATA_POINTS)
        except Exception as e:
            self._load_failed(LoadName.DATA_POINTS, e)
        finally:
            self.state.loading = False

    async def load_providers(self) -> None:
        try:
            data = await self._fetch_api("/providers")
            self.state.providers = list(data or [])
            self.state.clear_load_error(LoadName.PROVIDERS)
        except Exception as e:
            self._load_failed(LoadName.PROVIDERS, e)

    async def load_asset_classes(self) -> None:
        try:
            data = await self._fetch_api("/settings")
            self.state.asset_classes = list(data["assetClasses"].keys())
            self.state.clear_load_error(LoadName.ASSET_CLASSES)
        except Exception as e:
            self._load_failed(LoadName.ASSET_CLASSES, e)

    # ─── User actions ────────────────────────────────────────────

    def handle_add(self) -> None:
        self.state.open_add()

    def handle_edit(self, record: dict) -> None:
        self.state.open_edit(record)

    def handle_change(self, field_name: str, value: object) -> None:
        self.state.set_draft_field(field_name, value)

    def close_modal(self) -> None:
        self.state.close_modal()

    def set_filters(
        self,
        asset_class: str | None = None,
        quarter: str | None = None,
        provider: str | None = None,
    ) -> None:
        """Replace the filters; empty strings mean "no constraint"."""
        self.state.filters = DataPointFilters(
            asset_class=asset_class or None,
            quarter=quarter or None,
            provider=provider or None,
        )

    @property
    def filtered_data_points(self) -> list[dict]:
        return self.state.filtered_data_points

    async def handle_submit(self) -> bool:
        """Validate the draft, then create or update it. True when saved."""
        draft = self.state.draft
        errors = validate_data_point(draft)
        if errors:
            self._alert("\n".join(errors))
            return False

        try:
            payload = build_submit_payload(draft)
            if self.state.modal_mode == ModalMode.ADD:
                await self._fetch_api("/dataPoints", method="POST", json=payload)
            else:
                await self._fetch_api(
                    f"/dataPoints/{draft['id']}", method="PUT", json=payload,
                )
            await self.load_data_points()
        except Exception as e:
            logger.error(f"{SAVE_FAILED_MESSAGE}: {e}")
            self._alert(SAVE_FAILED_MESSAGE)
            return False

        self.state.finish_save()
        return True

    async def handle_delete(self, data_point_id: DataPointId) -> bool:
        """Delete after confirmation, then reload. True when deleted."""
        if not self._confirm(DELETE_CONFIRMATION):
            return False

        try:
            await self._fetch_api(f"/dataPoints/{data_point_id}", method="DELETE")
        except Exception as e:
            logger.error(
                f"{DELETE_FAILED_MESSAGE}: {e}",
                extra={"data_point_id": data_point_id},
            )
            self._alert(DELETE_FAILED_MESSAGE)
            return False

        await self.load_data_points()
        return True
