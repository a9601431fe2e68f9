"""Page State — tests for the pure UI state transitions of the data points page.

Tests cover:
    - open_add resets the draft and selects add mode
    - open_edit loads the record into the draft and selects edit mode
    - finish_save closes the modal and resets the draft
    - load error slots are independent; error shows the most recent one
"""

from pricebook.core.data_points import DataPointFilters, default_draft
from pricebook.core.domain_types import LoadName, ModalMode
from pricebook.core.page_state import PageState


def test_initial_state_is_closed_with_default_draft():
    state = PageState()
    assert state.modal_open is False
    assert state.draft == default_draft()
    assert state.error is None
    assert state.data_points == []


def test_open_add_resets_draft_and_opens_in_add_mode():
    state = PageState()
    state.set_draft_field("quarter", "Q4 2024")
    state.modal_mode = ModalMode.EDIT
    state.open_add()
    assert state.modal_open is True
    assert state.modal_mode == ModalMode.ADD
    assert state.draft == default_draft()


def test_open_edit_loads_record_into_draft():
    state = PageState()
    record = {
        "id": 4, "provider": {"id": 8, "name": "Birch Partners"},
        "assetClass": "Venture", "quarter": "Q1 2024",
        "minPrice": 0.5, "maxPrice": 0.9,
    }
    state.open_edit(record)
    assert state.modal_open is True
    assert state.modal_mode == ModalMode.EDIT
    assert state.draft["id"] == 4
    assert state.draft["provider"] == "8"
    assert state.draft["assetClass"] == "Venture"


def test_set_draft_field_replaces_draft_dict():
    state = PageState()
    before = state.draft
    state.set_draft_field("minPrice", 2)
    assert state.draft["minPrice"] == 2
    assert before["minPrice"] == 0


def test_close_modal_keeps_draft():
    state = PageState()
    state.open_add()
    state.set_draft_field("provider", "7")
    state.close_modal()
    assert state.modal_open is False
    assert state.draft["provider"] == "7"


def test_finish_save_closes_and_resets():
    state = PageState()
    state.open_add()
    state.set_draft_field("provider", "7")
    state.finish_save()
    assert state.modal_open is False
    assert state.draft == default_draft()


def test_error_is_most_recently_recorded_failure():
    state = PageState()
    state.record_load_error(LoadName.PROVIDERS, "providers down")
    state.record_load_error(LoadName.DATA_POINTS, "data points down")
    assert state.error == "data points down"
    assert state.load_errors == {
        LoadName.PROVIDERS: "providers down",
        LoadName.DATA_POINTS: "data points down",
    }


def test_re_recording_a_slot_makes_it_the_visible_error():
    state = PageState()
    state.record_load_error(LoadName.PROVIDERS, "first")
    state.record_load_error(LoadName.DATA_POINTS, "second")
    state.record_load_error(LoadName.PROVIDERS, "third")
    assert state.error == "third"


def test_clearing_a_slot_falls_back_to_remaining_error():
    state = PageState()
    state.record_load_error(LoadName.PROVIDERS, "providers down")
    state.record_load_error(LoadName.DATA_POINTS, "data points down")
    state.clear_load_error(LoadName.DATA_POINTS)
    assert state.error == "providers down"
    state.clear_load_error(LoadName.PROVIDERS)
    assert state.error is None


def test_filtered_data_points_applies_filters():
    state = PageState()
    state.data_points = [
        {"id": 1, "provider": {"name": "ACME Capital"}, "assetClass": "Buyout", "quarter": "Q1 2024"},
        {"id": 2, "provider": {"name": "Birch"}, "assetClass": "Buyout", "quarter": "Q1 2024"},
    ]
    state.filters = DataPointFilters(provider="acme")
    assert [r["id"] for r in state.filtered_data_points] == [1]
