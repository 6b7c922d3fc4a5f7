"""Tests for flat row ↔ section mapping and row visibility.

Reference catalog: Mac (8 items), iPad (4), iPhone (4), all collapsed.
Flat rows: Mac header 0, items 1-8; iPad header 9, items 10-13;
iPhone header 14, items 15-18.
"""

import pytest

from app.core import index_mapper as im
from app.models.list_config import ListConfig
from app.models.section import SectionModel

HEADER_H = 50.0
ITEM_H = 44.0


@pytest.fixture
def model() -> SectionModel:
    return SectionModel.from_pairs([
        ("Mac", [f"mac{i}" for i in range(8)]),
        ("iPad", [f"ipad{i}" for i in range(4)]),
        ("iPhone", [f"iphone{i}" for i in range(4)]),
    ])


@pytest.fixture
def pinned() -> ListConfig:
    return ListConfig.pin_top(3, HEADER_H, ITEM_H)


@pytest.fixture
def hide_all() -> ListConfig:
    return ListConfig.hide_all(HEADER_H, ITEM_H)


class TestMapping:

    def test_total_flat_rows(self, model: SectionModel):
        assert im.total_flat_rows(model) == 19

    def test_total_matches_section_sum(self, model: SectionModel):
        assert im.total_flat_rows(model) == sum(1 + len(s.items) for s in model.sections)

    def test_total_empty_model(self):
        assert im.total_flat_rows(SectionModel()) == 0

    def test_reference_rows(self, model: SectionModel):
        assert im.section_index_of(model, 10) == 1
        assert im.row_in_section_of(model, 10) == 1

    def test_first_and_last_rows(self, model: SectionModel):
        assert im.section_index_of(model, 0) == 0
        assert im.section_index_of(model, 8) == 0
        assert im.section_index_of(model, 9) == 1
        assert im.section_index_of(model, 18) == 2
        assert im.row_in_section_of(model, 18) == 4

    def test_mapping_inverts_header_indices(self, model: SectionModel):
        headers = model.header_indices()
        for row in range(im.total_flat_rows(model)):
            section = im.section_index_of(model, row)
            assert headers[section] + im.row_in_section_of(model, row) == row

    def test_flat_row_of_round_trip(self, model: SectionModel):
        for row in range(im.total_flat_rows(model)):
            section = im.section_index_of(model, row)
            offset = im.row_in_section_of(model, row)
            assert im.flat_row_of(model, section, offset) == row

    def test_header_rows(self, model: SectionModel):
        headers = [r for r in range(19) if im.is_header_row(model, r)]
        assert headers == [0, 9, 14]

    def test_empty_sections(self):
        m = SectionModel.from_pairs([("A", []), ("B", []), ("C", ["x"])])
        assert [im.section_index_of(m, r) for r in range(4)] == [0, 1, 2, 2]
        assert all(im.is_header_row(m, r) for r in range(3))

    @pytest.mark.parametrize("bad", [-1, 19, 50])
    def test_out_of_range_rows(self, model: SectionModel, bad: int):
        with pytest.raises(IndexError):
            im.section_index_of(model, bad)
        with pytest.raises(IndexError):
            im.row_in_section_of(model, bad)
        with pytest.raises(IndexError):
            im.is_header_row(model, bad)

    @pytest.mark.parametrize("bad", [1.5, True, "3"])
    def test_non_int_rows(self, model: SectionModel, bad):
        with pytest.raises(TypeError):
            im.section_index_of(model, bad)
        with pytest.raises(TypeError):
            im.row_in_section_of(model, bad)

    def test_flat_row_of_non_int(self, model: SectionModel):
        with pytest.raises(TypeError):
            im.flat_row_of(model, 1, 1.0)
        with pytest.raises(TypeError):
            im.flat_row_of(model, False, 0)

    def test_empty_model_has_no_rows(self):
        with pytest.raises(IndexError):
            im.section_index_of(SectionModel(), 0)

    def test_flat_row_of_out_of_range(self, model: SectionModel):
        with pytest.raises(IndexError):
            im.flat_row_of(model, 1, 5)
        with pytest.raises(IndexError):
            im.flat_row_of(model, 3, 0)


class TestHideAll:

    def test_collapsed_items_zero(self, hide_all: ListConfig):
        m = SectionModel.from_pairs([("S", ["a", "b", "c"])])
        assert im.visible_height(m, 0, hide_all) == HEADER_H
        assert [im.visible_height(m, r, hide_all) for r in (1, 2, 3)] == [0, 0, 0]

    def test_expanded_items_full(self, model: SectionModel, hide_all: ListConfig):
        model.toggle(1)
        assert [im.visible_height(model, r, hide_all) for r in range(10, 14)] == [ITEM_H] * 4
        # Other sections stay hidden
        assert im.visible_height(model, 1, hide_all) == 0

    def test_hide_all_policy_is_zero_pin(self, hide_all: ListConfig):
        assert hide_all == ListConfig.pin_top(0, HEADER_H, ITEM_H)


class TestPinTop:

    def test_reference_heights(self, model: SectionModel, pinned: ListConfig):
        assert im.visible_height(model, 10, pinned) == ITEM_H
        assert im.visible_height(model, 13, pinned) == 0

    def test_eight_items_show_first_three(self, model: SectionModel, pinned: ListConfig):
        heights = [im.visible_height(model, r, pinned) for r in range(1, 9)]
        assert heights == [ITEM_H] * 3 + [0.0] * 5

    def test_exactly_n_items_never_collapses(self, pinned: ListConfig):
        m = SectionModel.from_pairs([("S", ["a", "b", "c"])])
        assert [im.visible_height(m, r, pinned) for r in (1, 2, 3)] == [ITEM_H] * 3

    def test_fewer_than_n_items_never_collapses(self, pinned: ListConfig):
        m = SectionModel.from_pairs([("S", ["a"])])
        assert im.visible_height(m, 1, pinned) == ITEM_H

    def test_headers_always_visible(self, model: SectionModel, pinned: ListConfig):
        for row in model.header_indices():
            assert im.visible_height(model, row, pinned) == HEADER_H

    def test_expanded_shows_everything(self, model: SectionModel, pinned: ListConfig):
        model.toggle(0)
        assert all(im.visible_height(model, r, pinned) == ITEM_H for r in range(1, 9))

    def test_out_of_range_height(self, model: SectionModel, pinned: ListConfig):
        with pytest.raises(IndexError):
            im.visible_height(model, 19, pinned)


class TestRefreshRange:

    def test_ipad_range(self, model: SectionModel):
        assert im.refresh_range(model, 1) == (9, 13)

    def test_covers_header_and_items(self, model: SectionModel):
        assert im.refresh_range(model, 0) == (0, 8)
        assert im.refresh_range(model, 2) == (14, 18)

    def test_empty_section_range_is_header_only(self):
        m = SectionModel.from_pairs([("A", ["x"]), ("B", [])])
        assert im.refresh_range(m, 1) == (2, 2)

    def test_invalid_section(self, model: SectionModel):
        with pytest.raises(IndexError):
            im.refresh_range(model, 3)
