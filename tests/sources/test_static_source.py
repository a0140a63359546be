"""Tests for sources/: base contract, static source and factory."""

from __future__ import annotations

import pytest

from f1draft.exceptions import F1DraftError, SourceError
from f1draft.models import DraftableItem, EventOutcome, FinishResult
from f1draft.sources import EventDataSource, SourceKind, StaticDataSource, default_grid, get_source
from f1draft.sources.static_repo import GRID_2025


class TestSourceError:
    def test_is_draft_error(self):
        assert issubclass(SourceError, F1DraftError)

    def test_message(self):
        assert str(SourceError("boom")) == "boom"


class TestEventDataSource:
    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            EventDataSource()

    def test_concrete_implementation(self):
        class ConcreteSource(EventDataSource):
            def get_items(self, event_key): return []
            def get_outcome(self, event_key): return EventOutcome()

        assert ConcreteSource().get_items(1) == []

    def test_partial_implementation_fails(self):
        class PartialSource(EventDataSource):
            def get_items(self, event_key): return []

        with pytest.raises(TypeError):
            PartialSource()


class TestDefaultGrid:
    def test_ranks_are_contiguous(self):
        grid = default_grid()
        assert [i.start_rank for i in grid] == list(range(1, len(GRID_2025) + 1))
        assert len({i.item_id for i in grid}) == len(grid)

    def test_fields(self):
        first = default_grid()[0]
        assert first.item_id == "VER"
        assert first.driver_number == 1
        assert first.tier == 1
        assert default_grid()[-1].tier == 4


class TestStaticDataSource:
    def test_default_items(self):
        source = StaticDataSource()
        assert source.get_items("anything") == default_grid()

    def test_custom_items(self):
        items = [DraftableItem(item_id="A", start_rank=1), DraftableItem(item_id="B", start_rank=2)]
        assert StaticDataSource(items=items).get_items(1) == items

    def test_get_items_returns_copy(self):
        source = StaticDataSource()
        source.get_items(1).clear()
        assert len(source.get_items(1)) == 20

    def test_outcome(self):
        outcome = EventOutcome(results=(FinishResult(item_id="VER", position=1),))
        source = StaticDataSource(outcomes={"bahrain": outcome})
        assert source.get_outcome("bahrain") is outcome

    def test_missing_outcome(self, _isolated_call_log):
        with pytest.raises(SourceError, match="No results recorded"):
            StaticDataSource().get_outcome("monaco")
        content = (_isolated_call_log / "calls.log").read_text()
        assert "FAIL: StaticDataSource.get_outcome('monaco') -> SourceError" in content


class TestGetSource:
    def test_static_by_default(self):
        assert isinstance(get_source(), StaticDataSource)

    def test_openf1_when_selected(self):
        from f1draft.sources.openf1_repo import OpenF1DataSource

        assert isinstance(get_source(SourceKind.OPENF1), OpenF1DataSource)
        assert isinstance(get_source("openf1"), OpenF1DataSource)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            get_source("ergast")
