"""Tests for ViewSynchronizer."""

from immo_catalog.models import FilterCriteria, PropertyCategory, SortKey
from immo_catalog.store import PropertyStore
from immo_catalog.sync import ViewSynchronizer
from immo_catalog.views import NO_MATCH_MESSAGE, FilteredResult, MapLayer, ResultGrid


class RecordingConsumer:
    """Consumer that remembers every result it was given."""

    def __init__(self) -> None:
        self.results: list[FilteredResult] = []

    def render(self, result: FilteredResult) -> None:
        self.results.append(result)


class TestViewSynchronizer:
    """Tests for fan-out of filtered results."""

    def test_all_consumers_receive_same_result(self, store: PropertyStore) -> None:
        first, second = RecordingConsumer(), RecordingConsumer()
        sync = ViewSynchronizer(store, [first, second])

        result = sync.apply(FilterCriteria(category=PropertyCategory.VILLA))

        assert first.results == [result]
        assert second.results[0] is result
        assert sync.current is result
        assert result.ids == ["prop-1", "prop-6"]

    def test_count_matches_items(self, store: PropertyStore) -> None:
        sync = ViewSynchronizer(store)
        for criteria in (FilterCriteria(), FilterCriteria(min_rooms=4), FilterCriteria(query="zzz")):
            result = sync.apply(criteria)
            assert result.count == len(result.items)

    def test_grid_and_map_stay_consistent(self, store: PropertyStore) -> None:
        grid, layer = ResultGrid(store), MapLayer()
        sync = ViewSynchronizer(store, [grid, layer])

        for criteria in (
            FilterCriteria(),
            FilterCriteria(neighborhood="plateau"),
            FilterCriteria(sort=SortKey.PRICE_ASC, min_price=1_000_000),
            FilterCriteria(query="nothing matches this"),
        ):
            result = sync.apply(criteria)
            assert [c.property_id for c in grid.cards] == result.ids
            assert [m.property_id for m in layer.markers] == result.ids
            assert grid.count == result.count
            assert grid.revision == layer.revision == result.revision

    def test_empty_result_renders_no_match_state(self, store: PropertyStore) -> None:
        grid, layer = ResultGrid(store), MapLayer()
        sync = ViewSynchronizer(store, [grid, layer])

        result = sync.apply(FilterCriteria(query="no such listing"))

        assert result.is_empty
        assert grid.count == 0
        assert grid.empty_message == NO_MATCH_MESSAGE
        assert layer.markers == []
        assert layer.viewport == layer.default_viewport()

    def test_revisions_increase(self, store: PropertyStore) -> None:
        sync = ViewSynchronizer(store)
        first = sync.apply(FilterCriteria())
        second = sync.apply(FilterCriteria())
        assert second.revision == first.revision + 1

    def test_reset_applies_defaults(self, store: PropertyStore) -> None:
        sync = ViewSynchronizer(store)
        sync.apply(FilterCriteria(min_rooms=5))

        result = sync.reset()

        assert result.criteria == FilterCriteria()
        assert result.count == len(store)

    def test_subscribe_renders_current_result(self, store: PropertyStore) -> None:
        sync = ViewSynchronizer(store)
        result = sync.apply(FilterCriteria(min_rooms=4))
        late = RecordingConsumer()

        sync.subscribe(late)

        assert late.results == [result]
        sync.apply(FilterCriteria())
        assert len(late.results) == 2

    def test_unsubscribe(self, store: PropertyStore) -> None:
        consumer = RecordingConsumer()
        sync = ViewSynchronizer(store, [consumer])
        sync.unsubscribe(consumer)
        sync.apply(FilterCriteria())
        assert consumer.results == []
