"""Property tests for offline event filtering.

- Filtering only ever narrows: the result is an ordered subset of the input.
- Every returned event satisfies each supplied filter.
- Filters combine with AND, so the order they are applied in does not matter.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from eventsphere.models.requests import EventFilters
from eventsphere.models.schemas import Event, EventCategory
from eventsphere.offline.dataset import YamlEventSource
from eventsphere.offline.filters import filter_events, matches_search

_BUNDLED = YamlEventSource().list_events()


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

categories = st.one_of(st.none(), st.sampled_from(list(EventCategory)))
cities = st.one_of(
    st.none(),
    st.sampled_from(["Pune", "mumbai", "DELHI", "Bengaluru", "Chennai", "Kolkata", "Mum"]),
)
searches = st.one_of(
    st.none(),
    st.sampled_from(["jazz", "Workshop", "food", "mumbai", "summit", "zzz"]),
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", min_size=1, max_size=4),
)
filter_sets = st.builds(EventFilters, category=categories, search=searches, city=cities)


def _ids(events: list[Event]) -> list[str]:
    return [event.id for event in events]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@settings(max_examples=200)
@given(filters=filter_sets)
def test_result_is_ordered_subset(filters: EventFilters) -> None:
    result = filter_events(_BUNDLED, filters)

    all_ids = _ids(_BUNDLED)
    positions = [all_ids.index(event_id) for event_id in _ids(result)]
    assert positions == sorted(positions)
    assert len(result) <= len(_BUNDLED)


@settings(max_examples=200)
@given(filters=filter_sets)
def test_every_result_matches_every_filter(filters: EventFilters) -> None:
    for event in filter_events(_BUNDLED, filters):
        if filters.category:
            assert event.category == filters.category
        if filters.search:
            assert matches_search(event, filters.search)
        if filters.city:
            assert event.venue.city.lower() == filters.city.lower()


@settings(max_examples=200)
@given(filters=filter_sets)
def test_no_matching_event_is_dropped(filters: EventFilters) -> None:
    expected = [
        event
        for event in _BUNDLED
        if (not filters.category or event.category == filters.category)
        and (not filters.search or matches_search(event, filters.search))
        and (not filters.city or event.venue.city.lower() == filters.city.lower())
    ]

    assert _ids(filter_events(_BUNDLED, filters)) == _ids(expected)


@settings(max_examples=100)
@given(filters=filter_sets)
def test_filters_compose(filters: EventFilters) -> None:
    by_category = filter_events(_BUNDLED, EventFilters(category=filters.category))
    by_search = filter_events(by_category, EventFilters(search=filters.search))
    by_city = filter_events(by_search, EventFilters(city=filters.city))

    assert _ids(by_city) == _ids(filter_events(_BUNDLED, filters))
