import copy

import pytest

from brewroute.services.route_service import RouteResult, RouteService
from brewroute.utils.geo_utils import Coordinate, InvalidCoordinateError, haversine_distance

START = Coordinate(40.0, -75.0)


def make_stop(name, lat, lon):
    return {"id": name, "name": name, "latitude": lat, "longitude": lon, "city": "Somewhere"}


@pytest.fixture
def stops():
    return [
        make_stop("C", 40.5, -75.0),
        make_stop("A", 40.01, -75.0),
        make_stop("B", 40.0, -75.5),
    ]


def names(route):
    return [stop["name"] for stop in route]


def test_empty_candidates_give_empty_route():
    result = RouteService.plan_route(START, [], max_stops=5)

    assert result.ordered_stops == []
    assert result.total_distance == 0
    assert result.estimated_duration == 0


@pytest.mark.parametrize("max_stops", [0, -1, -10])
def test_non_positive_max_stops_gives_empty_route(stops, max_stops):
    result = RouteService.plan_route(START, stops, max_stops=max_stops)

    assert result.ordered_stops == []
    assert result.total_distance == 0


@pytest.mark.parametrize("max_stops", [3, 4, 100])
def test_large_max_stops_visits_every_candidate_once(stops, max_stops):
    route = RouteService.optimize_route(START, stops, max_stops)

    assert len(route) == len(stops)
    assert sorted(names(route)) == ["A", "B", "C"]


def test_route_is_capped_at_max_stops(stops):
    assert len(RouteService.optimize_route(START, stops, 1)) == 1
    assert len(RouteService.optimize_route(START, stops, 2)) == 2


def test_second_stop_is_nearest_to_first_stop(stops):
    a = stops[1]
    b = stops[2]
    c = stops[0]
    a_to_b = haversine_distance(a["latitude"], a["longitude"], b["latitude"], b["longitude"])
    a_to_c = haversine_distance(a["latitude"], a["longitude"], c["latitude"], c["longitude"])
    expected_second = "B" if a_to_b < a_to_c else "C"

    route = RouteService.optimize_route(START, stops, max_stops=2)

    assert names(route) == ["A", expected_second]


def test_each_step_picks_nearest_remaining(stops):
    route = RouteService.optimize_route(START, stops, max_stops=len(stops))

    current = (START.latitude, START.longitude)
    remaining = list(stops)
    for chosen in route:
        nearest = min(
            haversine_distance(*current, s["latitude"], s["longitude"]) for s in remaining
        )
        assert haversine_distance(*current, chosen["latitude"], chosen["longitude"]) == nearest
        remaining.remove(chosen)
        current = (chosen["latitude"], chosen["longitude"])


def test_pre_sorted_input_is_not_trusted():
    # Sorted by distance from the start, but the greedy walk doubles back
    candidates = [
        make_stop("east-near", 40.0, -74.9),
        make_stop("west-mid", 40.0, -75.15),
        make_stop("east-far", 40.0, -74.8),
    ]

    route = RouteService.optimize_route(START, candidates, max_stops=3)

    assert names(route) == ["east-near", "east-far", "west-mid"]


def test_equidistant_candidates_follow_input_order():
    origin = Coordinate(0.0, 0.0)
    east = make_stop("east", 0.0, 1.0)
    west = make_stop("west", 0.0, -1.0)
    assert haversine_distance(0.0, 0.0, 0.0, 1.0) == haversine_distance(0.0, 0.0, 0.0, -1.0)

    for _ in range(5):
        assert names(RouteService.optimize_route(origin, [east, west], 1)) == ["east"]
        assert names(RouteService.optimize_route(origin, [west, east], 1)) == ["west"]


def test_duplicate_locations_keep_input_order():
    twins = [make_stop("first", 40.1, -75.0), make_stop("second", 40.1, -75.0)]

    assert names(RouteService.optimize_route(START, twins, 2)) == ["first", "second"]


def test_repeated_calls_are_deterministic(stops):
    first = RouteService.optimize_route(START, copy.deepcopy(stops), 3)
    second = RouteService.optimize_route(START, copy.deepcopy(stops), 3)

    assert first == second


def test_candidates_are_not_mutated(stops):
    original = copy.deepcopy(stops)

    route = RouteService.optimize_route(START, stops, 2)

    assert stops == original
    assert route[0] is stops[1]


def test_accepts_any_candidate_type_with_key():
    candidates = [("far", (41.0, -75.0)), ("near", (40.1, -75.0))]

    route = RouteService.optimize_route(
        START, candidates, 2, key=lambda c: Coordinate(*c[1])
    )

    assert [c[0] for c in route] == ["near", "far"]


def test_invalid_candidate_coordinate_raises(stops):
    stops.append(make_stop("bad", 123.0, -75.0))

    with pytest.raises(InvalidCoordinateError):
        RouteService.optimize_route(START, stops, 5)


def test_invalid_start_raises(stops):
    with pytest.raises(InvalidCoordinateError):
        RouteService.optimize_route(Coordinate(0.0, 200.0), stops, 5)


def test_total_distance_is_sum_of_legs(stops):
    result = RouteService.plan_route(START, stops, max_stops=3)

    expected = 0.0
    current = (START.latitude, START.longitude)
    for stop in result.ordered_stops:
        expected += haversine_distance(*current, stop["latitude"], stop["longitude"])
        current = (stop["latitude"], stop["longitude"])

    assert result.total_distance == pytest.approx(expected)
    assert result.estimated_duration == pytest.approx(expected * 2.0)


def test_trip_metrics_uses_given_factor(stops):
    distance, duration = RouteService.trip_metrics(START, stops[:1], minutes_per_mile=1.5)

    assert distance == pytest.approx(haversine_distance(40.0, -75.0, 40.5, -75.0))
    assert duration == pytest.approx(distance * 1.5)


@pytest.mark.parametrize("factor", [-1.0, float("nan"), float("inf")])
def test_trip_metrics_rejects_bad_factor(factor):
    with pytest.raises(ValueError):
        RouteService.trip_metrics(START, [], minutes_per_mile=factor)


def test_route_result_rounding_keeps_raw_values():
    result = RouteResult(ordered_stops=[], total_distance=12.34567, estimated_duration=24.69134)

    assert result.rounded() == (12.35, 24.69)
    assert result.total_distance == 12.34567
