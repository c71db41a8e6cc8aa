"""Route sequencing service for brewery crawls"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, Tuple

from ..config import MINUTES_PER_MILE
from ..utils.geo_utils import Coordinate, coordinate_of, distance_between

logger = logging.getLogger(__name__)

CoordinateKey = Callable[[Any], Coordinate]


@dataclass
class RouteResult:
    """Ordered stops plus unrounded trip totals"""
    ordered_stops: List[Any] = field(default_factory=list)
    total_distance: float = 0.0
    estimated_duration: float = 0.0

    def rounded(self) -> Tuple[float, float]:
        """Distance (miles) and duration (minutes) rounded for presentation"""
        return round(self.total_distance, 2), round(self.estimated_duration, 2)


class RouteService:
    """Service for sequencing stops and estimating trip metrics"""

    @staticmethod
    def optimize_route(
        start: Coordinate,
        candidates: Sequence[Any],
        max_stops: int,
        key: CoordinateKey = coordinate_of
    ) -> List[Any]:
        """
        Order candidates with the nearest-neighbor heuristic.

        Starting at ``start``, repeatedly travel to the closest remaining
        candidate until ``max_stops`` stops are chosen or none remain.
        Equidistant candidates are resolved in favour of the one that
        appears first. This is a greedy O(n*k) scan with no spatial index,
        which is enough for the tens of points a crawl deals with.

        Args:
            start: Starting coordinate
            candidates: Candidate stops, never mutated
            max_stops: Maximum number of stops; values <= 0 mean no stops
            key: Function returning the Coordinate of a candidate

        Returns:
            List of the selected candidates in visiting order

        Raises:
            InvalidCoordinateError: If the start or any candidate is invalid
        """
        current = coordinate_of(start)
        remaining = [(candidate, key(candidate)) for candidate in candidates]
        route: List[Any] = []

        while len(route) < max_stops and remaining:
            nearest_index = 0
            nearest_distance = distance_between(current, remaining[0][1])

            for i in range(1, len(remaining)):
                distance = distance_between(current, remaining[i][1])
                if distance < nearest_distance:
                    nearest_distance = distance
                    nearest_index = i

            candidate, current = remaining.pop(nearest_index)
            route.append(candidate)

        return route

    @staticmethod
    def trip_metrics(
        start: Coordinate,
        stops: Sequence[Any],
        minutes_per_mile: float = MINUTES_PER_MILE,
        key: CoordinateKey = coordinate_of
    ) -> Tuple[float, float]:
        """
        Compute total leg distance and a linear driving-time estimate.

        Args:
            start: Starting coordinate
            stops: Stops in visiting order
            minutes_per_mile: Time factor for the estimate
            key: Function returning the Coordinate of a stop

        Returns:
            Tuple of (total_distance_miles, estimated_minutes), unrounded
        """
        if not math.isfinite(minutes_per_mile) or minutes_per_mile < 0:
            raise ValueError(f"minutes_per_mile must be a non-negative number, got {minutes_per_mile}")

        total_distance = 0.0
        current = coordinate_of(start)
        for stop in stops:
            position = key(stop)
            total_distance += distance_between(current, position)
            current = position

        return total_distance, total_distance * minutes_per_mile

    @staticmethod
    def plan_route(
        start: Coordinate,
        candidates: Sequence[Any],
        max_stops: int,
        minutes_per_mile: float = MINUTES_PER_MILE,
        key: CoordinateKey = coordinate_of
    ) -> RouteResult:
        """
        Sequence the candidates and attach trip totals.

        Returns:
            RouteResult with unrounded totals
        """
        stops = RouteService.optimize_route(start, candidates, max_stops, key=key)
        total_distance, estimated_duration = RouteService.trip_metrics(
            start, stops, minutes_per_mile, key=key
        )
        logger.debug(
            "Planned %d of %d candidates, %.2f mi", len(stops), len(candidates), total_distance
        )
        return RouteResult(
            ordered_stops=stops,
            total_distance=total_distance,
            estimated_duration=estimated_duration
        )
