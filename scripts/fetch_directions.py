#!/usr/bin/env python3
"""
Fetch directions between two places and print a route summary.

Usage:
    python fetch_directions.py "Toronto" "Montreal"
    python fetch_directions.py 43.65,-79.38 45.50,-73.57 --mode transit --departure-time 2024-01-01T08:00
    python fetch_directions.py "Toronto" "Montreal" --waypoints "Kingston,ON" --avoid tolls,ferries
"""

import sys
import argparse
from datetime import datetime

from gmaps_directions.common import get_logger
from gmaps_directions.directions import (
    DirectionsClient,
    DirectionsRequest,
    Place,
    RouteRestriction,
    TravelMode,
    Unit,
)

logger = get_logger("fetch_directions")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fetch directions from the Google Maps Directions API",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("origin", help='Origin address, "lat,lng" or "place_id:<id>"')
    parser.add_argument(
        "destination", help='Destination address, "lat,lng" or "place_id:<id>"'
    )

    parser.add_argument(
        "--mode",
        choices=[m.value for m in TravelMode],
        default=TravelMode.DRIVING.value,
        help="Travel mode",
    )

    parser.add_argument(
        "--waypoints",
        type=str,
        nargs="*",
        default=[],
        help="Intermediate places, in order",
    )

    parser.add_argument(
        "--avoid",
        type=str,
        help="Comma-separated features to avoid (tolls,highways,ferries,indoor)",
    )

    parser.add_argument(
        "--alternatives", action="store_true", help="Request alternative routes"
    )

    parser.add_argument("--language", type=str, help="Result language")

    parser.add_argument(
        "--units", choices=[u.value for u in Unit], help="Unit system for display"
    )

    parser.add_argument("--region", type=str, help="Region code (ccTLD)")

    parser.add_argument(
        "--arrival-time", type=str, help="Arrival time, ISO format (transit only)"
    )

    parser.add_argument(
        "--departure-time", type=str, help="Departure time, ISO format (transit only)"
    )

    return parser.parse_args(argv)


def build_request(args) -> DirectionsRequest:
    """Build a directions request from parsed arguments."""
    avoid = []
    if args.avoid:
        avoid = [RouteRestriction(a.strip()) for a in args.avoid.split(",")]

    return DirectionsRequest(
        origin=Place.from_token(args.origin),
        destination=Place.from_token(args.destination),
        travel_mode=TravelMode(args.mode),
        waypoints=tuple(Place.from_token(w) for w in args.waypoints),
        alternatives=True if args.alternatives else None,
        avoid=frozenset(avoid),
        language=args.language,
        units=Unit(args.units) if args.units else None,
        region=args.region,
        arrival_time=datetime.fromisoformat(args.arrival_time)
        if args.arrival_time
        else None,
        departure_time=datetime.fromisoformat(args.departure_time)
        if args.departure_time
        else None,
    )


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        request = build_request(args)
    except ValueError as e:
        print(f"Invalid arguments: {e}")
        sys.exit(2)

    with DirectionsClient() as client:
        response, error = client.get_directions(request)

    if error is not None:
        logger.error(f"Directions failed: {error}", extra=error.to_dict())
        print(f"{error.kind}: {error}")
        if error.retryable:
            print("The request may succeed if retried later")
        sys.exit(1)

    if not response.routes:
        print("No routes returned")
        return

    for index, route in enumerate(response.routes, start=1):
        print(f"Route {index}: {route.summary or '(no summary)'}")
        print(f"   Distance: {route.distance_m / 1000:.1f} km")
        print(f"   Duration: {route.duration_s / 60:.0f} min")
        for leg in route.legs:
            print(f"   {leg.start_address} -> {leg.end_address}")
        for warning in route.warnings:
            print(f"   Warning: {warning}")


if __name__ == "__main__":
    main()
