#!/usr/bin/env python3
import argparse
import logging
import datetime
import sys
import os

# Add the parent directory to the path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from simplink_routing.route_planner import RoutePlanner
from simplink_routing.schedule import calculate_eta, is_within_operating_hours, next_departure
from simplink_routing.geo import distance_meters, format_distance


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_coordinate(text):
    """Parse 'lat,lon' into a (lat, lon) tuple, or None if text is not a coordinate."""
    parts = text.split(",")
    if len(parts) != 2:
        return None
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError:
        return None


def parse_board_time(text):
    """Parse 'HH:MM' into (hour, minute)."""
    try:
        parsed = datetime.datetime.strptime(text, "%H:%M")
    except ValueError:
        logging.error(f"Invalid board time: {text}")
        return None
    return parsed.hour, parsed.minute


def resolve_location(planner, text):
    """
    Resolve a location argument to (coordinate, display name).

    Accepts 'lat,lon', a BSD Link stop name, or free text for place search.
    Stop-name matches are tried before free-text search.
    """
    coordinate = parse_coordinate(text)
    if coordinate:
        return coordinate, text

    stops = planner.search_stops(text)
    if stops:
        stop = stops[0]
        logging.info(f"Resolved '{text}' to bus stop {stop.name} ({stop.stop_id})")
        return stop.location, f"{stop.name} (Bus Stop)"

    places = planner.api_client.search_places(text)
    if places:
        place = places[0]
        logging.info(f"Resolved '{text}' to place {place.name}")
        return place.location, place.name

    return None, None


def show_nearby(planner, location, radius):
    coordinate, name = resolve_location(planner, location)
    if coordinate is None:
        print(f"❌ Could not resolve location: {location}")
        return
    stops = planner.nearby_stops(coordinate, radius)
    if not stops:
        print(f"❌ No bus stops within {radius:.0f} m of {name}")
        return
    print(f"✅ {len(stops)} bus stops near {name}:")
    for stop in stops:
        distance = format_distance(distance_meters(coordinate, stop.location))
        print(f"  🚏 {stop.name} ({stop.stop_id}) - {distance}")


def show_search(planner, query):
    stops = planner.search_stops(query)
    places = planner.api_client.search_places(query)
    if not stops and not places:
        print(f"❌ Nothing found for '{query}'")
        return
    for stop in stops:
        print(f"  🚏 {stop.name} (Bus Stop) {stop.lat:.6f}, {stop.lon:.6f}")
    for place in places:
        print(f"  📍 {place.name} {place.lat:.6f}, {place.lon:.6f}")


def show_suggestions(planner, from_location, to_location, board_time=None):
    origin, origin_name = resolve_location(planner, from_location)
    destination, destination_name = resolve_location(planner, to_location)
    if origin is None or destination is None:
        print("❌ Could not resolve both locations")
        return None, None, None

    if board_time and not is_within_operating_hours(*board_time):
        print("❌ No buses available at this time")
        print("   BSD Link operating hours: 05:00 - 21:30")
        return None, None, None

    suggestions = planner.suggest_routes(origin, destination)
    if not suggestions:
        print("❌ No available routes found")
        return None, None, None

    print(f"✅ Suggested routes from {origin_name} to {destination_name}:")
    for i, suggestion in enumerate(suggestions):
        line = (f"  {i+1}. [{suggestion.route.route_id}] {suggestion.route.name}: "
                f"{suggestion.start_stop.name} → {suggestion.end_stop.name}, "
                f"{suggestion.formatted_total_time} min")
        if board_time:
            line += f" (board {board_time[0]:02d}:{board_time[1]:02d}, ETA {calculate_eta(*board_time, suggestion.total_time)})"
            departure = next_departure(suggestion.schedules, datetime.time(*board_time))
            if departure:
                line += f", next bus {departure}"
        print(line)
    return suggestions, (origin, origin_name), (destination, destination_name)


def show_itinerary(planner, from_location, to_location, route_id=None, wait=False):
    suggestions, origin, destination = show_suggestions(planner, from_location, to_location)
    if not suggestions:
        return

    chosen = suggestions[0]
    if route_id:
        matching = [s for s in suggestions if s.route.route_id == route_id]
        if not matching:
            print(f"❌ Route {route_id} is not among the suggestions")
            return
        chosen = matching[0]

    itinerary = planner.plan_itinerary(chosen, origin[0], destination[0],
                                       origin_name=origin[1], destination_name=destination[1])
    print(f"\n🚌 Itinerary on {chosen.route.name}:")
    for step in itinerary.steps:
        extra = step.duration or step.address or ""
        print(f"  {step.time}  {step.location}  {extra}".rstrip())

    if wait:
        try:
            polylines = itinerary.wait_for_polylines(timeout=60)
        except TimeoutError:
            print("⚠️  Timed out waiting for route geometry")
            return
        print(f"\n🗺️  {len(polylines)} leg polylines:")
        for polyline in polylines:
            print(f"  {polyline.transport_type}: {len(polyline.coordinates)} points")


def main():
    parser = argparse.ArgumentParser(
        description="SimpLink Routing CLI - Test and demo tool for BSD Link trip planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bus stops near a coordinate
  ./main_cli.py nearby "-6.3199,106.6437" --radius 800

  # Search stops and places
  ./main_cli.py search "AEON"

  # Suggest routes between two locations
  ./main_cli.py suggest "Intermoda" "Edutown 2" --board 14:30

  # Full itinerary, waiting for the leg polylines
  ./main_cli.py plan "Intermoda" "Edutown 2" --wait
        """
    )

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    nearby_parser = subparsers.add_parser('nearby', help='List bus stops near a location')
    nearby_parser.add_argument('location', type=str, help='"lat,lon", stop name or place')
    nearby_parser.add_argument('--radius', type=float, default=500, help='Search radius in meters')

    search_parser = subparsers.add_parser('search', help='Search bus stops and places')
    search_parser.add_argument('query', type=str, help='Search text')

    suggest_parser = subparsers.add_parser('suggest', help='Suggest bus routes between two locations')
    suggest_parser.add_argument('from_location', type=str, help='Starting location')
    suggest_parser.add_argument('to_location', type=str, help='Destination location')
    suggest_parser.add_argument('--board', type=str, help='Boarding time (e.g., "14:30")')

    plan_parser = subparsers.add_parser('plan', help='Build a step-by-step itinerary')
    plan_parser.add_argument('from_location', type=str, help='Starting location')
    plan_parser.add_argument('to_location', type=str, help='Destination location')
    plan_parser.add_argument('--route', type=str, help='Route id to use (default: fastest)')
    plan_parser.add_argument('--wait', action='store_true', help='Wait for route geometry')

    args = parser.parse_args()
    setup_logging(args.debug)

    with RoutePlanner() as planner:
        if args.command == 'nearby':
            show_nearby(planner, args.location, args.radius)
        elif args.command == 'search':
            show_search(planner, args.query)
        elif args.command == 'suggest':
            board_time = parse_board_time(args.board) if args.board else None
            if args.board and board_time is None:
                print(f"❌ Invalid board time format: {args.board}")
                return
            show_suggestions(planner, args.from_location, args.to_location, board_time)
        elif args.command == 'plan':
            show_itinerary(planner, args.from_location, args.to_location, args.route, args.wait)
        else:
            parser.print_help()


if __name__ == "__main__":
    main()
