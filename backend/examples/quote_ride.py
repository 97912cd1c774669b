"""
Example client for the taxi fare estimator API.

Quotes a ride from a passenger position to a destination, the way the
mobile screen does after the user taps the map.
"""

import sys

import requests


def quote_via_api(base_url: str = "http://localhost:8000",
                  passenger: tuple = None,
                  destination: tuple = None,
                  mode: str = "day"):
    """
    Request a fare quote from the API and print it.

    Args:
        base_url: API base URL
        passenger: (latitude, longitude) of the passenger
        destination: (latitude, longitude) of the destination, or None
        mode: Tariff mode, "day" or "night"
    """
    if not passenger:
        print("Error: Passenger location is required")
        return

    payload = {
        "passenger": {"latitude": passenger[0], "longitude": passenger[1]},
        "mode": mode,
    }
    if destination:
        payload["destination"] = {"latitude": destination[0], "longitude": destination[1]}

    response = requests.post(f"{base_url}/api/quote", json=payload, timeout=10)

    if response.status_code != 200:
        print(f"✗ Quote failed: {response.text}")
        return

    data = response.json()
    print(f"Driver distance: {data['driver_distance_km']:.2f} km")
    print(f"Driver ETA:      {data['driver_eta_minutes']:.1f} min")
    if data["has_destination"]:
        print(f"Ride distance:   {data['ride_distance_km']:.2f} km")
        print(f"Estimated fare:  {data['estimated_fare']:.2f} ({mode} tariff)")
    else:
        print("No destination selected yet.")


def show_tariffs(base_url: str = "http://localhost:8000"):
    """Print the tariffs the server is using."""
    response = requests.get(f"{base_url}/api/tariffs", timeout=10)
    data = response.json()

    for tariff in data["tariffs"]:
        print(f"  {tariff['mode']:<6} base {tariff['base_fare']:.2f}, per km {tariff['per_km_rate']:.2f}")
    print(f"  Average speed: {data['avg_speed_kmh']} km/h")


def parse_quote_args(args: list) -> tuple:
    """
    Parse LAT LON [DEST_LAT DEST_LON] [MODE] command-line arguments.

    The mode may follow the passenger position directly when there is no
    destination; any trailing argument that is not a number is taken as the mode.

    Returns:
        (passenger, destination, mode) with destination None when not given

    Raises:
        ValueError: If coordinates are not numbers or come in the wrong count
    """
    args = list(args)
    mode = "day"
    if args:
        try:
            float(args[-1])
        except ValueError:
            mode = args.pop().lower()

    if len(args) not in (2, 4):
        raise ValueError("Expected LAT LON or LAT LON DEST_LAT DEST_LON")

    coords = [float(arg) for arg in args]
    passenger = (coords[0], coords[1])
    destination = (coords[2], coords[3]) if len(coords) == 4 else None
    return passenger, destination, mode


def show_usage():
    """Show usage instructions."""
    print("=" * 60)
    print("RIDE QUOTE EXAMPLE")
    print("=" * 60)
    print("\nUsage:")
    print("  python quote_ride.py                              # Show this help")
    print("  python quote_ride.py tariffs                      # Show tariffs")
    print("  python quote_ride.py LAT LON [DEST_LAT DEST_LON] [day|night]")
    print("  python quote_ride.py 35.18 33.37 night             # Driver ETA only, night tariff")
    print("\nExample - Quote via curl:")
    print('  curl -X POST http://localhost:8000/api/quote \\')
    print('    -H "Content-Type: application/json" \\')
    print('    -d \'{"passenger": {"latitude": 35.18, "longitude": 33.37},')
    print('         "destination": {"latitude": 35.1835, "longitude": 33.3639}, "mode": "night"}\'')
    print("\n" + "=" * 60)


if __name__ == "__main__":
    args = sys.argv[1:]

    if args and args[0].lower() == "tariffs":
        show_tariffs()
    elif len(args) >= 2:
        try:
            passenger, destination, mode = parse_quote_args(args)
        except ValueError as e:
            print(f"Invalid input. {e}")
            sys.exit(1)
        quote_via_api(passenger=passenger, destination=destination, mode=mode)
    else:
        show_usage()
