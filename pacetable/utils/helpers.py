"""
Utility functions for PaceTable
"""

import math

# Distances with a conventional name (metres)
NAMED_DISTANCES = {
    1609: "Mile",
    21097: "Half Marathon",
    42195: "Marathon"
}


def format_time(seconds: float, with_centiseconds: bool = False) -> str:
    """
    Format a duration in seconds the way race results are written

    Args:
        seconds: Duration in seconds
        with_centiseconds: Append hundredths after the seconds

    Returns:
        Formatted string (e.g., '09"', '2\'05"', '1h02\'03"', '10"45')
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    full_seconds = int(seconds % 60)
    centiseconds = int(round((seconds - math.floor(seconds)) * 100, 6))

    formatted = ""
    if hours > 0:
        formatted += f"{hours}h"
    if minutes > 0 or hours > 0:
        formatted += f"{minutes:02d}'" if hours > 0 else f"{minutes}'"
    formatted += f'{full_seconds:02d}"'

    if with_centiseconds:
        formatted += f"{centiseconds:02d}"

    return formatted


def format_pace(seconds_per_km: float) -> str:
    """
    Format a pace in seconds per km

    Args:
        seconds_per_km: Pace in seconds per kilometre

    Returns:
        Formatted string (e.g., '6\'00"', or '5\'59.5"' for fractional seconds)
    """
    minutes = int(seconds_per_km // 60)
    seconds = round(seconds_per_km % 60, 1)
    if float(seconds).is_integer():
        return f"{minutes}'{int(seconds):02d}\""
    return f"{minutes}'{seconds:04.1f}\""


def format_speed(speed: float) -> str:
    """Format a speed in km/h with two decimals"""
    return f"{speed:.2f}"


def pace_to_speed(seconds_per_km: float) -> float:
    """Convert a pace (s/km) to a speed (km/h)"""
    return 3600 / seconds_per_km if seconds_per_km > 0 else 0.0


def speed_to_pace(speed_kmh: float) -> float:
    """Convert a speed (km/h) to a pace (s/km)"""
    return 3600 / speed_kmh if speed_kmh > 0 else 0.0


def format_distance(metres: int) -> str:
    """
    Get display name for a distance

    Args:
        metres: Distance in metres

    Returns:
        Human readable name (e.g., "400m", "5km", "Marathon")
    """
    if metres in NAMED_DISTANCES:
        return NAMED_DISTANCES[metres]
    if metres >= 1000 and metres % 1000 == 0:
        return f"{metres // 1000}km"
    if metres >= 1000:
        return f"{metres / 1000:g}km"
    return f"{metres}m"
