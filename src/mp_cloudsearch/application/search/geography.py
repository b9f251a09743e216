"""Application search – integer-encoded geographic coordinates.

Search domains without a native lat/lon field type store coordinates as
unsigned integers: degrees are shifted by 180 and scaled to centimetres
along the earth's surface.  :func:`coordinate_box` returns range literals
that can be dropped straight into a filter::

    client.search(filter={"and": coordinate_box(meters=5000, lat=45.52, lng=122.68)})
"""
from __future__ import annotations

import math

__all__ = [
    "EARTH_RADIUS",
    "METERS_PER_DEGREE_OF_LATITUDE",
    "coordinate_box",
    "degrees_to_int",
    "int_to_degrees",
]

EARTH_RADIUS = 6_367_444
METERS_PER_DEGREE_OF_LATITUDE = 111_133


def _meters_per_degree_of_longitude(latitude: float) -> float:
    return METERS_PER_DEGREE_OF_LATITUDE * math.cos(math.radians(latitude))


def _latitude_to_int(degrees: float) -> int:
    return round((degrees + 180) * METERS_PER_DEGREE_OF_LATITUDE * 100)


def _latitude_to_degrees(value: int) -> float:
    return value / METERS_PER_DEGREE_OF_LATITUDE / 100.0 - 180


def _longitude_to_int(degrees: float, latitude: float) -> int:
    return round((degrees + 180) * _meters_per_degree_of_longitude(latitude) * 100)


def _longitude_to_degrees(value: int, latitude: float) -> float:
    return value / _meters_per_degree_of_longitude(latitude) / 100.0 - 180


def degrees_to_int(lat: float, lng: float) -> dict[str, int]:
    """Encode a coordinate pair; longitude scaling depends on latitude."""
    return {"lat": _latitude_to_int(lat), "lng": _longitude_to_int(lng, lat)}


def int_to_degrees(lat: int, lng: int) -> dict[str, float]:
    """Decode a pair produced by :func:`degrees_to_int`."""
    latitude = _latitude_to_degrees(lat)
    return {"lat": latitude, "lng": _longitude_to_degrees(lng, latitude)}


def coordinate_box(meters: float, lat: float, lng: float) -> dict[str, str]:
    """Return ``{"lat": "a..b", "lng": "c..d"}`` covering *meters* around a point.

    Longitudes are encoded at the southern edge of the box.
    """
    if meters < 0:
        raise ValueError("meters must be >= 0")
    change_in_latitude = math.degrees(meters / EARTH_RADIUS)
    change_in_longitude = math.degrees(meters / (EARTH_RADIUS * math.cos(math.radians(lat))))

    bottom = _latitude_to_int(lat - change_in_latitude)
    top = _latitude_to_int(lat + change_in_latitude)
    left = _longitude_to_int(lng - change_in_longitude, lat - change_in_latitude)
    right = _longitude_to_int(lng + change_in_longitude, lat - change_in_latitude)
    return {"lat": f"{bottom}..{top}", "lng": f"{left}..{right}"}
