"""Unit tests for integer-encoded coordinates."""

from __future__ import annotations

import pytest

from mp_cloudsearch.application.search import coordinate_box, degrees_to_int, int_to_degrees


class TestCoordinateEncoding:
    def test_round_trip(self) -> None:
        encoded = degrees_to_int(lat=45.52, lng=122.68)
        decoded = int_to_degrees(encoded["lat"], encoded["lng"])
        assert decoded["lat"] == pytest.approx(45.52, abs=1e-6)
        assert decoded["lng"] == pytest.approx(122.68, abs=1e-3)

    def test_encoded_values_are_non_negative_integers(self) -> None:
        encoded = degrees_to_int(lat=-89.0, lng=-179.0)
        assert all(isinstance(v, int) and v >= 0 for v in encoded.values())


class TestCoordinateBox:
    def test_known_box(self) -> None:
        assert coordinate_box(meters=5000, lat=45.52, lng=122.6819) == {
            "lat": "2505771415..2506771417",
            "lng": "2358260777..2359261578",
        }

    def test_box_spans_the_latitude(self) -> None:
        box = coordinate_box(meters=5000, lat=45.52, lng=122.68)
        center = degrees_to_int(lat=45.52, lng=122.68)
        bottom, top = (int(v) for v in box["lat"].split(".."))
        left, right = (int(v) for v in box["lng"].split(".."))
        assert bottom < center["lat"] < top
        assert left < right

    def test_zero_meters_is_a_point(self) -> None:
        box = coordinate_box(meters=0, lat=10.0, lng=20.0)
        low, high = box["lat"].split("..")
        assert low == high

    def test_box_is_a_valid_filter_range(self) -> None:
        from mp_cloudsearch.application.search import compile_filter

        box = coordinate_box(meters=100, lat=1.0, lng=2.0)
        assert compile_filter({"and": box}) == f"(and lat:{box['lat']} lng:{box['lng']})"

    def test_negative_distance(self) -> None:
        with pytest.raises(ValueError):
            coordinate_box(meters=-1, lat=0.0, lng=0.0)
