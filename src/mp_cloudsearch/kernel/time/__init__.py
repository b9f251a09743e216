"""Kernel time – UTC conversion helpers."""
from mp_cloudsearch.kernel.time.iso import ISO_UTC_FORMAT, as_utc, is_temporal, to_utc_iso

__all__ = ["ISO_UTC_FORMAT", "as_utc", "is_temporal", "to_utc_iso"]
