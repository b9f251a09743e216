"""Testing generators – property-based strategies."""
from mp_cloudsearch.testing.generators.strategies import (
    empty_value_strategy,
    field_name_strategy,
    filter_mapping_strategy,
    filter_value_strategy,
)

__all__ = [
    "empty_value_strategy",
    "field_name_strategy",
    "filter_mapping_strategy",
    "filter_value_strategy",
]
