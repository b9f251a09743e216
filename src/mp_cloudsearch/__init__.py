"""
mp_cloudsearch – client for CloudSearch-style full-text search domains.

Import path convention::

    from mp_cloudsearch import CloudSearchClient
    from mp_cloudsearch.application.search import compile_filter, SearchOptions
    from mp_cloudsearch.kernel.errors import SearchError
"""

from mp_cloudsearch.application.pagination import ResultCollection
from mp_cloudsearch.application.search import FieldRange, RankSpec, SearchOptions, SortDirection
from mp_cloudsearch.client import ClientMode, CloudSearchClient
from mp_cloudsearch.config.validation import MissingConfigurationError
from mp_cloudsearch.kernel.errors import DocumentUpdateError, SearchError

__version__ = "0.1.0"
__all__ = [
    "ClientMode",
    "CloudSearchClient",
    "DocumentUpdateError",
    "FieldRange",
    "MissingConfigurationError",
    "RankSpec",
    "ResultCollection",
    "SearchError",
    "SearchOptions",
    "SortDirection",
    "__version__",
]
