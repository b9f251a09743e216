"""Application pagination – paginated search results."""
from mp_cloudsearch.application.pagination.collection import ResultCollection

__all__ = ["ResultCollection"]
