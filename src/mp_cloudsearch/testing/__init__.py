"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_cloudsearch.testing.fixtures"]
"""

from mp_cloudsearch.testing.fakes import FakeTransport, RecordedRequest, search_response

__all__ = ["FakeTransport", "RecordedRequest", "search_response"]
