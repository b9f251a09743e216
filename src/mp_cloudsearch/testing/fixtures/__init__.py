"""Testing fixtures – pytest plugin.

Enable in ``conftest.py``::

    pytest_plugins = ["mp_cloudsearch.testing.fixtures"]
"""
from mp_cloudsearch.testing.fixtures.client import fake_transport, live_client, sandbox_client

__all__ = ["fake_transport", "live_client", "sandbox_client"]
