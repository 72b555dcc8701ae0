"""Test utilities for urlshort handlers::

    from urlshort.testing import TestClient
"""

from urlshort.testing.client import TestClient

__all__ = ["TestClient"]
