"""Test utilities for demo_api applications.

::

    from demo_api.testing import TestClient
"""

from demo_api.testing.client import TestClient

__all__ = ["TestClient"]
