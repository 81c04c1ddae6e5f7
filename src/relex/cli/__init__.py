"""CLI package.

The ``cli`` sub-package contains the Click application.  It should
import only from the public API of the sibling packages, never from
their internal modules directly.
"""
from __future__ import annotations
