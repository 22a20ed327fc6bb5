"""CLI layer — the ``cli-support`` argument inspector and its error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``display`` and ``exceptions``; nothing imports from ``cli``
except the entry points.
"""
