"""Infrastructure adapters for builder progress reporting.

Adapters exported for simplified imports.
"""

from .row_progress import LoggingRowProgress, TqdmRowProgress

__all__ = ["LoggingRowProgress", "TqdmRowProgress"]
