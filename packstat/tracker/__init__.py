"""packstat tracker subpackage: fixed-capacity streaming collections."""

from .top_k import TopKTracker
from .last_k import LastKTracker
from .combined import TopLastTracker

__all__ = [
    "TopKTracker",
    "LastKTracker",
    "TopLastTracker",
]
