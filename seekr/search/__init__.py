"""
Search package - Query classification, routing and handlers.

Queries are classified into an intent, dispatched to the matching branch
handler, or searched across apps, bookmarks and files as a fallback.
"""

from .intent import Branch, Intent, classify
from .results import ResultItem
from .router import QueryRouter

__all__ = ["Branch", "Intent", "QueryRouter", "ResultItem", "classify"]
