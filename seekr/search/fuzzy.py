"""
Approximate Matcher - Typo-tolerant ranking of candidate records.

Each searchable field is scored with rapidfuzz partial_ratio (best aligned
substring, normalized edit distance), or plain ratio when the query is
longer than the field, and scaled by the field weight. A
candidate's distance is 1 - its best weighted score; 0 is a perfect match.
"""

from typing import Any, Mapping, Sequence, TypeVar

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

T = TypeVar("T")

# Name hits count more than description hits
DEFAULT_FIELDS = {"name": 1.0, "description": 0.8}


def _field_value(candidate: Any, field: str) -> str:
    if isinstance(candidate, Mapping):
        value = candidate.get(field)
    else:
        value = getattr(candidate, field, None)
    return value if isinstance(value, str) else ""


def distance(candidate: Any, query: str, fields: Mapping[str, float] = DEFAULT_FIELDS) -> float:
    """
    Distance between a candidate and the query.

    Args:
        candidate: Object or mapping exposing the weighted fields
        query: Search text
        fields: Field name -> weight (0..1)

    Returns:
        Value in [0, 1]; lower is better
    """
    best = 0.0
    for field, weight in fields.items():
        value = _field_value(candidate, field)
        if not value:
            continue
        best = max(best, _similarity(query, value) * weight)
    return 1.0 - best


def _similarity(query: str, value: str) -> float:
    """
    Similarity in [0, 1] of the query to one field value.

    partial_ratio is used only while the query fits inside the value; a
    longer query is compared whole with ratio.
    """
    query = default_process(query)
    value = default_process(value)
    if len(query) > len(value):
        return fuzz.ratio(query, value) / 100
    return fuzz.partial_ratio(query, value) / 100


def match(
    candidates: Sequence[T],
    query: str,
    fields: Mapping[str, float] = DEFAULT_FIELDS,
    threshold: float = 0.3,
) -> list[T]:
    """
    Filter and rank candidates by approximate match.

    An empty query returns the candidates unchanged. Otherwise candidates
    farther than threshold are dropped and the rest are sorted best first;
    equal distances keep their input order.
    """
    if not query:
        return list(candidates)

    scored = []
    for candidate in candidates:
        d = distance(candidate, query, fields)
        if d <= threshold:
            scored.append((d, candidate))

    scored.sort(key=lambda pair: pair[0])
    return [candidate for _d, candidate in scored]
