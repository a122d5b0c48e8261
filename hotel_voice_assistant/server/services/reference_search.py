"""
Reference lookup: find the reference material a piece of conversation mentions.
"""

from __future__ import annotations

from typing import Iterable, List

from hotel_voice_assistant.core.database.entities import ReferenceItem


def match_references(items: Iterable[ReferenceItem], content: str) -> List[ReferenceItem]:
    """
    Return the items with a keyword found in ``content`` (case-insensitive).

    Items keep their input order; later items sharing a url with an earlier
    match are dropped.
    """
    haystack = (content or "").lower()
    if not haystack.strip():
        return []
    matched: List[ReferenceItem] = []
    seen_urls = set()
    for item in items:
        if item.url in seen_urls:
            continue
        if any(keyword and keyword.lower() in haystack for keyword in item.keywords or []):
            matched.append(item)
            seen_urls.add(item.url)
    return matched
