"""Facilities codec.

Facilities reach the service either as a list of tags, as JSON array text, or
as a comma-separated string (older rows). ``decode_facilities`` reduces all of
them to one ordered list of non-empty tags; ``encode_facilities`` always
writes the JSON array form, which is what the search filter matches against.
"""

import json
from typing import Any, List, Optional


def _clean(tags) -> List[str]:
    result = []
    for tag in tags:
        if tag is None:
            continue
        tag = str(tag).strip()
        if tag:
            result.append(tag)
    return result


def decode_facilities(value: Any) -> List[str]:
    if not value:
        return []

    if isinstance(value, (list, tuple)):
        return _clean(value)

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                parsed = json.loads(text)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return _clean(parsed)
        return _clean(text.split(","))

    return []


def encode_facilities(value: Any) -> str:
    return json.dumps(decode_facilities(value))


def parse_facility_filter(value: Optional[str]) -> List[str]:
    """Split the comma-joined ``facilities`` query parameter into tags."""
    if not value:
        return []
    return _clean(value.split(","))
