from __future__ import annotations

from models.check import Check

DOWN_TAG = "down"


def compose_tags(check: Check, include_hostname: bool = False) -> tuple[str, ...]:
    """Build the sorted tag set attached to every outage annotation of ``check``.

    Duplicates coming from the provider are kept.
    """
    tags = [DOWN_TAG]
    if include_hostname:
        tags.append(check.hostname)
    tags.extend(check.tags)
    return tuple(sorted(tags))
