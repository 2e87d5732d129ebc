"""Task and column ID comparison and generation."""

import re

TASK_PREFIX = "task-"

_TAIL_RE = re.compile(r"^(.*?)(\d*)$")


def split_id(s: str) -> tuple[str, str]:
    """Split an ID into its prefix and trailing digits.

    "task-12" → ("task-", "12"), "12" → ("", "12"), "todo" → ("todo", "")
    """
    match = _TAIL_RE.match(s)
    return match.group(1), match.group(2)


def compare_ids(left: str, right: str) -> int:
    """Compare two numeric IDs, padding with leading zeros.

    Returns -1 if left < right, 0 if equal, 1 if left > right.
    """
    max_len = max(len(left), len(right))
    left_padded = left.zfill(max_len)
    right_padded = right.zfill(max_len)

    if left_padded < right_padded:
        return -1
    if left_padded > right_padded:
        return 1
    return 0


def max_id(ids: list[str]) -> str | None:
    """Find the highest numeric ID from a list, or None if empty."""
    if not ids:
        return None

    highest = ids[0]
    for id_ in ids[1:]:
        if compare_ids(id_, highest) > 0:
            highest = id_
    return highest


def next_id(existing: list[str], prefix: str = TASK_PREFIX) -> str:
    """Generate an ID one past the highest numeric tail among existing IDs.

    ["task-1", "task-9"] → "task-10". IDs without a numeric tail are
    ignored for numbering but never returned.
    """
    tails = [tail.lstrip("0") or "0" for _, tail in map(split_id, existing) if tail]
    highest = max_id(tails)
    n = int(highest) + 1 if highest is not None else 1
    taken = set(existing)
    while f"{prefix}{n}" in taken:
        n += 1
    return f"{prefix}{n}"


def unique_key(desired: str, existing: set[str]) -> str:
    """Return desired if unused, otherwise append -1, -2, etc."""
    if desired not in existing:
        return desired
    n = 1
    while f"{desired}-{n}" in existing:
        n += 1
    return f"{desired}-{n}"
