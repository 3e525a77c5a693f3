"""Skip/limit windowing over an already filtered and ordered sequence."""

from __future__ import annotations

from typing import Sequence, TypeVar

from docstore.domain.exceptions import InvalidArgumentError

T = TypeVar("T")


def paginate(
    documents: Sequence[T],
    skip: int | None = None,
    limit: int | None = None,
) -> list[T]:
    """Drop the first ``skip`` items, then keep at most ``limit``.

    Skip always runs before limit. ``None`` disables either step.

    Raises:
        InvalidArgumentError: If a count is negative.
    """
    if skip is not None and skip < 0:
        raise InvalidArgumentError(f"skip must be non-negative, got {skip}")
    if limit is not None and limit < 0:
        raise InvalidArgumentError(f"limit must be non-negative, got {limit}")

    window = list(documents)
    if skip:
        window = window[skip:]
    if limit is not None:
        window = window[:limit]
    return window
