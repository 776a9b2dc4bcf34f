"""Header comparison and column position matching."""

import re
from typing import Optional, Sequence, Union

from .models import HeaderCompareOptions

# Mapping value for an old column with no counterpart
NOT_FOUND = -1

_WHITESPACE_RUN = re.compile(r"\s+")

OptionsLike = Optional[Union[HeaderCompareOptions, dict]]


def normalize_header(header: str, options: OptionsLike = None) -> str:
    """
    Normalize a header label for comparison.

    Args:
        header: The header text
        options: Header compare options

    Returns:
        Trimmed label with single spaces, lower-cased if ignore_case is set
    """
    opts = HeaderCompareOptions.coerce(options)
    normalized = header

    if opts.trim_whitespace:
        normalized = normalized.strip()
    if opts.normalize_whitespace:
        normalized = _WHITESPACE_RUN.sub(" ", normalized)
    if opts.ignore_case:
        normalized = normalized.lower()

    return normalized


def headers_equal(first: str, second: str, options: OptionsLike = None) -> bool:
    """Compare two header labels after normalization."""
    opts = HeaderCompareOptions.coerce(options)
    return normalize_header(first, opts) == normalize_header(second, opts)


def find_header_index(
    headers: Sequence[str], target: str, options: OptionsLike = None
) -> int:
    """Return the first index whose header equals target, or -1."""
    opts = HeaderCompareOptions.coerce(options)
    normalized_target = normalize_header(target, opts)

    for index, header in enumerate(headers):
        if normalize_header(header, opts) == normalized_target:
            return index

    return NOT_FOUND


def header_exists(
    headers: Sequence[str], target: str, options: OptionsLike = None
) -> bool:
    return find_header_index(headers, target, options) != NOT_FOUND


def _claim_matches(
    old_headers: Sequence[str],
    new_headers: Sequence[str],
    opts: HeaderCompareOptions,
) -> tuple[list[int], set[int]]:
    """
    Pair old headers with new headers left to right.

    Each old header claims the first equal new header that no earlier old
    header has claimed, so duplicate labels pair up in order.

    Returns:
        (mapping, claimed new indices)
    """
    normalized_new = [normalize_header(header, opts) for header in new_headers]
    claimed: set[int] = set()
    mapping: list[int] = []

    for header in old_headers:
        normalized = normalize_header(header, opts)
        match = NOT_FOUND
        for new_index, candidate in enumerate(normalized_new):
            if new_index not in claimed and candidate == normalized:
                match = new_index
                break
        if match != NOT_FOUND:
            claimed.add(match)
        mapping.append(match)

    return mapping, claimed


def create_header_position_mapping(
    old_headers: Sequence[str],
    new_headers: Sequence[str],
    options: OptionsLike = None,
) -> list[int]:
    """
    Map each old column index to its new column index.

    Args:
        old_headers: Headers before the change
        new_headers: Headers after the change
        options: Header compare options

    Returns:
        List of length len(old_headers); entry i is the new index of old
        column i, or -1 if the column was removed
    """
    opts = HeaderCompareOptions.coerce(options)
    mapping, _ = _claim_matches(old_headers, new_headers, opts)
    return mapping


def find_deleted_header_indices(
    old_headers: Sequence[str],
    new_headers: Sequence[str],
    options: OptionsLike = None,
) -> list[int]:
    """
    Find old columns with no remaining counterpart in the new headers.

    Returns:
        Ascending old-space indices
    """
    mapping = create_header_position_mapping(old_headers, new_headers, options)
    return [index for index, target in enumerate(mapping) if target == NOT_FOUND]


def find_added_header_indices(
    old_headers: Sequence[str],
    new_headers: Sequence[str],
    options: OptionsLike = None,
) -> list[int]:
    """
    Find new columns that no old header was matched to.

    Each old header pairs with at most one new header, so a label that
    appears more often in new_headers than in old_headers reports the
    surplus copies as added: ``(["A"], ["A", "A"])`` gives ``[1]``. This
    keeps the result consistent with create_header_position_mapping.

    Returns:
        Ascending new-space indices
    """
    opts = HeaderCompareOptions.coerce(options)
    _, claimed = _claim_matches(old_headers, new_headers, opts)
    return [index for index in range(len(new_headers)) if index not in claimed]
