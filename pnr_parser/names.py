"""
Name normalization for PNR names.

Reservation systems glue honorifics onto the given name (``ERVINMR``,
``MRJOHN``) and generational suffixes onto the surname (``SMITHJR``). These are
split off into ``title`` and ``suffix``.
"""
import logging
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# Scan order matters: the first honorific that fits wins.
HONORIFICS: Tuple[str, ...] = ("MR", "MRS", "MS", "DR", "MISS", "SIR", "MADAM", "MAYOR", "PRESIDENT")
SUFFIXES: Tuple[str, ...] = ("JR", "SR")

# marks a duplicate name entry in some feeds: ELIZABETH-1ROBERTS
DUPLICATE_MARKER = "-1"

FEMALE = "F"


class NormalizedName(NamedTuple):
    last_name: Optional[str]
    first_name: Optional[str]
    middle_name: Optional[str]
    title: Optional[str] = None
    suffix: Optional[str] = None


def _rejects(honorific: str, gender: Optional[str]) -> bool:
    # MR inside a female given name is part of the name, not a title
    return honorific == "MR" and (gender or "").upper() == FEMALE


def split_honorific(first: Optional[str], gender: Optional[str] = None) -> Tuple[Optional[str], Optional[str]]:
    """Return (title, first name). Title is None when no honorific applies."""
    if first is None:
        return None, None
    for honorific in HONORIFICS:
        if first.startswith(honorific):
            remainder = first[len(honorific):].strip()
        elif first.endswith(honorific):
            remainder = first[:-len(honorific)].strip()
        else:
            continue
        if _rejects(honorific, gender):
            logger.debug("skipping %s for female given name %r", honorific, first)
            continue
        return honorific, remainder
    return None, first


def split_suffix(last: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return (suffix, last name). A repeated suffix (SMITHJRJR) is removed entirely."""
    if last is None:
        return None, None
    for suffix in SUFFIXES:
        if last.endswith(suffix):
            while last.endswith(suffix):
                last = last[:-len(suffix)].strip()
            return suffix, last
    return None, last


def strip_duplicate_marker(name: Optional[str], marker: str = DUPLICATE_MARKER) -> Optional[str]:
    if not name or marker not in name:
        return name
    return name[:name.index(marker)]


def normalize_name(last: Optional[str], first: Optional[str], middle: Optional[str] = None,
                   gender: Optional[str] = None, marker: str = DUPLICATE_MARKER) -> NormalizedName:
    title, first_name = split_honorific(first, gender)
    suffix, last_name = split_suffix(last)
    return NormalizedName(
        last_name=strip_duplicate_marker(last_name, marker),
        first_name=strip_duplicate_marker(first_name, marker),
        middle_name=strip_duplicate_marker(middle, marker),
        title=title,
        suffix=suffix,
    )
