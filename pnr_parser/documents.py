"""
Travel document (SSR DOCS) free-text layouts.

The sender never says which layout it used, so the layout is inferred from
which leading fields are empty:

  A  /P/GBR/123456789/GBR/12JUL64/M/23AUG19/SMITHJR/JONATHON/ROBERT
     /////05MAY02/F//ROBERTS/ELIZABETH-1ROBERTS/ELIZABETH
  B  //P/USA/554416148/USA/06MAY02/F/27SEP21/ROBERTS/ELIZABETH/ANNE
  C  //USA/497994674//17MAR47/M/02NOV16/ELMORE/ERVINMR/DARIN

Not handled (matches A, yields garbage positions, left as is):
  / /   /         /   /GBR/12JUL64/M//JONES/WILLIAMNEVELL

Field positions follow "3.13.1 API - Passenger Travel Document Information"
of AIRIMP.
"""
import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterable, List, Mapping, NamedTuple, Optional

from .models import DocumentVo, PassengerVo, Ssr
from .names import DUPLICATE_MARKER, NormalizedName, normalize_name
from .utils import FIELD_DELIMITER, calculate_age, is_blank, is_empty, parse_doc_date, safe_get, split_free_text

logger = logging.getLogger(__name__)


class DocLayout(enum.Enum):
    A = "A"
    B = "B"
    C = "C"


class FieldMap(NamedTuple):
    document_type: int
    issuance_country: int
    document_number: int
    citizenship_country: int
    dob: int
    gender: int
    expiration_date: int
    last_name: int
    first_name: int
    middle_name: int


_STANDARD = FieldMap(*range(1, 11))

LAYOUT_FIELDS: Mapping[DocLayout, FieldMap] = MappingProxyType({
    DocLayout.A: _STANDARD,
    DocLayout.B: FieldMap(*(i + 1 for i in _STANDARD)),
    DocLayout.C: _STANDARD,
})


def detect_layout(strs: Optional[List[str]]) -> Optional[DocLayout]:
    if not strs:
        return None
    f1 = not is_empty(safe_get(strs, 1))
    f2 = not is_empty(safe_get(strs, 2))
    f4 = not is_empty(safe_get(strs, 4))

    if f1 or not f2:
        return DocLayout.A
    if f2 and f4:
        return DocLayout.B
    if not f4:
        return DocLayout.C
    return None


@dataclass
class ResolvedDocument:
    layout: DocLayout
    document: DocumentVo
    name: NormalizedName
    citizenship_country: Optional[str] = None
    dob: Optional[date] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    # fields that were present but could not be parsed
    bad_fields: List[str] = field(default_factory=list)


def resolve_document(strs: Optional[List[str]], marker: str = DUPLICATE_MARKER) -> Optional[ResolvedDocument]:
    """Map DOCS fields onto a document and passenger details. None if no layout fits."""
    layout = detect_layout(strs)
    if layout is None:
        logger.debug("no document layout matches %r", strs)
        return None
    pos = LAYOUT_FIELDS[layout]

    def get(i: int) -> Optional[str]:
        return safe_get(strs, i)

    out = ResolvedDocument(
        layout=layout,
        document=DocumentVo(
            document_type=get(pos.document_type),
            issuance_country=get(pos.issuance_country),
            document_number=get(pos.document_number),
        ),
        name=NormalizedName(None, None, None),
        citizenship_country=get(pos.citizenship_country),
        gender=get(pos.gender),
    )

    d = get(pos.dob)
    if not is_blank(d):
        out.dob = parse_doc_date(d)
        if out.dob is None:
            logger.warning("unparseable date of birth %r", d)
            out.bad_fields.append("dob")
        else:
            out.age = calculate_age(out.dob)

    d = get(pos.expiration_date)
    if not is_blank(d):
        out.document.expiration_date = parse_doc_date(d)
        if out.document.expiration_date is None:
            logger.warning("unparseable expiration date %r", d)
            out.bad_fields.append("expiration_date")

    out.name = normalize_name(get(pos.last_name), get(pos.first_name), get(pos.middle_name), out.gender, marker)
    return out


def resolve_free_text(free_text: Optional[str], delimiter: str = FIELD_DELIMITER,
                      marker: str = DUPLICATE_MARKER) -> Optional[ResolvedDocument]:
    return resolve_document(split_free_text(free_text, delimiter), marker)


def citizenship_from(strs: Optional[List[str]]) -> Optional[str]:
    layout = detect_layout(strs)
    if layout is None:
        return None
    return safe_get(strs, LAYOUT_FIELDS[layout].citizenship_country)


def backfill_citizenship(p: PassengerVo, ssr_docs: Iterable[Ssr], delimiter: str = FIELD_DELIMITER) -> None:
    """
    Fill a missing citizenship from the other DOCS of the traveler, e.g. an
    alien card sent alongside the passport. First non-empty value wins.
    """
    if not is_blank(p.citizenship_country):
        return
    for ssr in ssr_docs:
        country = citizenship_from(split_free_text(ssr.free_text, delimiter))
        if not is_blank(country):
            logger.debug("citizenship %s taken from secondary DOCS", country)
            p.citizenship_country = country
            return
