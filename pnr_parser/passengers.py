import logging
from typing import List, Optional, Sequence

from .config import DEFAULTS, ParserConfig
from .documents import backfill_citizenship, resolve_document
from .models import DocumentVo, PassengerVo, Ssr, Tif
from .names import normalize_name, strip_duplicate_marker
from .utils import is_blank, split_free_text

logger = logging.getLogger(__name__)


def select_best_ssr(ssr_docs: Sequence[Ssr]) -> Optional[Ssr]:
    """Longest free text wins; on a tie the earlier segment is kept."""
    best: Optional[Ssr] = None
    for ssr in ssr_docs:
        if ssr.free_text is None:
            continue
        if best is None or len(ssr.free_text) > len(best.free_text):
            best = ssr
    return best


def _apply_document(p: PassengerVo, ssr: Ssr, config: ParserConfig) -> DocumentVo:
    resolved = resolve_document(split_free_text(ssr.free_text, config.field_delimiter), config.duplicate_marker)
    if resolved is None:
        logger.info("DOCS free text fits no layout: %r", ssr.free_text)
        return DocumentVo()
    if resolved.bad_fields:
        logger.info("partial DOCS data, unset: %s", ", ".join(resolved.bad_fields))

    p.citizenship_country = resolved.citizenship_country
    p.dob = resolved.dob
    p.age = resolved.age
    p.gender = resolved.gender
    name = resolved.name
    p.last_name, p.first_name, p.middle_name = name.last_name, name.first_name, name.middle_name
    p.title, p.suffix = name.title, name.suffix
    return resolved.document


def _merge_traveler_info(p: PassengerVo, tif: Tif, config: ParserConfig) -> None:
    td = tif.traveler_details[0]
    p.traveler_reference_number = td.traveler_reference_number

    tmp = normalize_name(tif.traveler_surname, td.traveler_given_name, None, p.gender, config.duplicate_marker)
    # DOCS names take priority, TIF only fills the gaps
    if not is_blank(tif.traveler_surname) and is_blank(p.last_name):
        p.last_name = tmp.last_name
    if not is_blank(td.traveler_given_name) and is_blank(p.first_name):
        p.first_name = tmp.first_name
    if tmp.title:
        p.title = tmp.title
    if tmp.suffix:
        p.suffix = tmp.suffix


def create_passenger(ssr_docs: Sequence[Ssr], tif: Optional[Tif], config: ParserConfig = DEFAULTS) -> Optional[PassengerVo]:
    """
    Build the passenger of one traveler group (TIF plus its SSR DOCS).

    The DOCS segment with the most free text supplies document, birth date,
    gender and names; the TIF supplies the traveler reference number and
    fills names the DOCS left blank. Returns None when neither has anything
    to contribute.
    """
    has_tif = tif is not None and bool(tif.traveler_details)
    best = select_best_ssr(ssr_docs)
    if best is None and not has_tif:
        return None

    p = PassengerVo(passenger_type=config.passenger_type)
    doc = _apply_document(p, best, config) if best is not None else DocumentVo()
    backfill_citizenship(p, ssr_docs, config.field_delimiter)

    if not is_blank(doc.document_type) and not is_blank(doc.document_number):
        if is_blank(p.citizenship_country):
            p.citizenship_country = doc.issuance_country
        p.add_document(doc)
    elif best is not None:
        logger.debug("discarding incomplete document type=%r number=%r", doc.document_type, doc.document_number)

    if has_tif:
        _merge_traveler_info(p, tif, config)

    p.middle_name = strip_duplicate_marker(p.middle_name, config.duplicate_marker)
    p.last_name = strip_duplicate_marker(p.last_name, config.duplicate_marker)
    p.first_name = strip_duplicate_marker(p.first_name, config.duplicate_marker)
    return p


def match_traveler(surname: Optional[str], given_name: Optional[str], passengers: List[PassengerVo]) -> PassengerVo:
    """Passenger with exactly this last and first name, else the first passenger."""
    if not passengers:
        raise ValueError("no passengers to match against")
    for pax in passengers:
        if surname is not None and surname == pax.last_name and given_name == pax.first_name:
            return pax
    return passengers[0]


def get_pax_from_tif(tif: Optional[Tif], passengers: List[PassengerVo]) -> PassengerVo:
    if tif is None or not tif.traveler_details:
        return match_traveler(None, None, passengers)
    return match_traveler(tif.traveler_surname, tif.traveler_details[0].traveler_given_name, passengers)
