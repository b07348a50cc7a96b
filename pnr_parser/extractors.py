from typing import Optional
import logging
import regex as re

from .models import Add, AddressVo, DocumentVo, PhoneVo, Ssr
from .utils import FIELD_DELIMITER, is_blank, parse_doc_date, prep_telephone_number, safe_get, split_free_text

logger = logging.getLogger(__name__)

# marks the phone number in an LTS free text: ... APM 4155551212/EN
PHONE_MARKER = "APM"

# =================
# Visa (SSR DOCO)
# =================

def create_visa(ssr: Ssr, delimiter: str = FIELD_DELIMITER) -> Optional[DocumentVo]:
    strs = split_free_text(ssr.free_text, delimiter)
    if not strs:
        return None

    visa = DocumentVo()
    # index 1 place of birth, index 4 city of issue
    visa.document_type = safe_get(strs, 2)
    visa.document_number = safe_get(strs, 3)
    d = safe_get(strs, 5)
    if not is_blank(d):
        visa.issuance_date = parse_doc_date(d)
        if visa.issuance_date is None:
            logger.warning("unparseable visa issuance date %r", d)
    visa.issuance_country = safe_get(strs, 6)
    return visa

# ====================
# Address (SSR DOCA)
# ====================

def create_address(ssr: Ssr, delimiter: str = FIELD_DELIMITER) -> Optional[AddressVo]:
    """
    SSR+DOCA:HK:1:TZ:::::/D/AUS/13 SHORE AVENUE/BROADBEACH/QLD/4215+::43577'
    """
    strs = split_free_text(ssr.free_text, delimiter)
    if strs is None:
        return None

    return AddressVo(
        country=safe_get(strs, 2),
        line1=safe_get(strs, 3),
        city=safe_get(strs, 4),
        state=safe_get(strs, 5),
        postal_code=safe_get(strs, 6),
    )

def create_address_from_add(add: Add) -> AddressVo:
    return AddressVo(
        type=add.address_type,
        line1=add.street_number_and_name,
        city=add.city,
        state=add.state_or_province_code,
        country=add.country_code,
        postal_code=add.postal_code,
        phone_number=prep_telephone_number(add.telephone),
        email=add.email,
    )

# =========================
# Phones, frequent flyer
# =========================

def create_phone(number: Optional[str]) -> PhoneVo:
    return PhoneVo(number=prep_telephone_number(number))

def get_phone_number_from_lts(phone_text: str, delimiter: str = FIELD_DELIMITER) -> str:
    phone_text = re.sub(r"\s+", "", phone_text or "")
    i = phone_text.find(PHONE_MARKER)
    if i == -1:
        logger.debug("no %s marker in %r", PHONE_MARKER, phone_text)
        return phone_text
    phone_text = phone_text[i + len(PHONE_MARKER):]
    if phone_text.find(delimiter) > 0:
        phone_text = phone_text[:phone_text.find(delimiter)]
    return phone_text

def _last_dashed_token(free_text: Optional[str], delimiter: str) -> Optional[str]:
    # last TOKEN-xxx wins
    out = None
    for tok in (free_text or "").split(delimiter):
        tok = tok.strip()
        if tok.find("-") > 0:
            out = tok[:tok.find("-")]
    return out

def get_frequent_flyer_from_free_text(free_text: Optional[str], delimiter: str = FIELD_DELIMITER) -> Optional[str]:
    return _last_dashed_token(free_text, delimiter)

def get_phone_number_from_free_text(free_text: Optional[str], delimiter: str = FIELD_DELIMITER) -> Optional[str]:
    return _last_dashed_token(free_text, delimiter)

# ===========
# Bag tags
# ===========

def get_bag_tag_from_element(tag_number: Optional[str], counter: int) -> str:
    """Tag id of the `counter`-th bag of a consecutive run starting at tag_number."""
    if is_blank(tag_number):
        return "0"
    tag_number = re.sub(r"\s", "", tag_number)
    if tag_number.isdigit():
        return str(int(tag_number) + counter)
    return f"{tag_number}{counter}"
