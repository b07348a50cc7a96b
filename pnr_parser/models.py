from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any, Dict, List, Optional

# =========================
# Segment inputs
# =========================

@dataclass(frozen=True)
class Ssr:
    """Special service request; `type_of_request` is DOCS, DOCO, DOCA, FQTV, ..."""
    type_of_request: Optional[str] = None
    free_text: Optional[str] = None


@dataclass(frozen=True)
class TravelerDetails:
    traveler_reference_number: Optional[str] = None
    traveler_given_name: Optional[str] = None


@dataclass(frozen=True)
class Tif:
    traveler_surname: Optional[str] = None
    traveler_details: List[TravelerDetails] = field(default_factory=list)


@dataclass(frozen=True)
class Add:
    address_type: Optional[str] = None
    street_number_and_name: Optional[str] = None
    city: Optional[str] = None
    state_or_province_code: Optional[str] = None
    country_code: Optional[str] = None
    postal_code: Optional[str] = None
    telephone: Optional[str] = None
    email: Optional[str] = None

# =========================
# Parsed value objects
# =========================

@dataclass
class DocumentVo:
    document_type: Optional[str] = None
    document_number: Optional[str] = None
    issuance_country: Optional[str] = None
    issuance_date: Optional[date] = None
    expiration_date: Optional[date] = None


@dataclass
class PassengerVo:
    passenger_type: Optional[str] = None
    title: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    suffix: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[date] = None
    age: Optional[int] = None
    citizenship_country: Optional[str] = None
    traveler_reference_number: Optional[str] = None
    documents: List[DocumentVo] = field(default_factory=list)

    def add_document(self, doc: DocumentVo) -> None:
        self.documents.append(doc)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AddressVo:
    type: Optional[str] = None
    line1: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


@dataclass
class PhoneVo:
    number: Optional[str] = None
