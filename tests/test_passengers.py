from datetime import date
import pytest
from pnr_parser.config import ParserConfig
from pnr_parser.models import PassengerVo, Ssr, Tif, TravelerDetails
from pnr_parser.passengers import create_passenger, get_pax_from_tif, match_traveler, select_best_ssr

PASSPORT = "/P/GBR/123456789/GBR/12JUL64/M/23AUG19/SMITHJR/JONATHON/ROBERT"
SHORT = "/P/GBR/987/GBR/12JUL64/M/23AUG19/SMITH/JON"

def tif(surname="SMITH", given="JONATHON", ref="1"):
    return Tif(traveler_surname=surname, traveler_details=[TravelerDetails(ref, given)])

def test_select_best_ssr_longest_regardless_of_order():
    a, b = Ssr("DOCS", SHORT), Ssr("DOCS", PASSPORT)
    assert select_best_ssr([a, b]) is b
    assert select_best_ssr([b, a]) is b
    assert select_best_ssr([Ssr("DOCS", None), a]) is a
    assert select_best_ssr([Ssr("DOCS", None)]) is None

def test_select_best_ssr_tie_keeps_first():
    a, b = Ssr("DOCS", "/P/GBR/1"), Ssr("DOCS", "/P/USA/2")
    assert select_best_ssr([a, b]) is a

def test_create_passenger_from_best_docs():
    p = create_passenger([Ssr("DOCS", SHORT), Ssr("DOCS", PASSPORT)], tif())
    assert p.passenger_type == "P"
    assert (p.last_name, p.first_name, p.middle_name, p.suffix) == ("SMITH", "JONATHON", "ROBERT", "JR")
    assert p.dob == date(1964, 7, 12)
    assert p.gender == "M"
    assert p.citizenship_country == "GBR"
    assert p.traveler_reference_number == "1"
    assert len(p.documents) == 1
    doc = p.documents[0]
    assert (doc.document_type, doc.document_number, doc.issuance_country) == ("P", "123456789", "GBR")
    assert doc.expiration_date == date(2019, 8, 23)

def test_citizenship_backfilled_from_secondary_docs():
    primary = Ssr("DOCS", "/P/GBR/123456789//12JUL64/M/23AUG19/SMITH/JONATHON/ROBERT")
    alien_card = Ssr("DOCS", "/C/USA/A12345/FRA")
    p = create_passenger([alien_card, primary], tif())
    assert p.citizenship_country == "FRA"
    assert p.documents[0].document_number == "123456789"

def test_citizenship_defaults_to_issuing_country():
    p = create_passenger([Ssr("DOCS", "/P/GBR/123456789//12JUL64/M/23AUG19/SMITH/JOHN")], tif())
    assert p.citizenship_country == "GBR"

def test_partial_document_is_discarded():
    p = create_passenger([Ssr("DOCS", "/P/GBR//DEU/12JUL64/M/23AUG19/SMITH/JOHN")], tif())
    assert p.documents == []
    assert p.citizenship_country == "DEU"
    assert p.dob == date(1964, 7, 12)

def test_docs_names_win_over_tif():
    p = create_passenger([Ssr("DOCS", PASSPORT)], tif("JONES", "WILLIAM"))
    assert (p.last_name, p.first_name) == ("SMITH", "JONATHON")

def test_tif_fills_blank_names_and_title():
    p = create_passenger([Ssr("DOCS", "/P/GBR/123456789/GBR/12JUL64/M/23AUG19/SMITH")], tif("SMITH", "JOHNMR"))
    assert p.last_name == "SMITH"
    assert p.first_name == "JOHN"
    assert p.title == "MR"

def test_tif_does_not_assign_mr_for_female():
    p = create_passenger([Ssr("DOCS", "/P/GBR/1/GBR/12JUL64/F/23AUG19/JONES")], tif("JONES", "MRJANE"))
    assert p.first_name == "MRJANE"
    assert p.title is None

def test_duplicate_marker_removed_from_merged_names():
    p = create_passenger([Ssr("DOCS", "/////05MAY02/F//ROBERTS")], tif("ROBERTS", "ELIZABETH-1ROBERTS"))
    assert p.first_name == "ELIZABETH"
    assert p.documents == []

def test_tif_reference_attached_without_docs():
    p = create_passenger([], tif("DOE", "JANE", "7"))
    assert p.traveler_reference_number == "7"
    assert (p.last_name, p.first_name) == ("DOE", "JANE")
    assert p.documents == []
    p = create_passenger([Ssr("DOCS", None)], tif("DOE", "JANE", "8"))
    assert p.traveler_reference_number == "8"

def test_nothing_to_build():
    assert create_passenger([Ssr("DOCS", None)], Tif("DOE", [])) is None
    assert create_passenger([], None) is None

def test_docs_without_tif():
    p = create_passenger([Ssr("DOCS", PASSPORT)], None)
    assert p.traveler_reference_number is None
    assert p.last_name == "SMITH"

def test_configured_passenger_type():
    p = create_passenger([Ssr("DOCS", PASSPORT)], tif(), ParserConfig(passenger_type="C"))
    assert p.passenger_type == "C"

def test_match_traveler_exact_then_first():
    a = PassengerVo(last_name="SMITH", first_name="JOHN")
    b = PassengerVo(last_name="DOE", first_name="JANE")
    assert match_traveler("DOE", "JANE", [a, b]) is b
    assert match_traveler("doe", "JANE", [a, b]) is a
    assert match_traveler("NOBODY", "X", [a, b]) is a

def test_get_pax_from_tif():
    a = PassengerVo(last_name="SMITH", first_name="JOHN")
    b = PassengerVo(last_name="DOE", first_name="JANE")
    assert get_pax_from_tif(tif("DOE", "JANE"), [a, b]) is b
    assert get_pax_from_tif(Tif("DOE", []), [a, b]) is a
    assert get_pax_from_tif(None, [a, b]) is a
    with pytest.raises(ValueError):
        get_pax_from_tif(tif(), [])

def test_configured_duplicate_marker_applies_to_docs_names():
    cfg = ParserConfig(duplicate_marker="#2")
    p = create_passenger([Ssr("DOCS", "/P/GBR/123456789/GBR/12JUL64/F/23AUG19/SMITH/ANNE-1MARIE/LEE#2X")],
                         tif("SMITH", "ANNE"), cfg)
    assert p.first_name == "ANNE-1MARIE"
    assert p.middle_name == "LEE"
