from .documents import DocLayout, resolve_document, resolve_free_text
from .names import normalize_name
from .passengers import create_passenger, get_pax_from_tif, match_traveler
from .splitter import get_pnrs, get_single_pnr
from .utils import split_free_text

__version__ = "0.1.0"
