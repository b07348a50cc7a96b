"""
Split a PNRGOV message carrying several PNRs into single-PNR messages.

Every record starts with an SRC segment. The interchange header (UNB up to the
first SRC) and the trailer (UNT to the end) are shared, so each extracted
record is rewrapped with both to stay a complete message on its own.
"""
import logging
from typing import List, Optional
import regex as re

from .config import DEFAULTS, ParserConfig
from .lexer import EdifactLexer
from .utils import is_blank

logger = logging.getLogger(__name__)


def _record_pattern(lexer: EdifactLexer, config: ParserConfig):
    # record marker segment with no data (SRC'), at a segment boundary
    return re.compile(rf"{lexer.segment_boundary()}({re.escape(config.record_marker)})(?=\s*{re.escape(lexer.una.segment_terminator)})")


def get_single_pnr(lexer: EdifactLexer, index: int, config: ParserConfig = DEFAULTS) -> Optional[str]:
    """
    Text of the `index`-th (0-based) PNR in the message, None if there is no such PNR.
    """
    if index < 0:
        return None
    matches = _record_pattern(lexer, config).finditer(lexer.message)
    found = None
    for _ in range(index + 1):
        found = next(matches, None)
        if found is None:
            return None
    start = found.start(1)

    following = next(matches, None)
    if following is not None:
        end = following.start(1)
    else:
        end = lexer.get_start_of_segment(config.footer_marker)
        if end < start:
            logger.debug("no %s after record %d, taking rest of message", config.footer_marker, index)
            end = -1

    return lexer.message[start:end] if end != -1 else lexer.message[start:]


def get_pnrs(msg: Optional[str], config: ParserConfig = DEFAULTS) -> List[str]:
    """Each PNR of `msg` as a complete message: UNA + header + PNR + footer."""
    if is_blank(msg):
        return []
    lexer = EdifactLexer(msg)

    first = _record_pattern(lexer, config).search(msg)
    if first is None:
        logger.info("message has no %s segment, nothing to split", config.record_marker)
        return []

    start = lexer.get_start_of_segment(config.header_marker)
    if start == -1 or start > first.start(1):
        start = msg.find(lexer.una.segment_text) + len(lexer.una.segment_text) if lexer.una.segment_text else 0
    header = msg[start:first.start(1)]

    start = lexer.get_start_of_segment(config.footer_marker)
    footer = msg[start:] if start >= first.start(1) else ""

    rv: List[str] = []
    i = 0
    while True:
        pnr = get_single_pnr(lexer, i, config)
        if pnr is None:
            break
        rv.append(lexer.una.segment_text + header + pnr + footer)
        i += 1

    logger.debug("split message into %d PNRs", len(rv))
    return rv
