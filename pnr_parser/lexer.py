"""
Minimal EDIFACT tokenizer: service string advice (UNA) and segment lookup.

Only what the PNR splitter needs is here: the active segment terminator and
the offset at which a segment tag starts.
"""
import logging
from dataclasses import dataclass
from typing import Optional
import regex as re

logger = logging.getLogger(__name__)

UNA_TAG = "UNA"
# component sep, data sep, decimal mark, release char, reserved, terminator
DEFAULT_SERVICE_CHARS = ":+.? '"


class ParseException(Exception):
    """Raised when a message cannot be tokenized at all."""


@dataclass(frozen=True)
class Una:
    component_separator: str = ":"
    data_element_separator: str = "+"
    decimal_mark: str = "."
    release_character: str = "?"
    segment_terminator: str = "'"
    # literal UNA segment as it appeared in the message, "" if absent
    segment_text: str = ""

    @classmethod
    def from_message(cls, message: str) -> "Una":
        text = message.lstrip()
        if not text.startswith(UNA_TAG):
            return cls()
        chars = text[len(UNA_TAG):len(UNA_TAG) + len(DEFAULT_SERVICE_CHARS)]
        if len(chars) < len(DEFAULT_SERVICE_CHARS):
            raise ParseException(f"truncated UNA segment: {text[:9]!r}")
        return cls(
            component_separator=chars[0],
            data_element_separator=chars[1],
            decimal_mark=chars[2],
            release_character=chars[3],
            segment_terminator=chars[5],
            segment_text=UNA_TAG + chars,
        )


class EdifactLexer:
    def __init__(self, message: str, una: Optional[Una] = None):
        if not message or not message.strip():
            raise ParseException("empty message, no segment terminator can be established")
        self.message = message
        self.una = una or Una.from_message(message)

    def get_start_of_segment(self, tag: str) -> int:
        """Offset of the first `tag` segment, or -1."""
        m = self._segment_pattern(tag).search(self.message)
        if not m:
            logger.debug("segment %s not found", tag)
            return -1
        return m.start(1)

    def segment_boundary(self) -> str:
        """
        Pattern for the start of a segment: the start of the message, or a
        terminator preceded by an even run of release characters (`??'` ends a
        segment, `?'` does not).
        """
        term = re.escape(self.una.segment_terminator)
        rel = re.escape(self.una.release_character)
        return rf"(?:^|(?<!{rel})(?:{rel}{rel})*{term})\s*"

    def _segment_pattern(self, tag: str):
        term = re.escape(self.una.segment_terminator)
        sep = re.escape(self.una.data_element_separator)
        return re.compile(rf"{self.segment_boundary()}({re.escape(tag)})(?=\s*(?:{sep}|{term}))")
