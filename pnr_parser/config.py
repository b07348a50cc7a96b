from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
import os
import yaml


@dataclass(frozen=True)
class ParserConfig:
    field_delimiter: str = "/"
    # segment tags: record start, shared header start, shared footer start
    record_marker: str = "SRC"
    header_marker: str = "UNB"
    footer_marker: str = "UNT"
    duplicate_marker: str = "-1"
    passenger_type: str = "P"


DEFAULTS = ParserConfig()


def load_config(path: Optional[str] = None) -> ParserConfig:
    if not path or not os.path.exists(path):
        return DEFAULTS
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}
    # Fill in missing keys, drop unknown ones
    known = {fld.name: getattr(DEFAULTS, fld.name) for fld in fields(ParserConfig)}
    for key, value in known.items():
        data.setdefault(key, value)
    return ParserConfig(**{k: str(data[k]) for k in known})
