import json, logging
from dataclasses import asdict
from typing import Any, Dict
import click
from .config import DEFAULTS, ParserConfig, load_config
from .documents import resolve_free_text
from .lexer import ParseException
from .splitter import get_pnrs

def _jsonable(v: Any) -> Any:
    return v.isoformat() if hasattr(v, "isoformat") else str(v)

def docs_summary(free_text: str, config: ParserConfig = DEFAULTS) -> Dict[str, Any]:
    resolved = resolve_free_text(free_text, config.field_delimiter, config.duplicate_marker)
    if resolved is None:
        return {"free_text": free_text, "layout": None}
    return {
        "free_text": free_text,
        "layout": resolved.layout.value,
        "document": asdict(resolved.document),
        "name": resolved.name._asdict(),
        "citizenship_country": resolved.citizenship_country,
        "dob": resolved.dob,
        "age": resolved.age,
        "gender": resolved.gender,
        "bad_fields": resolved.bad_fields,
    }

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose):
    """PNRGOV message splitter & passenger document parser"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

@main.command("split")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="Path to parser config (YAML)")
def split_cmd(path, config_path):
    """Split a multi-PNR message file into single-PNR messages (one JSON line each)."""
    config = load_config(config_path)
    with open(path, "r", encoding="utf-8") as f:
        msg = f.read()
    try:
        pnrs = get_pnrs(msg, config)
    except ParseException as e:
        raise click.ClickException(str(e))
    for i, pnr in enumerate(pnrs):
        click.echo(json.dumps({"index": i, "message": pnr}, ensure_ascii=False))

@main.command("docs")
@click.argument("free_text")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="Path to parser config (YAML)")
def docs_cmd(free_text, config_path):
    """Resolve an SSR DOCS free text, e.g. '/P/GBR/123456789/GBR/12JUL64/M/23AUG19/SMITHJR/JONATHON'."""
    click.echo(json.dumps(docs_summary(free_text, load_config(config_path)), ensure_ascii=False, default=_jsonable))

if __name__ == "__main__":
    main()
