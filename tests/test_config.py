from pnr_parser.config import DEFAULTS, load_config

def test_missing_config_gives_defaults(tmp_path):
    assert load_config(None) is DEFAULTS
    assert load_config(str(tmp_path / "nope.yaml")) is DEFAULTS

def test_partial_config_filled_with_defaults(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("record_marker: REC\nunknown: 1\n")
    cfg = load_config(str(p))
    assert cfg.record_marker == "REC"
    assert cfg.footer_marker == "UNT"
    assert cfg.duplicate_marker == "-1"

def test_empty_config_file(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(str(p)) == DEFAULTS
