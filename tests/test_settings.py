from pathlib import Path

from wordhunt.settings import EDITABLE_FIELDS, Settings, get_editable_settings, update_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults(monkeypatch):
    for name in ("MIN_WORD_LENGTH", "MAX_RESULTS", "SOLVER_WORKERS", "DICTIONARY_PATH"):
        monkeypatch.delenv(name, raising=False)
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.MAX_RESULTS == 0
    assert cfg.SOLVER_WORKERS == 1
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("MIN_WORD_LENGTH", "4")
    monkeypatch.setenv("OCR_ENABLED", "false")
    monkeypatch.setenv("OCR_CONFIDENCE_THRESHOLD", "0.6")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    monkeypatch.setenv("DICTIONARY_URL", "http://example.test/words.txt")
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.OCR_ENABLED is False
    assert cfg.OCR_CONFIDENCE_THRESHOLD == 0.6
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")
    assert cfg.DICTIONARY_URL == "http://example.test/words.txt"


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MIN_WORD_LENGTH"] == cfg.MIN_WORD_LENGTH
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, SOLVER_WORKERS=4)
    assert errors == {}
    assert cfg.SOLVER_WORKERS == 4


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="25")
    assert errors == {}
    assert cfg.MAX_RESULTS == 25


def test_update_bool_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG=True)
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_float_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, OCR_CONFIDENCE_THRESHOLD=0.5)
    assert errors == {}
    assert cfg.OCR_CONFIDENCE_THRESHOLD == 0.5


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, GRID_SIZE=5)
    assert errors == {}
    assert (cfg.MAX_RESULTS, cfg.MIN_WORD_LENGTH, cfg.GRID_SIZE) == (10, 4, 5)


def test_update_invalid_value_returns_error():
    cfg = _fresh_settings()
    original = cfg.MIN_WORD_LENGTH
    errors = update_settings(cfg, MIN_WORD_LENGTH="three")
    assert "MIN_WORD_LENGTH" in errors
    assert cfg.MIN_WORD_LENGTH == original


def test_update_negative_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=-1)
    assert "MAX_RESULTS" in errors


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DICTIONARY_URL="http://elsewhere")
    assert "DICTIONARY_URL" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_update_int_rejects_bool_and_fraction():
    cfg = _fresh_settings()
    before = (cfg.MAX_RESULTS, cfg.MIN_WORD_LENGTH)
    errors = update_settings(cfg, MAX_RESULTS=True, MIN_WORD_LENGTH=3.7)
    assert set(errors) == {"MAX_RESULTS", "MIN_WORD_LENGTH"}
    assert (cfg.MAX_RESULTS, cfg.MIN_WORD_LENGTH) == before


def test_update_int_accepts_whole_float():
    cfg = _fresh_settings()
    errors = update_settings(cfg, GRID_SIZE=5.0)
    assert errors == {}
    assert cfg.GRID_SIZE == 5
    assert isinstance(cfg.GRID_SIZE, int)
