import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    DICTIONARY_URL: str = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
    DICTIONARY_TIMEOUT: float = 30.0

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0  # 0 returns every word found
    GRID_SIZE: int = 4
    SOLVER_WORKERS: int = 1

    OCR_ENABLED: bool = True
    OCR_CONFIDENCE_THRESHOLD: float = 0.3
    CELL_INSET: float = 0.15
    BOARD_PADDING: float = 0.06

    MAX_UPLOAD_BYTES: int = 5_000_000
    TORCH_NUM_THREADS: int = 4
    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "GRID_SIZE": int,
    "SOLVER_WORKERS": int,
    "OCR_CONFIDENCE_THRESHOLD": float,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        if isinstance(value, bool):
            raise TypeError(f"expected an integer, got {value!r}")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"expected a whole number, got {value!r}")
            return int(value)
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values in place. Returns {field: error} for rejected ones."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        if EDITABLE_FIELDS[name] is int and coerced < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
