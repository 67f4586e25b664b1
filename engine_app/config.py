"""Configuration helpers for the outfit styling engine."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Callable, Dict, Optional, TypeVar

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_DATA_DIR = "data"
DEFAULT_SELECTION_TOP_K = 20
DEFAULT_GAP_MAX_TOKENS = 300
DEFAULT_GAP_TEMPERATURE = 0.4

T = TypeVar("T")


def _data_path(name: str) -> Callable[[], str]:
    return lambda: str(Path(DEFAULT_DATA_DIR) / name)


@dataclass
class EngineConfig:
    """Configuration values for the styling engine.

    Only the text-completion oracle needs a secret. Store locations default to
    files under ``data/`` so the engine runs offline against SQLite and JSON.
    """

    model: str = DEFAULT_GEMINI_MODEL
    api_key: Optional[str] = None
    wardrobe_db_path: str = field(default_factory=_data_path("wardrobe.db"))
    preferences_dir: str = field(default_factory=_data_path("preferences"))
    missing_items_db_path: str = field(default_factory=_data_path("missing_items.db"))
    selection_top_k: int = DEFAULT_SELECTION_TOP_K
    gap_max_tokens: int = DEFAULT_GAP_MAX_TOKENS
    gap_temperature: float = DEFAULT_GAP_TEMPERATURE
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.selection_top_k < 1:
            raise ValueError("selection_top_k must be at least 1")
        if self.gap_max_tokens < 1:
            raise ValueError("gap_max_tokens must be at least 1")
        if not 0.0 <= self.gap_temperature <= 2.0:
            raise ValueError("gap_temperature must be between 0 and 2")

    @property
    def oracle_configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables over an optional settings file.

        The file is ``APP_CONFIG_PATH`` when set, otherwise
        ``<ENGINE_CONFIG_DIR>/<APP_ENV>.yaml``. Environment variables (the
        upper-cased key) always win so secrets never need to live on disk.
        ``DATA_DIR`` relocates every store path that is not set explicitly.
        """

        env_name = os.getenv("APP_ENV")
        file_values = cls._load_yaml_config(cls._settings_path(env_name))

        def lookup(key: str) -> Optional[str]:
            value = os.getenv(key.upper(), file_values.get(key))
            return value if value not in (None, "") else None

        def typed(key: str, cast: Callable[[str], T], default: T) -> T:
            raw = lookup(key)
            if raw is None:
                return default
            try:
                return cast(raw)
            except ValueError as exc:
                raise ValueError(f"Invalid value for {key}: {raw!r}") from exc

        data_dir = Path(lookup("data_dir") or DEFAULT_DATA_DIR)
        return cls(
            model=lookup("model") or DEFAULT_GEMINI_MODEL,
            api_key=lookup("google_api_key") or lookup("gemini_api_key"),
            wardrobe_db_path=lookup("wardrobe_db_path") or str(data_dir / "wardrobe.db"),
            preferences_dir=lookup("preferences_dir") or str(data_dir / "preferences"),
            missing_items_db_path=lookup("missing_items_db_path") or str(data_dir / "missing_items.db"),
            selection_top_k=typed("selection_top_k", int, DEFAULT_SELECTION_TOP_K),
            gap_max_tokens=typed("gap_max_tokens", int, DEFAULT_GAP_MAX_TOKENS),
            gap_temperature=typed("gap_temperature", float, DEFAULT_GAP_TEMPERATURE),
            environment=env_name,
        )

    @staticmethod
    def _settings_path(env_name: Optional[str]) -> Optional[Path]:
        explicit = os.getenv("APP_CONFIG_PATH")
        if explicit:
            return Path(explicit)
        if env_name:
            return Path(os.getenv("ENGINE_CONFIG_DIR", "config/environments")) / f"{env_name}.yaml"
        return None

    @staticmethod
    def _load_yaml_config(path: Optional[Path]) -> Dict[str, str]:
        """Read flat ``key: value`` lines; a missing file yields no values."""

        if path is None or not path.exists():
            return {}
        values: Dict[str, str] = {}
        for line in path.read_text().splitlines():
            key, sep, raw_value = line.partition(":")
            key = key.strip()
            if not sep or not key or key.startswith("#"):
                continue
            value = raw_value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            values[key] = value
        return values
