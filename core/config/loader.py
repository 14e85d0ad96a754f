"""
Settings loader

Loads settings.yaml and builds the application config.
The file is optional: missing keys fall back to core.constants.Defaults.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths, PROJECT_ROOT


@dataclass(frozen=True)
class AppConfig:
    """Application config (loaded from settings.yaml)

    Immutable to prevent runtime changes.
    """

    partners: tuple[str, str] = Defaults.PARTNERS
    categories: tuple[str, ...] = Defaults.CATEGORIES

    web_host: str = Defaults.WEB_HOST
    web_port: int = Defaults.WEB_PORT
    cors_origins: tuple[str, ...] = Defaults.CORS_ORIGINS

    db_path: Path = Paths.DB_FILE

    api_base_url: str = Defaults.API_BASE_URL
    request_timeout_sec: float = Defaults.REQUEST_TIMEOUT_SEC
    read_retries: int = Defaults.READ_RETRIES
    probe_interval_sec: int = Defaults.PROBE_INTERVAL_SEC
    cache_path: Path = Paths.CACHE_FILE
    cache_key: str = Defaults.CACHE_KEY

    source: Path | None = field(default=None, compare=False)


class ConfigLoadError(Exception):
    """Settings load failure"""

    pass


def _resolve_path(value: Any, base_dir: Path) -> Path:
    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"'{name}' in settings.yaml must be a mapping")
    return section


def _parse_partners(value: Any) -> tuple[str, str]:
    if not isinstance(value, (list, tuple)):
        raise ConfigLoadError("'partners' must be a list of two names")

    names = [str(v).strip() for v in value]
    if len(names) != 2 or not all(names):
        raise ConfigLoadError(f"'partners' must contain exactly two names: {value}")
    if names[0] == names[1]:
        raise ConfigLoadError(f"'partners' must be two different names: {value}")

    return names[0], names[1]


def parse_config(data: dict[str, Any] | None, base_dir: Path = PROJECT_ROOT) -> AppConfig:
    """Build AppConfig from parsed YAML

    Args:
        data: parsed settings (None = all defaults)
        base_dir: base for relative paths (project root)

    Returns:
        AppConfig

    Raises:
        ConfigLoadError: wrong structure or values
    """
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml must contain a mapping")

    web = _section(data, "web")
    database = _section(data, "database")
    client = _section(data, "client")

    kwargs: dict[str, Any] = {}

    if "partners" in data:
        kwargs["partners"] = _parse_partners(data["partners"])
    if "categories" in data:
        categories = data["categories"]
        if not isinstance(categories, list) or not categories:
            raise ConfigLoadError("'categories' must be a non-empty list")
        kwargs["categories"] = tuple(str(c) for c in categories)

    try:
        if "host" in web:
            kwargs["web_host"] = str(web["host"])
        if "port" in web:
            kwargs["web_port"] = int(web["port"])
        if "cors_origins" in web:
            kwargs["cors_origins"] = tuple(str(o) for o in web["cors_origins"])

        if "path" in database:
            kwargs["db_path"] = _resolve_path(database["path"], base_dir)

        if "api_base_url" in client:
            kwargs["api_base_url"] = str(client["api_base_url"]).rstrip("/")
        if "request_timeout_sec" in client:
            kwargs["request_timeout_sec"] = float(client["request_timeout_sec"])
        if "read_retries" in client:
            kwargs["read_retries"] = int(client["read_retries"])
        if "probe_interval_sec" in client:
            kwargs["probe_interval_sec"] = int(client["probe_interval_sec"])
        if "cache_path" in client:
            kwargs["cache_path"] = _resolve_path(client["cache_path"], base_dir)
        if "cache_key" in client:
            kwargs["cache_key"] = str(client["cache_key"])
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"Invalid value in settings.yaml: {e}") from e

    if kwargs.get("request_timeout_sec", 1.0) <= 0:
        raise ConfigLoadError("'client.request_timeout_sec' must be positive")
    if kwargs.get("read_retries", 0) < 0:
        raise ConfigLoadError("'client.read_retries' must not be negative")
    if kwargs.get("probe_interval_sec", 1) <= 0:
        raise ConfigLoadError("'client.probe_interval_sec' must be positive")

    return AppConfig(**kwargs)


def load_config(path: Path | None = None) -> AppConfig:
    """Load settings.yaml

    Args:
        path: settings.yaml path (None = default path)

    Returns:
        AppConfig (defaults when the default file does not exist)

    Raises:
        ConfigLoadError: explicit path missing, or malformed file
    """
    explicit = path is not None
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        if explicit:
            raise ConfigLoadError(f"settings file not found: {path}")
        return AppConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Failed to parse settings.yaml: {e}") from e

    config = parse_config(data)
    return replace(config, source=path)


class Settings:
    """Application settings (singleton)

    Loads settings.yaml once and exposes the config.
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(settings_path)

    @property
    def config(self) -> AppConfig:
        assert self._config is not None
        return self._config

    @property
    def partners(self) -> tuple[str, str]:
        return self.config.partners

    @property
    def categories(self) -> tuple[str, ...]:
        return self.config.categories

    @property
    def db_path(self) -> Path:
        return self.config.db_path

    @property
    def web_port(self) -> int:
        return self.config.web_port

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (tests)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings singleton

    Args:
        settings_path: settings.yaml path (None = default path)
    """
    return Settings(settings_path)
