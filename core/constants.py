"""
Hard-coded constants - fixed values that rarely change

Note: paths must always be pathlib.Path (Windows/Linux cross-platform)
"""

from pathlib import Path


# Project root (two levels above this file: core/constants.py -> project/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """Default values (overridable from settings.yaml)"""

    PARTNERS: tuple[str, str] = ("Sebi", "Alex")
    CATEGORIES: tuple[str, ...] = (
        "Elektronik",
        "Möbel",
        "Fahrzeug",
        "Kleidung",
        "Reise",
        "Sonstiges",
    )

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 3001
    CORS_ORIGINS: tuple[str, ...] = ("http://localhost:5173", "http://localhost:3000")

    API_BASE_URL: str = "http://localhost:3001"
    REQUEST_TIMEOUT_SEC: float = 10.0
    READ_RETRIES: int = 1
    PROBE_INTERVAL_SEC: int = 30

    CACHE_KEY: str = "firma-expenses"

    LOG_LEVEL: str = "INFO"


class Paths:
    """Project path constants (pathlib - OS independent)"""

    # Directories
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    CLIENT_LOGS_DIR: Path = LOGS_DIR / "client"

    # Settings file
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB file
    DB_FILE: Path = DATA_DIR / "expenses.db"

    # Client-side snapshot cache
    CACHE_FILE: Path = DATA_DIR / "expense_cache.json"


class Money:
    """Monetary constants"""

    CURRENCY_SYMBOL: str = "€"
    # Absolute balance below this counts as settled
    SETTLED_TOLERANCE: str = "0.01"
