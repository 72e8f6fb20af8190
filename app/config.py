# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent
_DATA_DIR = Path(os.getenv("STOREFRONT_DATA_DIR", str(_PROJECT_ROOT / "data")))

# Storage backend for wizard checkpoints: "sqlite" (persistent) or "memory"
_STORAGE_BACKEND = os.getenv("STOREFRONT_STORAGE_BACKEND", "sqlite").lower()

_LOG_LEVEL = os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Liberator Storefront"
    APP_TITLE: str = "Liberator Medical Supply"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Liberator Medical"
    SUPPORT_PHONE: str = "1-877-899-9208"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Local key-value storage (checkpoints for in-progress wizards)
    STORAGE_BACKEND: str = _STORAGE_BACKEND
    STORAGE_DB_NAME: str = "local_storage.db"
    STORAGE_DB_PATH: Path = DATA_DIR / STORAGE_DB_NAME

    # One storage key per wizard variant
    SAMPLE_REQUEST_STORAGE_KEY: str = "liberator-sample-request"
    SUPPLY_FINDER_STORAGE_KEY: str = "liberator-supply-finder"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 640
    WIZARD_WIDTH: int = 560
    WIZARD_MAX_HEIGHT: int = 720
