"""
Framework Configuration
Settings come from the environment, optionally seeded from a .env file.
"""

import os
import pathlib
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Bundled fixtures and features live next to the package (backend/)
BACKEND_DIR = pathlib.Path(__file__).parent.parent
DEFAULT_FIXTURES_DIR = BACKEND_DIR / "fixtures"
DEFAULT_FEATURES_DIR = BACKEND_DIR / "features"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got '{value}'")


class FrameworkConfig(BaseModel):
    """Run-wide settings shared by the driver, fixture store and runner"""
    base_url: str = "http://localhost:3000"
    fixtures_dir: pathlib.Path = DEFAULT_FIXTURES_DIR
    features_dir: pathlib.Path = DEFAULT_FEATURES_DIR
    headless: bool = True
    browser: str = "chromium"
    default_timeout_ms: int = 10000
    viewport_width: int = 1920
    viewport_height: int = 1080
    report_dir: Optional[pathlib.Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "FrameworkConfig":
        """
        Build the configuration from PAGEBDD_* environment variables.

        Args:
            env_file: Optional .env path; defaults to backend/.env when present
        """
        env_path = pathlib.Path(env_file) if env_file else BACKEND_DIR / ".env"
        load_dotenv(env_path)

        browser = os.getenv("PAGEBDD_BROWSER", "chromium").lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser}'. Expected one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        report_dir = os.getenv("PAGEBDD_REPORT_DIR")

        return cls(
            base_url=os.getenv("PAGEBDD_BASE_URL", "http://localhost:3000"),
            fixtures_dir=pathlib.Path(os.getenv("PAGEBDD_FIXTURES_DIR", str(DEFAULT_FIXTURES_DIR))),
            features_dir=pathlib.Path(os.getenv("PAGEBDD_FEATURES_DIR", str(DEFAULT_FEATURES_DIR))),
            headless=_env_bool("PAGEBDD_HEADLESS", True),
            browser=browser,
            default_timeout_ms=_env_int("PAGEBDD_DEFAULT_TIMEOUT_MS", 10000),
            viewport_width=_env_int("PAGEBDD_VIEWPORT_WIDTH", 1920),
            viewport_height=_env_int("PAGEBDD_VIEWPORT_HEIGHT", 1080),
            report_dir=pathlib.Path(report_dir) if report_dir else None,
            log_level=os.getenv("PAGEBDD_LOG_LEVEL", "INFO").upper(),
        )
