# schedule_admin/config.py

import os
import logging
from dotenv import load_dotenv
from typing import Dict, Any, Optional

# Initialize logger
logger = logging.getLogger(__name__)


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and "API" in st.secrets
    except Exception:
        return False


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Empty or missing timeout means requests never time out"""
    if raw is None or str(raw).strip() == "":
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid API_TIMEOUT_SECONDS value: {raw!r}")
        return None


class Config:
    """Centralized configuration management for the Schedule Allocations app"""

    DEFAULT_API_BASE_URL = "http://localhost:8080"

    def __init__(self):
        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            self._load_cloud_config()
        else:
            self._load_local_config()

        # Common configuration
        self._load_app_config()

    def _load_cloud_config(self):
        """Load configuration from Streamlit Cloud secrets"""
        import streamlit as st

        api_secrets = dict(st.secrets["API"])
        self.api_config = {
            "base_url": api_secrets.get("BASE_URL", self.DEFAULT_API_BASE_URL),
            "timeout": _parse_timeout(api_secrets.get("TIMEOUT_SECONDS")),
        }

        logger.info("☁️  Running in STREAMLIT CLOUD")

    def _load_local_config(self):
        """Load configuration from local environment"""
        # Load .env file
        load_dotenv()

        self.api_config = {
            "base_url": os.getenv("API_BASE_URL", self.DEFAULT_API_BASE_URL),
            "timeout": _parse_timeout(os.getenv("API_TIMEOUT_SECONDS")),
        }

        logger.info("💻 Running in LOCAL environment")

    def _load_app_config(self):
        """Load application-specific configuration"""
        self.app_config = {
            "APP_TITLE": os.getenv("APP_TITLE", "Schedule Allocations"),
            "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        }
        self._log_config_status()

    def _log_config_status(self):
        """Log configuration status for debugging"""
        issues = []

        logger.info("─" * 55)
        logger.info("🌐 API CONFIGURATION")

        base_url = self.api_config.get('base_url')
        timeout = self.api_config.get('timeout')

        if base_url:
            logger.info(f"   ✅ Base URL: {base_url}")
        else:
            logger.error("   ❌ Base URL: MISSING")
            issues.append("API: base URL missing")

        if timeout is None:
            logger.info("   ℹ️  Timeout: none (requests wait indefinitely)")
        else:
            logger.info(f"   ✅ Timeout: {timeout:g}s")

        logger.info("─" * 55)
        if issues:
            logger.warning(f"⚠️  CONFIGURATION ISSUES FOUND ({len(issues)}):")
            for issue in issues:
                logger.warning(f"   • {issue}")
            logger.info("─" * 55)
        else:
            logger.info("✅ ALL REQUIRED CONFIGURATIONS LOADED SUCCESSFULLY")
            logger.info("─" * 55)

    def get_api_config(self) -> Dict[str, Any]:
        """Get API transport configuration"""
        return self.api_config.copy()

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting"""
        return self.app_config.get(key, default)


# Create singleton instance
config = Config()

API_BASE_URL = config.api_config["base_url"]
APP_CONFIG = config.app_config


__all__ = [
    'config',
    'Config',
    'API_BASE_URL',
    'APP_CONFIG',
]
