import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

# Package defaults (bundled with code)
PACKAGE_CONFIG_DIR = Path(__file__).parent / "defaults"

# User configs (in project root, gitignored)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
USER_CONFIG_DIR = PROJECT_ROOT / "config"

LEDGER_PATH_ENV_VAR = "FINANCIAL_TRACKER_LEDGER"
LOG_LEVEL_ENV_VAR = "FINANCIAL_TRACKER_LOG_LEVEL"

class ConfigLoader:
    """Load configuration with user overrides"""

    @staticmethod
    def load_config(config_name: str) -> Dict[str, Any]:
        """
        Load config with fallback: user config -> default config

        Args:
            config_name: Name of the config file (e.g., 'ledger.json')

        Raises:
            FileNotFoundError: If no config file was found

        Returns:
            Parsed JSON configuration
        """
        user_config_path = USER_CONFIG_DIR / config_name
        if user_config_path.exists():
            with open(user_config_path) as f:
                return json.load(f)

        default_config_path = PACKAGE_CONFIG_DIR / config_name
        if default_config_path.exists():
            with open(default_config_path) as f:
                return json.load(f)

        raise FileNotFoundError(
            f"Config file '{config_name}' not found in:\n"
            f" - {user_config_path}\n"
            f" - {default_config_path}"
        )

    @staticmethod
    def load_ledger_config() -> Dict[str, Any]:
        """Load ledger file and logging configuration"""
        return ConfigLoader.load_config('ledger.json')

class LedgerConfig:
    """
    Ledger settings.

    Each value resolves from the explicit argument, then the environment,
    then the config file.
    """

    def __init__(
        self,
        ledger_path: Path | str | None = None,
        log_level: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        if config is None:
            config = ConfigLoader.load_ledger_config()

        self.ledger_path = Path(
            ledger_path
            or os.getenv(LEDGER_PATH_ENV_VAR)
            or config.get("ledger_path", "transactions.csv")
        )
        self.log_level: str = (
            log_level
            or os.getenv(LOG_LEVEL_ENV_VAR)
            or config.get("log_level", "WARNING")
        )

    def __repr__(self):
        return f"LedgerConfig(ledger_path={self.ledger_path}, log_level={self.log_level})"
