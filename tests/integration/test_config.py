import json
import pytest
from pathlib import Path

from financial_tracker.config import settings
from financial_tracker.config.settings import ConfigLoader, LedgerConfig

@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(settings.LEDGER_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(settings.LOG_LEVEL_ENV_VAR, raising=False)

@pytest.mark.integration
class TestConfigLoader:

    def test_loads_packaged_defaults(self, monkeypatch, tmp_path: Path):
        monkeypatch.setattr(settings, "USER_CONFIG_DIR", tmp_path / "missing")

        config = ConfigLoader.load_ledger_config()

        assert config == {"ledger_path": "transactions.csv", "log_level": "WARNING"}

    def test_user_config_overrides_defaults(self, monkeypatch, tmp_path: Path):
        (tmp_path / "ledger.json").write_text(json.dumps({"ledger_path": "mine.csv"}))
        monkeypatch.setattr(settings, "USER_CONFIG_DIR", tmp_path)

        assert ConfigLoader.load_ledger_config() == {"ledger_path": "mine.csv"}

    def test_missing_config_raises(self, monkeypatch, tmp_path: Path):
        monkeypatch.setattr(settings, "USER_CONFIG_DIR", tmp_path)

        with pytest.raises(FileNotFoundError, match="nothing.json"):
            ConfigLoader.load_config("nothing.json")

@pytest.mark.integration
class TestLedgerConfig:

    def test_values_from_config(self):
        config = LedgerConfig(config={"ledger_path": "data/ledger.csv", "log_level": "INFO"})

        assert config.ledger_path == Path("data/ledger.csv")
        assert config.log_level == "INFO"

    def test_missing_keys_use_defaults(self):
        config = LedgerConfig(config={})

        assert config.ledger_path == Path("transactions.csv")
        assert config.log_level == "WARNING"

    def test_environment_beats_config(self, monkeypatch):
        monkeypatch.setenv(settings.LEDGER_PATH_ENV_VAR, "/tmp/env.csv")
        monkeypatch.setenv(settings.LOG_LEVEL_ENV_VAR, "DEBUG")

        config = LedgerConfig(config={"ledger_path": "file.csv", "log_level": "INFO"})

        assert config.ledger_path == Path("/tmp/env.csv")
        assert config.log_level == "DEBUG"

    def test_argument_beats_environment(self, monkeypatch):
        monkeypatch.setenv(settings.LEDGER_PATH_ENV_VAR, "/tmp/env.csv")

        config = LedgerConfig(ledger_path="cli.csv", config={})

        assert config.ledger_path == Path("cli.csv")
