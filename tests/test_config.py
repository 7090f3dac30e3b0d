"""
Test suite for configuration module

Tests defaults and environment overrides for AccountsConfig.
"""

import pytest

from bank_accounts.accounts import SavingAccount
from bank_accounts.config import AccountsConfig, get_config, reload_config


class TestAccountsConfig:
    """Test AccountsConfig settings"""

    def test_defaults(self, monkeypatch):
        """Test default values"""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "LOG_REJECTED_OPERATIONS", "THREAD_SAFE"):
            monkeypatch.delenv(f"BANK_ACCOUNTS_{name}", raising=False)

        cfg = AccountsConfig(_env_file=None)

        assert cfg.log_level == "INFO"
        assert cfg.log_format == "json"
        assert cfg.log_file is None
        assert cfg.log_rejected_operations is True
        assert cfg.thread_safe is True

    def test_environment_override(self, monkeypatch):
        """Test values are read from prefixed environment variables"""
        monkeypatch.setenv("BANK_ACCOUNTS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("bank_accounts_log_format", "text")
        monkeypatch.setenv("BANK_ACCOUNTS_THREAD_SAFE", "false")

        cfg = AccountsConfig(_env_file=None)

        assert cfg.log_level == "DEBUG"
        assert cfg.log_format == "text"
        assert cfg.thread_safe is False

    def test_invalid_log_format(self, monkeypatch):
        """Test that an unknown log format is rejected"""
        monkeypatch.setenv("BANK_ACCOUNTS_LOG_FORMAT", "xml")

        with pytest.raises(ValueError):
            AccountsConfig(_env_file=None)


class TestGlobalConfig:
    """Test the module-level configuration instance"""

    def test_reload_replaces_instance(self, monkeypatch):
        """Test reload_config picks up environment changes"""
        monkeypatch.setenv("BANK_ACCOUNTS_THREAD_SAFE", "false")
        try:
            cfg = reload_config()

            assert get_config() is cfg
            assert cfg.thread_safe is False

            # Accounts opened now skip the per-account lock
            account = SavingAccount(0, 0, 100, 5)
            assert account.deposit(100)
            assert account.balance == 100
        finally:
            monkeypatch.delenv("BANK_ACCOUNTS_THREAD_SAFE")
            reload_config()

        assert get_config().thread_safe is True
