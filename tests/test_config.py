"""Tests for settings loading."""

from config import Settings, get_settings, reload_settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("FUND_CODE_PREFIX", "NOTIFICATION_CHANNEL", "SMTP_USERNAME", "SMTP_PASSWORD", "FROM_EMAIL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.fund_code_prefix == "FUND"
        assert settings.notification_channel == "log"
        assert settings.persistence_raise_on_error is False
        assert settings.is_email_configured is False

    def test_email_from_defaults_to_username(self):
        settings = Settings(smtp_username="me@example.com", smtp_password="pw", from_email=None)
        assert settings.email_from == "me@example.com"
        assert settings.is_email_configured is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FUND_CODE_PREFIX", "MF")
        settings = reload_settings()

        assert settings.fund_code_prefix == "MF"
        assert get_settings() is settings

    def test_ledger_uses_configured_prefix(self, monkeypatch, store, notifier):
        from services.ledger import PortfolioLedger

        monkeypatch.setenv("FUND_CODE_PREFIX", "MF")
        reload_settings()
        ledger = PortfolioLedger("user-1", transaction_store=store, notifier=notifier)

        ledger.process_buy("MF001", 5.0)
        assert ledger.balance_of("MF001") == 5.0
