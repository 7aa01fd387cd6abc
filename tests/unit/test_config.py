import pytest
from pydantic import ValidationError

from donut_shop.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DONUT_SHOP_SERVICE_NAME",
        "DONUT_SHOP_LOG_LEVEL",
        "DONUT_SHOP_DEFAULT_CARD_BALANCE",
        "DONUT_SHOP_LOCK_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.service_name == "donut-shop"
        assert settings.log_level == "INFO"
        assert settings.default_card_balance == 50
        assert settings.lock_mode == "in_memory"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DONUT_SHOP_DEFAULT_CARD_BALANCE", "120")
        monkeypatch.setenv("DONUT_SHOP_LOCK_MODE", "noop")
        monkeypatch.setenv("DONUT_SHOP_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.default_card_balance == 120
        assert settings.lock_mode == "noop"
        assert settings.log_level == "DEBUG"

    def test_ignores_unprefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_CARD_BALANCE", "999")

        assert Settings(_env_file=None).default_card_balance == 50

    def test_rejects_unknown_lock_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DONUT_SHOP_LOCK_MODE", "redis")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("DONUT_SHOP_SERVICE_NAME=corner-shop\n")

        assert Settings(_env_file=env_file).service_name == "corner-shop"
