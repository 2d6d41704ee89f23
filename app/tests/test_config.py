import pytest

from app.core.config import Settings


@pytest.fixture(autouse=True)
def _clear_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "APP_PORT", "APP_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)


def test_port_defaults_to_3000() -> None:
    assert Settings(_env_file=None).port == 3000


def test_port_read_from_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).port == 8080


def test_port_read_from_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_PORT", "9090")

    assert Settings(_env_file=None).port == 9090


def test_cors_origins_split_on_commas(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_CORS_ORIGINS", "http://a.test, http://b.test,")

    assert Settings(_env_file=None).cors_origins == ["http://a.test", "http://b.test"]
