# tests/test_config.py
from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "MONGO_URI", "APP_VERSION", "NODE_ENV", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.port == 5000
    assert s.mongo_uri == "mongodb://localhost:27017/taskmaster"
    assert s.app_version == "1.0.0"
    assert s.environment == "development"


def test_environment_from_env(monkeypatch):
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOSTNAME", "pod-1")

    s = Settings(_env_file=None)

    assert s.environment == "production"
    assert s.port == 8080
    assert s.hostname == "pod-1"


def test_cors_origin_list():
    s = Settings(_env_file=None, cors_origins="https://a.example, https://b.example")
    assert s.cors_origin_list == ["https://a.example", "https://b.example"]
