import pydantic
import pytest

from chaintokens.config import Settings, load_config_from_file, save_config_to_file


def test_default_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CHAINTOKENS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHAINTOKENS_REGISTRY__ALLOW_SHARED_ADDRESSES", raising=False)
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.registry.allow_shared_addresses is True


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CHAINTOKENS_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHAINTOKENS_REGISTRY__ALLOW_SHARED_ADDRESSES", "false")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.registry.allow_shared_addresses is False


def test_invalid_log_level():
    with pytest.raises(pydantic.ValidationError):
        Settings(log_level="LOUD")


def test_load_config_from_file(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'log_level = "warning"\n\n[registry]\nallow_shared_addresses = false\n',
    )
    settings = load_config_from_file(config_file)
    assert settings.log_level == "WARNING"
    assert settings.registry.allow_shared_addresses is False


def test_save_config_to_file(tmp_path):
    config_file = tmp_path / "nested" / "config.toml"
    save_config_to_file(Settings(log_level="ERROR"), config_file)
    assert config_file.exists()
    assert "[registry]" in config_file.read_text()
    assert load_config_from_file(config_file).log_level == "ERROR"
