"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from frontline.config import GameConfig, Settings


def test_defaults(tmp_path) -> None:
    settings = Settings(data_dir=tmp_path)
    assert settings.game.fee_bps == 500
    assert settings.database_url == f"sqlite:///{tmp_path.resolve() / 'frontline.db'}"


def test_yaml_overrides_sections(tmp_path) -> None:
    (tmp_path / "config.yaml").write_text(
        "game:\n  fee_bps: 250\napi:\n  port: 9000\n", encoding="utf-8"
    )
    settings = Settings(data_dir=tmp_path)
    settings.load_yaml_config()

    assert settings.game.fee_bps == 250
    assert settings.api.port == 9000
    assert settings.api.host == "127.0.0.1"


def test_missing_yaml_keeps_defaults(tmp_path) -> None:
    settings = Settings(data_dir=tmp_path)
    settings.load_yaml_config()
    assert settings.game.fee_bps == 500


def test_env_nested_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("FRONTLINE_GAME__FEE_BPS", "100")
    monkeypatch.setenv("FRONTLINE_DATABASE__URL", "sqlite://")
    settings = Settings(data_dir=tmp_path)

    assert settings.game.fee_bps == 100
    assert settings.database_url == "sqlite://"


@pytest.mark.parametrize("fee_bps", [-1, 10_001])
def test_fee_bounds(fee_bps) -> None:
    with pytest.raises(ValidationError):
        GameConfig(fee_bps=fee_bps)


def test_origins_from_comma_string() -> None:
    from frontline.config import ApiConfig

    assert ApiConfig(allowed_origins="http://a, http://b").allowed_origins == [
        "http://a",
        "http://b",
    ]
