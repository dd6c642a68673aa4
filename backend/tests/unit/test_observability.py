"""Unit tests for Logfire initialization."""

from frontline.config import Settings
from frontline.observability import initialize_logfire


def test_skipped_without_token(tmp_path) -> None:
    settings = Settings(data_dir=tmp_path, logfire_token="")
    assert initialize_logfire(settings) is False
