"""Tests for kalendaryo.events.config."""

import os

from kalendaryo.core.config import Config
from kalendaryo.events.config import StoreConfig


class TestStoreConfig:
    def test_defaults(self):
        config = StoreConfig()
        assert config.events_file == "events.txt"
        assert config.encoding == "utf-8"

    def test_from_config(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        store_config = StoreConfig.from_config(config)
        assert store_config.events_file == os.path.join(tmp_dir, "events.txt")
        assert store_config.encoding == "utf-8"

    def test_from_config_env_override(self, tmp_dir, monkeypatch):
        path = os.path.join(tmp_dir, "other.txt")
        monkeypatch.setenv("KALENDARYO_STORAGE__EVENTS_FILE", path)
        assert StoreConfig.from_config(Config(data_dir=tmp_dir)).events_file == path
