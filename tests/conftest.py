"""Shared test fixtures for kalendaryo."""

import os
import tempfile

import pytest

from kalendaryo.events import Record


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing at a temp events file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": tmp_dir,
            "log_dir": os.path.join(tmp_dir, "logs"),
        },
        "storage": {
            "events_file": os.path.join(tmp_dir, "events.txt"),
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def sample_events():
    return [
        Record("Science Fair", "Gym, all grades", 20240315, 2),
        Record("Parent Meeting", "Room 12", 20240110, 1),
        Record("Math Fair", "Library", 20240201, 3),
        Record("Sports Day", "Field", 20240110, 2),
        Record("Recital", "Music hall", 20240505, 1),
    ]
