"""
Tests for configuration loading and validation.
"""

import pytest
import yaml

from box_arena.core import config_loader
from box_arena.core.boxes import BoxKind
from box_arena.core.config_loader import get_config, load_config, reload_config


VALID = {
    "boxes": [
        {"index": 0, "kind": "mean_square", "initial_weight": 0.0},
        {"index": 1, "kind": "mean_square", "initial_weight": 0.1},
        {"index": 2, "kind": "pairing", "initial_weight": 0.2},
        {"index": 3, "kind": "pairing", "initial_weight": 0.3},
    ],
    "scoring": {"window_size": 3},
}


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "game_config.yaml"
        path.write_text(yaml.safe_dump(data))
        return str(path)
    return _write


@pytest.fixture
def restore_cache():
    saved = config_loader._cached_config
    yield
    config_loader._cached_config = saved


class TestLoadConfig:
    """Test loading the default and custom files."""

    def test_default_config(self):
        config = load_config()
        assert config.num_boxes == 4
        assert [b.kind for b in config.boxes] == [
            BoxKind.MEAN_SQUARE,
            BoxKind.MEAN_SQUARE,
            BoxKind.PAIRING,
            BoxKind.PAIRING,
        ]
        assert [b.initial_weight for b in config.boxes] == [0.0, 0.1, 0.2, 0.3]
        assert config.scoring.window_size == 3

    def test_custom_path(self, write_config):
        config = load_config(write_config(VALID))
        assert config.get_box(2).kind is BoxKind.PAIRING

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_window_size_defaults(self, write_config):
        data = {"boxes": VALID["boxes"]}
        assert load_config(write_config(data)).scoring.window_size == 3

    def test_get_box_invalid(self):
        with pytest.raises(ValueError):
            load_config().get_box(4)

    def test_config_is_frozen(self):
        config = load_config()
        with pytest.raises(AttributeError):
            config.boxes[0].initial_weight = 5.0


class TestValidation:
    """Test rejection of layouts other than the fixed game design."""

    def test_wrong_box_count(self, write_config):
        data = dict(VALID, boxes=VALID["boxes"][:3])
        with pytest.raises(ValueError, match="exactly 4 boxes"):
            load_config(write_config(data))

    def test_wrong_kind(self, write_config):
        boxes = [dict(b) for b in VALID["boxes"]]
        boxes[0]["kind"] = "pairing"
        with pytest.raises(ValueError, match="kind"):
            load_config(write_config(dict(VALID, boxes=boxes)))

    def test_unknown_kind(self, write_config):
        boxes = [dict(b) for b in VALID["boxes"]]
        boxes[1]["kind"] = "red"
        with pytest.raises(ValueError, match="Unknown box kind"):
            load_config(write_config(dict(VALID, boxes=boxes)))

    def test_wrong_initial_weight(self, write_config):
        boxes = [dict(b) for b in VALID["boxes"]]
        boxes[3]["initial_weight"] = 0.4
        with pytest.raises(ValueError, match="start with weight"):
            load_config(write_config(dict(VALID, boxes=boxes)))

    def test_index_mismatch(self, write_config):
        boxes = [dict(b) for b in VALID["boxes"]]
        boxes[2]["index"] = 5
        with pytest.raises(ValueError, match="index mismatch"):
            load_config(write_config(dict(VALID, boxes=boxes)))

    def test_wrong_window_size(self, write_config):
        data = dict(VALID, scoring={"window_size": 4})
        with pytest.raises(ValueError, match="window_size"):
            load_config(write_config(data))

    def test_missing_boxes_section(self, write_config):
        with pytest.raises(ValueError, match="boxes"):
            load_config(write_config({"scoring": {"window_size": 3}}))


class TestConfigCache:
    """Test the module-level cached config."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_replaces_cache(self, write_config, restore_cache):
        first = get_config()
        reloaded = reload_config(write_config(VALID))
        assert reloaded is not first
        assert get_config() is reloaded
