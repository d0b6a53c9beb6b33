"""
Tests for the settings file: zoom, removal tolerance and recent files.
"""
import json
import os

import pytest

from constants import ZOOM_DEFAULT, ZOOM_MAX, ZOOM_MIN, DEFAULT_REMOVAL_TOLERANCE, MAX_RECENT_FILES
from editor_session import CompositionEditor


def write_config(config_dir, data):
    os.makedirs(config_dir, exist_ok=True)
    with open(os.path.join(config_dir, 'config.json'), 'w', encoding='utf-8') as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f)


def read_config(config_dir):
    with open(os.path.join(config_dir, 'config.json'), encoding='utf-8') as f:
        return json.load(f)


class TestLoadConfig:

    def test_defaults_without_file(self, editor):
        assert editor.zoom_level == ZOOM_DEFAULT
        assert editor.removal_tolerance == DEFAULT_REMOVAL_TOLERANCE
        assert editor.recent_files == []

    def test_values_loaded(self, config_dir, tmp_path):
        existing = tmp_path / 'a.png'
        existing.write_bytes(b'x')
        write_config(config_dir, {
            'zoom_level': 1.5,
            'removal_tolerance': 60,
            'recent_files': [str(existing), str(tmp_path / 'gone.png')],
        })
        editor = CompositionEditor(config_dir=config_dir)
        assert editor.zoom_level == 1.5
        assert editor.removal_tolerance == 60
        assert editor.recent_files == [str(existing)]

    def test_out_of_range_values_clamped(self, config_dir):
        write_config(config_dir, {'zoom_level': 9, 'removal_tolerance': -3})
        editor = CompositionEditor(config_dir=config_dir)
        assert editor.zoom_level == ZOOM_MAX
        assert editor.removal_tolerance == 0

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"zoom_level": "big"}'])
    def test_broken_config_falls_back(self, config_dir, content):
        write_config(config_dir, content)
        editor = CompositionEditor(config_dir=config_dir)
        assert editor.zoom_level == ZOOM_DEFAULT
        assert editor.recent_files == []


class TestSaveConfig:

    def test_zoom_round_trip(self, editor, config_dir):
        assert editor.zoom_in() == 0.9
        assert read_config(config_dir)['zoom_level'] == 0.9
        assert CompositionEditor(config_dir=config_dir).zoom_level == 0.9

    def test_zoom_bounds(self, editor):
        editor.set_zoom(ZOOM_MIN)
        assert editor.zoom_out() == ZOOM_MIN
        editor.set_zoom(ZOOM_MAX)
        assert editor.zoom_in() == ZOOM_MAX

    def test_zoom_is_not_history(self, editor):
        editor.zoom_in()
        assert len(editor.history_manager) == 1

    def test_recent_files_order_and_limit(self, editor, config_dir):
        for i in range(MAX_RECENT_FILES + 3):
            editor._add_to_recent_files(f"/tmp/file{i}.png")
        editor._add_to_recent_files("/tmp/file5.png")
        assert len(editor.recent_files) == MAX_RECENT_FILES
        assert editor.recent_files[0] == "/tmp/file5.png"
        assert editor.recent_files.count("/tmp/file5.png") == 1
        assert read_config(config_dir)['recent_files'] == editor.recent_files

    def test_clear_recent_files(self, editor, config_dir):
        editor._add_to_recent_files("/tmp/a.png")
        editor.clear_recent_files()
        assert read_config(config_dir)['recent_files'] == []

    def test_removal_tolerance_clamped_and_saved(self, editor, config_dir):
        editor.set_removal_tolerance(1000)
        assert editor.removal_tolerance == pytest.approx(441.67, abs=0.01)
        assert read_config(config_dir)['removal_tolerance'] == editor.removal_tolerance

    def test_unwritable_config_dir_is_not_fatal(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text("a file, not a directory")
        editor = CompositionEditor(config_dir=str(blocker / 'sub'))
        assert editor.set_zoom(1.2) == 1.2
