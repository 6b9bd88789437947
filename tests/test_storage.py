import json

import pytest

from storage import JsonStore, load_high_score, save_high_score
from settings import HIGHSCORE_KEY


def test_missing_file_reads_zero(tmp_path):
    store = JsonStore(tmp_path / "hs.json")
    assert load_high_score(store) == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "hs.json"
    save_high_score(JsonStore(path), 42)
    assert json.loads(path.read_text(encoding="utf-8")) == {HIGHSCORE_KEY: 42}
    assert load_high_score(JsonStore(path)) == 42


def test_set_keeps_other_keys(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text(json.dumps({"volume": 3}), encoding="utf-8")
    JsonStore(path).set(HIGHSCORE_KEY, 9)
    assert json.loads(path.read_text(encoding="utf-8")) == {"volume": 3, HIGHSCORE_KEY: 9}


@pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"highScore": "inf"}', '{"highScore": "abc"}', '{"highScore": null}'])
def test_bad_data_degrades_to_zero(tmp_path, content):
    path = tmp_path / "hs.json"
    path.write_text(content, encoding="utf-8")
    assert load_high_score(JsonStore(path)) == 0


def test_numeric_strings_are_accepted(store):
    store.data[HIGHSCORE_KEY] = " 17 "
    assert load_high_score(store) == 17


@pytest.mark.parametrize("raw", [12.5, "12.5", "12"])
def test_fractional_values_keep_leading_integer(store, raw):
    store.data[HIGHSCORE_KEY] = raw
    assert load_high_score(store) == 12


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = JsonStore(blocker / "hs.json")
    save_high_score(store, 5)
    assert "Could not write" in caplog.text
