"""Tests for the command-line scripts under scripts/countries/."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts" / "countries"


def load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def analyze_script():
    return load_script("analyze_coverage")


class TestExpandPaths:
    def test_same_basename_in_two_directories(self, analyze_script, tmp_path):
        for sub in ("2024", "2025"):
            (tmp_path / sub).mkdir()
            (tmp_path / sub / "gdp.json").write_text(json.dumps({"France": 1}), encoding="utf-8")

        sources = analyze_script.expand_paths([str(tmp_path / "2024"), str(tmp_path / "2025")])
        assert len(sources) == 2
        assert set(sources.values()) == {tmp_path / "2024" / "gdp.json", tmp_path / "2025" / "gdp.json"}

    def test_files_and_urls_pass_through(self, analyze_script, tmp_path):
        path = tmp_path / "area.json"
        path.write_text("{}", encoding="utf-8")
        url = "https://example.org/quiz_data.json"

        sources = analyze_script.expand_paths([str(path), url])
        assert sources == {str(path): path, url: url}

    def test_directory_only_json(self, analyze_script, tmp_path):
        (tmp_path / "a.json").write_text("{}", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        assert list(analyze_script.expand_paths([str(tmp_path)])) == [str(tmp_path / "a.json")]
