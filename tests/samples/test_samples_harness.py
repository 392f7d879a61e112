import json
import os

import pytest

import json_parser as jp

TEST_DIR = os.path.dirname(__file__)

sample_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".json"))

# pass*.json is plain JSON; lenient*.json has a lenient*.expected twin
VALID_FILES = [f for f in sample_files if f.startswith("pass")]
LENIENT_FILES = [f for f in sample_files if f.startswith("lenient")]

# Hard fail if sample files are missing
if not VALID_FILES:
    raise RuntimeError("No pass*.json files found in samples directory")
if not LENIENT_FILES:
    raise RuntimeError("No lenient*.json files found in samples directory")

def _read(name):
    with open(os.path.join(TEST_DIR, name), encoding="utf-8") as fh:
        return fh.read()

@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_json_matches_stdlib(filename):
    text = _read(filename)
    assert jp.parse(text) == json.loads(text), f"tree mismatch for {filename}"

@pytest.mark.parametrize("filename", LENIENT_FILES)
def test_lenient_json_recovers(filename):
    expected = json.loads(_read(filename.replace(".json", ".expected")))
    assert jp.parse(_read(filename)) == expected, f"tree mismatch for {filename}"
