import json

import pytest

from json_split_aom.errors import JsonParseError, SplitIOError
from json_split_aom.io_utils import parse_json_text, write_text
from json_split_aom.naming import output_filename, output_path
from json_split_aom.serialization import to_json
from json_split_aom.splitter import SplitOptions


def test_output_filename():
    assert output_filename("Apple.Banana", "id", "12") == "Apple.Banana-id-12.json"
    assert output_filename("Apple", "Banana.id", "x", ext=".txt") == "Apple-Banana.id-x.txt"


def test_output_path_uses_output_dir(tmp_path):
    options = SplitOptions("A", "id", output_dir=str(tmp_path))
    assert output_path(options, "7") == str(tmp_path / "A-id-7.json")


def test_compact_serialization():
    value = {"id": "x", "n": [1, 2.5, None, True], "s": "café \"q\""}
    assert to_json(value) == '{"id":"x","n":[1,2.5,null,true],"s":"café \\"q\\""}'


def test_pretty_serialization():
    assert to_json({"a": [1], "b": {}}, pretty=True) == '{\n  "a": [\n    1\n  ],\n  "b": {}\n}'


def test_key_order_preserved():
    assert to_json({"z": 1, "a": 2}) == '{"z":1,"a":2}'


@pytest.mark.parametrize("pretty", [False, True])
def test_serialization_is_a_fixed_point(pretty):
    text = '{"id":"über","vals":[1e300,-0.0,1.10,12345678901234567890],"nested":{"k":[{"x":null}]}}'
    once = to_json(json.loads(text), pretty)
    assert to_json(parse_json_text(once), pretty) == once


@pytest.mark.parametrize("text", [
    "NaN",
    "1e400",
    '{"a": Infinity}',
    "[-Infinity]",
    "{",
    "",
    '{"s": "\\ud800"}',
    "[" * 100000 + "]" * 100000,
])
def test_parse_rejects_invalid_json(text):
    with pytest.raises(JsonParseError):
        parse_json_text(text, "in.json")


def test_parse_rejects_bad_utf8():
    with pytest.raises(JsonParseError):
        parse_json_text(b'"\xff"', "in.json")


def test_parse_accepts_surrogate_pairs():
    assert parse_json_text('"\\ud83d\\ude00"') == "\U0001F600"


def test_write_text_unencodable_leaves_no_file(tmp_path):
    target = tmp_path / "out.json"
    with pytest.raises(SplitIOError):
        write_text(target, '"\ud800"')
    assert not target.exists()
