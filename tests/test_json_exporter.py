"""Tests for JSON export."""

from __future__ import annotations

import json

import pytest

from adapters.json_exporter import dumps_pretty, write_json_to_file
from core.domain.models import Feedback
from core.errors import ExportError


def test_write_json_to_file_pretty_prints(tmp_path):
    target = tmp_path / "nested" / "out.json"

    path = write_json_to_file({"name": "café", "items": [1, 2]}, target)

    assert path == target
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '  "name": "café"' in text
    assert json.loads(text) == {"name": "café", "items": [1, 2]}


def test_write_json_to_file_overwrites(tmp_path):
    target = tmp_path / "out.json"
    write_json_to_file({"a": 1}, target)
    write_json_to_file([], str(target))

    assert json.loads(target.read_text(encoding="utf-8")) == []


def test_write_json_to_file_accepts_models(tmp_path):
    target = write_json_to_file(Feedback.from_error(RuntimeError("boom")), tmp_path / "err.json")

    assert json.loads(target.read_text(encoding="utf-8")) == {
        "items": [{"title": "Error", "subtitle": "boom"}]
    }


def test_write_json_to_file_rejects_unserializable(tmp_path):
    with pytest.raises(ExportError) as excinfo:
        write_json_to_file({"bad": object()}, tmp_path / "bad.json")

    assert excinfo.value.path == tmp_path / "bad.json"
    assert not (tmp_path / "bad.json").exists()


def test_write_json_to_file_reports_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(ExportError):
        write_json_to_file({"a": 1}, blocker / "child.json")


def test_dumps_pretty_keeps_key_order():
    assert dumps_pretty({"b": 1, "a": 2}) == '{\n  "b": 1,\n  "a": 2\n}'
