#!/usr/bin/env python3
"""
End-to-end checks for the command line entry point.
"""
import json
import os

import pytest

from auto_tagging.__main__ import main
from auto_tagging.file_utils import iter_records, out_path_for_input
from auto_tagging.store import SQLiteTagStore

ITEMS = [
    {
        "id": "item-1",
        "type": "url",
        "title": "React Native docs",
        "url": "https://reactnative.dev/docs/getting-started",
    },
    {"id": "item-2", "type": "image", "title": "Sunset hike", "notes": "Hiking at sunset in the mountains"},
    {"id": "item-3"},
]


def _write_json(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)


def _read_jsonl(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


def test_out_path_for_input():
    assert out_path_for_input("out", "data/items.json") == os.path.join("out", "items.tags.jsonl")
    assert out_path_for_input("out", "inbox.JSONL") == os.path.join("out", "inbox.tags.jsonl")


def test_iter_records_formats(tmp_path):
    as_list = tmp_path / "a.json"
    as_object = tmp_path / "b.json"
    as_lines = tmp_path / "c.jsonl"
    _write_json(str(as_list), ITEMS)
    _write_json(str(as_object), {"items": ITEMS})
    as_lines.write_text("\n".join(json.dumps(i) for i in ITEMS) + "\n\n", encoding="utf-8")
    for p in (as_list, as_object, as_lines):
        assert [r["id"] for r in iter_records(str(p))] == ["item-1", "item-2", "item-3"]


def test_cli_writes_candidates(tmp_path):
    inp = tmp_path / "items.json"
    _write_json(str(inp), ITEMS)
    out_dir = tmp_path / "out"
    assert main(["--input-file", str(inp), "--output-dir", str(out_dir), "--topk", "3"]) == 0

    records = _read_jsonl(str(out_dir / "items.tags.jsonl"))
    assert [r["id"] for r in records] == ["item-1", "item-2", "item-3"]
    assert records[0]["tags"][0]["name"] == "react native"
    assert "title" in records[0]["tags"][0]["sources"]
    assert all(len(r["tags"]) <= 3 for r in records)
    assert records[2]["tags"] == []


def test_cli_assign_and_feedback(tmp_path):
    inp = tmp_path / "items.json"
    _write_json(str(inp), ITEMS)
    db = str(tmp_path / "tags.sqlite")
    out_dir = str(tmp_path / "out")
    assert main(["--input-file", str(inp), "--output-dir", out_dir, "--db", db, "--assign"]) == 0

    with SQLiteTagStore(db) as store:
        before = {a.tag_id: a.confidence for a in store.get_associations_for_item("item-2")}
    assert before

    events = tmp_path / "swipes.jsonl"
    events.write_text(
        json.dumps({"item_id": "item-2", "decision": "dislike", "timestamp": 10.0}) + "\n",
        encoding="utf-8",
    )
    for _ in range(2):
        assert main(["--db", db, "--feedback-file", str(events)]) == 0

    with SQLiteTagStore(db) as store:
        after = {a.tag_id: a.confidence for a in store.get_associations_for_item("item-2")}
    # applied once despite two runs
    for tag_id, c in before.items():
        assert after[tag_id] == pytest.approx(c * 0.9)


def test_cli_requires_db_for_assign(tmp_path):
    inp = tmp_path / "items.json"
    _write_json(str(inp), ITEMS)
    with pytest.raises(SystemExit):
        main(["--input-file", str(inp), "--assign"])
    with pytest.raises(SystemExit):
        main([])


def test_iter_records_skips_bad_jsonl_lines(tmp_path):
    p = tmp_path / "mixed.jsonl"
    p.write_text('{"id": "a"}\n{not json\n[1, 2]\n{"id": "b"}\n', encoding="utf-8")
    assert [r["id"] for r in iter_records(str(p))] == ["a", "b"]


def test_cli_skips_malformed_feedback_events(tmp_path, capsys):
    inp = tmp_path / "items.json"
    _write_json(str(inp), ITEMS)
    db = str(tmp_path / "tags.sqlite")
    assert main(["--input-file", str(inp), "--output-dir", str(tmp_path / "out"), "--db", db, "--assign"]) == 0

    with SQLiteTagStore(db) as store:
        before = {a.tag_id: a.confidence for a in store.get_associations_for_item("item-2")}

    events = tmp_path / "swipes.jsonl"
    events.write_text(
        "\n".join(
            [
                json.dumps({"item_id": "item-2", "decision": "like"}),
                json.dumps({"item_id": "item-2", "decision": "maybe", "timestamp": 1.0}),
                "{broken",
                json.dumps({"item_id": "item-2", "decision": "like", "timestamp": 11.0}),
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    assert main(["--db", db, "--feedback-file", str(events)]) == 1
    err = capsys.readouterr().err
    assert "applied=1" in err
    assert "invalid=2" in err

    with SQLiteTagStore(db) as store:
        after = {a.tag_id: a.confidence for a in store.get_associations_for_item("item-2")}
    for tag_id, c in before.items():
        assert after[tag_id] == pytest.approx(c + 0.1 * (1 - c))
