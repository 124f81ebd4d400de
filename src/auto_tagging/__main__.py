#!/usr/bin/env python3
"""
Automatic tagging for saved content items.

- Reads one or many JSON/JSONL files of content items
- Produces per-item tag candidates with scores and contributing fields (JSONL)
- Optionally persists the top tags to a SQLite tag store and applies swipe feedback

Usage examples:
  python3 -m auto_tagging --input-file items.json
  python3 -m auto_tagging --input-glob "inbox/*.jsonl" --topk 8
  python3 -m auto_tagging --input-file items.json --db output/tags.sqlite --assign
  python3 -m auto_tagging --db output/tags.sqlite --feedback-file swipes.jsonl

Output:
  For each input file path/to/items.json, writes:
    output/tags/items.tags.jsonl
  Each line is a JSON object with:
    {
      "id": "item-1",
      "type": "url",
      "tags": [
        { "name": "react native", "score": 1.12, "sources": ["title", "url"] },
        ...
      ]
    }
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from glob import glob
from typing import List, Optional

from . import config
from .data_models import SwipeEvent
from .errors import AutoTaggingError, FeedbackPersistenceError
from .feedback import process_swipe_event
from .file_utils import ensure_dir, iter_items_from_file, iter_records, out_path_for_input
from .store import SQLiteTagStore
from .tagger import assign_tags, extract_tag_candidates, max_tags_for


def process_inputs(
    input_paths: List[str],
    output_dir: str,
    topk: int,
    store: Optional[SQLiteTagStore] = None,
) -> int:
    """Tag every item in the input files; returns the number of items processed."""
    if not input_paths:
        print("No input files matched.", file=sys.stderr)
        return 0

    ensure_dir(output_dir)
    total = 0
    for inp in input_paths:
        outp = out_path_for_input(output_dir, inp)
        print(f"[items] processing {inp} -> {outp}", file=sys.stderr)

        count_written = 0
        count_assigned = 0
        with open(outp, "w", encoding="utf-8") as fout:
            for item, extra_texts, keywords in iter_items_from_file(inp):
                candidates = extract_tag_candidates(item, extra_texts, keywords)
                rec = {
                    "id": item.id,
                    "type": item.media_type,
                    "tags": [
                        {
                            "name": c.name,
                            "score": round(c.score, 6),
                            "sources": sorted(s.value for s in c.sources),
                        }
                        for c in candidates[:topk]
                    ],
                }
                fout.write(json.dumps(rec, ensure_ascii=False) + "\n")
                count_written += 1

                if store is not None:
                    result = assign_tags(store, item.id, candidates, max_tags_for(extra_texts))
                    count_assigned += result.tags_assigned

        print(f"[done] wrote {count_written} records to {outp}", file=sys.stderr)
        if store is not None:
            print(f"[store] assigned {count_assigned} tags from {inp}", file=sys.stderr)
        total += count_written
    return total


def process_feedback(feedback_path: str, store: SQLiteTagStore) -> int:
    """
    Apply swipe events in file order. Malformed records are reported and
    skipped. Returns the number of records that were malformed or failed.
    """
    applied = skipped = invalid = failed = 0
    for i, rec in enumerate(iter_records(feedback_path), 1):
        try:
            event = SwipeEvent.from_dict(rec)
        except (KeyError, TypeError, ValueError) as e:
            print(f"[feedback] skipping malformed event #{i}: {e!r}", file=sys.stderr)
            invalid += 1
            continue
        try:
            result = process_swipe_event(store, event)
        except FeedbackPersistenceError as e:
            print(f"[feedback] {e} (will retry on next run)", file=sys.stderr)
            failed += 1
            continue
        if result.already_consumed:
            skipped += 1
        else:
            applied += 1
    print(
        f"[feedback] applied={applied}, already_consumed={skipped}, invalid={invalid}, "
        f"failed={failed} from {feedback_path}",
        file=sys.stderr,
    )
    return invalid + failed


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Extract, validate and assign tags for saved content items.")
    g = ap.add_mutually_exclusive_group()
    g.add_argument("--input-file", type=str, help="Path to one JSON or JSONL file of items")
    g.add_argument("--input-glob", type=str, help="Glob for many item files, e.g., 'inbox/*.jsonl'")
    ap.add_argument("--output-dir", type=str, default=config.DEFAULT_OUTPUT_DIR, help="Directory for output JSONL files")
    ap.add_argument("--topk", type=int, default=config.DEFAULT_MAX_TAGS_WITH_CONTENT, help="Top-K candidates written per item")
    ap.add_argument("--db", type=str, default=None, help=f"SQLite tag store path (e.g., {config.DEFAULT_DB_PATH})")
    ap.add_argument("--assign", action="store_true", help="Persist the top tags of each item to --db")
    ap.add_argument("--feedback-file", type=str, default=None, help="JSONL of swipe events to apply to --db")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not (args.input_file or args.input_glob or args.feedback_file):
        ap.error("one of --input-file, --input-glob or --feedback-file is required")
    if (args.assign or args.feedback_file) and not args.db:
        ap.error("--assign and --feedback-file require --db")

    store: Optional[SQLiteTagStore] = None
    try:
        if args.db:
            store = SQLiteTagStore(args.db)

        if args.input_file or args.input_glob:
            inputs = [args.input_file] if args.input_file else sorted(glob(args.input_glob))
            process_inputs(inputs, args.output_dir, args.topk, store if args.assign else None)

        failed = 0
        if args.feedback_file:
            failed = process_feedback(args.feedback_file, store)
    except AutoTaggingError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    finally:
        if store is not None:
            store.close()
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
