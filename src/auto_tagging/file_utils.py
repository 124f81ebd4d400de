import json
import logging
import os
import re
from typing import Iterable, Iterator, List, Tuple

from .data_models import ContentItem

logger = logging.getLogger(__name__)


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def out_path_for_input(output_dir: str, input_path: str) -> str:
    base = os.path.basename(input_path)
    base = re.sub(r"\.jsonl?$", "", base, flags=re.IGNORECASE)
    return os.path.join(output_dir, f"{base}.tags.jsonl")


def iter_records(path: str) -> Iterator[dict]:
    """
    Records from a JSON file (a list, or an object with an "items" list) or
    from JSONL, one object per line. Blank lines are ignored; JSONL lines that
    do not decode to an object are logged and skipped.
    """
    with open(path, "r", encoding="utf-8") as f:
        if path.lower().endswith(".jsonl"):
            for lineno, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    rec = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning("%s:%d: skipping undecodable line: %s", path, lineno, e)
                    continue
                if isinstance(rec, dict):
                    yield rec
                else:
                    logger.warning("%s:%d: skipping non-object line", path, lineno)
            return
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("items", []) or []
    for rec in data:
        if isinstance(rec, dict):
            yield rec


def iter_items_from_file(path: str) -> Iterable[Tuple[ContentItem, List[str], List[str]]]:
    """
    Yield (item, extra_texts, extra_keywords). Fetched page content may be
    carried alongside an item as "extra_texts" and "keywords".
    """
    for rec in iter_records(path):
        extra_texts = [t for t in (rec.get("extra_texts") or []) if isinstance(t, str)]
        keywords = [k for k in (rec.get("keywords") or []) if isinstance(k, str)]
        yield ContentItem.from_dict(rec), extra_texts, keywords
