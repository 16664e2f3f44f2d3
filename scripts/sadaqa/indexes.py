import json
import logging
import re
from pathlib import Path

from sadaqa.config import INDEXED_COLLECTIONS
from sadaqa.errors import ContentError, MissingIndex, MissingItem
from sadaqa.store import INDEX_FILE, index_path

log = logging.getLogger(__name__)


def _is_manifest(data) -> bool:
    return isinstance(data, list) and all(isinstance(x, str) and x for x in data)


_ID_PATTERN = re.compile(r"\w[\w.-]*")


def is_safe_id(item_id) -> bool:
    """Ids become file names and URL segments: no separators, no ``..``."""
    return (
        isinstance(item_id, str)
        and _ID_PATTERN.fullmatch(item_id) is not None
        and ".." not in item_id
    )


def _safe_ids(collection, ids):
    kept = []
    for item_id in ids:
        if item_id == "index":
            continue
        if not is_safe_id(item_id):
            log.warning("Ignoring %s id %r: not a plain file name", collection, item_id)
            continue
        kept.append(item_id)
    return kept


def list_ids(store, collection: str) -> list:
    """Ordered ids of a collection, from its manifest or a directory listing.

    Never raises for content problems: a collection that does not exist is an
    empty list, reported only through the log. Ids that could escape the
    collection's folder (``a/b``, ``../x``) are dropped with a warning.
    """
    try:
        manifest = store.fetch(index_path(collection))
    except MissingItem:
        manifest = None
    except ContentError as e:
        log.warning("Ignoring unreadable manifest for %s: %s", collection, e)
        manifest = None

    if manifest is not None:
        if _is_manifest(manifest):
            return _safe_ids(collection, manifest)
        log.warning("Ignoring manifest for %s: expected a list of ids", collection)

    try:
        listed = store.list_documents(collection)
    except MissingIndex as e:
        log.warning("Collection %s not found in %r, treating as empty: %s", collection, store, e)
        return []
    return _safe_ids(collection, listed)


def generate_index(content_dir: Path, collection: str) -> list:
    folder = Path(content_dir) / collection
    if folder.is_dir():
        ids = sorted(
            p.stem for p in folder.glob("*.json")
            if p.is_file() and p.name != INDEX_FILE
        )
    else:
        print(f"WARNING: source directory {folder} does not exist")
        ids = []

    folder.mkdir(parents=True, exist_ok=True)
    with open(folder / INDEX_FILE, "w", encoding="utf-8") as f:
        json.dump(ids, f, ensure_ascii=False, indent=2)

    print(f"✔ {collection}/{INDEX_FILE} generated ({len(ids)} items)")
    return ids


def generate_indexes(content_dir: Path, collections=INDEXED_COLLECTIONS) -> dict:
    return {c: generate_index(content_dir, c) for c in collections}


def build_item_lookup(items) -> dict:
    return {it["id"]: it for it in items if it.get("id")}
