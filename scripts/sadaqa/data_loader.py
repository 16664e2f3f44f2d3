import logging

from sadaqa.config import COLLECTIONS, FEATURED_LIMIT, PAGE_NAMES
from sadaqa.errors import ContentError, MalformedContent
from sadaqa.indexes import is_safe_id, list_ids
from sadaqa.store import document_path
from sadaqa.validate import check_record, normalize_record, parse_date

log = logging.getLogger(__name__)

# collection -> boolean field an item must have set to true to be shown
VISIBILITY_FLAGS = {
    "advertisements": "active",
    "announcements": "published",
}

DATED_COLLECTIONS = ("works", "advertisements", "announcements")


def _check_collection(collection: str):
    if collection not in COLLECTIONS:
        raise ValueError(f"unknown collection {collection!r}, expected one of {COLLECTIONS}")


def newest_first(items):
    # stable: equal dates keep index order
    return sorted(items, key=lambda it: parse_date(it.get("date")), reverse=True)


class ContentLoader:
    """Materializes collection items and pages from a content store.

    Every caller receives already filtered and sorted data. Content failures
    never escape: they are logged and the affected item is left out.
    """

    def __init__(self, store):
        self.store = store

    def list_ids(self, collection: str) -> list:
        _check_collection(collection)
        return list_ids(self.store, collection)

    def _fetch_item(self, collection: str, item_id: str) -> dict:
        if not is_safe_id(item_id):
            raise MalformedContent(f"{collection}/{item_id!r} is not a usable id")
        record = self.store.fetch(document_path(collection, item_id))
        problems = check_record(collection, item_id, record)
        if problems:
            raise MalformedContent("; ".join(problems))
        return normalize_record(collection, item_id, record)

    def load_collection(self, collection: str) -> list:
        _check_collection(collection)

        items = []
        for item_id in list_ids(self.store, collection):
            try:
                items.append(self._fetch_item(collection, item_id))
            except ContentError as e:
                log.error("Skipping %s/%s: %s", collection, item_id, e)

        flag = VISIBILITY_FLAGS.get(collection)
        if flag:
            items = [it for it in items if it.get(flag) is True]

        if collection in DATED_COLLECTIONS:
            items = newest_first(items)

        log.debug("Loaded %d %s", len(items), collection)
        return items

    def load_single(self, collection: str, item_id: str):
        _check_collection(collection)
        try:
            return self._fetch_item(collection, item_id)
        except ContentError as e:
            log.error("Could not load %s/%s: %s", collection, item_id, e)
            return None

    def load_page(self, page_name: str):
        if page_name not in PAGE_NAMES:
            raise ValueError(f"unknown page {page_name!r}, expected one of {PAGE_NAMES}")
        return self.load_single("pages", page_name)

    def load_works(self) -> list:
        return self.load_collection("works")

    def load_advertisements(self) -> list:
        return self.load_collection("advertisements")

    def load_announcements(self) -> list:
        return self.load_collection("announcements")

    def load_featured_works(self, limit: int = FEATURED_LIMIT) -> list:
        featured = [w for w in self.load_collection("works") if w.get("featured") is True]
        # date descending, then id ascending for equal dates
        featured.sort(key=lambda w: w["id"])
        featured = newest_first(featured)
        return featured[:limit]
