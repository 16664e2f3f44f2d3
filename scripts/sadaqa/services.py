import concurrent.futures
import logging

from sadaqa.indexes import build_item_lookup
from sadaqa.templating import root

log = logging.getLogger(__name__)


def page_url(locale: str, name: str) -> str:
    return root(f"/{locale}/{name}.html")


def breadcrumbs(items):
    """[(label, href or None), ...] -> crumbs with site-rooted links."""
    crumbs = []
    for label, href in items:
        crumbs.append({"label": label, "href": root(href) if href else None})
    return crumbs


class Gallery:
    """List view with a detail overlay for one selected item.

    The items are held as loaded; opening and closing the detail view never
    goes back to the content store.
    """

    def __init__(self, items):
        self.items = list(items)
        self._by_id = build_item_lookup(self.items)
        self.selected = None

    def select(self, item_id: str):
        item = self._by_id.get(item_id)
        if item is None:
            log.warning("No item %r in gallery", item_id)
            return None
        self.selected = item
        return item

    def close(self):
        self.selected = None
        return self.items

    @property
    def images(self):
        if self.selected is None:
            return []
        return list(self.selected.get("images") or [])

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


class HomeSections:
    """Result slots for the home page; a slot stays None until its load finishes."""

    def __init__(self):
        self.page = None
        self.featured = None
        self.advertisements = None

    @property
    def ready(self):
        return {
            "hero": self.page is not None,
            "featured": self.featured is not None,
            "advertisements": self.advertisements is not None,
        }


def compose_home(loader, featured_limit=None, max_workers=3) -> HomeSections:
    sections = HomeSections()

    featured_args = () if featured_limit is None else (featured_limit,)
    jobs = {
        "page": (loader.load_page, ("home",)),
        "featured": (loader.load_featured_works, featured_args),
        "advertisements": (loader.load_advertisements, ()),
    }

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(fn, *args): slot
            for slot, (fn, args) in jobs.items()
        }
        # slots fill in whatever order the loads finish
        for future in concurrent.futures.as_completed(futures):
            slot = futures[future]
            setattr(sections, slot, future.result())
            log.debug("Home section %s loaded", slot)

    return sections
