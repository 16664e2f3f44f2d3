"""Tests for gallery state and home page composition."""

import threading

from conftest import FakeStore, PAGES, WORKS

from sadaqa.data_loader import ContentLoader
from sadaqa.services import Gallery, HomeSections, breadcrumbs, compose_home, page_url


class TestGallery:
    """Tests for Gallery select/close."""

    def test_select_shows_all_images(self, fake_store) -> None:
        gallery = Gallery(ContentLoader(fake_store).load_works())
        item = gallery.select("work-2024-01")

        assert item["id"] == "work-2024-01"
        assert gallery.selected is item
        assert gallery.images == WORKS["work-2024-01"]["images"]

    def test_close_returns_list_without_refetch(self, fake_store) -> None:
        loader = ContentLoader(fake_store)
        gallery = Gallery(loader.load_works())
        fetches_before = len(fake_store.fetches)

        gallery.select("work-2023-11")
        items = gallery.close()

        assert gallery.selected is None
        assert gallery.images == []
        assert [w["id"] for w in items] == ["work-2024-01", "work-2023-11"]
        assert len(fake_store.fetches) == fetches_before

    def test_select_unknown_keeps_list(self, fake_store) -> None:
        gallery = Gallery(ContentLoader(fake_store).load_works())
        assert gallery.select("missing") is None
        assert gallery.selected is None
        assert len(gallery) == 2


class SlowStore(FakeStore):
    """Holds home.json back until the other home loads have fetched."""

    def __init__(self, documents):
        super().__init__(documents)
        self.release = threading.Event()

    def fetch(self, path):
        if path == "pages/home.json":
            self.release.wait(timeout=5)
            return super().fetch(path)
        result = super().fetch(path)
        if path == "advertisements/index.json":
            self.release.set()
        return result


class TestComposeHome:
    """Tests for compose_home."""

    def test_all_sections_filled(self, fake_store) -> None:
        sections = compose_home(ContentLoader(fake_store))

        assert sections.page["heroTitleAr"] == PAGES["home"]["heroTitleAr"]
        assert [w["id"] for w in sections.featured] == ["work-2024-01"]
        assert [a["id"] for a in sections.advertisements] == ["ad-ramadan"]
        assert all(sections.ready.values())

    def test_missing_home_page_leaves_only_hero_empty(self) -> None:
        store = FakeStore.from_collections(works=WORKS, advertisements={})
        sections = compose_home(ContentLoader(store))

        assert sections.page is None
        assert sections.ready == {"hero": False, "featured": True, "advertisements": True}
        assert sections.advertisements == []

    def test_tolerates_any_completion_order(self, fake_store) -> None:
        store = SlowStore(fake_store.documents)
        sections = compose_home(ContentLoader(store))

        assert sections.page is not None
        assert store.fetches.index("advertisements/index.json") < store.fetches.index("pages/home.json")

    def test_featured_limit_passed_through(self) -> None:
        works = {f"w{i}": dict(WORKS["work-2024-01"], featured=True) for i in range(5)}
        store = FakeStore.from_collections(works=works)
        sections = compose_home(ContentLoader(store), featured_limit=2)
        assert len(sections.featured) == 2


def test_empty_sections_not_ready() -> None:
    assert HomeSections().ready == {"hero": False, "featured": False, "advertisements": False}


def test_links(monkeypatch) -> None:
    monkeypatch.setattr("sadaqa.services.root", lambda path: "/site" + path)
    assert page_url("fr", "works") == "/site/fr/works.html"
    assert breadcrumbs([("Home", "/ar/index.html"), ("Title", None)]) == [
        {"label": "Home", "href": "/site/ar/index.html"},
        {"label": "Title", "href": None},
    ]
