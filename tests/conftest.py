"""
Pytest fixtures for the site generator tests.

Content stores are either a throwaway directory under ``tmp_path`` laid out
like the deployed ``content/`` folder, or an in-memory fake that counts how
often each path is fetched.
"""

import json
import sys
from pathlib import Path

import pytest

# Add scripts/ to path so tests can import the sadaqa package without installing it
scripts_dir = Path(__file__).parent.parent / "scripts"
if str(scripts_dir) not in sys.path:
    sys.path.insert(0, str(scripts_dir))

from sadaqa.errors import MalformedContent, MissingIndex, MissingItem  # noqa: E402


WORKS = {
    "work-2024-01": {
        "titleAr": "توزيع السلال الغذائية",
        "titleFr": "Distribution de paniers alimentaires",
        "descriptionAr": "توزيع على الأسر المتعففة",
        "descriptionFr": "Distribution aux familles nécessiteuses",
        "images": ["https://img.example/w1a.jpg", "https://img.example/w1b.jpg"],
        "date": "2024-01-10",
        "featured": True,
    },
    "work-2023-11": {
        "titleAr": "حفر بئر",
        "titleFr": "Forage d'un puits",
        "descriptionAr": "بئر جديد للقرية",
        "descriptionFr": "Un nouveau puits pour le village",
        "images": ["https://img.example/w2.jpg"],
        "date": "2023-11-05",
        "featured": False,
    },
}

ADVERTISEMENTS = {
    "ad-ramadan": {
        "titleAr": "حملة رمضان",
        "titleFr": "Campagne du Ramadan",
        "images": ["https://img.example/ad1.jpg", "https://img.example/ad1b.jpg"],
        "date": "2024-03-01",
        "active": True,
    },
    "ad-old": {
        "titleAr": "إعلان قديم",
        "titleFr": "Ancienne annonce",
        "image": "https://img.example/ad2.jpg",
        "date": "2023-01-01",
        "active": False,
    },
}

ANNOUNCEMENTS = {
    "ann-1": {"titleAr": "اجتماع", "titleFr": "Réunion", "date": "2024-02-01", "published": True},
    "ann-draft": {"titleAr": "مسودة", "titleFr": "Brouillon", "date": "2024-05-01", "published": False},
}

PAGES = {
    "home": {
        "heroTitleAr": "جمعية مانقص مال من صدقة",
        "heroTitleFr": "Association Manqass Mal Min Sadaqa",
        "heroSloganAr": "معاً من أجل الخير",
        "heroSloganFr": "Ensemble pour le bien",
    },
    "about": {
        "titleAr": "من نحن",
        "titleFr": "Qui sommes-nous",
        "contentAr": "## رسالتنا\n\nخدمة المجتمع.",
        "contentFr": "## Notre mission\n\nServir la communauté.",
    },
    "legal": {
        "titleAr": "النظام الداخلي",
        "titleFr": "Règlement intérieur",
        "contentAr": "### المادة 1\n\nالاسم.",
        "contentFr": "### Article 1\n\nLe nom.",
    },
}


def write_collection(root: Path, collection: str, docs: dict, index=True):
    folder = root / collection
    folder.mkdir(parents=True, exist_ok=True)
    for item_id, body in docs.items():
        (folder / f"{item_id}.json").write_text(json.dumps(body, ensure_ascii=False), encoding="utf-8")
    if index:
        (folder / "index.json").write_text(json.dumps(list(docs)), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path):
    """A complete content store on disk."""
    root = tmp_path / "content"
    write_collection(root, "works", WORKS)
    write_collection(root, "advertisements", ADVERTISEMENTS)
    write_collection(root, "announcements", ANNOUNCEMENTS)
    write_collection(root, "pages", PAGES, index=False)
    return root


class FakeStore:
    """In-memory content store keyed by path, e.g. ``works/index.json``."""

    def __init__(self, documents=None, raw=None):
        self.documents = dict(documents or {})
        # path -> text that is not valid JSON
        self.raw = dict(raw or {})
        self.fetches = []

    @classmethod
    def from_collections(cls, **collections):
        docs = {}
        for name, items in collections.items():
            if name != "pages":
                docs[f"{name}/index.json"] = list(items)
            for item_id, body in items.items():
                docs[f"{name}/{item_id}.json"] = body
        return cls(docs)

    def fetch(self, path):
        self.fetches.append(path)
        if path in self.raw:
            raise MalformedContent(f"{path} is not valid JSON")
        if path not in self.documents:
            raise MissingItem(f"{path} not found")
        return json.loads(json.dumps(self.documents[path]))

    def list_documents(self, collection):
        prefix = f"{collection}/"
        names = [
            p[len(prefix):-len(".json")]
            for p in list(self.documents) + list(self.raw)
            if p.startswith(prefix) and p != f"{collection}/index.json"
        ]
        if not names:
            raise MissingIndex(f"no documents under {prefix}")
        return sorted(names)


@pytest.fixture
def fake_store():
    return FakeStore.from_collections(
        works=WORKS,
        advertisements=ADVERTISEMENTS,
        announcements=ANNOUNCEMENTS,
        pages=PAGES,
    )
