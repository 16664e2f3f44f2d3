"""Transports for the content store.

A store answers two questions: "give me the JSON body at this path" and
"which documents live in this collection". Documents are addressed as
``<collection>/<id>.json``; the manifest lives at ``<collection>/index.json``.
"""

import json
import logging
import threading
from pathlib import Path

import requests

from sadaqa.errors import MalformedContent, MissingIndex, MissingItem

log = logging.getLogger(__name__)

INDEX_FILE = "index.json"


def document_path(collection: str, item_id: str) -> str:
    return f"{collection}/{item_id}.json"


def index_path(collection: str) -> str:
    return f"{collection}/{INDEX_FILE}"


class FileContentStore:
    def __init__(self, root):
        self.root = Path(root)

    def fetch(self, path: str):
        full = self.root / path
        try:
            with open(full, encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError as e:
            raise MissingItem(f"{path} not found") from e
        except OSError as e:
            raise MissingItem(f"{path} could not be read: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedContent(f"{path} is not valid JSON: {e}") from e

    def list_documents(self, collection: str):
        folder = self.root / collection
        if not folder.is_dir():
            raise MissingIndex(f"{folder} does not exist")
        return sorted(
            p.stem for p in folder.glob("*.json")
            if p.is_file() and p.name != INDEX_FILE
        )

    def __repr__(self):
        return f"FileContentStore({str(self.root)!r})"


class HttpContentStore:
    """Reads documents over HTTP GET, e.g. from the deployed site's /content/.

    ``requests.Session`` is not thread-safe, and the home page loads its
    sections on a thread pool, so each thread gets its own session unless one
    is injected.
    """

    def __init__(self, base_url: str, session=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.timeout = timeout
        self._local = threading.local()

    def _session(self):
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def fetch(self, path: str):
        url = f"{self.base_url}/{path}"
        try:
            response = self._session().get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise MissingItem(f"GET {url} failed: {e}") from e

        if response.status_code == 404:
            raise MissingItem(f"{path} not found")
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise MissingItem(f"GET {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedContent(f"{path} is not valid JSON: {e}") from e

    def list_documents(self, collection: str):
        # no directory listing over HTTP; the manifest is the only enumeration
        raise MissingIndex(f"no {INDEX_FILE} for {collection} at {self.base_url}")

    def __repr__(self):
        return f"HttpContentStore({self.base_url!r})"
