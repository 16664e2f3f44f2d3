import argparse
import logging
import sys
from pathlib import Path

from sadaqa.config import CONTENT_DIR, INDEXED_COLLECTIONS, SITE
from sadaqa.data_loader import ContentLoader
from sadaqa.errors import ContentError
from sadaqa.i18n import DEFAULT_LOCALE, LOCALES, LocaleContext
from sadaqa.pages import (
    build_about,
    build_advertisements,
    build_donate,
    build_home,
    build_legal,
    build_works,
)
from sadaqa.services import compose_home, page_url
from sadaqa.store import FileContentStore, HttpContentStore, document_path
from sadaqa.templating import make_env
from sadaqa.validate import validate_collection

log = logging.getLogger(__name__)


def report(loader):
    """Print the content validation report; returns the number of errors."""
    n_errors = 0
    for collection in INDEXED_COLLECTIONS:
        items = []
        errors = []
        for item_id in loader.list_ids(collection):
            try:
                record = loader.store.fetch(document_path(collection, item_id))
            except ContentError as e:
                errors.append(str(e))
                continue
            items.append(dict(record, id=item_id) if isinstance(record, dict) else record)
        found, warnings = validate_collection(collection, items)
        errors.extend(found)
        for w in warnings:
            print(f"WARNING: {w}")
        for e in errors:
            print(f"ERROR: {e}")
        n_errors += len(errors)
    return n_errors


def build_site(loader, site_dir: Path = SITE, locales=LOCALES, env=None):
    """Write the whole site, one tree per locale, and return the written paths."""
    env = env or make_env()
    site_dir = Path(site_dir)
    site_dir.mkdir(parents=True, exist_ok=True)

    tpl_home = env.get_template("home.html")
    tpl_about = env.get_template("about.html")
    tpl_legal = env.get_template("legal.html")
    tpl_gallery = env.get_template("gallery.html")
    tpl_gallery_item = env.get_template("gallery_item.html")
    tpl_donate = env.get_template("donate.html")
    tpl_redirect = env.get_template("redirect.html")

    # loaded once, rendered in every locale
    sections = compose_home(loader)
    about = loader.load_page("about")
    legal = loader.load_page("legal")
    works = loader.load_works()
    advertisements = loader.load_advertisements()

    written = []
    for locale in locales:
        ctx = LocaleContext(locale)
        out_dir = site_dir / locale

        written.append(build_home(out_dir, tpl_home, ctx, sections))
        written.append(build_about(out_dir, tpl_about, ctx, about))
        written.append(build_legal(out_dir, tpl_legal, ctx, legal))
        written.extend(build_works(out_dir, tpl_gallery, tpl_gallery_item, ctx, works))
        written.extend(build_advertisements(out_dir, tpl_gallery, tpl_gallery_item, ctx, advertisements))
        written.append(build_donate(out_dir, tpl_donate, ctx))

        print(f"✔ {locale}: {len(works)} works, {len(advertisements)} advertisements")

    default = DEFAULT_LOCALE if DEFAULT_LOCALE in locales else locales[0]
    index = site_dir / "index.html"
    index.write_text(
        tpl_redirect.render(locale=default, target=page_url(default, "index")),
        encoding="utf-8",
    )
    written.append(index)

    return [p for p in written if p is not None]


def make_store(source: str):
    if source.startswith(("http://", "https://")):
        return HttpContentStore(source)
    return FileContentStore(source)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build the bilingual association site.")
    parser.add_argument("--content", default=str(CONTENT_DIR),
                        help="content directory or base URL (default: %(default)s)")
    parser.add_argument("--output", default=str(SITE), help="output directory (default: %(default)s)")
    parser.add_argument("--locale", action="append", choices=LOCALES,
                        help="only build this locale (repeatable)")
    parser.add_argument("--strict", action="store_true", help="fail when the content report has errors")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    loader = ContentLoader(make_store(args.content))

    n_errors = report(loader)
    if n_errors and args.strict:
        print(f"{n_errors} content error(s), aborting")
        return 1

    written = build_site(loader, Path(args.output), tuple(args.locale or LOCALES))
    print(f"✔ site built in {args.output} ({len(written)} files)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
