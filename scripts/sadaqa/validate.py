from datetime import date

from sadaqa.config import FEATURED_LIMIT

# collection -> (required fields, required bool fields)
RECORD_CONTRACTS = {
    "works": (("date",), ()),
    "advertisements": (("date",), ("active",)),
    "announcements": (("date",), ("published",)),
}

# bilingual fields shown on each record kind; a missing locale renders as ""
DISPLAY_FIELDS = {
    "works": ("title", "description"),
    "advertisements": ("title",),
    "announcements": ("title",),
    "home": ("heroTitle", "heroSlogan"),
    "about": ("title", "content"),
    "legal": ("title", "content"),
}

LOCALE_SUFFIXES = ("Ar", "Fr")


def parse_date(value):
    """ISO date (``YYYY-MM-DD``, optionally followed by a time) -> date, or None."""
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _images_of(record):
    images = record.get("images")
    if images is None and "image" in record:
        images = [record["image"]]
    return images


def _is_bilingual_key(key) -> bool:
    return isinstance(key, str) and len(key) > 2 and key.endswith(LOCALE_SUFFIXES)


def check_record(collection: str, item_id: str, record) -> list:
    if not isinstance(record, dict):
        return [f"{collection}/{item_id}: expected an object, got {type(record).__name__}"]

    problems = []

    if collection == "pages":
        required, bools = (), ()
    else:
        required, bools = RECORD_CONTRACTS.get(collection, ((), ()))

    for key in required:
        value = record.get(key)
        if not isinstance(value, str) or not value.strip():
            problems.append(f"{collection}/{item_id}: missing field {key!r}")

    for key in bools:
        if not isinstance(record.get(key), bool):
            problems.append(f"{collection}/{item_id}: {key!r} must be true or false")

    # per-locale text is optional, but when present it must be text
    for key, value in record.items():
        if _is_bilingual_key(key) and value is not None and not isinstance(value, str):
            problems.append(f"{collection}/{item_id}: {key!r} must be text")

    if "date" in required and isinstance(record.get("date"), str) and parse_date(record["date"]) is None:
        problems.append(f"{collection}/{item_id}: date {record['date']!r} is not an ISO date")

    if collection == "works":
        if "featured" in record and not isinstance(record["featured"], bool):
            problems.append(f"{collection}/{item_id}: 'featured' must be true or false")

    if collection in ("works", "advertisements"):
        images = _images_of(record)
        if images is None and collection == "works":
            problems.append(f"{collection}/{item_id}: missing 'images'")
        elif images is not None and (
            not isinstance(images, list) or not all(isinstance(u, str) for u in images)
        ):
            problems.append(f"{collection}/{item_id}: images must be a list of URLs")

    return problems


def normalize_record(collection: str, item_id: str, record) -> dict:
    """Copy of ``record`` with location-derived id and defaulted optional fields."""
    out = dict(record)
    out["id"] = item_id

    if collection in ("works", "advertisements"):
        out["images"] = list(_images_of(record) or [])
    if collection == "works":
        out.setdefault("featured", False)

    return out


def missing_translations(kind: str, record) -> list:
    """Display fields of ``record`` that have no text in some locale, e.g. ``titleFr``."""
    missing = []
    for field in DISPLAY_FIELDS.get(kind, ()):
        for suffix in LOCALE_SUFFIXES:
            value = record.get(f"{field}{suffix}")
            if not isinstance(value, str) or not value.strip():
                missing.append(f"{field}{suffix}")
    return missing


def validate_collection(collection: str, items):
    errors = []
    warnings = []

    # helpers
    def find_dupes(ids):
        seen = set()
        dupes = set()
        for x in ids:
            if x in seen:
                dupes.add(x)
            seen.add(x)
        return sorted(d for d in dupes if d)

    ids = [it.get("id") for it in items if isinstance(it, dict)]
    dupes = find_dupes(ids)
    if dupes:
        warnings.append(f"Duplicate {collection} ids: {dupes[:10]}" + (" ..." if len(dupes) > 10 else ""))

    for it in items:
        if not isinstance(it, dict):
            errors.append(f"{collection}: non-object item")
            continue
        errors.extend(check_record(collection, it.get("id") or "?", it))

    if collection == "works":
        featured = [it for it in items if isinstance(it, dict) and it.get("featured") is True]
        if len(featured) > FEATURED_LIMIT:
            warnings.append(
                f"{len(featured)} featured works, only {FEATURED_LIMIT} are shown on the home page"
            )

    if collection in ("works", "advertisements"):
        for it in items:
            if isinstance(it, dict) and not _images_of(it):
                warnings.append(f"{collection}/{it.get('id')}: no images")

    for it in items:
        if isinstance(it, dict):
            missing = missing_translations(collection, it)
            if missing:
                warnings.append(f"{collection}/{it.get('id')}: no text for {', '.join(missing)}")

    return errors, warnings
