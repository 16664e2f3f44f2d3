from pathlib import Path

CONTENT_DIR = Path("public/content")
SITE = Path("site")

COLLECTIONS = ("works", "advertisements", "announcements", "pages")
# collections that get a generated index.json manifest
INDEXED_COLLECTIONS = ("works", "advertisements", "announcements")
PAGE_NAMES = ("home", "about", "legal")

FEATURED_LIMIT = 3

WHATSAPP_URL = "https://wa.me/22244444455"
LOGO_URL = "https://i.postimg.cc/J07msSyW/oiljpoml.png"
HERO_IMAGE_URL = "https://i.postimg.cc/9fNkQznk/180944489-2711536482471444-1968639298452916963-n.jpg"
PAYMENT_IMAGE_URL = "https://i.postimg.cc/XJ95xB7d/pojpoml.png"
