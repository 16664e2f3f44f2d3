import os
from pathlib import Path

import markdown as md
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).parent / "templates"

BASE_PATH = os.environ.get("BASE_PATH", "").strip()
if BASE_PATH:
    BASE_PATH = "/" + BASE_PATH.strip("/")
else:
    BASE_PATH = ""


def root(path: str) -> str:
    return f"{BASE_PATH}{path}"


def render_markdown(text) -> Markup:
    if not text:
        return Markup("")
    return Markup(md.markdown(text, extensions=["extra", "sane_lists"]))


def make_env(templates_dir=TEMPLATES_DIR):
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.globals["base_path"] = BASE_PATH
    env.globals["root"] = root
    env.filters["markdown"] = render_markdown
    return env
