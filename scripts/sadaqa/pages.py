import logging
from pathlib import Path

from sadaqa.config import HERO_IMAGE_URL, LOGO_URL, PAYMENT_IMAGE_URL, WHATSAPP_URL
from sadaqa.services import Gallery, breadcrumbs, page_url

log = logging.getLogger(__name__)

NAV_PAGES = ("home", "about", "works", "advertisements", "legal")

HOME_STATS = [
    {"icon": "heart", "numberAr": "١٠٠+", "numberFr": "100+", "labelAr": "مشروع خيري", "labelFr": "Projets caritatifs"},
    {"icon": "users", "numberAr": "٥٠٠٠+", "numberFr": "5000+", "labelAr": "أسرة مستفيدة", "labelFr": "Familles bénéficiaires"},
    {"icon": "droplet", "numberAr": "٣٨", "numberFr": "38", "labelAr": "بئر محفور", "labelFr": "Puits creusés"},
    {"icon": "hand-heart", "numberAr": "٢٠٠+", "numberFr": "200+", "labelAr": "متطوع", "labelFr": "Bénévoles"},
]

ABOUT_VALUES = [
    {
        "titleAr": "الشفافية",
        "titleFr": "Transparence",
        "descAr": "نلتزم بالشفافية الكاملة في جميع عملياتنا",
        "descFr": "Nous nous engageons à une transparence totale dans toutes nos opérations",
    },
    {
        "titleAr": "الفعالية",
        "titleFr": "Efficacité",
        "descAr": "نعمل بفعالية لتحقيق أقصى استفادة من التبرعات",
        "descFr": "Nous travaillons efficacement pour maximiser les bénéfices des dons",
    },
    {
        "titleAr": "الاحترافية",
        "titleFr": "Professionnalisme",
        "descAr": "نتبع أعلى معايير الاحترافية في العمل الخيري",
        "descFr": "Nous suivons les plus hauts standards de professionnalisme dans le travail caritatif",
    },
]

DONATE_POINTS = [
    {
        "titleAr": "شفافية كاملة",
        "titleFr": "Transparence totale",
        "descAr": "نضمن وصول تبرعاتكم لمستحقيها",
        "descFr": "Nous garantissons que vos dons parviennent aux bénéficiaires",
    },
    {
        "titleAr": "تواصل سريع",
        "titleFr": "Contact rapide",
        "descAr": "نرد على استفساراتكم فوراً",
        "descFr": "Nous répondons immédiatement à vos questions",
    },
    {
        "titleAr": "تحويل آمن",
        "titleFr": "Transfert sécurisé",
        "descAr": "نستخدم قنوات آمنة للتحويلات",
        "descFr": "Nous utilisons des canaux sécurisés pour les transferts",
    },
]

DONATE_VERSE = {
    "textAr": "﴿ مَّثَلُ الَّذِينَ يُنفِقُونَ أَمْوَالَهُمْ فِي سَبِيلِ اللَّهِ كَمَثَلِ حَبَّةٍ أَنبَتَتْ سَبْعَ سَنَابِلَ فِي كُلِّ سُنبُلَةٍ مِّائَةُ حَبَّةٍ ۗ وَاللَّهُ يُضَاعِفُ لِمَن يَشَاءُ ۗ وَاللَّهُ وَاسِعٌ عَلِيمٌ ﴾",
    "textFr": "﴿ L'exemple de ceux qui dépensent leurs biens dans le sentier d'Allah est semblable à une graine d'où naissent sept épis, à cent grains l'épi. Car Allah multiplie la récompense à qui Il veut et la grâce d'Allah est immense et Il est Omniscient ﴾",
    "sourceAr": "سورة البقرة - الآية 261",
    "sourceFr": "Sourate Al-Baqara - Verset 261",
}


def _nav(ctx, current_page):
    return [
        {
            "id": name,
            "label": ctx.t(f"nav.{name}"),
            "href": page_url(ctx.locale, name if name != "home" else "index"),
            "active": current_page == name,
        }
        for name in NAV_PAGES
    ]


def _render(tpl, ctx, current_page, path, **context):
    """Render ``tpl`` for one locale; ``path`` is the page's location without .html."""
    return tpl.render(
        ctx=ctx,
        nav=_nav(ctx, current_page),
        toggle_url=page_url(ctx.other, path),
        home_url=page_url(ctx.locale, "index"),
        whatsapp_url=WHATSAPP_URL,
        logo_url=LOGO_URL,
        **context,
    )


def _write(path: Path, html: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path


def build_home(out_dir: Path, tpl_home, ctx, sections):
    html = _render(
        tpl_home, ctx, "home", "index",
        title=ctx.t("nav.home"),
        home=sections.page,
        featured_works=sections.featured,
        advertisements=sections.advertisements,
        stats=HOME_STATS,
        hero_image=HERO_IMAGE_URL,
        works_url=page_url(ctx.locale, "works"),
        advertisements_url=page_url(ctx.locale, "advertisements"),
    )
    return _write(out_dir / "index.html", html)


def _build_text_page(out_dir: Path, tpl, ctx, name, content, **extra):
    # no content -> the page keeps its route but renders an empty body
    if content is None:
        log.warning("No %s page content, writing %s/%s.html without a body", name, ctx.locale, name)

    html = _render(
        tpl, ctx, name, name,
        title=ctx.pick(content, "title") or ctx.t(f"nav.{name}"),
        content=content,
        body=ctx.pick(content, "content"),
        **extra,
    )
    return _write(out_dir / f"{name}.html", html)


def build_about(out_dir: Path, tpl_about, ctx, content):
    return _build_text_page(out_dir, tpl_about, ctx, "about", content, values=ABOUT_VALUES)


def build_legal(out_dir: Path, tpl_legal, ctx, content):
    return _build_text_page(out_dir, tpl_legal, ctx, "legal", content)


def build_gallery(out_dir: Path, tpl_list, tpl_detail, ctx, collection, items):
    """List page plus one detail page per item, each showing all of its images."""
    gallery = Gallery(items)

    html = _render(
        tpl_list, ctx, collection, collection,
        title=ctx.t(f"{collection}.title"),
        collection=collection,
        items=gallery.items,
    )
    written = [_write(out_dir / f"{collection}.html", html)]

    list_url = page_url(ctx.locale, collection)
    for item in gallery.items:
        item_id = item["id"]
        gallery.select(item_id)
        crumbs = breadcrumbs([
            (ctx.t("nav.home"), f"/{ctx.locale}/index.html"),
            (ctx.t(f"nav.{collection}"), f"/{ctx.locale}/{collection}.html"),
            (ctx.pick(item, "title"), None),
        ])
        html = _render(
            tpl_detail, ctx, collection, f"{collection}/{item_id}",
            title=ctx.pick(item, "title"),
            item=gallery.selected,
            images=gallery.images,
            breadcrumbs=crumbs,
            close_url=list_url,
        )
        written.append(_write(out_dir / collection / f"{item_id}.html", html))
        gallery.close()

    return written


def build_works(out_dir: Path, tpl_list, tpl_detail, ctx, works):
    return build_gallery(out_dir, tpl_list, tpl_detail, ctx, "works", works)


def build_advertisements(out_dir: Path, tpl_list, tpl_detail, ctx, advertisements):
    return build_gallery(out_dir, tpl_list, tpl_detail, ctx, "advertisements", advertisements)


def build_donate(out_dir: Path, tpl_donate, ctx):
    html = _render(
        tpl_donate, ctx, "donate", "donate",
        title=ctx.t("donate.title"),
        points=DONATE_POINTS,
        verse=DONATE_VERSE,
        payment_image=PAYMENT_IMAGE_URL,
    )
    return _write(out_dir / "donate.html", html)
