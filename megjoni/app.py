"""Document shell, page layout and routing of the shop's pages."""

from megjoni.catalog import (
    about_page,
    home_page,
    men_page,
    news_page,
    sale_page,
    woman_page,
)
from megjoni.contact import contact_page
from megjoni.layout import _el, _text, footer, header, navbar
from megjoni.legal import (
    SHOP_DOMAIN,
    privacy_page,
    shipping_returns_page,
    terms_and_conditions_page,
)

SITE_URL = f"https://{SHOP_DOMAIN}/"
STYLESHEET = "/style.css"
NOT_FOUND_MESSAGE = "Nie znaleziono strony"
TITLE = "Meg Joni - Odzież Używana Online | Najlepsze Second Hand Odkrycia"

ROUTES = {
    "": home_page,
    "o-nas": about_page,
    "kontakt": contact_page,
    "nowosci": news_page,
    "polityka-prywatnosci": privacy_page,
    "dostawa-i-zwroty": shipping_returns_page,
    "regulamin": terms_and_conditions_page,
    "mezczyzni": men_page,
    "kobiety": woman_page,
    "sale": sale_page,
}

_NAMED_META = (
    (
        "description",
        "Odkryj unikalną odzież używaną wysokiej jakości w naszym sklepie online. "
        "Znajdź stylowe perełki z drugiej ręki w świetnych cenach. Ekologiczne "
        "zakupy modowe.",
    ),
    (
        "keywords",
        "odzież używana, second hand online, sklep vintage, ciuchy z drugiej ręki, "
        "moda ekologiczna, ubrania używane, outlet, odzież damska używana, "
        "odzież męska używana",
    ),
    ("author", "Meg Joni"),
    ("robots", "index, follow"),
    ("theme-color", "#ffffff"),
)

_OPEN_GRAPH = (
    ("og:title", "Meg Joni - Odkryj Unikalną Odzież Używaną Online"),
    (
        "og:description",
        "Znajdź stylowe perełki z drugiej ręki i odśwież swoją garderobę w "
        "ekologiczny sposób. Wysoka jakość w świetnych cenach!",
    ),
    ("og:type", "website"),
    ("og:url", SITE_URL),
    ("og:site_name", "Meg Joni"),
    ("og:locale", "pl_PL"),
)


def _head():
    return _el(
        "head",
        _el("meta", charset="UTF-8"),
        _el(
            "meta",
            name="viewport",
            content="width=device-width, initial-scale=1.0",
        ),
        _el("title", _text(TITLE)),
        *(_el("meta", name=name, content=content) for name, content in _NAMED_META),
        *(
            _el("meta", property=prop, content=content)
            for prop, content in _OPEN_GRAPH
        ),
        _el("link", rel="canonical", href=SITE_URL),
        _el("link", rel="stylesheet", href=STYLESHEET),
    )


def shell(body):
    """Wrap already rendered body markup in the full HTML document."""
    return "<!DOCTYPE html>" + _el("html", _head(), _el("body", body), lang="pl")


def _segment(path):
    path = path.split("#", 1)[0].split("?", 1)[0]
    return path.strip("/")


def resolve(path):
    """Return the page function routed at ``path``, or None if there is none."""
    return ROUTES.get(_segment(path))


def layout(path):
    """Render header, navigation, the routed page (or a not-found note) and footer."""
    page = resolve(path)
    content = page() if page is not None else _el("p", _text(NOT_FOUND_MESSAGE))
    return header() + navbar() + _el("main", content) + footer()


def render_page(path):
    """Render the complete HTML document for ``path``."""
    return shell(layout(path))