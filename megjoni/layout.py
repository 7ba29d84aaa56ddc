"""Site-wide header, navigation bar and footer."""

from html import escape

_VOID = frozenset({"img", "input", "br", "meta", "link"})

NAV_LINKS = (
    ("/", "Strona Główna"),
    ("/kobiety", "Damska"),
    ("/mezczyzni", "Męska"),
    ("/nowosci", "Nowości"),
    ("/wyprzedaz", "Wyprzedaż"),
    ("/o-nas", "O Nas"),
    ("/kontakt", "Kontakt"),
)

FOOTER_LINKS = (
    ("/kontakt", "Kontakt"),
    ("/dostawa-i-zwroty", "Wysyłka i zwroty"),
    ("/polityka-prywatnosci", "Polityka Prywatności"),
    ("/regulamin", "Regulamin sklepu"),
)

SOCIAL_LINKS = (
    ("Facebook", "https://facebook.example.com/megjoni", "/facebook.svg"),
    ("Instagram", "https://instagram.example.com/megjoni", "/instagram.svg"),
)

COPYRIGHT_YEAR = "2025"


def _attr_name(key):
    return key.rstrip("_").replace("_", "-")


def _el(tag, *children, **attrs):
    rendered = "".join(
        f' {_attr_name(key)}="{escape(str(value))}"'
        for key, value in attrs.items()
        if value is not None
    )
    if tag in _VOID:
        return f"<{tag}{rendered}>"
    return f"<{tag}{rendered}>{''.join(children)}</{tag}>"


def _text(value):
    return escape(value, quote=False)


def _link_list(links):
    return _el(
        "ul",
        *(_el("li", _el("a", _text(label), href=href)) for href, label in links),
    )


def header():
    """Render the page header: logo, search form and account/cart icons."""
    logo = _el(
        "div",
        _el(
            "a",
            _el(
                "img",
                src="/megjoni-big.png",
                alt="Nazwa Sklepu Meg Joni / Logo",
                height="100%",
            ),
            href="/",
        ),
        class_="logo-title",
    )
    search = _el(
        "div",
        _el(
            "form",
            _el(
                "label",
                _text("Szukaj produktów"),
                for_="search-input",
                class_="visually-hidden",
            ),
            _el(
                "input",
                type="text",
                id="search-input",
                name="query",
                placeholder="Szukaj...",
            ),
            _el("button", _text("Szukaj"), type="submit"),
            action="/search",
            method="get",
        ),
        class_="search-bar",
    )
    icons = _el(
        "div",
        _el(
            "a",
            _el("img", src="/my-account.svg", width="32", height="32"),
            href="/account",
            aria_label="Moje konto",
        ),
        _el(
            "a",
            _el("img", src="/shopping-cart.svg", width="32", height="32"),
            _el("span", _text("0"), class_="cart-count"),
            href="/cart",
            aria_label="Mój koszyk",
        ),
        class_="user-cart-icons",
    )
    return _el("header", logo, search, icons)


def navbar():
    """Render the main navigation bar."""
    return _el("nav", _link_list(NAV_LINKS))


def footer():
    """Render the page footer with informational and social links."""
    links = _el("div", _link_list(FOOTER_LINKS), class_="footer-links")
    social = _el(
        "div",
        _el("p", _text("Znajdź nas w social mediach:")),
        *(
            _el(
                "a",
                _el("img", src=icon, width="48", height="48"),
                href=href,
                target="_blank",
                rel="noopener noreferrer",
                aria_label=label,
            )
            for label, href, icon in SOCIAL_LINKS
        ),
        class_="social-media",
    )
    copyright_ = _el(
        "div",
        _el(
            "p",
            _text("©"),
            _el("span", _text(COPYRIGHT_YEAR), id="current-year"),
            _text(" Meg Joni. Wszelkie prawa zastrzeżone."),
        ),
        class_="copyright",
    )
    return _el("footer", links, social, copyright_)