import pytest

from megjoni.app import (
    NOT_FOUND_MESSAGE,
    ROUTES,
    layout,
    render_page,
    resolve,
    shell,
)
from megjoni.catalog import about_page, home_page, sale_page
from megjoni.contact import contact_page
from megjoni.layout import footer, header, navbar
from megjoni.legal import privacy_page


@pytest.mark.parametrize(
    "path, page",
    [
        ("/", home_page),
        ("", home_page),
        ("/o-nas", about_page),
        ("/o-nas/", about_page),
        ("/kontakt?x=1", contact_page),
        ("/sale#top", sale_page),
        ("/polityka-prywatnosci", privacy_page),
    ],
)
def test_resolve_known_paths(path, page):
    assert resolve(path) is page


@pytest.mark.parametrize("path", ["/wyprzedaz", "/o-nas/extra", "/nope", "/product/x"])
def test_resolve_unknown_paths(path):
    assert resolve(path) is None


def test_every_route_resolves_to_itself():
    for segment, page in ROUTES.items():
        assert resolve("/" + segment) is page


@pytest.mark.parametrize("segment", sorted(ROUTES))
def test_rendered_page_contains_page_content(segment):
    html = render_page("/" + segment)
    assert ROUTES[segment]() in html
    assert NOT_FOUND_MESSAGE not in html


def test_layout_order():
    html = layout("/kontakt")
    assert html == header() + navbar() + "<main>" + contact_page() + "</main>" + footer()


def test_unknown_path_shows_not_found():
    html = layout("/missing")
    assert "<main><p>Nie znaleziono strony</p></main>" in html


def test_shell_document_structure():
    html = shell("<p>x</p>")
    assert html.startswith("<!DOCTYPE html><html lang=\"pl\"><head>")
    assert html.endswith("<body><p>x</p></body></html>")
    assert '<meta charset="UTF-8">' in html
    assert '<meta property="og:locale" content="pl_PL">' in html
    assert '<link rel="stylesheet" href="/style.css">' in html


def test_shell_title():
    html = shell("")
    assert (
        "<title>Meg Joni - Odzież Używana Online | Najlepsze Second Hand Odkrycia</title>"
        in html
    )


def test_render_page_is_shell_of_layout():
    assert render_page("/regulamin") == shell(layout("/regulamin"))