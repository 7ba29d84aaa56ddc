# megjoni

A small server-rendered storefront for a second-hand clothing shop. Every page
is plain HTML built on the server, in Polish. Nothing runs in the browser. The
package needs only the standard library.

## Pages

| Path                    | Page                 | Function (module)                           |
|-------------------------|----------------------|---------------------------------------------|
| `/`                     | Home page            | `home_page` (`megjoni.catalog`)             |
| `/o-nas`                | About us             | `about_page` (`megjoni.catalog`)            |
| `/kontakt`              | Contact form         | `contact_page` (`megjoni.contact`)          |
| `/nowosci`              | New arrivals         | `news_page` (`megjoni.catalog`)             |
| `/kobiety`              | Women's clothing     | `woman_page` (`megjoni.catalog`)            |
| `/mezczyzni`            | Men's clothing       | `men_page` (`megjoni.catalog`)              |
| `/sale`                 | Sale                 | `sale_page` (`megjoni.catalog`)             |
| `/polityka-prywatnosci` | Privacy policy       | `privacy_page` (`megjoni.legal`)            |
| `/dostawa-i-zwroty`     | Shipping and returns | `shipping_returns_page` (`megjoni.legal`)   |
| `/regulamin`            | Terms and conditions | `terms_and_conditions_page` (`megjoni.legal`) |

Routing ignores leading and trailing slashes, query strings and fragments, so
`/kontakt/?x=1` is the contact page. Each page is wrapped in the shared header,
navigation bar and footer. Any other path gets the message
"Nie znaleziono strony" (page not found) in the same layout.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
megjoni
megjoni --addr 0.0.0.0:8080
```

The `megjoni` command starts a WSGI server from the standard library's
`wsgiref`. It prints the address it listens on and serves until you interrupt
it. `--addr host:port` overrides the configured address.

The configuration comes from environment variables:

| Variable              | Default          | Meaning                                      |
|-----------------------|------------------|----------------------------------------------|
| `LEPTOS_SITE_ADDR`    | `127.0.0.1:3000` | address as `host:port` (IPv6 as `[host]:port`) |
| `LEPTOS_SITE_ROOT`    | `target/site`    | directory that static files are served from  |
| `LEPTOS_SITE_PKG_DIR` | `pkg`            | stored in the configuration                  |
| `LEPTOS_ENV`          | `DEV`            | `dev`/`development` or `prod`/`production`   |

A bad address, a port outside 0–65535 or an unknown environment raises
`ValueError`.

The server answers only `GET` and `HEAD`. Any other method gets
`405 Method Not Allowed`. A routed path returns its page with `200`. If the path
is not routed, the server looks it up as a file under the site root. It will not
serve anything outside that root. If no file is found, it returns the
not-found page with `404`.

## Using it from Python

The pages can be rendered without a server:

```python
from megjoni.app import render_page, resolve, layout, shell

html = render_page("/kontakt")   # full HTML document for the contact page
view = resolve("/kobiety")       # the page function, or None if unrouted
body = layout("/sale")           # header + nav + <main> + footer, no <html>
doc = shell("<p>hi</p>")         # wrap body markup in the document and <head>
```

The server can also be built from Python:

```python
from megjoni.server import SiteConfig, create_app, load_config

config = load_config({"LEPTOS_SITE_ADDR": "127.0.0.1:8000"})
app = create_app(config)         # a WSGI application
```

`SiteConfig` holds `host`, `port`, `site_root`, `site_pkg_dir` and `env`, and
its `site_addr` property gives back `host:port`.

There are building blocks you can use on their own:

- `megjoni.layout`: `header()`, `navbar()`, `footer()`.
- `megjoni.catalog`: the `Product` dataclass, `product_grid(products)` and the
  catalogue pages. `Product` takes a non-empty `slug`, `name`, `image` and
  `price`, with optional `alt`, `old_price`, `width` and `height`. Prices are
  stored as `Decimal` rounded to grosze. A negative or non-numeric price raises
  `ValueError`, and so does an `old_price` that is not higher than `price`.
  `Product.render()` returns the product's `<article>` markup, and `href` is
  `/product/<slug>`.
- `megjoni.legal` and `megjoni.contact`: the remaining pages.

## What it does not do

- There is no product database. The listings are fixed in `megjoni.catalog`.
  Product links (`/product/...`), search (`/search`), the account (`/account`)
  and cart (`/cart`) links lead to the not-found page.
- The contact form posts to `/submit-contact-form`, but the server does not
  accept `POST`, so no message is received or stored.
- Some links in the pages point to paths that are not routed: `/wyprzedaz` in
  the navigation bar, and `/woman` and `/about` in page buttons. The sale page
  is served at `/sale`.
- No stylesheet or images come with the package. `/style.css` and the pictures
  are served only if they exist under the site root.