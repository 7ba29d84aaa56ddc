"""Product listings and the shop's catalogue pages."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from html import escape

_VOID = frozenset({"img", "input", "br"})
_CENT = Decimal("0.01")


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


def _to_price(value, field):
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"{field} is not a number: {value!r}") from exc
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"{field} must be a non-negative amount: {value!r}")
    return amount.quantize(_CENT)


def _format_price(amount):
    return f"{amount} PLN"


@dataclass(frozen=True)
class Product:
    """A product shown in a listing grid; prices are in PLN."""

    slug: str
    name: str
    image: str
    price: Decimal
    alt: str = ""
    old_price: Decimal | None = None
    width: int = 300
    height: int = 400

    def __post_init__(self):
        if not self.slug:
            raise ValueError("slug must not be empty")
        object.__setattr__(self, "price", _to_price(self.price, "price"))
        if self.old_price is not None:
            old = _to_price(self.old_price, "old_price")
            if old <= self.price:
                raise ValueError("old_price must be higher than price")
            object.__setattr__(self, "old_price", old)
        if not self.alt:
            object.__setattr__(self, "alt", self.name)

    @property
    def href(self):
        return f"/product/{self.slug}"

    def render(self):
        """Render the product as an article element."""
        if self.old_price is None:
            price = _text(_format_price(self.price))
        else:
            price = (
                _el(
                    "del",
                    _text(_format_price(self.old_price)),
                    style="color: var(--color-text-light);",
                )
                + " "
                + _text(_format_price(self.price))
            )
        return _el(
            "article",
            _el(
                "a",
                _el(
                    "figure",
                    _el(
                        "img",
                        src=self.image,
                        alt=self.alt,
                        width=self.width,
                        height=self.height,
                    ),
                ),
                _el("h3", _text(self.name)),
                _el("p", price, class_="product-price"),
                href=self.href,
            ),
            class_="product-item",
        )


FEATURED_PRODUCTS = (
    Product(
        "spodnie-vintage",
        "Spodnie Vintage",
        "/spodnie-vintage.jpg",
        "49.99",
        alt="Opis produktu. Np. Czerwona sukienka",
    ),
)

MEN_PRODUCTS = (
    Product(
        "meskie-001",
        "Czarny T-Shirt Męski",
        "/black-tshirt.jpg",
        "39.50",
        alt="Czarny T-Shirt Męski",
    ),
    Product(
        "meskie-002",
        "Niebieska Bluza",
        "/niebieska-bluza.jpg",
        "85.00",
        alt="Przykładowy produkt męski",
    ),
)

WOMAN_PRODUCTS = (
    Product(
        "damskie-001",
        "Czerwona sukienka",
        "/czerwona-sukienka.jpg",
        "75.00",
        alt="Przykładowy produkt damski",
    ),
    Product(
        "damskie-002",
        "Elegancka sukienka",
        "/elegancka-sukienka.jpg",
        "55.00",
        alt="Przykładowy produkt damski",
    ),
)

NEWS_PRODUCTS = (
    Product(
        "nowosc-001",
        "Bluza Oversize",
        "/bluza-oversize.jpg",
        "65.00",
        alt="Najnowszy produkt",
    ),
)

SALE_PRODUCTS = (
    Product(
        "sale-001",
        "Letnia Sukienka",
        "/letnia-sukienka.jpg",
        "30.00",
        alt="Produkt na wyprzedaży",
        old_price="50.00",
    ),
)


def product_grid(products):
    """Render products as a grid container."""
    return _el("div", *(product.render() for product in products), class_="product-grid")


def _category_page(title, intro, products):
    return _el(
        "section",
        _el("h2", _text(title)),
        _el("p", _text(intro)),
        product_grid(products),
    )


def home_page():
    """Render the landing page: hero, featured products and a promo."""
    hero = _el(
        "section",
        _el(
            "img",
            src="/clothes1.jpg",
            alt="Odkryj unikalne perełki z drugiej ręki",
            class_="hero-image",
        ),
        _el(
            "div",
            _el("h2", _text("Moda z Duszą - Znajdź Swoje Unikalne Perełki")),
            _el(
                "p",
                _text(
                    "Wysokiej jakości odzież używana, starannie wyselekcjonowana dla Ciebie."
                ),
            ),
            _el("a", _el("button", _text("Przejdź do sklepu")), href="/woman"),
            class_="hero-text",
        ),
        class_="hero-section",
    )
    featured = _el(
        "section",
        _el("h2", _text("Polecane produkty")),
        product_grid(FEATURED_PRODUCTS),
        _el(
            "div",
            _el("a", _text("Zobacz wszystkie produkty"), href="/woman"),
            class_="view-all-link",
        ),
        class_="featured-products",
    )
    promo = _el(
        "section",
        _el("h2", _text("Dlaczego Second Hand?")),
        _el(
            "p",
            _text(
                "Moda z drugiej ręki to świadomy wybór - ekologiczny, ekonomiczny i "
                "niepowtarzalny. Daj ubraniom drugie życie!"
            ),
        ),
        _el(
            "a",
            _el("button", _text("Dowiedz się więcej o nas")),
            href="/about",
            class_="btn",
        ),
        class_="about-promo",
    )
    return hero + featured + promo


def men_page():
    """Render the men's clothing category."""
    return _category_page(
        "Kategoria: Męska",
        "Przeglądaj naszą ofertę męskiej odzieży używanej. Znajdź koszule, spodnie, "
        "marynarki i inne elementy garderoby w świetnych cenach.",
        MEN_PRODUCTS,
    )


def woman_page():
    """Render the women's clothing category."""
    return _category_page(
        "Kategoria: Damska",
        "Odkryj naszą kolekcję odzieży damskiej z drugiej ręki. Eleganckie sukienki, "
        "wygodne spodnie, stylowe bluzki i wiele więcej!",
        WOMAN_PRODUCTS,
    )


def news_page():
    """Render the new arrivals page."""
    return _category_page(
        "Nowości u Meg Joni",
        "Zobacz nasze najnowsze dostawy! Świeże i unikalne ubrania dodane do sklepu.",
        NEWS_PRODUCTS,
    )


def sale_page():
    """Render the sale page."""
    return _category_page(
        "Wyprzedaż",
        "Super okazje czekają! Ostatnie sztuki w niższych cenach.",
        SALE_PRODUCTS,
    )


def about_page():
    """Render the 'about us' page."""
    paragraphs = (
        "Witaj w Meg Joni! Jesteśmy pasjonatami mody z drugiej ręki, wierzymy, że "
        "ubrania zasługują na drugie życie. Nasz sklep to miejsce, gdzie znajdziesz "
        "unikalne perełki vintage i starannie wyselekcjonowaną odzież używaną w "
        "doskonałym stanie.",
        "Naszą misją jest promowanie zrównoważonej mody i pokazywanie, że można "
        "ubierać się stylowo, dbając jednocześnie o planetę. Każdy zakup w naszym "
        "sklepie to krok w stronę bardziej świadomego konsumpcjonizmu.",
        "Dołącz do naszej społeczności miłośników second handu i odkryj swój "
        "niepowtarzalny styl!",
    )
    return _el(
        "section",
        _el(
            "div",
            _el("h2", _text("O Nas")),
            _el("img", src="/megjoni-big.png", id="megjoni-logo", alt="Meg Joni Logo"),
            class_="container",
        ),
        *(_el("p", _text(paragraph)) for paragraph in paragraphs),
        _el("a", _el("button", _text("Zobacz nasze produkty")), href="/woman"),
        class_="about-promo",
    )