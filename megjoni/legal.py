"""Legal information pages: privacy policy, shipping and returns, terms."""

from dataclasses import dataclass

from megjoni.layout import _el, _text

CONTACT_EMAIL = "kontakt@example.com"
SHOP_DOMAIN = "megjoni.example.com"
LAST_UPDATED = "23 kwietnia 2025 r."
ADMINISTRATOR = "[imię i nazwisko administratora]"
COMPANY_DETAILS = "[pełna nazwa firmy, adres, NIP, REGON]"
OFFICE_ADDRESS = "Siedziba Łódź"
RETURN_ADDRESS = "[Adres do zwrotu]"
FREE_SHIPPING_THRESHOLD = "[np. 200 zł]"


@dataclass(frozen=True)
class _Paragraph:
    """A paragraph whose lines are separated by line breaks."""

    lines: tuple


@dataclass(frozen=True)
class _List:
    """A bulleted or numbered list; an item may be a tuple of lines."""

    items: tuple
    ordered: bool = False
    extra_class: str = ""


def _lines(lines):
    if isinstance(lines, str):
        lines = (lines,)
    return _el("br").join(_text(line) for line in lines)


def _render_block(block):
    if isinstance(block, _Paragraph):
        return _el("p", _lines(block.lines))
    tag, style = ("ol", "list-decimal") if block.ordered else ("ul", "list-disc")
    classes = " ".join(filter(None, (style, "list-inside", block.extra_class)))
    return _el(tag, *(_el("li", _lines(item)) for item in block.items), class_=classes)


def _render_section(number, heading, blocks):
    return _el(
        "section",
        _el("h2", _text(f"{number}. {heading}"), class_="text-xl font-semibold mb-2"),
        *(_render_block(block) for block in blocks),
        class_="mb-6",
    )


def _document(title, sections):
    return _el(
        "section",
        _el("h1", _text(title), class_="text-3xl font-bold mb-6"),
        _el(
            "p",
            _text(f"Data ostatniej aktualizacji: {LAST_UPDATED}"),
            class_="text-sm text-gray-500 mb-8",
        ),
        _el(
            "div",
            *(
                _render_section(number, heading, blocks)
                for number, (heading, blocks) in enumerate(sections, start=1)
            ),
            class_="prose max-w-none",
        ),
        class_="max-w-3xl mx-auto p-4 text-gray-800 dark:text-gray-200",
    )


def _contact_block(intro):
    return _Paragraph(
        (
            intro,
            f"📧 E-mail: {CONTACT_EMAIL}",
            f"📬 Adres: {OFFICE_ADDRESS}",
        )
    )


_PRIVACY_SECTIONS = (
    (
        "Administrator danych osobowych",
        (
            _Paragraph(
                (
                    f"Administratorem Twoich danych osobowych jest {ADMINISTRATOR}, "
                    'prowadząca działalność pod nazwą "Meg Joni". Możesz się z nami '
                    f"skontaktować pod adresem e-mail: {CONTACT_EMAIL}.",
                )
            ),
        ),
    ),
    (
        "Jakie dane zbieramy?",
        (
            _List(
                (
                    "imię i nazwisko",
                    "adres dostawy",
                    "adres e-mail",
                    "numer telefonu (opcjonalnie)",
                    "dane do faktury (jeśli dotyczy)",
                    "adres IP oraz dane o aktywności na stronie (cookies – patrz pkt 6)",
                )
            ),
        ),
    ),
    (
        "Cel i podstawa prawna przetwarzania danych",
        (
            _List(
                (
                    "realizacja zamówień (art. 6 ust. 1 lit. b RODO)",
                    "prowadzenie konta użytkownika (jeśli dotyczy)",
                    "kontakt z klientem (art. 6 ust. 1 lit. f RODO)",
                    "cele księgowe (art. 6 ust. 1 lit. c RODO)",
                    "cele marketingowe za zgodą (art. 6 ust. 1 lit. a RODO)",
                )
            ),
        ),
    ),
    (
        "Czas przechowywania danych",
        (
            _Paragraph(
                (
                    "Dane przechowujemy do czasu realizacji umowy i przez okres wymagany "
                    "przepisami prawa. Dane wykorzystywane do celów marketingowych – do "
                    "momentu cofnięcia zgody.",
                )
            ),
        ),
    ),
    (
        "Udostępnianie danych",
        (
            _Paragraph(
                (
                    "Dane mogą być przekazywane firmom kurierskim, operatorom płatności, "
                    "biuru księgowemu oraz firmie hostingowej – tylko w zakresie "
                    "niezbędnym do świadczenia usług.",
                )
            ),
        ),
    ),
    (
        "Pliki cookies",
        (
            _Paragraph(
                (
                    "Używamy cookies do działania strony, analizy ruchu (np. Google "
                    "Analytics) i personalizacji treści. Możesz zmienić ich ustawienia "
                    "w przeglądarce.",
                )
            ),
        ),
    ),
    (
        "Twoje prawa",
        (
            _List(
                (
                    "dostęp do danych",
                    "sprostowanie, usunięcie lub ograniczenie przetwarzania",
                    "przenoszenie danych",
                    "sprzeciw wobec przetwarzania",
                    "cofnięcie zgody",
                    "skarga do Prezesa UODO",
                )
            ),
        ),
    ),
    (
        "Kontakt",
        (
            _contact_block(
                "W sprawach związanych z ochroną danych osobowych, skontaktuj się z nami:"
            ),
        ),
    ),
)

_SHIPPING_SECTIONS = (
    (
        "Koszt i czas wysyłki",
        (
            _List(
                (
                    "Koszt dostawy na terenie Polski: 14,99 zł",
                    "Czas realizacji zamówienia: 1–3 dni robocze",
                    "Czas dostawy: 1–2 dni robocze od momentu nadania",
                    f"Darmowa dostawa dla zamówień powyżej {FREE_SHIPPING_THRESHOLD}",
                )
            ),
        ),
    ),
    (
        "Formy dostawy",
        (_List(("Kurier (np. InPost, DPD, DHL)", "Paczkomaty InPost")),),
    ),
    (
        "Zwroty i reklamacje",
        (
            _Paragraph(
                (
                    "Zgodnie z prawem konsumenta masz prawo do zwrotu towaru w ciągu 14 "
                    "dni od jego otrzymania – bez podania przyczyny.",
                )
            ),
            _List(
                (
                    "Produkt nie może nosić śladów użytkowania i musi być odesłany w "
                    "oryginalnym stanie",
                    "Zwrotu dokonujesz na własny koszt",
                    "Zwrot środków nastąpi do 14 dni od otrzymania przesyłki",
                ),
                extra_class="mt-2",
            ),
        ),
    ),
    (
        "Jak dokonać zwrotu?",
        (
            _List(
                (
                    "Wypełnij formularz zwrotu (dostępny w zakładce Zwroty lub dołączony "
                    "do przesyłki)",
                    ("Zapakuj produkt i odeślij na adres:", RETURN_ADDRESS),
                    "Po otrzymaniu i sprawdzeniu przesyłki dokonamy zwrotu pieniędzy",
                ),
                ordered=True,
            ),
        ),
    ),
    (
        "Reklamacje",
        (
            _Paragraph(
                (
                    "Jeśli produkt jest uszkodzony lub niezgodny z opisem, skontaktuj się "
                    f"z nami pod adresem e-mail: {CONTACT_EMAIL}. Do reklamacji dołącz "
                    "zdjęcia oraz numer zamówienia.",
                )
            ),
        ),
    ),
    (
        "Kontakt",
        (_contact_block("W razie pytań dotyczących wysyłki lub zwrotów:"),),
    ),
)

_TERMS_SECTIONS = (
    (
        "Postanowienia ogólne",
        (
            _Paragraph(
                (
                    "Niniejszy regulamin określa zasady korzystania ze sklepu "
                    f"internetowego prowadzonego pod adresem {SHOP_DOMAIN}. Sklep "
                    f"prowadzony jest przez {COMPANY_DETAILS}.",
                )
            ),
        ),
    ),
    (
        "Składanie zamówień",
        (
            _List(
                (
                    "Zamówienia można składać 24 godziny na dobę, 7 dni w tygodniu",
                    "Złożenie zamówienia oznacza akceptację niniejszego regulaminu",
                    "Po złożeniu zamówienia klient otrzymuje e-mail z potwierdzeniem "
                    "przyjęcia zamówienia",
                )
            ),
        ),
    ),
    (
        "Ceny i płatności",
        (
            _List(
                (
                    "Wszystkie ceny podane w sklepie są cenami brutto i zawierają podatek VAT",
                    "Akceptowane formy płatności: przelew bankowy, szybkie płatności "
                    "online, BLIK",
                    "Zamówienie jest realizowane po zaksięgowaniu płatności",
                )
            ),
        ),
    ),
    (
        "Dostawa",
        (
            _Paragraph(
                (
                    "Informacje o kosztach i czasie dostawy znajdują się w zakładce "
                    "Wysyłka i zwroty.",
                )
            ),
        ),
    ),
    (
        "Zwroty i reklamacje",
        (
            _Paragraph(
                (
                    "Klient ma prawo do zwrotu towaru w ciągu 14 dni bez podania "
                    "przyczyny. Szczegóły znajdują się w zakładce Wysyłka i zwroty.",
                )
            ),
        ),
    ),
    (
        "Dane osobowe",
        (
            _Paragraph(
                (
                    "Szczegóły dotyczące przetwarzania danych osobowych znajdują się w "
                    "Polityce Prywatności.",
                )
            ),
        ),
    ),
    (
        "Postanowienia końcowe",
        (
            _List(
                (
                    "Sklep zastrzega sobie prawo do zmiany regulaminu",
                    "W sprawach nieuregulowanych mają zastosowanie przepisy prawa polskiego",
                    "Spory będą rozstrzygane przez właściwy sąd powszechny",
                )
            ),
        ),
    ),
)


def privacy_page():
    """Render the privacy policy."""
    return _document("Polityka Prywatności", _PRIVACY_SECTIONS)


def shipping_returns_page():
    """Render the shipping and returns information."""
    return _document("Wysyłka i zwroty", _SHIPPING_SECTIONS)


def terms_and_conditions_page():
    """Render the shop's terms and conditions."""
    return _document("Regulamin sklepu", _TERMS_SECTIONS)