"""The contact page with its message form."""

from dataclasses import dataclass

from megjoni.layout import _el, _text
from megjoni.legal import CONTACT_EMAIL

FORM_ACTION = "/submit-contact-form"
FORM_METHOD = "post"

_SECTION_STYLE = (
    "max-width: 600px; margin: var(--space-md) auto; "
    "background-color: var(--color-surface); padding: var(--space-md); "
    "border-radius: 8px; box-shadow: 0 2px 8px rgba(0, 0, 0, 0.08);"
)
_CONTROL_STYLE = (
    "width: 100%; padding: var(--space-xs); "
    "border: 1px solid var(--color-border); border-radius: 4px;"
)
_ROW_STYLE = "margin-bottom: var(--space-sm);"


@dataclass(frozen=True)
class _Field:
    name: str
    label: str
    placeholder: str
    kind: str = "text"
    required: bool = True

    def render(self):
        common = {
            "id": self.name,
            "name": self.name,
            "placeholder": self.placeholder,
        }
        required = "" if self.required else None
        if self.kind == "textarea":
            control = _el(
                "textarea", **common, rows="6", required=required, style=_CONTROL_STYLE
            )
        else:
            control = _el(
                "input", type=self.kind, **common, required=required, style=_CONTROL_STYLE
            )
        return _el(
            "div",
            _el("label", _text(self.label), for_=self.name, class_="visually-hidden"),
            control,
            style=_ROW_STYLE,
        )


CONTACT_FIELDS = (
    _Field("name", "Twoje imię:", "Twoje imię"),
    _Field("email", "Twój email:", "Twój email", kind="email"),
    _Field("subject", "Temat:", "Temat wiadomości", required=False),
    _Field("message", "Twoja wiadomość:", "Twoja wiadomość", kind="textarea"),
)


def contact_page():
    """Render the contact page: intro, e-mail address and message form."""
    info = _el(
        "div",
        _el(
            "p",
            _el("strong", _text("Email: ")),
            " ",
            _el("a", _text(CONTACT_EMAIL), href=f"mailto:{CONTACT_EMAIL}"),
        ),
        class_="contact-info",
        style="margin-bottom: var(--space-md);",
    )
    form = _el(
        "form",
        *(field.render() for field in CONTACT_FIELDS),
        _el("button", _text("Wyślij wiadomość"), type="submit"),
        action=FORM_ACTION,
        method=FORM_METHOD,
    )
    return _el(
        "section",
        _el("h2", _text("Skontaktuj się z Nami")),
        _el(
            "p",
            _text(
                "Masz pytania dotyczące produktów, zamówień, czy współpracy? Chętnie "
                "pomożemy! Skontaktuj się z nami poprzez formularz poniżej lub "
                "bezpośrednio."
            ),
        ),
        info,
        form,
        class_="contact-section",
        style=_SECTION_STYLE,
    )