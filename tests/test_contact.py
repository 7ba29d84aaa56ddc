from html.parser import HTMLParser

from megjoni.contact import CONTACT_FIELDS, FORM_ACTION, contact_page
from megjoni.legal import CONTACT_EMAIL

_VOID = {"img", "input", "br", "meta", "link"}


class _Node:
    def __init__(self, tag, attrs):
        self.tag = tag
        self.attrs = dict(attrs)
        self.children = []

    def iter(self):
        yield self
        for child in self.children:
            if isinstance(child, _Node):
                yield from child.iter()

    def find_all(self, *tags):
        return [node for node in self.iter() if node.tag in tags]

    def text(self):
        return "".join(
            child if isinstance(child, str) else child.text() for child in self.children
        )


class _TreeBuilder(HTMLParser):
    def __init__(self):
        super().__init__()
        self.root = _Node("#root", [])
        self.stack = [self.root]

    def handle_starttag(self, tag, attrs):
        node = _Node(tag, attrs)
        self.stack[-1].children.append(node)
        if tag not in _VOID:
            self.stack.append(node)

    def handle_endtag(self, tag):
        if self.stack[-1].tag != tag:
            raise AssertionError(f"unexpected </{tag}> inside <{self.stack[-1].tag}>")
        self.stack.pop()

    def handle_data(self, data):
        self.stack[-1].children.append(data)


def _parse(markup):
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    assert len(builder.stack) == 1
    return builder.root


def _controls():
    return _parse(contact_page()).find_all("input", "textarea")


def test_heading():
    headings = [h.text() for h in _parse(contact_page()).find_all("h2")]
    assert headings == ["Skontaktuj się z Nami"]


def test_form_target():
    forms = _parse(contact_page()).find_all("form")
    assert len(forms) == 1
    assert forms[0].attrs["action"] == FORM_ACTION
    assert forms[0].attrs["method"] == "post"


def test_field_order():
    assert [c.attrs["name"] for c in _controls()] == ["name", "email", "subject", "message"]
    assert [f.name for f in CONTACT_FIELDS] == [c.attrs["id"] for c in _controls()]


def test_required_fields():
    required = {c.attrs["name"] for c in _controls() if "required" in c.attrs}
    assert required == {"name", "email", "message"}


def test_labels_point_at_controls():
    root = _parse(contact_page())
    ids = {c.attrs["id"] for c in root.find_all("input", "textarea")}
    labels = root.find_all("label")
    assert len(labels) == len(ids)
    assert {label.attrs["for"] for label in labels} == ids
    assert all(label.attrs["class"] == "visually-hidden" for label in labels)


def test_email_input_type_and_textarea_rows():
    by_name = {c.attrs["name"]: c for c in _controls()}
    assert by_name["email"].attrs["type"] == "email"
    assert by_name["message"].tag == "textarea"
    assert by_name["message"].attrs["rows"] == "6"


def test_mailto_link():
    links = _parse(contact_page()).find_all("a")
    assert [a.attrs["href"] for a in links] == [f"mailto:{CONTACT_EMAIL}"]
    assert links[0].text() == CONTACT_EMAIL


def test_submit_button():
    buttons = _parse(contact_page()).find_all("button")
    assert len(buttons) == 1
    assert buttons[0].attrs["type"] == "submit"
    assert buttons[0].text() == "Wyślij wiadomość"


def test_section_class_and_stable_output():
    root = _parse(contact_page())
    sections = root.find_all("section")
    assert [s.attrs["class"] for s in sections] == ["contact-section"]
    assert contact_page() == contact_page()