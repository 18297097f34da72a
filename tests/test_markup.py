from html.parser import HTMLParser

import pytest

from cocompute.markup import error_banner, icon, render_page, text_input


class _Collector(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.tags = []
        self.text = []
        self._stack = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, dict(attrs)))
        self._stack.append(tag)

    def handle_endtag(self, tag):
        if self._stack and self._stack[-1] == tag:
            self._stack.pop()

    def handle_data(self, data):
        self.text.append((tuple(self._stack), data))


def parse(markup):
    collector = _Collector()
    collector.feed(markup)
    collector.close()
    return collector


def tags_named(parsed, name):
    return [attrs for tag, attrs in parsed.tags if tag == name]


def text_inside(parsed, tag):
    return "".join(data for stack, data in parsed.text if stack and stack[-1] == tag)


# ── render_page ───────────────────────────────────────────────────


def test_render_page_sets_title_and_keeps_body():
    body = '<p id="marker">hello</p>'
    page = render_page("cocompute — sign in", body)
    parsed = parse(page)
    assert text_inside(parsed, "title") == "cocompute — sign in"
    assert body in page
    assert page.lower().startswith("<!doctype html>")


def test_render_page_escapes_title():
    page = render_page("<script>x</script>", "")
    parsed = parse(page)
    assert tags_named(parsed, "script") == []
    assert text_inside(parsed, "title") == "<script>x</script>"


# ── text_input ────────────────────────────────────────────────────


@pytest.mark.parametrize("required", [True, False])
def test_text_input_attributes(required):
    markup = text_input(
        "Email", "email", "email", "you@example.com", required=required
    )
    parsed = parse(markup)
    inputs = tags_named(parsed, "input")
    assert len(inputs) == 1
    attrs = inputs[0]
    assert attrs["type"] == "email"
    assert attrs["name"] == "email"
    assert attrs["placeholder"] == "you@example.com"
    assert ("required" in attrs) is required
    assert "Email" in [data for _, data in parsed.text]


def test_text_input_hint_rendered_only_when_given():
    hint = "Optional — anything Ollama runs on works"
    with_hint = parse(text_input("GPU", "text", "gpu", hint=hint))
    without_hint = parse(text_input("GPU", "text", "gpu"))
    assert hint in [data for _, data in with_hint.text]
    assert len(tags_named(with_hint, "span")) == len(tags_named(without_hint, "span")) + 1


def test_text_input_escapes_quotes_in_attributes():
    placeholder = 'say "hi" & <go>'
    parsed = parse(text_input("Label", "text", "field", placeholder))
    assert tags_named(parsed, "input")[0]["placeholder"] == placeholder


# ── icon ──────────────────────────────────────────────────────────


def test_icon_carries_name_and_classes():
    parsed = parse(icon("github", "w-4 h-4"))
    spans = tags_named(parsed, "span")
    assert len(spans) == 1
    assert spans[0]["data-icon"] == "github"
    classes = spans[0]["class"].split()
    assert "w-4" in classes and "h-4" in classes
    assert spans[0]["aria-hidden"] == "true"


# ── error_banner ──────────────────────────────────────────────────


def test_error_banner_shows_message_escaped():
    message = "Invalid <email> & password"
    parsed = parse(error_banner(message))
    divs = tags_named(parsed, "div")
    assert len(divs) == 1
    assert "text-red-400" in divs[0]["class"].split()
    assert text_inside(parsed, "div") == message
    assert [tag for tag, _ in parsed.tags] == ["div"]