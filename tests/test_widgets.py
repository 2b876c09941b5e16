from html.parser import HTMLParser

import pytest

from meteorite.widgets import (
    DividerStyle,
    render_alert,
    render_badge,
    render_button,
    render_card,
    render_card_body,
    render_card_footer,
    render_card_header,
    render_divider,
)


class _Collector(HTMLParser):
    def __init__(self):
        super().__init__()
        self.tags = []
        self.text = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, dict(attrs)))

    def handle_data(self, data):
        self.text.append(data)


def _parse(markup):
    collector = _Collector()
    collector.feed(markup)
    collector.close()
    return collector


def _classes(markup):
    return _parse(markup).tags[0][1]["class"].split()


@pytest.mark.parametrize(
    "style, expected",
    [
        (DividerStyle.SOLID, "met-divider-solid"),
        (DividerStyle.DASHED, "met-divider-dashed"),
        (DividerStyle.DOTTED, "met-divider-dotted"),
    ],
)
def test_divider_style_classes(style, expected):
    assert style.css_class() == expected
    assert expected in _classes(render_divider(style=style))


@pytest.mark.parametrize(
    "variant, icon",
    [("success", "✓"), ("danger", "✕"), ("warning", "⚠"), ("primary", "ℹ"), (None, "ℹ")],
)
def test_alert_icon_follows_variant(variant, icon):
    parsed = _parse(render_alert("body", variant=variant))
    assert parsed.text[0] == icon


def test_alert_title_and_role():
    out = render_alert("Operation completed.", variant="success", title="Done!")
    tags = _parse(out).tags
    assert tags[0][1]["role"] == "alert"
    assert "Done!" in _parse(out).text
    assert "met-alert-title" in out
    assert "met-alert-title" not in render_alert("x")


def test_alert_dismiss_button_only_when_dismissible():
    with_button = render_alert("x", dismissible=True)
    buttons = [a for tag, a in _parse(with_button).tags if tag == "button"]
    assert [b["aria-label"] for b in buttons] == ["Dismiss"]
    assert "met-alert-dismiss" not in render_alert("x")


def test_alert_variant_class():
    assert _classes(render_alert("x", variant_class="met-success", css_class="c"))[:3] == [
        "met-alert",
        "met-success",
        "c",
    ]


def test_badge_classes_and_children():
    out = render_badge("New", variant_class="met-primary")
    assert _classes(out) == ["met-badge", "met-primary"]
    assert _parse(out).text == ["New"]


def test_button_loading_is_disabled_with_spinner():
    loading = render_button("Go", loading=True)
    attrs = _parse(loading).tags[0][1]
    assert "disabled" in attrs
    assert "met-btn-spinner" in loading
    plain = render_button("Go")
    assert "disabled" not in _parse(plain).tags[0][1]
    assert "met-btn-spinner" not in plain


def test_button_disabled_and_classes():
    out = render_button("Go", variant_class="met-danger", size_class="met-size-lg", disabled=True)
    assert _classes(out) == ["met-btn", "met-danger", "met-size-lg"]
    assert "disabled" in _parse(out).tags[0][1]


@pytest.mark.parametrize(
    "hoverable, clickable, expected",
    [(False, False, False), (True, False, True), (False, True, True)],
)
def test_card_hover_effect(hoverable, clickable, expected):
    out = render_card("c", hoverable=hoverable, clickable=clickable)
    assert ("met-card-hoverable" in _classes(out)) is expected


def test_card_sections():
    out = render_card(
        render_card_header("H") + render_card_body("B") + render_card_footer("F")
    )
    classes = [a["class"].split()[0] for _, a in _parse(out).tags]
    assert classes == ["met-card", "met-card-header", "met-card-body", "met-card-footer"]
    assert _parse(out).text == ["H", "B", "F"]


def test_divider_without_text_is_single_separator():
    out = render_divider(horizontal=False)
    tags = _parse(out).tags
    assert len(tags) == 1
    assert tags[0][1]["data-orientation"] == "vertical"
    assert "met-divider" in tags[0][1]["class"].split()


def test_divider_with_text_has_two_separators():
    out = render_divider(text="OR")
    tags = _parse(out).tags
    assert "met-divider-with-text" in tags[0][1]["class"].split()
    separators = [a for _, a in tags if a.get("role") == "none"]
    assert len(separators) == 2
    assert all(s["data-orientation"] == "horizontal" for s in separators)
    assert _parse(out).text == ["OR"]