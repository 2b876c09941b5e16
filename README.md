# meteorite

Themed UI components as plain Python. Every component builds a small HTML
string carrying `met-*` CSS classes for a stylesheet to target. Interactive
components are state objects: you call their event methods (`toggle`, `key`,
`select`, ...) and render them again.

The package has no runtime dependencies.

## Installation

```
pip install meteorite
```

## Layout

`meteorite.layout` provides `container`, `grid`, `sidebar`, `split`, `vstack`
and `hstack`, each returning an HTML string.

```python
from meteorite.layout import container, grid, sidebar, split, vstack, SplitDirection

page = container("<p>content</p>", max_width="960px")
cols = grid("<div>a</div><div>b</div>", columns=2, gap="1rem")
nav = sidebar("<ul>...</ul>", collapsed=True)      # width becomes 0px
panes = split(SplitDirection.VERTICAL, ratio=0.3)  # ratio is clamped to 0..1
stack = vstack("<p>one</p><p>two</p>")
```

`grid` raises `ValueError` for a negative column count.

## Tree view

`meteorite.tree_model` turns a flat list of `TreeItem`s with parent ids into
`VisibleRow`s. Items whose parent id is unknown are treated as roots, and
siblings keep their order in the list.

```python
from meteorite.tree_model import TreeItem, compute_visible_rows
from meteorite.tree import Tree

items = [
    TreeItem("0", "Documents"),
    TreeItem("1", "Photos", parent_id="0"),
    TreeItem("2", "Music"),
]

rows = compute_visible_rows(items, {"0"})

tree = Tree(items, on_select=print)
tree.toggle("0")
for row in tree.visible_rows():
    print(row.depth, row.label)
# 0 Documents
# 1 Photos
# 0 Music

tree.key("0", "ArrowLeft")  # collapses "0"; returns True
html = tree.render()
```

`Tree` keeps its own set of open nodes unless you pass `expanded`, in which
case you update it yourself from `on_toggle`. Keys handled by `Tree.key` are
`"Enter"` (toggle and select), `" "` (toggle), `"ArrowRight"` (expand) and
`"ArrowLeft"` (collapse). Events on a node that is not visible raise
`KeyError`. Guide lines (`│ ├ └`) are drawn unless `show_guides=False`.

## Forms and inputs

`meteorite.form` has `form_group`, `form_label`, `form_input`,
`form_textarea`, `form_select`, `form_checkbox` and `form_error`.
`meteorite.text_input` has `render_text_input` and `render_textarea`.

```python
from meteorite.form import form_group, form_label, form_input, form_error

field = form_group(
    form_label("Email", required=True, for_id="email")
    + form_input("", input_type="email", element_id="email", error=True)
    + form_error("Invalid email address")
)
```

Size and variant classes are plain strings you supply (`size_class`,
`variant_class`); the components add them to their own `met-*` classes.

## Searchable select

```python
from meteorite.searchable_select import SearchableSelect, filter_options

filter_options(["Apple", "Banana", "Apricot"], "ap")  # ['Apple', 'Apricot']

select = SearchableSelect("", ["Alpha", "Beta", "Gamma"], on_change=print)
select.focus()
select.type_text("ga")
select.key("Enter")   # picks "Gamma" and closes
select.key("Escape")  # restores the current value
html = select.render()
```

Enter picks the exact match if the search text is one of the options,
otherwise the first match. `choose` raises `ValueError` for an unknown option.

## Radio groups and accordions

```python
from meteorite.radio import RadioGroup, RadioOption, RadioOrientation
from meteorite.accordion import Accordion, AccordionSection

colors = RadioGroup(
    "red",
    [RadioOption("red", "Red"), RadioOption("blue", "Blue", disabled=True)],
    orientation=RadioOrientation.HORIZONTAL,
)
colors.select("blue")  # False: the option is disabled

panels = Accordion(
    [AccordionSection("s1", "Settings", "<p>...</p>"),
     AccordionSection("s2", "Advanced", "<p>...</p>")],
    default_open=["s1"],
)
panels.toggle("s2")    # opens s2 and closes s1 unless allow_multiple=True
panels.is_open("s1")   # False
```

With `collapsible=False` the last open section stays open.

## Other widgets

- `meteorite.widgets`: `render_alert`, `render_badge`, `render_button`,
  `render_card` with `render_card_header`, `render_card_body` and
  `render_card_footer`, and `render_divider` with `DividerStyle`.
- `meteorite.loader`: `render_loader` (`LoaderType.DOTS`, `BARS`, `PULSE`,
  `SKELETON`; at most ten dots or bars), `render_skeleton` (at most twenty
  lines), `render_content_loader`, `render_spinner` and
  `render_loading_overlay`.
- `meteorite.status_badge`: `StatusVariant` and `render_status_badge`.
- `meteorite.shortcuts`: `Shortcut`, `ShortcutSection`, `default_sections`
  and `render_shortcuts_overlay`, which renders nothing when not visible.

```python
from meteorite.status_badge import StatusVariant, render_status_badge
from meteorite.shortcuts import render_shortcuts_overlay

render_status_badge(StatusVariant.PROCESSING, animated=True)
render_shortcuts_overlay(True)  # uses default_sections()
```

## What it does not do

The package has no Markdown parser or renderer, no data table with sorting
and cell editing, no SVG icon set, and no compound form field with built-in
validation messages. It produces HTML strings only: it runs no browser, no
event loop and no server, and ships no stylesheet for the `met-*` classes.

## Tests

```
pip install -e ".[test]"
pytest
```