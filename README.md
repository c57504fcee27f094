# saba

Building blocks of a small educational web browser, as a pure Python library
with no third-party dependencies.

## Modules

- `saba.url` — `Url`, a parser for plain `http://host:port/path?searchpart`
  URLs. `Url(text).parse()` returns a new `Url` with `host`, `port` (`"80"`
  when none is given), `path` (without the leading `/`) and `searchpart`
  filled in. A URL without `http://` raises `UrlError`.
- `saba.js_token` — `JsLexer`, an iterator that turns a tiny JavaScript subset
  into `Token`s. A token has a `kind` (a `TokenKind`: identifier, keyword,
  punctuator, string literal or number) and a `value` (an `int` for numbers,
  a `str` otherwise). The keywords are `var`, `function` and `return`; the
  punctuators are `+ - ; = ( ) { } , .`. Any other character raises
  `JsLexError`.
- `saba.js_values` — the values a script works with:
  - `DomNode`, a minimal document/element/text node with `document()`,
    `element()` and `text_node()` constructors, `get_attribute()`,
    `replace_children()` and `walk()`;
  - `get_element_by_id(root, element_id)`;
  - `HtmlElement`, a DOM node seen from script with an optional property name;
  - `add_values`, `sub_values`, `values_equal` and `to_display_string`, which
    give numbers (unsigned 64-bit; results out of range raise `OverflowError`),
    strings and elements their script semantics: `+` concatenates when either
    side is not a number, `-` gives `0` when either side is not a number, and
    elements never compare equal;
  - `Environment`, a scope of variables that looks names up in its outer scope
    when they are not its own. `update_variable` ignores names the scope does
    not hold.
- `saba.color` — `Color`, built from one of 18 CSS colour names
  (`from_name`) or from the matching `#rrggbb` code (`from_code`); anything
  else raises `UnsupportedValueError`. `code_u32()` gives the code as an
  integer.
- `saba.geometry` — `LayoutPoint` (`x`, `y`) and `LayoutSize` (`width`,
  `height`).
- `saba.computed_style` — `ComputedStyle` and its value types `DisplayType`,
  `FontSize`, `TextDecoration`, `WhiteSpace` and `BoxInfo`.
  `defaulting(tag, is_block, parent_style)` fills every unset property,
  inheriting background colour, colour, font size and text decoration from
  the parent where the parent's value is not the default. `script` and
  `style` get `display: none`, `h1`/`h2` get larger fonts, `a` is
  underlined and `pre` keeps white space.

## Installation

```
pip install .
```

## Example

```python
from saba.url import Url
from saba.js_token import JsLexer
from saba.js_values import DomNode, get_element_by_id, add_values
from saba.color import Color
from saba.computed_style import ComputedStyle

url = Url("http://example.com:8888/index.html?a=123").parse()
print(url.host, url.port, url.path, url.searchpart)
# example.com 8888 index.html a=123

for token in JsLexer("var foo=42;"):
    print(token.kind, token.value)

doc = DomNode.document([DomNode.element("p", {"id": "target"})])
target = get_element_by_id(doc, "target")
target.replace_children(DomNode.text_node("hello"))

print(add_values(1, 2), add_values(1, "2"))   # 3 12
print(hex(Color.from_name("red").code_u32()))  # 0xff0000

style = ComputedStyle()
style.defaulting("h1", True)
print(style.display, style.font_size)  # DisplayType.BLOCK FontSize.XX_LARGE
```

## What this package does not do

The package stops at the pieces listed above. It does not parse tokens into a
syntax tree or run scripts, it does not fetch pages over the network, and it
has no HTML or CSS parser, layout tree, painting or user interface. There is
no command to run.

## Running the tests

```
pip install ".[test]"
pytest
```