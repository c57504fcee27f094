"""Runtime values, scopes and the small DOM the script runtime works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

_U64_MAX = 2**64 - 1


@dataclass(eq=False)
class DomNode:
    """A document, element or text node; element nodes carry a tag."""

    tag: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    data: Optional[str] = None
    children: List["DomNode"] = field(default_factory=list)

    @classmethod
    def document(cls, children: Optional[List["DomNode"]] = None) -> "DomNode":
        return cls(children=list(children or []))

    @classmethod
    def element(
        cls,
        tag: str,
        attributes: Optional[Dict[str, str]] = None,
        children: Optional[List["DomNode"]] = None,
    ) -> "DomNode":
        return cls(tag=tag, attributes=dict(attributes or {}), children=list(children or []))

    @classmethod
    def text_node(cls, data: str) -> "DomNode":
        return cls(data=data)

    @property
    def is_element(self) -> bool:
        return self.tag is not None

    @property
    def is_text(self) -> bool:
        return self.tag is None and self.data is not None

    @property
    def is_document(self) -> bool:
        return self.tag is None and self.data is None

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def replace_children(self, *nodes: "DomNode") -> None:
        """Make `nodes` the only children of this node."""
        self.children = list(nodes)

    def walk(self) -> Iterator["DomNode"]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def get_element_by_id(root: Optional[DomNode], element_id: str) -> Optional[DomNode]:
    """Return the first element under `root` whose id attribute equals `element_id`."""
    if root is None:
        return None
    for node in root.walk():
        if node.is_element and node.attributes.get("id") == element_id:
            return node
    return None


@dataclass(frozen=True, eq=False)
class HtmlElement:
    """A DOM node seen from script, optionally with a property being accessed."""

    object: DomNode
    property: Optional[str] = None


RuntimeValue = Union[int, str, HtmlElement]


def _check_u64(value: int) -> int:
    if not 0 <= value <= _U64_MAX:
        raise OverflowError(f"number {value} is out of range")
    return value


def _is_number(value: RuntimeValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def to_display_string(value: RuntimeValue) -> str:
    """Convert a runtime value to the string the runtime shows for it."""
    if isinstance(value, HtmlElement):
        return f"HtmlElement: {value.object!r}"
    return str(value)


def values_equal(left: RuntimeValue, right: RuntimeValue) -> bool:
    """Numbers and strings compare by value; elements never compare equal."""
    if _is_number(left) and _is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return False


def add_values(left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    """Add two numbers, or concatenate the display strings otherwise."""
    if _is_number(left) and _is_number(right):
        return _check_u64(left + right)
    return to_display_string(left) + to_display_string(right)


def sub_values(left: RuntimeValue, right: RuntimeValue) -> int:
    """Subtract two numbers; anything else yields 0 in place of NaN."""
    if _is_number(left) and _is_number(right):
        return _check_u64(left - right)
    return 0


@dataclass
class Environment:
    """A scope of variables, falling back to an outer scope on lookup."""

    outer: Optional["Environment"] = None
    variables: List[Tuple[str, Optional[RuntimeValue]]] = field(default_factory=list)

    def get_variable(self, name: str) -> Optional[RuntimeValue]:
        for var_name, value in self.variables:
            if var_name == name:
                return value
        if self.outer is not None:
            return self.outer.get_variable(name)
        return None

    def add_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        self.variables.append((name, value))

    def update_variable(self, name: str, value: Optional[RuntimeValue]) -> None:
        """Replace a variable of this scope; unknown names are ignored."""
        for index, (var_name, _) in enumerate(self.variables):
            if var_name == name:
                del self.variables[index]
                self.variables.append((name, value))
                return