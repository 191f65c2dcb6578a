"""Small LaTeX document model: every node renders itself to a text fragment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


class Node:
    """Anything that can be rendered into a LaTeX fragment."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


@dataclass
class Text(Node):
    """Literal text."""

    contents: str

    def render(self) -> str:
        return self.contents


@dataclass(init=False)
class Overline(Text):
    """Text with a bar over it (logical negation)."""

    inner: Node

    def __init__(self, inner: Union[Node, str]):
        self.inner = inner if isinstance(inner, Node) else Text(inner)
        super().__init__(self.inner.render())

    def render(self) -> str:
        return "\\overline{" + self.inner.render() + "}"


@dataclass
class WithIndex(Text):
    """Indexed variable ``x_{i}``.

    Only ``index`` takes part in rendering; the text passed first is kept in
    ``contents`` but never printed, so ``WithIndex("y", "2")`` still renders
    as ``x_{2}``.
    """

    index: str

    def render(self) -> str:
        return "x_{" + self.index + "}"


@dataclass(init=False)
class Header(Node):
    """Preamble command such as ``\\usepackage[utf8]{inputenc}``."""

    name: str
    option: str
    value: str

    def __init__(self, name: str, option_or_value: str, value: str | None = None):
        self.name = name
        if value is None:
            self.option, self.value = "", option_or_value
        else:
            self.option, self.value = option_or_value, value

    def render(self) -> str:
        if not self.option:
            return f"\\{self.name}{{{self.value}}}"
        return f"\\{self.name}[{self.option}]{{{self.value}}}"


@dataclass
class Frame(Node):
    """Begin/end pair wrapping an ordered list of children."""

    begin: str
    end: str
    children: List[Node] = field(default_factory=list)

    def append(self, item: Node) -> None:
        self.children.append(item)

    def is_empty(self) -> bool:
        return not self.children

    def render(self) -> str:
        body = "".join(child.render() + "\n" for child in self.children)
        return "\n" + self.begin + body + self.end


class Document(Frame):
    def __init__(self):
        super().__init__("\\begin{document}", "\\end{document}")


class Math(Frame):
    def __init__(self):
        super().__init__("\\begin{equation*}", "\\end{equation*}")


class Array(Frame):
    """Two centered columns; every appended node becomes one flattened row."""

    def __init__(self):
        super().__init__("\\begin{array}{cc}", "\\end{array}")

    def append(self, item: Node) -> None:
        if not self.is_empty():
            super().append(Text("\\\\"))
        super().append(Text(item.render()))


class File(Frame):
    """Top level of a ``.tex`` file: preamble lines followed by the body."""

    def __init__(self):
        super().__init__("", "")


__all__ = [
    "Node",
    "Text",
    "Overline",
    "WithIndex",
    "Header",
    "Frame",
    "Document",
    "Math",
    "Array",
    "File",
]
