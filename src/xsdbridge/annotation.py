"""xs:annotation construction and escaping."""

import re
from typing import Iterable, List, Optional, Union
from xml.sax.saxutils import escape

INDENT = "  "

_ELEMENT_OPEN = re.compile(r"<xs:element\b[^>]*?(/?)>")

Descriptions = Union[str, None, Iterable[Optional[str]]]


def escape_xml(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` (ampersand first) and nothing else."""
    return escape(text)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return escape(value, {'"': "&quot;"})


def _texts(descriptions: Descriptions) -> List[str]:
    if descriptions is None or isinstance(descriptions, str):
        descriptions = [descriptions]
    return [d for d in descriptions if d]


def annotation_lines(descriptions: Descriptions, depth: int = 0) -> List[str]:
    """Render an xs:annotation block, one xs:documentation per description.

    Returns an empty list when no description is non-empty.
    """
    texts = _texts(descriptions)
    if not texts:
        return []

    pad = INDENT * depth
    lines = [f"{pad}<xs:annotation>"]
    for text in texts:
        lines.append(f"{pad}{INDENT}<xs:documentation>{escape_xml(text)}</xs:documentation>")
    lines.append(f"{pad}</xs:annotation>")
    return lines


def annotation_block(descriptions: Descriptions, depth: int = 0) -> str:
    return "\n".join(annotation_lines(descriptions, depth))


def wrap_with_annotation(element_text: str, descriptions: Descriptions) -> str:
    """Splice an annotation into the first xs:element opening tag of ``element_text``.

    A self-closed tag is opened up to hold the annotation; an open tag gets
    it as its first child. When no opening tag is found the annotation is
    placed in front of the text instead.
    """
    if not _texts(descriptions):
        return element_text

    match = _ELEMENT_OPEN.search(element_text)
    if match is None:
        return annotation_block(descriptions) + "\n" + element_text

    line_start = element_text.rfind("\n", 0, match.start()) + 1
    leading = element_text[line_start:match.start()]
    depth = len(leading) // len(INDENT) if leading.isspace() else 0
    annotation = annotation_block(descriptions, depth + 1)

    head = element_text[:match.start()]
    tail = element_text[match.end():]
    tag = match.group(0)

    if match.group(1):
        opened = tag[:-2].rstrip() + ">"
        closing = INDENT * depth + "</xs:element>"
        return f"{head}{opened}\n{annotation}\n{closing}{tail}"

    return f"{head}{tag}\n{annotation}{tail}"
