"""Adapters between rendered content trees and the part builders.

The HTML walk that produces WordprocessingML lives outside this package. A
fragment renderer is any callable ``renderer(tree, document)`` returning the
XML elements for ``tree``; it receives the document so that it can register
media, hyperlinks and lists while it walks. :func:`render_fragment` is the
default and accepts content that has already been rendered.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional

from lxml import etree

from docx_writer.errors import FragmentRenderError
from docx_writer.utils.xml_utils import Namespaces

if TYPE_CHECKING:
    from docx_writer.builder.docx_document import DocxDocument

FragmentRenderer = Callable[[Any, "DocxDocument"], Iterable[etree._Element]]

_FRAGMENT_PARSER = etree.XMLParser(remove_blank_text=True)
_WRAPPER_NAMESPACES = " ".join(
    f'xmlns:{prefix}="{uri}"' for prefix, uri in Namespaces.DOCUMENT.items()
)


def render_fragment(tree: Any, document: Optional["DocxDocument"] = None) -> List[etree._Element]:
    """Return ``tree`` as a flat list of elements.

    ``tree`` may be ``None``, an element, a string holding one or more
    elements that use the usual WordprocessingML prefixes, or an iterable
    mixing those.
    """
    if tree is None:
        return []
    if isinstance(tree, etree._Element):
        return [tree]
    if isinstance(tree, (str, bytes)):
        return parse_fragment(tree)
    elements: List[etree._Element] = []
    for item in tree:
        elements.extend(render_fragment(item, document))
    return elements


def parse_fragment(xml: str | bytes) -> List[etree._Element]:
    """Parse a prefixed XML fragment (several sibling elements allowed)."""
    if isinstance(xml, bytes):
        xml = xml.decode("utf-8")
    wrapped = f"<fragment {_WRAPPER_NAMESPACES}>{xml}</fragment>"
    try:
        wrapper = etree.fromstring(wrapped.encode("utf-8"), _FRAGMENT_PARSER)
    except etree.XMLSyntaxError as exc:
        raise FragmentRenderError(f"Content fragment is not well-formed XML: {exc}") from exc
    return list(wrapper)
