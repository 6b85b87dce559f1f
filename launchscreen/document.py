"""
Launch screen xib document handling.

The xib is parsed with lxml, mutated in place by node identifier, and
serialized back. Node identifiers are a contract with the template file, so
every mutation looks its node up again rather than holding on to elements.
"""

import io
from typing import Optional

from lxml import etree

from .errors import FormatError
from .render import RGBColor


def parse_document(data: bytes, source: Optional[str] = None) -> etree._ElementTree:
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.parse(io.BytesIO(data), parser)
    except etree.XMLSyntaxError as e:
        raise FormatError(f"Unable to parse launch screen document: {e}", source=source) from e


def serialize_document(tree: etree._ElementTree) -> bytes:
    docinfo = tree.docinfo
    return etree.tostring(
        tree,
        xml_declaration=True,
        encoding=docinfo.encoding or "UTF-8",
        standalone=docinfo.standalone,
    )


def find_node_by_id(tree: etree._ElementTree, node_id: str) -> Optional[etree._Element]:
    matches = tree.xpath("//*[@id=$node_id]", node_id=node_id)
    return matches[0] if matches else None


def apply_background_color(tree: etree._ElementTree, rgb: RGBColor, view_id: str) -> None:
    """
    Set the background color of the view identified by `view_id`.

    Only the view's own `<color key="backgroundColor">` is touched; colors of
    nested subviews are skipped. Missing nodes leave the document unchanged.
    """
    view = find_node_by_id(tree, view_id)
    if view is None:
        return

    color_node = None
    for node in view.iter("color"):
        if node.getparent().get("id") != view_id:
            continue
        if node.get("key") == "backgroundColor":
            color_node = node
            break

    if color_node is None:
        return

    color_node.set("red", str(rgb.r))
    color_node.set("green", str(rgb.g))
    color_node.set("blue", str(rgb.b))


def apply_content_mode(tree: etree._ElementTree, mode: str, view_id: str) -> None:
    image_view = find_node_by_id(tree, view_id)
    if image_view is not None:
        image_view.set("contentMode", mode)
