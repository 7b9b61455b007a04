"""Normalization of the loosely shaped XML feed documents.

The feed collapses arity: a repeated child element becomes a single value when
it occurs once, a list when it occurs more than once and is missing entirely
when it does not occur. ``parse_document`` keeps that shape; ``to_list`` is the
one place where it is removed, and must be applied wherever a document field
is read.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from nextbus_predictions.adapters.nextbus_api.constants import TEXT_KEY
from nextbus_predictions.domain.errors import DocumentParseError
from nextbus_predictions.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)


def to_list(value: Any) -> list[Any]:
    """Return a document field as a list.

    Args:
        value: Field value as found in a parsed document, possibly None.

    Returns:
        Empty list when the field is absent, the value itself when it is
        already a list, otherwise a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _element_to_value(element: ET.Element) -> Any:
    """Convert an element into a string or a mapping of attributes and children."""
    children = list(element)
    text = (element.text or "").strip()

    if not element.attrib and not children:
        return text

    node: dict[str, Any] = dict(element.attrib)
    for child in children:
        value = _element_to_value(child)
        if child.tag not in node:
            node[child.tag] = value
        elif isinstance(node[child.tag], list):
            node[child.tag].append(value)
        else:
            node[child.tag] = [node[child.tag], value]

    if text:
        node[TEXT_KEY] = text
    return node


def parse_document(xml_text: str | bytes) -> dict[str, Any]:
    """Parse a feed response body into a document.

    The root element is dropped; its attributes and children become the
    document's keys.

    Args:
        xml_text: Raw response body.

    Returns:
        Document mapping tag names to values or lists of values.

    Raises:
        DocumentParseError: If the body is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        logger.warning(f"Unparseable response document: {e}")
        raise DocumentParseError(ErrorDetails(reason=f"Malformed response document: {e}")) from e

    document = _element_to_value(root)
    if isinstance(document, dict):
        return document
    # Root without attributes or children
    return {}
