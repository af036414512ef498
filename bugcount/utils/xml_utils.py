# bugcount/utils/xml_utils.py

"""
Helpers for working with lxml parser events.
"""

from typing import Optional, Tuple

from lxml import etree


def local_name(tag) -> Optional[str]:
    """
    Return the tag name without its namespace, e.g. "{urn:x}BugInstance" ->
    "BugInstance". Comments and processing instructions have non-string tags
    and yield None.
    """
    if not isinstance(tag, str):
        return None
    return tag.rsplit("}", 1)[-1]


def error_position(error: etree.XMLSyntaxError) -> Tuple[Optional[int], Optional[int]]:
    """
    Return (line, column) of a parse error, or (None, None) if unknown.
    """
    position = getattr(error, "position", None)
    if not position:
        return None, None
    return position
