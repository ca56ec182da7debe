import json
import logging
from typing import Any, Dict, Optional, Tuple

from ..errors import AttributeDecodeError, MarkerSyntaxError
from .markers import read_marker
from .patterns import COMMENT_OPEN

logger = logging.getLogger(__name__)

# Characters that must not appear raw inside a comment delimiter
_COMMENT_SAFE_ESCAPES = (
    ('--', '\\u002d\\u002d'),
    ('<', '\\u003c'),
    ('>', '\\u003e'),
    ('&', '\\u0026'),
)


class AttributeParser:
    @staticmethod
    def decode(raw_attributes: Optional[str]) -> Dict[str, Any]:
        """Strictly decode a marker payload into an attributes map"""
        if raw_attributes is None or not raw_attributes.strip():
            return {}

        try:
            value = json.loads(raw_attributes)
        except ValueError as e:
            raise AttributeDecodeError(f"Malformed attribute JSON {raw_attributes!r}: {e}")

        if not isinstance(value, dict):
            raise AttributeDecodeError(f"Attribute payload is not an object: {raw_attributes!r}")
        return value

    @staticmethod
    def parse_attributes(raw_attributes: Optional[str]) -> Tuple[Dict[str, Any], Optional[str]]:
        """Decode a payload tolerantly, returning (attributes, warning)"""
        try:
            return AttributeParser.decode(raw_attributes), None
        except AttributeDecodeError as e:
            logger.warning(str(e))
            return {}, str(e)

    @staticmethod
    def extract_from_marker(marker_text: str) -> Dict[str, Any]:
        """Extract attributes from a single block marker string"""
        start = marker_text.find(COMMENT_OPEN)
        if start < 0:
            return {}

        try:
            marker = read_marker(marker_text, start)
        except MarkerSyntaxError as e:
            logger.warning(f"Failed to read block marker: {e}")
            return {}

        if marker is None:
            return {}
        attributes, _ = AttributeParser.parse_attributes(marker.raw_attributes)
        return attributes

    @staticmethod
    def encode(attributes: Dict[str, Any]) -> str:
        """Encode attributes as compact JSON safe to embed in a comment"""
        text = json.dumps(attributes, separators=(',', ':'), ensure_ascii=False)
        for raw, escaped in _COMMENT_SAFE_ESCAPES:
            text = text.replace(raw, escaped)
        return text
