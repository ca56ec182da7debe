import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..core.block_node import BlockNode, SourceFormat
from ..errors import MarkerSyntaxError
from .attribute_parser import AttributeParser
from .markers import Marker, MarkerKind, iter_markers, read_marker
from .patterns import COMMENT_OPEN

logger = logging.getLogger(__name__)


class ScanState(Enum):
    SCANNING = "scanning"
    IN_HEADER = "in_header"
    IN_BODY = "in_body"


class BlockScanner:
    """Cursor scanner that extracts comment-delimited blocks"""

    def __init__(self, balance_nested_blocks: bool = False) -> None:
        self.balance_nested_blocks = balance_nested_blocks
        self.warnings: List[str] = []

    def scan_content(self, content: str) -> List[BlockNode]:
        """Extract top-level blocks from content, recursing into inner content"""
        blocks: List[BlockNode] = []
        state = ScanState.SCANNING
        marker: Optional[Marker] = None
        node: Optional[BlockNode] = None
        i = 0

        while i < len(content):
            if state is ScanState.SCANNING:
                # Look for the next opening marker
                pos = content.find(COMMENT_OPEN, i)
                if pos < 0:
                    break
                try:
                    marker = read_marker(content, pos)
                except MarkerSyntaxError as e:
                    logger.debug(f"Skipping malformed marker: {e}")
                    marker = None
                if marker is None or not marker.opens_block:
                    i = pos + len(COMMENT_OPEN)
                    continue
                state = ScanState.IN_HEADER

            elif state is ScanState.IN_HEADER:
                attributes, warning = AttributeParser.parse_attributes(marker.raw_attributes)
                if warning:
                    self.warnings.append(f"Failed to parse block attributes for {marker.name}: {warning}")

                if marker.kind is MarkerKind.SELF_CLOSING:
                    blocks.append(BlockNode(
                        name=marker.name,
                        attributes=attributes,
                        raw_inner_content="",
                        source_format=SourceFormat.SELF_CLOSING
                    ))
                    i = marker.end
                    state = ScanState.SCANNING
                else:
                    node = BlockNode(name=marker.name, attributes=attributes)
                    state = ScanState.IN_BODY

            elif state is ScanState.IN_BODY:
                inner, i = self._extract_body(content, marker)
                node.raw_inner_content = inner
                if inner:
                    node.children = self.scan_content(inner)
                blocks.append(node)
                node = None
                state = ScanState.SCANNING

        return blocks

    def _extract_body(self, content: str, opener: Marker) -> Tuple[str, int]:
        """Return (inner content, resume index) for an opening marker"""
        closer = self._find_closer(content, opener)
        if closer is not None:
            return content[opener.end:closer.start].strip(), closer.end

        # Unclosed block runs up to the next opening marker
        next_open = self._find_next_opener(content, opener.end)
        end = next_open.start if next_open is not None else len(content)
        logger.debug(f"No closing marker for {opener.name} at offset {opener.start}")
        return content[opener.end:end].strip(), end

    def _find_closer(self, content: str, opener: Marker) -> Optional[Marker]:
        """Find the closing marker for opener.

        By default the first closer with the same name wins, so a block
        nested inside a block of the same name closes its parent early.
        With balance_nested_blocks the search tracks same-name depth.
        """
        depth = 0
        for marker in iter_markers(content, opener.end):
            if marker.name != opener.name:
                continue
            if marker.kind is MarkerKind.CLOSE:
                if depth == 0:
                    return marker
                depth -= 1
            elif marker.kind is MarkerKind.OPEN and self.balance_nested_blocks:
                depth += 1
        return None

    def _find_next_opener(self, content: str, start: int) -> Optional[Marker]:
        for marker in iter_markers(content, start):
            if marker.opens_block:
                return marker
        return None
