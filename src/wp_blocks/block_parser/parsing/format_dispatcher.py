import json
import logging
from typing import Any, List

from ..core.block_node import ACF_NAMESPACE, BlockNode, SourceFormat
from .block_scanner import BlockScanner
from .patterns import ACF_LAYOUT_KEY

logger = logging.getLogger(__name__)


class FormatDispatcher:
    """Chooses the parse path for a whole content string"""

    def __init__(self, balance_nested_blocks: bool = False) -> None:
        self.balance_nested_blocks = balance_nested_blocks
        self.warnings: List[str] = []

    def dispatch(self, content: str) -> List[BlockNode]:
        """Parse content as block markup, flexible layout JSON or opaque HTML"""
        if not content or not content.strip():
            return []

        scanner = BlockScanner(balance_nested_blocks=self.balance_nested_blocks)
        blocks = scanner.scan_content(content)
        self.warnings.extend(scanner.warnings)
        if blocks:
            logger.debug(f"Parsed {len(blocks)} comment-delimited blocks")
            return blocks

        layout_blocks = self._parse_flexible_layout(content)
        if layout_blocks:
            logger.debug(f"Parsed {len(layout_blocks)} flexible content layouts")
            return layout_blocks

        logger.debug("No block markup found, treating content as HTML")
        return [self._create_html_block(content)]

    def _parse_flexible_layout(self, content: str) -> List[BlockNode]:
        """Parse flexible content layout JSON, empty list when not applicable"""
        try:
            data = json.loads(content)
        except (ValueError, RecursionError):
            return []

        if isinstance(data, dict):
            if self._has_layout(data):
                return [self._create_layout_block(data)]
            return []

        if not isinstance(data, list):
            return []

        blocks = []
        skipped = []
        for index, item in enumerate(data):
            if self._has_layout(item):
                blocks.append(self._create_layout_block(item))
            else:
                skipped.append(index)

        # Rows are only reported when the array is flexible content at all
        if blocks:
            for index in skipped:
                message = f"Skipped flexible content row {index} without {ACF_LAYOUT_KEY}"
                logger.warning(message)
                self.warnings.append(message)
        return blocks

    @staticmethod
    def _has_layout(item: Any) -> bool:
        # Null and empty layouts count as missing
        return isinstance(item, dict) and bool(item.get(ACF_LAYOUT_KEY))

    def _create_layout_block(self, item: dict) -> BlockNode:
        layout: Any = item[ACF_LAYOUT_KEY]
        return BlockNode(
            name=f"{ACF_NAMESPACE}{layout}",
            attributes={k: v for k, v in item.items() if k != ACF_LAYOUT_KEY},
            raw_inner_content="",
            source_format=SourceFormat.ACF_FLEXIBLE_LAYOUT
        )

    def _create_html_block(self, content: str) -> BlockNode:
        return BlockNode(
            name='core/html',
            attributes={'content': content},
            raw_inner_content=content,
            source_format=SourceFormat.OPAQUE_HTML
        )
