import logging
from typing import Callable, List, Optional, Sequence

from .core.block_node import BlockNode
from .core.parse_result import ParseMetadata, ParseResult
from .filtering.block_filter import BlockFilter
from .filtering.block_stats import count_blocks
from .parsing.format_dispatcher import FormatDispatcher
from .serializer import BlockSerializer

logger = logging.getLogger(__name__)


class BlockParser:
    """Parses block content into a filtered, counted block tree.

    A parser holds only its options, so one instance can be shared
    between threads; every call builds its own scanner state.
    """

    def __init__(
        self,
        allowed_blocks: Optional[Sequence[str]] = None,
        disallowed_blocks: Optional[Sequence[str]] = None,
        strip_invalid_blocks: bool = True,
        validate_attributes: bool = True,
        balance_nested_blocks: bool = False,
        error_handler: Optional[Callable[[Exception], None]] = None
    ) -> None:
        self.block_filter = BlockFilter(
            allowed_blocks=allowed_blocks,
            disallowed_blocks=disallowed_blocks,
            strip_invalid_blocks=strip_invalid_blocks,
            validate_names=validate_attributes
        )
        self.balance_nested_blocks = balance_nested_blocks
        self.error_handler = error_handler
        self.serializer = BlockSerializer()

    @classmethod
    def from_config(cls, config) -> 'BlockParser':
        """Create a parser from a ParserConfig"""
        return cls(
            allowed_blocks=config.allowed_blocks,
            disallowed_blocks=config.disallowed_blocks,
            strip_invalid_blocks=config.strip_invalid_blocks,
            validate_attributes=config.validate_attributes,
            balance_nested_blocks=config.balance_nested_blocks,
            error_handler=config.error_handler
        )

    def parse(self, content: str) -> ParseResult:
        """Parse content into a ParseResult; never raises for string input"""
        if not isinstance(content, str):
            raise TypeError(f"Content must be a string, got {type(content).__name__}")

        blocks: List[BlockNode] = []
        warnings: List[str] = []
        errors: List[str] = []

        try:
            dispatcher = FormatDispatcher(balance_nested_blocks=self.balance_nested_blocks)
            blocks = dispatcher.dispatch(content)
            warnings.extend(dispatcher.warnings)

            outcome = self.block_filter.apply(blocks)
            blocks = outcome.blocks
            warnings.extend(outcome.warnings)
            errors.extend(outcome.errors)

        except Exception as e:
            message = f"Failed to parse blocks: {str(e)}"
            logger.error(message)
            errors.append(message)
            self._handle_error(e)

        total, block_types = count_blocks(blocks)
        logger.debug(f"Parsed {len(blocks)} top-level blocks, {total} in total")

        return ParseResult(
            blocks=blocks,
            warnings=warnings,
            errors=errors,
            metadata=ParseMetadata(
                total_blocks=total,
                block_types_count=block_types,
                has_invalid_blocks=len(errors) > 0
            )
        )

    def serialize(self, blocks) -> str:
        """Serialize a node or sequence of nodes back into content"""
        return self.serializer.serialize(blocks)

    def _handle_error(self, error: Exception) -> None:
        if not self.error_handler:
            return
        try:
            self.error_handler(error)
        except Exception as e:
            logger.error(f"Error handler failed: {e}")
