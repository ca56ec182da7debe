import logging
from typing import Iterable, Union

from .core.block_node import BlockNode, SourceFormat
from .errors import SerializationError
from .parsing.attribute_parser import AttributeParser

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = '\n\n'


class BlockSerializer:
    """Converts block trees back into block content"""

    def serialize(self, blocks: Union[BlockNode, Iterable[BlockNode]]) -> str:
        """Serialize a single node or a sequence of top-level nodes"""
        if isinstance(blocks, BlockNode):
            return self.serialize_block(blocks)
        if isinstance(blocks, (str, bytes, dict)):
            raise SerializationError(f"Cannot serialize {type(blocks).__name__}, expected BlockNode")

        try:
            items = list(blocks)
        except TypeError:
            raise SerializationError(f"Cannot serialize {type(blocks).__name__}, expected BlockNode")
        return BLOCK_SEPARATOR.join(self.serialize_block(block) for block in items)

    def serialize_block(self, block: BlockNode) -> str:
        """Serialize one node according to its source format"""
        if not isinstance(block, BlockNode):
            raise SerializationError(f"Cannot serialize {type(block).__name__}, expected BlockNode")
        if not block.name:
            raise SerializationError("Block is missing its name")

        if block.source_format is SourceFormat.OPAQUE_HTML:
            return block.raw_inner_content or ''

        if block.source_format is SourceFormat.ACF_FLEXIBLE_LAYOUT:
            # Flexible content is not reconstructed, only labelled
            return f"<!-- ACF Flexible Content: {block.layout} -->"

        attributes = f" {AttributeParser.encode(block.attributes)}" if block.attributes else ''

        if block.source_format is SourceFormat.SELF_CLOSING or not (block.raw_inner_content or block.children):
            return f"<!-- wp:{block.name}{attributes} /-->"

        inner = block.raw_inner_content
        if not inner:
            logger.debug(f"Rebuilding inner content of {block.name} from its children")
            inner = self.serialize(block.children)
        return f"<!-- wp:{block.name}{attributes} -->\n{inner}\n<!-- /wp:{block.name} -->"
