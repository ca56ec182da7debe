from typing import Any, Dict, Iterable, Mapping, Union

from .block_parser.block_parser import BlockParser
from .block_parser.core.block_node import BlockNode
from .block_parser.core.parse_result import ParseResult
from .block_parser.filtering.block_stats import get_block_type_stats as _get_block_type_stats
from .block_parser.parsing.attribute_parser import AttributeParser
from .block_parser.serializer import BlockSerializer
from .config import ParserConfig

_serializer = BlockSerializer()


def parse(content: str, options: Union[ParserConfig, Mapping[str, Any], None] = None) -> ParseResult:
    """Parse WordPress block content into a ParseResult.

    Args:
        content: Block markup, flexible content JSON or plain HTML.
        options: A ParserConfig or a mapping of its options.

    Returns:
        ParseResult with the top-level blocks, warnings, errors and counts.
    """
    config = ParserConfig.from_options(options)
    return BlockParser.from_config(config).parse(content)


def serialize(blocks: Union[BlockNode, Iterable[BlockNode]]) -> str:
    """Convert a node or sequence of top-level nodes back into content"""
    return _serializer.serialize(blocks)


def get_block_type_stats(blocks: Iterable[BlockNode]) -> Dict[str, int]:
    """Count block names across the whole tree, nested children included"""
    return _get_block_type_stats(blocks)


def extract_block_attributes(marker: str) -> Dict[str, Any]:
    """Decode the attributes of a single block marker string"""
    return AttributeParser.extract_from_marker(marker)
