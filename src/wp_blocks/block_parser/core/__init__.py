from .block_node import BlockNode, SourceFormat
from .block_names import BlockNames, BLOCK_NAME_PATTERN
from .parse_result import ParseResult, ParseMetadata

__all__ = [
    'BlockNode', 'SourceFormat', 'BlockNames', 'BLOCK_NAME_PATTERN',
    'ParseResult', 'ParseMetadata'
]
