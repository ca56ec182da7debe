"""WordPress block content parser and serializer."""

from .api import parse, serialize, get_block_type_stats, extract_block_attributes
from .config import ParserConfig
from .sanitizer import sanitize_block_content
from .block_parser import (
    BlockNode, SourceFormat, ParseResult, ParseMetadata,
    BlockParser, BlockRegistry, BlockRegistration, BlockParsingError
)

__all__ = [
    'parse',
    'serialize',
    'get_block_type_stats',
    'extract_block_attributes',
    'sanitize_block_content',
    'ParserConfig',
    'BlockNode',
    'SourceFormat',
    'ParseResult',
    'ParseMetadata',
    'BlockParser',
    'BlockRegistry',
    'BlockRegistration',
    'BlockParsingError'
]
