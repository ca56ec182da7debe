from .core import BlockNode, SourceFormat, BlockNames, ParseResult, ParseMetadata
from .parsing import BlockScanner, AttributeParser, FormatDispatcher
from .filtering import BlockFilter, count_blocks, get_block_type_stats
from .registry import BlockRegistry, BlockRegistration
from .serializer import BlockSerializer
from .block_parser import BlockParser
from .errors import BlockParsingError

__all__ = [
    'BlockNode', 'SourceFormat', 'BlockNames', 'ParseResult', 'ParseMetadata',
    'BlockScanner', 'AttributeParser', 'FormatDispatcher',
    'BlockFilter', 'count_blocks', 'get_block_type_stats',
    'BlockRegistry', 'BlockRegistration',
    'BlockSerializer', 'BlockParser', 'BlockParsingError'
]
