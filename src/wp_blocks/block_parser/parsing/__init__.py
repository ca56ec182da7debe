from .block_scanner import BlockScanner, ScanState
from .attribute_parser import AttributeParser
from .format_dispatcher import FormatDispatcher
from .markers import Marker, MarkerKind, read_marker, iter_markers

__all__ = [
    'BlockScanner', 'ScanState', 'AttributeParser', 'FormatDispatcher',
    'Marker', 'MarkerKind', 'read_marker', 'iter_markers'
]
