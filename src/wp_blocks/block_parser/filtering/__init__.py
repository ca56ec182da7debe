from .block_filter import BlockFilter, FilterOutcome
from .block_stats import count_blocks, get_block_type_stats

__all__ = ['BlockFilter', 'FilterOutcome', 'count_blocks', 'get_block_type_stats']
