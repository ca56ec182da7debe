from .block_registry import BlockRegistry, BlockRegistration

__all__ = ['BlockRegistry', 'BlockRegistration']
