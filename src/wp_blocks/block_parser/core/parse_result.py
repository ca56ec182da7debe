from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from .block_node import BlockNode


@dataclass
class ParseMetadata:
    """Counts over every node of a parsed tree"""
    total_blocks: int = 0
    block_types_count: Dict[str, int] = field(default_factory=dict)
    has_invalid_blocks: bool = False

    def to_dict(self) -> dict:
        return {
            'total_blocks': self.total_blocks,
            'block_types_count': dict(self.block_types_count),
            'has_invalid_blocks': self.has_invalid_blocks
        }


@dataclass
class ParseResult:
    """Contains the results of a single parse call"""
    blocks: List[BlockNode] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metadata: ParseMetadata = field(default_factory=ParseMetadata)

    def __iter__(self) -> Iterator[BlockNode]:
        return iter(self.blocks)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            'blocks': [block.to_dict() for block in self.blocks],
            'warnings': list(self.warnings),
            'errors': list(self.errors),
            'metadata': self.metadata.to_dict()
        }
