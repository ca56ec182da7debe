from collections import Counter
from typing import Dict, Iterable, Tuple

from ..core.block_node import BlockNode


def count_blocks(blocks: Iterable[BlockNode]) -> Tuple[int, Dict[str, int]]:
    """Count every node in the tree, returning (total, per-name counts)"""
    counts: Counter = Counter()
    for block in blocks:
        for node in block.walk():
            counts[node.name] += 1
    return sum(counts.values()), dict(counts)


def get_block_type_stats(blocks: Iterable[BlockNode]) -> Dict[str, int]:
    """Per-name counts including nested children"""
    return count_blocks(blocks)[1]
