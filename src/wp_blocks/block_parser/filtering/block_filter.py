import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.block_names import BlockNames
from ..core.block_node import BlockNode

logger = logging.getLogger(__name__)


@dataclass
class FilterOutcome:
    """Blocks left after filtering plus the messages it produced"""
    blocks: List[BlockNode] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class BlockFilter:
    """Validates block names and applies allow/deny lists to top-level blocks"""

    def __init__(
        self,
        allowed_blocks: Optional[Sequence[str]] = None,
        disallowed_blocks: Optional[Sequence[str]] = None,
        strip_invalid_blocks: bool = True,
        validate_names: bool = True
    ) -> None:
        self.allowed_blocks = allowed_blocks
        self.disallowed_blocks = disallowed_blocks
        self.strip_invalid_blocks = strip_invalid_blocks
        self.validate_names = validate_names

    def apply(self, blocks: List[BlockNode]) -> FilterOutcome:
        """Run validation, then allow-list, then deny-list filtering"""
        outcome = FilterOutcome(blocks=list(blocks))

        if self.validate_names:
            outcome.blocks = self._validate(outcome.blocks, outcome)
        if self.allowed_blocks is not None:
            outcome.blocks = self._apply_allow_list(outcome.blocks, outcome)
        if self.disallowed_blocks is not None:
            outcome.blocks = self._apply_deny_list(outcome.blocks, outcome)

        return outcome

    def _validate(self, blocks: List[BlockNode], outcome: FilterOutcome) -> List[BlockNode]:
        kept = []
        for index, block in enumerate(blocks):
            if BlockNames.is_valid_name(block.name):
                kept.append(block)
                continue

            block.is_valid = False
            message = f"Invalid block at index {index}: Invalid block name format: {block.name}"
            if self.strip_invalid_blocks:
                logger.warning(message)
                outcome.warnings.append(message)
            else:
                logger.error(message)
                outcome.errors.append(message)
                kept.append(block)
        return kept

    def _apply_allow_list(self, blocks: List[BlockNode], outcome: FilterOutcome) -> List[BlockNode]:
        kept = [b for b in blocks if BlockNames.matches_any(b.name, self.allowed_blocks)]
        removed = len(blocks) - len(kept)
        if removed:
            message = f"Filtered {removed} blocks not in allowedBlocks list"
            logger.warning(message)
            outcome.warnings.append(message)
        return kept

    def _apply_deny_list(self, blocks: List[BlockNode], outcome: FilterOutcome) -> List[BlockNode]:
        kept = [b for b in blocks if not BlockNames.matches_any(b.name, self.disallowed_blocks)]
        removed = len(blocks) - len(kept)
        if removed:
            message = f"Removed {removed} blocks from disallowedBlocks list"
            logger.warning(message)
            outcome.warnings.append(message)
        return kept
