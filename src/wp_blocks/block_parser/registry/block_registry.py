import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..core.block_names import BlockNames
from ..core.block_node import BlockNode
from ..errors import RegistrationError

logger = logging.getLogger(__name__)


def _default_supports() -> Dict[str, Any]:
    return {
        'html': True,
        'align': False,
        'anchor': False,
        'className': True
    }


@dataclass(frozen=True)
class BlockRegistration:
    """Describes how consumers handle one block type"""
    name: str
    handler: Optional[Callable[..., Any]] = None
    category: str = 'custom'
    icon: str = 'block-default'
    description: str = ''
    supports: Dict[str, Any] = field(default_factory=_default_supports)

    def to_dict(self) -> dict:
        """Registration without its handler"""
        return {
            'name': self.name,
            'category': self.category,
            'icon': self.icon,
            'description': self.description,
            'supports': dict(self.supports)
        }


@dataclass
class BlockRegistry:
    """Maps block names to registrations; created and passed by the caller"""
    blocks: Dict[str, BlockRegistration] = field(default_factory=dict)

    def register(self, registration: BlockRegistration) -> None:
        """Add or replace a registration"""
        if not registration.name:
            raise RegistrationError("Block registration must include a name")
        if not BlockNames.is_strict_name(registration.name):
            raise RegistrationError(
                f'Invalid block name format: "{registration.name}". Expected format: "namespace/blockname"'
            )
        self.blocks[registration.name] = registration
        logger.debug(f"Block {registration.name} registered")

    def register_many(self, registrations: Iterable[BlockRegistration]) -> None:
        for registration in registrations:
            self.register(registration)

    def unregister(self, name: str) -> bool:
        return self.blocks.pop(name, None) is not None

    def get(self, name: str) -> Optional[BlockRegistration]:
        return self.blocks.get(name)

    def has(self, name: str) -> bool:
        return name in self.blocks

    def names(self) -> List[str]:
        return list(self.blocks)

    def categories(self) -> List[str]:
        return list(dict.fromkeys(r.category for r in self.blocks.values() if r.category))

    def by_category(self, category: str) -> List[BlockRegistration]:
        return [r for r in self.blocks.values() if r.category == category]

    def search(self, query: str) -> List[BlockRegistration]:
        """Case-insensitive search over names and descriptions"""
        term = query.lower()
        return [
            r for r in self.blocks.values()
            if term in r.name.lower() or term in (r.description or '').lower()
        ]

    def clear(self) -> None:
        self.blocks.clear()

    def resolve(self, name: str) -> Optional[BlockRegistration]:
        """Find the registration for a block name, falling back to known variations"""
        registration = self.blocks.get(name)
        if registration:
            return registration

        # Handle name variations
        normalized = BlockNames.normalize(name)
        if normalized in self.blocks:
            return self.blocks[normalized]

        return self.blocks.get(BlockNames.qualify(normalized))

    def resolve_tree(self, blocks: Iterable[BlockNode]) -> List[Tuple[BlockNode, Optional[BlockRegistration]]]:
        """Resolve every node of a tree in document order"""
        resolved = []
        for block in blocks:
            for node in block.walk():
                resolved.append((node, self.resolve(node.name)))
        return resolved

    def stats(self) -> Dict[str, Any]:
        """Registry statistics by category and namespace"""
        by_category = Counter(r.category or 'uncategorized' for r in self.blocks.values())
        namespaces = Counter(BlockNames.namespace(name) for name in self.blocks)
        core = namespaces.get('core', 0)
        acf = namespaces.get('acf', 0)
        return {
            'total_blocks': len(self.blocks),
            'blocks_by_category': dict(by_category),
            'core_blocks': core,
            'acf_blocks': acf,
            'custom_blocks': len(self.blocks) - core - acf
        }

    def export(self) -> Dict[str, dict]:
        """Export registrations for debugging or migration"""
        return {name: r.to_dict() for name, r in self.blocks.items()}
