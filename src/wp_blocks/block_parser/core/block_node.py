from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ACF_NAMESPACE = 'acf/'


class SourceFormat(Enum):
    COMMENT_BLOCK = "comment_block"
    SELF_CLOSING = "self_closing"
    ACF_FLEXIBLE_LAYOUT = "acf_flexible_layout"
    OPAQUE_HTML = "opaque_html"


@dataclass
class BlockNode:
    """A single parsed block and its nested children"""
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    raw_inner_content: str = ""
    children: List['BlockNode'] = field(default_factory=list)
    source_format: SourceFormat = SourceFormat.COMMENT_BLOCK
    is_valid: bool = True

    def __post_init__(self) -> None:
        if self.attributes is None:
            self.attributes = {}
        if self.children is None:
            self.children = []

    @property
    def layout(self) -> Optional[str]:
        """Flexible-content layout name, None for other formats"""
        if self.source_format is not SourceFormat.ACF_FLEXIBLE_LAYOUT:
            return None
        if self.name.startswith(ACF_NAMESPACE):
            return self.name[len(ACF_NAMESPACE):]
        return self.name

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def walk(self):
        """Yield this node and every descendant in document order"""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        """Convert node tree to a JSON-safe dictionary"""
        return {
            'name': self.name,
            'attributes': dict(self.attributes),
            'raw_inner_content': self.raw_inner_content,
            'children': [child.to_dict() for child in self.children],
            'source_format': self.source_format.value,
            'is_valid': self.is_valid
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'BlockNode':
        """Create node tree from dictionary"""
        return cls(
            name=data['name'],
            attributes=dict(data.get('attributes') or {}),
            raw_inner_content=data.get('raw_inner_content', ''),
            children=[cls.from_dict(child) for child in data.get('children', [])],
            source_format=SourceFormat(data.get('source_format', SourceFormat.COMMENT_BLOCK.value)),
            is_valid=data.get('is_valid', True)
        )
