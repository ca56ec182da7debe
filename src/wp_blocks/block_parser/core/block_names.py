import re
from typing import Dict, Iterable, Optional

BLOCK_NAME_PATTERN = re.compile(r'^[a-z][a-z0-9-]*/[a-z][a-z0-9-]*$')


class BlockNames:
    """Helper for validating and normalizing block names"""
    DEFAULT_NAMESPACE = 'core'

    # Known name variations and the registration they fall back to
    VARIATIONS: Dict[str, str] = {
        'core-embed/youtube': 'core/embed',
        'core-embed/twitter': 'core/embed',
        'core-embed/instagram': 'core/embed',
        'core-embed/vimeo': 'core/embed',
        'core-embed/wordpress': 'core/embed',
        'acf/flexible-content': 'acf/flexible',
        'gutenberg/paragraph': 'core/paragraph',
        'gutenberg/heading': 'core/heading',
        'gutenberg/image': 'core/image'
    }

    @staticmethod
    def qualify(name: str) -> str:
        """Add the implicit core namespace to bare block names"""
        if '/' not in name:
            return f"{BlockNames.DEFAULT_NAMESPACE}/{name}"
        return name

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check the qualified name against the namespace/name format"""
        if not name:
            return False
        return BLOCK_NAME_PATTERN.match(BlockNames.qualify(name)) is not None

    @staticmethod
    def is_strict_name(name: str) -> bool:
        """Check a name that must carry its namespace explicitly"""
        return bool(name) and BLOCK_NAME_PATTERN.match(name) is not None

    @staticmethod
    def normalize(name: str) -> str:
        """Map a known name variation to its canonical name"""
        return BlockNames.VARIATIONS.get(name, name)

    @staticmethod
    def matches_any(name: str, names: Iterable[str]) -> bool:
        """Check written or qualified name membership"""
        candidates = set(names)
        return name in candidates or BlockNames.qualify(name) in candidates

    @staticmethod
    def namespace(name: str) -> Optional[str]:
        if '/' not in name:
            return None
        return name.split('/', 1)[0]
