from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from wp_blocks.block_parser.errors import ConfigError

# Option names as written by callers of the original content API
_CAMEL_CASE_OPTIONS = {
    'allowedBlocks': 'allowed_blocks',
    'disallowedBlocks': 'disallowed_blocks',
    'stripInvalidBlocks': 'strip_invalid_blocks',
    'validateAttributes': 'validate_attributes',
    'balanceNestedBlocks': 'balance_nested_blocks',
    'errorHandler': 'error_handler'
}

class ParserConfig:
    def __init__(
        self,
        allowed_blocks: Optional[Sequence[str]] = None,
        disallowed_blocks: Optional[Sequence[str]] = None,
        strip_invalid_blocks: bool = True,
        validate_attributes: bool = True,
        balance_nested_blocks: bool = False,
        error_handler: Optional[Callable[[Exception], None]] = None
    ):
        self.allowed_blocks = _as_name_list(allowed_blocks, 'allowed_blocks')
        self.disallowed_blocks = _as_name_list(disallowed_blocks, 'disallowed_blocks')
        self.strip_invalid_blocks = strip_invalid_blocks
        self.validate_attributes = validate_attributes
        self.balance_nested_blocks = balance_nested_blocks
        self.error_handler = error_handler

    @classmethod
    def from_options(cls, options: Union['ParserConfig', Mapping[str, Any], None]) -> 'ParserConfig':
        """Build a config from a ParserConfig, a mapping of options or None"""
        if options is None:
            return cls()
        if isinstance(options, ParserConfig):
            return options
        if not isinstance(options, Mapping):
            raise ConfigError(f"Options must be a ParserConfig or mapping, got {type(options).__name__}")

        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = _CAMEL_CASE_OPTIONS.get(key, key)
            if name not in _OPTION_NAMES:
                raise ConfigError(f"Unknown parse option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            'allowed_blocks': self.allowed_blocks,
            'disallowed_blocks': self.disallowed_blocks,
            'strip_invalid_blocks': self.strip_invalid_blocks,
            'validate_attributes': self.validate_attributes,
            'balance_nested_blocks': self.balance_nested_blocks
        }


_OPTION_NAMES = set(_CAMEL_CASE_OPTIONS.values())


def _as_name_list(names: Optional[Sequence[str]], option: str) -> Optional[list]:
    if names is None:
        return None
    if isinstance(names, str) or not all(isinstance(n, str) for n in names):
        raise ConfigError(f"{option} must be a list of block names")
    return list(names)
