class BlockParsingError(Exception):
    """Base error for block parsing failures"""
    pass

class AttributeDecodeError(BlockParsingError):
    """Error when decoding a marker attribute payload"""
    pass

class MarkerSyntaxError(BlockParsingError):
    """Error for an incomplete or malformed block marker"""
    pass

class SerializationError(BlockParsingError):
    """Error for a block tree that cannot be serialized"""
    pass

class ConfigError(BlockParsingError):
    """Error for unknown or mistyped parse options"""
    pass

class RegistrationError(BlockParsingError):
    """Error for an invalid block registration"""
    pass
