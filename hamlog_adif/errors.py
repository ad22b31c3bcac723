"""Error kinds raised by the conversion pipeline."""


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class FormatError(ConversionError):
    """Input text does not match the expected syntactic pattern."""


class RangeError(ConversionError):
    """Value is well-formed but has no mapping (e.g. frequency outside all bands)."""


class ScopeMismatch(ConversionError):
    """The whole input is already ADIF and must not be converted again."""
