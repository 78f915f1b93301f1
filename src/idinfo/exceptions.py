"""Custom exception hierarchy for the ID inspector."""


class IDInfoError(Exception):
    """Base exception for all idinfo errors."""


class UnrecognizedFormat(IDInfoError):
    """No decoder accepted the input during auto-detection."""


class ForcedFormatMismatch(IDInfoError):
    """The explicitly requested decoder could not parse the input."""


class UnknownFormatName(IDInfoError):
    """A format name or alias is not present in the registry."""


class DecodeError(IDInfoError):
    """Input passed the cheap admissibility check but failed the full decode."""


class GenerationError(IDInfoError):
    """The underlying ID generation primitive failed."""


class ConfigurationError(IDInfoError):
    """Error in system configuration."""
