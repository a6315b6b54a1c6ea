"""
Error kinds raised by the generation engine.
"""


class GenerationError(Exception):
    """Generic generation error."""


class InvalidArgument(GenerationError, ValueError):
    """A bound or option value is out of range."""


class EmptyPool(GenerationError, ValueError):
    """The selected classes and exclusions leave no usable characters."""


class EntropySourceUnavailable(GenerationError, RuntimeError):
    """The operating system's secure random source could not be read."""
