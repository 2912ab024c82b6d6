# ========================
# file: hash_rng/core/errors.py
# ========================
class HashRngError(Exception):
    """Base error for the hash RNG package."""


class PreconditionError(HashRngError, ValueError):
    """Raised when a caller passes arguments outside a function's contract."""


class BufferAlignmentError(PreconditionError):
    """Raised when an index buffer is not made of whole 32-bit words."""


class RangeError(PreconditionError):
    """Raised for empty or out-of-type ranges and bad upper bounds."""


class ProbabilityError(PreconditionError):
    """Raised when a probability is outside [0, 1]."""


class ConfigError(HashRngError, ValueError):
    """Raised when a configuration value cannot be accepted."""
