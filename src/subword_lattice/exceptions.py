"""Exception hierarchy for subword-lattice.

All exceptions derive from SubwordLatticeError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.

The tokenization engine itself never raises for degenerate input (empty
text, empty vocabulary, unreachable sink). These exceptions only guard the
package boundary: configuration, algorithm names and vocabulary files.
"""


class SubwordLatticeError(Exception):
    """Base exception for all subword-lattice errors."""


class ConfigValidationError(SubwordLatticeError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys or values that
    fail type validation.
    """


class UnknownAlgorithmError(SubwordLatticeError, ValueError):
    """An algorithm name does not match any registered segmentation policy."""


class VocabularyLoadError(SubwordLatticeError):
    """A vocabulary file could not be read or has an unsupported shape."""
