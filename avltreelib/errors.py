"""Exceptions raised by AVLTreeLib.

A key that is absent from the tree is never an error: search returns the
default, count returns 0 and remove is a no-op. Exceptions raised by a
user-supplied comparator, destructor or visitor propagate unchanged.
"""


class TreeError(Exception):
    """Base class for all errors raised by the library."""
    pass


class InvalidOpsError(TreeError):
    """Raised when a tree is created with an unusable ops descriptor."""
    pass


class TreeDestroyedError(TreeError):
    """Raised when a tree is used after it has been destroyed."""
    pass


class InvalidConfigurationError(TreeError):
    """Raised when a configuration object fails validation."""
    pass


class MarkovError(TreeError):
    """Base class for errors of the Markov chain demo."""
    pass


class UnknownWordError(MarkovError):
    """Raised when the chain is asked to start from a word not in the text."""

    def __init__(self, word: str):
        super().__init__(
            f"Initial word {word!r} not found in dictionary. "
            "Make sure you have supplied a word that really exists in the text."
        )
        self.word = word
