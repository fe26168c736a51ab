class SwordMergeError(Exception):
    """Base error for swordmerge domain exceptions."""


class IneligibleCombination(SwordMergeError):
    """Raised when two items cannot be combined (missing item or tier mismatch)."""


class PersistenceError(SwordMergeError):
    """Base exception for save/load errors."""


class SnapshotValidationError(PersistenceError):
    """Raised when a decoded snapshot fails schema or cardinality checks."""


class CorruptSaveError(PersistenceError):
    """Raised when a save file cannot be read or parsed."""
