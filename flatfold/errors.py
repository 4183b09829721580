"""
Exceptions raised when a crease pattern breaks the input contract.

Validation verdicts (Maekawa, Kawasaki, ...) are returned as values by
flatfold.validator and are never raised.
"""


class CreasePatternError(ValueError):
    """Base class for every input-contract failure."""


class PatternFormatError(CreasePatternError):
    """The pattern description is malformed (bad keys, ids, types)."""


class AsymmetricCreaseError(CreasePatternError):
    """A crease between two interior vertices has no matching reverse crease."""

    def __init__(self, message, vertex_index=None, target_index=None):
        super().__init__(message)
        self.vertex_index = vertex_index
        self.target_index = target_index


class DisconnectedPatternError(CreasePatternError):
    """More than one interior component under the "single" component policy."""

    def __init__(self, message, component_count):
        super().__init__(message)
        self.component_count = component_count


class ConfigError(CreasePatternError):
    pass
