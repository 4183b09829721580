"""
flatfold: local flat-foldability checks for origami crease patterns.

Exposed names
-------------
CreaseGraph, Vertex, Crease -- crease pattern data model
validate                    -- run the four local checks, stop at the first failure
diagnose                    -- collect every per-vertex violation
ValidationResult            -- outcome name plus fixed diagnostic message
Config                      -- theorem constants and validation policy
"""

from flatfold.config import Config
from flatfold.errors import (
    AsymmetricCreaseError,
    ConfigError,
    CreasePatternError,
    DisconnectedPatternError,
    PatternFormatError,
)
from flatfold.graph import MOUNTAIN, VALLEY, Crease, CreaseGraph, Vertex
from flatfold.pattern_file import load_pattern, pattern_from_dict, pattern_to_dict
from flatfold.validator import (
    BIG_LITTLE_BIG_VIOLATION,
    EMPTY,
    KAWASAKI_VIOLATION,
    MAEKAWA_VIOLATION,
    NOT_TWO_COLORABLE,
    VALID,
    ValidationResult,
    diagnose,
    validate,
)

__version__ = "1.0.0"

__all__ = [
    "Config",
    "Crease",
    "CreaseGraph",
    "Vertex",
    "MOUNTAIN",
    "VALLEY",
    "validate",
    "diagnose",
    "ValidationResult",
    "VALID",
    "EMPTY",
    "NOT_TWO_COLORABLE",
    "MAEKAWA_VIOLATION",
    "KAWASAKI_VIOLATION",
    "BIG_LITTLE_BIG_VIOLATION",
    "load_pattern",
    "pattern_from_dict",
    "pattern_to_dict",
    "CreasePatternError",
    "PatternFormatError",
    "AsymmetricCreaseError",
    "DisconnectedPatternError",
    "ConfigError",
]
