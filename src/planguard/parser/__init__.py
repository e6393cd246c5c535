"""YAML parsing with line fidelity for data object sources."""

from planguard.parser.loader import SourceMap, TrackedLoader, YAMLSafetyError
from planguard.parser.resolver import DataObjectResolver

__all__ = [
    "DataObjectResolver",
    "SourceMap",
    "TrackedLoader",
    "YAMLSafetyError",
]
