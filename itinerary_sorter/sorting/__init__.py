"""Sorting stages, in pipeline order.

- InputValidator: per-ticket checks
- StructuralValidator: degree classification and segment diagnosis
- EndpointResolver: start and end place
- PathTraverser: ordered ticket sequence
- SequenceValidator: adjacency re-check and warnings
"""

from .endpoint_resolver import EndpointResolver
from .input_validator import InputValidator
from .path_traverser import PathTraverser
from .sequence_validator import SequenceValidator
from .structural_validator import StructuralValidator

__all__ = [
    "InputValidator",
    "StructuralValidator",
    "EndpointResolver",
    "PathTraverser",
    "SequenceValidator",
]
