"""
Stencil exceptions.

This module defines the exception hierarchy for stencil:

    StencilError (base)
    ├── TemplateError - Errors during template parsing or rendering
    │   ├── TemplateSyntaxError - Invalid template syntax
    │   │   ├── UnterminatedTagError
    │   │   ├── MalformedForHeaderError
    │   │   ├── MalformedIfHeaderError
    │   │   ├── UnknownTagError
    │   │   ├── MismatchedEndError
    │   │   └── TrailingSourceError
    │   ├── TemplateUndefinedError - Undefined variable at render time
    │   ├── TemplateTypeError - Loop source of the wrong value kind
    │   ├── TemplateRedefinitionError - Loop variable already bound
    │   └── TemplateNotFoundError - Template file not found
    ├── ResourceError - Call stack exhaustion
    └── ValidationError - Invalid parameter value
"""

from .exceptions import (
    MalformedForHeaderError,
    MalformedIfHeaderError,
    MismatchedEndError,
    ResourceError,
    StencilError,
    TemplateError,
    TemplateNotFoundError,
    TemplateRedefinitionError,
    TemplateSyntaxError,
    TemplateTypeError,
    TemplateUndefinedError,
    TrailingSourceError,
    UnknownTagError,
    UnterminatedTagError,
    ValidationError,
)

# =============================================================================
# Public API - See stencil/__init__.py for the top-level re-exports
# =============================================================================
__all__ = [
    # Base
    "StencilError",
    # Template
    "TemplateError",
    "TemplateSyntaxError",
    "UnterminatedTagError",
    "MalformedForHeaderError",
    "MalformedIfHeaderError",
    "UnknownTagError",
    "MismatchedEndError",
    "TrailingSourceError",
    "TemplateUndefinedError",
    "TemplateTypeError",
    "TemplateRedefinitionError",
    "TemplateNotFoundError",
    # Resource
    "ResourceError",
    # Validation
    "ValidationError",
]
