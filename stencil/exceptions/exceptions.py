"""
Stencil exceptions.

This module defines the exception hierarchy for stencil:

    StencilError (base)
    ├── TemplateError - Errors during template parsing or rendering
    │   ├── TemplateSyntaxError - Invalid template syntax
    │   │   ├── UnterminatedTagError - ``{%`` without ``%}``
    │   │   ├── MalformedForHeaderError - Bad ``{% for %}`` header
    │   │   ├── MalformedIfHeaderError - Bad ``{% if %}`` header
    │   │   ├── UnknownTagError - Unrecognized control tag
    │   │   ├── MismatchedEndError - Missing or wrong end tag
    │   │   └── TrailingSourceError - Unconsumed source after parsing
    │   ├── TemplateUndefinedError - ``{{ name }}`` not bound at render time
    │   ├── TemplateTypeError - Loop source bound to the wrong value kind
    │   ├── TemplateRedefinitionError - Loop variable already bound
    │   └── TemplateNotFoundError - Template file not found
    ├── ResourceError - Call stack exhausted by deeply nested templates
    └── ValidationError - Invalid parameter value

Usage:
    try:
        Template("{{ name }}").render()
    except stencil.TemplateUndefinedError as e:
        print(f"Missing variable: {e.details['name']}")
    except stencil.TemplateSyntaxError as e:
        print(f"Bad template at offset {e.details.get('position')}: {e}")
    except stencil.StencilError as e:
        # Catch any stencil error with structured details
        print(f"Error {e.code}: {e}")

See Also
--------
    StencilError : Base exception for all stencil errors.
"""

from typing import Any

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


class StencilError(Exception):
    """
    Base exception for all stencil errors.

    All stencil-specific exceptions inherit from this class, enabling:
    - Catch-all handling: ``except stencil.StencilError``
    - Stable string-based error codes for programmatic handling
    - Structured details for debugging and logging

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "TEMPLATE_UNDEFINED_VAR").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"name": "...", "position": 12}).

    Example
    -------
    >>> try:
    ...     Template("{{ avalue }}").render()
    ... except stencil.StencilError as e:
    ...     print(f"Error code: {e.code}")
    ...     print(f"Details: {e.details}")
    Error code: TEMPLATE_UNDEFINED_VAR
    Details: {'name': 'avalue'}
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    @property
    def message(self) -> str:
        return self.args[0]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Template Errors
# =============================================================================


class TemplateError(StencilError, RuntimeError):
    """
    Base error for template operations.

    This exception (or its subclasses) is raised when parsing or rendering
    fails. No partial output is ever returned alongside it.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_RENDER_FAILED",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateSyntaxError(TemplateError, SyntaxError):
    """
    Invalid template syntax.

    Raised by the parser when the source cannot be consumed into a
    well-formed tree. The concrete subclasses identify the defect;
    ``details["position"]`` holds the offset into the source where it
    was detected.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_SYNTAX_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)

    def __str__(self) -> str:
        # SyntaxError.__str__ would append "(<filename>, line N)" fields we never set
        return self.args[0]


class UnterminatedTagError(TemplateSyntaxError):
    """A ``{%`` control tag has no matching ``%}``."""

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_UNTERMINATED_TAG",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class MalformedForHeaderError(TemplateSyntaxError):
    """
    Malformed ``{% for %}`` header.

    Raised when the ``in`` keyword is missing, when ``range(...)`` has an
    unusable argument, or when the iteration source is not bound at the
    time the template is parsed.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_MALFORMED_FOR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class MalformedIfHeaderError(TemplateSyntaxError):
    """
    Malformed ``{% if %}`` header.

    Only ``if <name>`` and ``if not <name>`` are accepted. Raised when the
    operand is missing or when tokens remain after it.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_MALFORMED_IF",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class UnknownTagError(TemplateSyntaxError):
    """Control tag is not one of ``for``, ``if``, ``endfor``, ``endif``."""

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_UNKNOWN_TAG",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class MismatchedEndError(TemplateSyntaxError):
    """
    Block body is not followed by its matching end tag.

    For example ``{% if x %}...{% endfor %}``, or a ``{% for %}`` block that
    runs to the end of the source.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_MISMATCHED_END",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TrailingSourceError(TemplateSyntaxError):
    """Source text remains after the outermost level was closed (stray end tag)."""

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_TRAILING_SOURCE",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateUndefinedError(TemplateError, NameError):
    """
    Undefined variable referenced by an interpolation marker.

    Raised at render time when ``{{ name }}`` names a variable that is not
    bound in the context. The same tree may render fine against a context
    that does bind it.

    Solutions:
        - Bind the missing variable with ``set_value()`` or as a render kwarg
        - Wrap optional output in ``{% if name %}...{% endif %}``
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_UNDEFINED_VAR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateTypeError(TemplateError, TypeError):
    """
    Loop source bound to the wrong kind of value.

    ``range(name)`` requires an Int binding; ``for x in name`` requires a
    Tuple binding.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_TYPE_MISMATCH",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateRedefinitionError(TemplateError):
    """
    Loop variable is already bound when the loop is entered.

    Loop variables may not shadow existing bindings, including the variable
    of an enclosing loop.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_REDEFINITION",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class TemplateNotFoundError(TemplateError, FileNotFoundError):
    """
    Template file not found.

    Raised when ``Template.from_file()`` is given a non-existent path.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_NOT_FOUND",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


# =============================================================================
# Resource Errors
# =============================================================================


class ResourceError(StencilError, MemoryError):
    """
    System resource exhaustion error.

    Raised when parsing or rendering runs out of call stack, which only
    happens for pathologically deep nesting of ``{% for %}`` / ``{% if %}``
    blocks. Nothing is truncated: the whole operation fails.
    """

    def __init__(
        self,
        message: str,
        code: str = "RESOURCE_EXHAUSTED",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(StencilError, ValueError):
    """
    Invalid parameter value.

    Raised when a function receives an argument it cannot use, such as a
    value that has no counterpart in the template value model.

    This exception inherits from both StencilError and ValueError, so both work::

        except stencil.StencilError:   # catches all stencil errors
        except ValueError:             # catches validation errors (Pythonic)

    Example:
        >>> Template("{{ x }}").set_value("x", None)
        ValidationError: Unsupported template value type: NoneType
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
