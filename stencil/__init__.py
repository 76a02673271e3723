"""
Stencil - Tiny Jinja-style templates for code generators.

Stencil renders ``{{ name }}`` interpolations, ``for`` loops over integer
ranges or tuples, and single-variable ``if`` blocks. Nothing more: no
expression language, no filters, no inheritance. No dependencies beyond
the standard library.

Quick Start
-----------

    >>> from stencil import Template
    >>>
    >>> t = Template('''{% for i in range(its) %}
    ...     a[{{i}}] = image[{{i}}];
    ... {% endfor %}''')
    >>> print(t.render(its=2))

        a[0] = image[0];

        a[1] = image[1];

Typed values:

    >>> from stencil import Template, TupleValue
    >>>
    >>> t = Template("{{ weather }} / {{ values }}")
    >>> t["weather"] = "rain"
    >>> t["values"] = TupleValue.create(10, 20.256, "Hello World!")
    >>> t()
    'rain / {10, 20.256, Hello World!}'

Conditionals:

    >>> Template("abc{% if not verbose %}def{% endif %}ghi")()
    'abcdefghi'

Errors
------

Every failure raises a subclass of ``StencilError`` carrying a stable
``code`` and structured ``details``; see ``stencil.exceptions``.

Logging
-------

Diagnostics go through the ``stencil`` logger. Configure with
``STENCIL_LOG_LEVEL`` / ``STENCIL_LOG_FORMAT`` or ``setup_logging()``.
"""

from stencil._logging import setup_logging as setup_logging

# Exceptions (commonly-used exceptions at root; all via stencil.exceptions)
from stencil.exceptions import (
    ResourceError as ResourceError,
)
from stencil.exceptions import (
    StencilError,
)
from stencil.exceptions import (
    TemplateError as TemplateError,
)
from stencil.exceptions import (
    TemplateRedefinitionError as TemplateRedefinitionError,
)
from stencil.exceptions import (
    TemplateSyntaxError as TemplateSyntaxError,
)
from stencil.exceptions import (
    TemplateTypeError as TemplateTypeError,
)
from stencil.exceptions import (
    TemplateUndefinedError as TemplateUndefinedError,
)
from stencil.exceptions import (
    ValidationError as ValidationError,
)

# Template
from stencil.template import Context, Template, parse, render

# Values
from stencil.template import FloatValue, IntValue, StringValue, TupleValue

__version__ = "0.1.0"

# =============================================================================
# Public API
# =============================================================================
#
# Guidelines for maintainers:
#   - Only add symbols that deserve top-level documentation
#   - Use comments to group related exports into sections
#   - Other symbols remain importable via submodules
#     (e.g., from stencil.template import TextBlock)
#
__all__ = [
    # Template
    "Template",
    "Context",
    "parse",
    "render",
    # Values
    "IntValue",
    "FloatValue",
    "StringValue",
    "TupleValue",
    # Logging
    "setup_logging",
    # Exceptions
    "StencilError",
]
