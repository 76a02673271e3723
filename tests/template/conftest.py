"""
Template test fixtures.

Pytest fixtures and test data for Template tests.
"""

import pytest


@pytest.fixture(scope="session")
def Template():
    """The Template class from stencil."""
    from stencil import Template

    return Template


@pytest.fixture
def Context():
    """The Context class from stencil.template."""
    from stencil.template import Context

    return Context


@pytest.fixture
def simple_template(Template):
    """A simple template with one variable."""
    return Template("Hello {{ name }}!")


# =============================================================================
# Test Data (shared across test modules)
# =============================================================================

# Basic variable substitution cases
BASIC_CASES = [
    ("{{ x }}", {"x": "hello"}, "hello"),
    ("{{x}}", {"x": "hello"}, "hello"),
    ("{{   x\t}}", {"x": "hello"}, "hello"),
    ("Hello {{ name }}!", {"name": "Alice"}, "Hello Alice!"),
    ("{{ a }} and {{ b }}", {"a": "one", "b": "two"}, "one and two"),
    ("{{ a }}{{ a }}", {"a": "x"}, "xx"),
    ("No variables here", {}, "No variables here"),
    ("", {}, ""),
]

# Number cases
NUMBER_CASES = [
    ("{{ x }}", {"x": 42}, "42"),
    ("{{ x }}", {"x": 0}, "0"),
    ("{{ x }}", {"x": -1}, "-1"),
    ("{{ x }}", {"x": 3.5}, "3.5"),
    ("{{ x }}", {"x": 12.123}, "12.123"),
    ("{{ x }}", {"x": 2.0}, "2"),
    ("{{ x }}", {"x": 3.14159265}, "3.14159"),
]

# Control flow cases
IF_CASES = [
    ("abc{% if True %}def{% endif %}ghi", {}, "abcdefghi"),
    ("abc{% if False %}def{% endif %}ghi", {}, "abcghi"),
    ("abc{% if not True %}def{% endif %}ghi", {}, "abcghi"),
    ("abc{% if not False %}def{% endif %}ghi", {}, "abcdefghi"),
    ("abc{% if its %}def{% endif %}ghi", {}, "abcghi"),
    ("abc{% if its %}def{% endif %}ghi", {"its": 3}, "abcdefghi"),
    ("abc{% if not its %}def{% endif %}ghi", {}, "abcdefghi"),
    ("abc{% if not its %}def{% endif %}ghi", {"its": 3}, "abcghi"),
]

FOR_CASES = [
    ("{% for i in range(3) %}{{ i }}{% endfor %}", {}, "012"),
    ("{% for i in range(its) %}a[{{i}}];{% endfor %}", {"its": 3}, "a[0];a[1];a[2];"),
    ("{% for i in range(0) %}{{ i }}{% endfor %}", {}, ""),
    ("{% for x in items %}{{ x }} {% endfor %}", {"items": ("a", "b")}, "a b "),
    ("{% for x in items %}[{{ x }}]{% endfor %}", {"items": (0, 1.1, "2abc")}, "[0][1.1][2abc]"),
    ("{% for x in items %}{{ x }}{% endfor %}", {"items": ()}, ""),
]

# Code-generation example: two nested range loops
NESTED_LOOP_TEMPLATE = """
{% for i in range(its) %}a[{{i}}] = image[{{i}}];
{% for j in range(2) %}b[{{j}}] = image[{{j}}];
{% endfor %}{% endfor %}
"""

NESTED_LOOP_EXPECTED = """
a[0] = image[0];
b[0] = image[0];
b[1] = image[1];
a[1] = image[1];
b[0] = image[0];
b[1] = image[1];
a[2] = image[2];
b[0] = image[0];
b[1] = image[1];

"""
