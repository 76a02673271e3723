"""
Variable context tests.

Tests for Context mapping behavior and the scoped bind() guard.
"""

import pytest

from stencil.exceptions import TemplateRedefinitionError, ValidationError
from stencil.template import IntValue, StringValue


class TestMapping:
    """Tests for Context as a mapping."""

    def test_init_from_kwargs(self, Context):
        """Keyword bindings are converted to values."""
        ctx = Context(its=3, weather="rain")
        assert ctx["its"] == IntValue(value=3)
        assert ctx["weather"] == StringValue(value="rain")

    def test_init_from_mapping(self, Context):
        """A mapping can seed the context."""
        ctx = Context({"a": 1})
        assert ctx["a"] == IntValue(value=1)

    def test_overwrite(self, Context):
        """Re-assigning a name replaces the binding."""
        ctx = Context(a=1)
        ctx["a"] = "now a string"
        assert ctx["a"] == StringValue(value="now a string")

    def test_missing_name(self, Context):
        """Lookups are exact; missing names raise KeyError."""
        ctx = Context(a=1)
        with pytest.raises(KeyError):
            ctx["A"]
        assert ctx.get("A") is None

    def test_invalid_value(self, Context):
        """Unsupported values are rejected at assignment."""
        ctx = Context()
        with pytest.raises(ValidationError):
            ctx["x"] = None

    def test_len_iter_delete(self, Context):
        """Context supports the full mutable mapping protocol."""
        ctx = Context(a=1, b=2)
        assert len(ctx) == 2
        assert sorted(ctx) == ["a", "b"]
        del ctx["a"]
        assert "a" not in ctx

    def test_copy_is_independent(self, Context):
        """copy() does not share bindings with the original."""
        ctx = Context(a=1)
        clone = ctx.copy()
        clone["b"] = 2
        assert "b" not in ctx


class TestBind:
    """Tests for Context.bind()."""

    def test_bind_and_unbind(self, Context):
        """Name is bound inside the block and removed after it."""
        ctx = Context()
        with ctx.bind("i", IntValue(value=0)):
            assert ctx["i"] == IntValue(value=0)
        assert "i" not in ctx

    def test_rebind_inside_block(self, Context):
        """Rebinding inside the block is allowed and still cleaned up."""
        ctx = Context()
        with ctx.bind("i", IntValue(value=0)):
            ctx["i"] = 5
            assert ctx["i"] == IntValue(value=5)
        assert "i" not in ctx

    def test_unbind_on_error(self, Context):
        """Binding is removed when the block raises."""
        ctx = Context()
        with pytest.raises(RuntimeError):
            with ctx.bind("i", IntValue(value=0)):
                raise RuntimeError("boom")
        assert "i" not in ctx

    def test_redefinition(self, Context):
        """Binding an already-bound name raises and leaves it untouched."""
        ctx = Context(i=7)
        with pytest.raises(TemplateRedefinitionError) as exc_info:
            with ctx.bind("i", IntValue(value=0)):
                pass
        assert str(exc_info.value) == "variable i already exists in this context"
        assert exc_info.value.details == {"name": "i"}
        assert ctx["i"] == IntValue(value=7)

    def test_other_bindings_untouched(self, Context):
        """Only the bound name is added and removed."""
        ctx = Context(a=1)
        with ctx.bind("i", IntValue(value=0)):
            pass
        assert dict(ctx) == {"a": IntValue(value=1)}
