"""
Recursive-descent template parser.

Turns template source into a :class:`~stencil.template.nodes.Root` tree.
One recursive call handles one nesting level: it scans forward for the
next ``{%`` tag, emits the literal text before it as a TextBlock, and
dispatches on the first word of the tag:

    ``for``/``if``          open a block and recurse for its body
    ``endfor``/``endif``    close the current level
    anything else           UnknownTagError

Loop sources are resolved against the context *while parsing*:
``range(its)`` reads the current Int value of ``its`` and ``for x in items``
requires ``items`` to already be a Tuple. A template whose loop sources
are not bound cannot be parsed, even though ``{{ name }}`` markers are only
resolved later, at render time.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .._logging import scoped_logger
from ..exceptions import (
    MalformedForHeaderError,
    MalformedIfHeaderError,
    MismatchedEndError,
    TemplateTypeError,
    TrailingSourceError,
    UnknownTagError,
    UnterminatedTagError,
)
from .nodes import Conditional, ForLoop, IterationSource, Node, RangeSource, Root, TextBlock, TupleSource
from .values import IntValue, TupleValue, Value

__all__ = ["Parser", "parse", "TAG_OPEN", "TAG_CLOSE"]

TAG_OPEN = "{%"
TAG_CLOSE = "%}"

# Characters of the offending tag quoted in UnterminatedTagError
_FRAGMENT_LIMIT = 40

_RANGE_RE = re.compile(r"range\(([^()]*)\)")
_INT_RE = re.compile(r"[+-]?\d+")

log = scoped_logger("parser")


class Parser:
    """
    Parser for a single template source.

    Args:
        source: Template text.
        context: Bindings used to resolve ``range(name)`` bounds and tuple
            loop sources. The parser only reads from it.

    Example:
        >>> tree = Parser("{% for i in range(n) %}{{ i }}{% endfor %}", Context(n=2)).parse()
        >>> tree.children[0].source
        RangeSource(stop=2, arg='n')
    """

    __slots__ = ("_source", "_context")

    def __init__(self, source: str, context: Mapping[str, Value]):
        self._source = source
        self._context = context

    def parse(self) -> Root:
        """
        Parse the whole source.

        Raises
        ------
            TemplateSyntaxError: On any malformed or unbalanced tag.
            TemplateTypeError: If a loop source is bound to the wrong value kind.
        """
        children: list[Node] = []
        end = self._eat_section(0, children)
        if end != len(self._source):
            # Only a stray end tag returns early at the outermost level
            raise TrailingSourceError(
                f"some sourcecode found at end: {self._source[end:]}",
                details={"position": end, "fragment": self._source[end:]},
            )
        return Root(children=tuple(children))

    # =========================================================================
    # Levels
    # =========================================================================

    def _eat_section(self, pos: int, children: list[Node]) -> int:
        """
        Parse one nesting level starting at ``pos``, appending to ``children``.

        Returns the offset of the ``{%`` that closed this level, or the end of
        the source if it ran out first.
        """
        source = self._source
        while True:
            tag_start = source.find(TAG_OPEN, pos)
            if tag_start == -1:
                self._append_text(children, pos, len(source))
                return len(source)

            tag_end = source.find(TAG_CLOSE, tag_start)
            if tag_end == -1:
                fragment = source[tag_start : tag_start + _FRAGMENT_LIMIT]
                raise UnterminatedTagError(
                    f"control section unterminated: {fragment}",
                    details={"position": tag_start, "fragment": fragment},
                )

            body = source[tag_start + len(TAG_OPEN) : tag_end].strip()
            tokens = body.split()
            self._append_text(children, pos, tag_start)
            after_tag = tag_end + len(TAG_CLOSE)

            keyword = tokens[0] if tokens else ""
            match keyword:
                case "endfor" | "endif":
                    if len(tokens) != 1:
                        raise MismatchedEndError(
                            f"control section {{% {body} %}} unrecognized: "
                            f"{keyword} takes no arguments",
                            details={"position": tag_start, "fragment": body},
                        )
                    return tag_start
                case "for":
                    pos = self._parse_for(tokens, body, tag_start, after_tag, children)
                case "if":
                    pos = self._parse_if(tokens, body, tag_start, after_tag, children)
                case _:
                    raise UnknownTagError(
                        f"control section {{% {body} %}} unexpected",
                        details={"position": tag_start, "fragment": body},
                    )

    def _append_text(self, children: list[Node], start: int, end: int) -> None:
        if end > start:
            children.append(TextBlock(text=self._source[start:end], start=start, end=end))

    def _expect_end(self, pos: int, keyword: str) -> int:
        """Check that ``{% keyword %}`` starts at ``pos``; return the offset after it."""
        source = self._source
        expected = f"{TAG_OPEN}{keyword}{TAG_CLOSE}"
        close = source.find(TAG_CLOSE, pos)
        if close == -1:
            raise MismatchedEndError(
                f"No control end section found, expected '{{% {keyword} %}}' "
                f"before end of template",
                details={"position": pos, "fragment": source[pos:], "expected": keyword},
            )
        end_tag = source[pos : close + len(TAG_CLOSE)]
        if "".join(end_tag.split()) != expected:
            raise MismatchedEndError(
                f"No control end section found, expected '{{% {keyword} %}}', got '{end_tag}'",
                details={"position": pos, "fragment": end_tag, "expected": keyword},
            )
        return close + len(TAG_CLOSE)

    # =========================================================================
    # Blocks
    # =========================================================================

    def _parse_for(
        self,
        tokens: list[str],
        body: str,
        tag_start: int,
        after_tag: int,
        children: list[Node],
    ) -> int:
        if len(tokens) < 3 or tokens[2] != "in":
            raise MalformedForHeaderError(
                f"control section {{% {body} %}} unexpected: second word should be 'in'",
                details={"position": tag_start, "fragment": body},
            )
        if len(tokens) == 3:
            raise MalformedForHeaderError(
                f"control section {{% {body} %}} unexpected: missing iteration source",
                details={"position": tag_start, "fragment": body},
            )
        var = tokens[1]
        source = self._resolve_source("".join(tokens[3:]), body, tag_start)
        log.debug(
            "Opening for block",
            extra={"var": var, "position": tag_start, "fragment": body},
        )

        loop_children: list[Node] = []
        end = self._eat_section(after_tag, loop_children)
        pos = self._expect_end(end, "endfor")
        children.append(
            ForLoop(var=var, source=source, children=tuple(loop_children), position=tag_start)
        )
        return pos

    def _resolve_source(self, text: str, body: str, tag_start: int) -> IterationSource:
        """Classify and resolve the iteration source of a for header."""
        details = {"position": tag_start, "fragment": body}
        if text.split("(")[0] == "range":
            match = _RANGE_RE.fullmatch(text)
            if match is None or not match.group(1):
                raise MalformedForHeaderError(
                    f"control section {body} unexpected: should be in format "
                    "'range(somevar)' or 'range(somenumber)'",
                    details=details,
                )
            arg = match.group(1)
            if _INT_RE.fullmatch(arg):
                return RangeSource(stop=int(arg), arg=arg)
            value = self._context.get(arg)
            if value is None:
                raise MalformedForHeaderError(
                    f"for loop range var {arg} not recognized",
                    details={**details, "name": arg},
                )
            if not isinstance(value, IntValue):
                raise TemplateTypeError(
                    f"for loop range var {arg} must be an int (but it's not)",
                    details={**details, "name": arg, "kind": value.kind.name},
                )
            return RangeSource(stop=value.value, arg=arg)

        value = self._context.get(text)
        if value is None:
            raise MalformedForHeaderError(
                f"for loop var {text} not recognized",
                details={**details, "name": text},
            )
        if not isinstance(value, TupleValue):
            raise TemplateTypeError(
                f"for loop var {text} must be a range or a tuple (but it's neither)",
                details={**details, "name": text, "kind": value.kind.name},
            )
        return TupleSource(name=text)

    def _parse_if(
        self,
        tokens: list[str],
        body: str,
        tag_start: int,
        after_tag: int,
        children: list[Node],
    ) -> int:
        details = {"position": tag_start, "fragment": body}
        operands = tokens[1:]
        if not operands:
            raise MalformedIfHeaderError(
                "Any expression expected after if statement.", details=details
            )
        negated = operands[0] == "not"
        if negated:
            operands = operands[1:]
            if not operands:
                raise MalformedIfHeaderError(
                    "Any expression expected after if not statement.", details=details
                )
        if len(operands) > 1:
            raise MalformedIfHeaderError(
                f"Unexpected expression after variable name: {operands[1]}",
                details={**details, "token": operands[1]},
            )
        operand = operands[0]
        log.debug(
            "Opening if block",
            extra={"operand": operand, "negated": negated, "position": tag_start},
        )

        body_children: list[Node] = []
        end = self._eat_section(after_tag, body_children)
        pos = self._expect_end(end, "endif")
        children.append(
            Conditional(
                operand=operand,
                negated=negated,
                children=tuple(body_children),
                position=tag_start,
            )
        )
        return pos


def parse(source: str, context: Mapping[str, Value]) -> Root:
    """
    Parse ``source`` into a syntax tree.

    Args:
        source: Template text.
        context: Bindings used to resolve loop sources.

    Returns
    -------
        The root of the parsed tree.

    Raises
    ------
        TemplateSyntaxError: If the text is not a well-formed template.
        TemplateTypeError: If a loop source is bound to the wrong value kind.
    """
    return Parser(source, context).parse()
