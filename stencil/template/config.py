"""
Runtime switches for the template engine.

``config.debug`` makes every ``Template.render()`` log the tree it parsed
(the same text ``Template.dump()`` returns) on the ``stencil`` logger at
DEBUG, scope ``template``. Turn the logger up as well to see it::

    >>> import stencil
    >>> from stencil.template import config
    >>> stencil.setup_logging("debug")
    >>> config.debug = True
"""

from ..exceptions import ValidationError


class _TemplateConfig:
    """Holds the module-wide switches; use the ``config`` instance."""

    __slots__ = ("_debug",)

    def __init__(self) -> None:
        self._debug = False

    @property
    def debug(self) -> bool:
        """Log the parsed tree dump before each render."""
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValidationError(
                f"debug must be bool, got {type(value).__name__}",
                details={"param": "debug", "type": type(value).__name__},
            )
        self._debug = value

    def __repr__(self) -> str:
        dumps = "logging tree dumps" if self._debug else "no tree dumps"
        return f"<stencil template config: debug={self._debug} ({dumps})>"


config = _TemplateConfig()
