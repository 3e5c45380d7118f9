"""Error types.

Two failure classes exist:

* :class:`ConfigurationError` is raised while building a configuration or a
  tile map. It is fatal; nothing should be rendered with a rejected setup.
* :class:`InvariantViolation` is raised by the core systems when world data
  or internal tables are malformed (e.g. an atlas source id without a
  terrain). The core never guesses a fallback terrain.

Both derive from the built-in exception used for the same situation so that
existing ``except ValueError`` / ``except RuntimeError`` handlers still apply.
"""


class DualGridError(Exception):
    """Base class for all errors raised by ``dual_grid``."""


class ConfigurationError(DualGridError, ValueError):
    """Invalid terrain, bespoke-mix or display-layer configuration."""


class InvariantViolation(DualGridError, RuntimeError):
    """Malformed world data or a broken internal table."""
