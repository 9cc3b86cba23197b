class PadlintError(Exception):
    """Base class for errors raised by padlint."""


class ConfigError(PadlintError):
    """Rule options or a configuration file could not be accepted."""


class UnknownConstructError(PadlintError):
    """A node reached padding evaluation without a construct kind.

    This signals a dispatcher/classifier mismatch and aborts the check.
    """

    def __init__(self, node_type: str, parent_type: str | None = None):
        self.node_type = node_type
        self.parent_type = parent_type
        super().__init__(f"Cannot classify '{node_type}' node (parent: {parent_type or 'none'})")
