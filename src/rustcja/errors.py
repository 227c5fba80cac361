"""Exception types for rustcja.

The translation engine itself never raises for bad input; it degrades to
pass-through. Only the wrapper surface reports errors to the user.
"""


class RustcJaError(Exception):
    """Base class for rustcja errors."""

    pass


class WrapperError(RustcJaError):
    """Raised when the wrapped command cannot be run."""

    action = "spawn command"

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to {self.action}: {reason}")


class OutputWriteError(WrapperError):
    """Raised when forwarded stderr output cannot be written."""

    action = "write to stderr"
