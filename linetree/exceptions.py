class LinetreeError(Exception):
    """Base for everything the lines core refuses to accept."""


class DocumentParseError(LinetreeError, ValueError):
    """The nested lines structure is absent or malformed."""


class IllegalMoveError(LinetreeError, ValueError):
    """A move token can't be played from the position it was tried on."""

    def __init__(self, token: str, position: str, reason: str = ""):
        self.token = token
        self.position = position
        self.reason = reason
        message = f"Illegal move {token!r} from {position}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CodecError(LinetreeError, ValueError):
    """A share token isn't valid percent/base64 encoding."""
