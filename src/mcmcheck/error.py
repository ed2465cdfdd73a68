"""Exception types."""


class FormatError(ValueError):
    """An input file does not have the structure needed to extract names.

    Raised when an expected marker is absent or when table rows do not line up with
    the header.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")
