class MetadataUnavailable(RuntimeError):
    """File metadata lacks an attribute the POSIX check needs.

    Raised when the filesystem (or the stat source) does not expose owner ids or
    permission bits, so the check cannot be evaluated.
    """

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Unable to get the {attribute} of the file")


class IdentityUnavailable(RuntimeError):
    """Effective user or group id of the process cannot be determined."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Unable to get the {attribute} of the process")
