class ContentError(Exception):
    """Base class for failures reading the content store."""


class MissingIndex(ContentError):
    """Collection location does not exist."""


class MissingItem(ContentError):
    """Document listed in an index could not be fetched."""


class MalformedContent(ContentError):
    """Document was fetched but is not valid JSON or breaks its record contract."""
