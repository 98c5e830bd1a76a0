class HypViewError(Exception):
    """Base class for all hypview exceptions."""

    pass
