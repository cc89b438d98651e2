class RepositoryError(Exception):
    """
    A call to the content store failed. `message` is safe to show to the user.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RepositoryFetchError(RepositoryError):
    """Listing or lookup failed."""


class RepositoryMutationError(RepositoryError):
    """Insert, update or delete failed; nothing was changed."""


class RecordNotFound(RepositoryError):
    """Update/delete addressed an id that does not exist."""


class ValidationError(Exception):
    """
    Submitted fields are incomplete. Raised before the store is touched.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
