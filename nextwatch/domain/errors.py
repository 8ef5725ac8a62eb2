"""Domain error taxonomy.

Every error carries a stable ``code`` and the HTTP ``status`` it maps to, so
the API layer can translate them without knowing each subclass.
"""


class NextWatchError(Exception):
    code: str = "nextwatch_error"
    status: int = 400

    def __init__(self, message: str = "", *, code: str | None = None, status: int | None = None):
        super().__init__(message or self.__class__.__name__)
        self.message = str(self)
        if code:
            self.code = code
        if status:
            self.status = status


class InvalidActor(NextWatchError):
    code = "invalid_actor"
    status = 400

    def __init__(self, message: str = "Either user_id or session_id must be provided"):
        super().__init__(message)


class NotFound(NextWatchError):
    code = "not_found"
    status = 404


class DuplicateIdentity(NextWatchError):
    code = "duplicate_identity"
    status = 409


class CatalogUnavailable(NextWatchError):
    code = "catalog_unavailable"
    status = 503


class CatalogError(NextWatchError):
    code = "catalog_error"
    status = 502
