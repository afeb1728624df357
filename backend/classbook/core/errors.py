"""Error kinds raised below the HTTP layer and rendered by ``classbook.main``."""


class ApiError(Exception):
    status_code = 500
    kind = "error"
    message = "Request failed"

    def __init__(self, kind: str | None = None, message: str | None = None):
        if kind is not None:
            self.kind = kind
        if message is not None:
            self.message = message
        super().__init__(self.kind)

    def body(self) -> dict:
        return {"error": self.kind, "message": self.message}


class StorageFailure(ApiError):
    """A store operation was rejected by the database.

    The underlying ``SQLAlchemyError`` is kept as ``__cause__`` for the server log
    and never sent to the client.
    """

    status_code = 500
    kind = "storage_failure"
    message = "Internal server error"


class NotFound(ApiError):
    status_code = 404
    kind = "not_found"
    message = "Not found"


class Conflict(ApiError):
    status_code = 409
    kind = "conflict"
    message = "Conflict"


class Unauthorized(ApiError):
    status_code = 401
    kind = "unauthorized"
    message = "Unauthorized"

    def body(self) -> dict:
        return {"message": "Unauthorized"}
