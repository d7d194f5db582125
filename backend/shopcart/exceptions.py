"""
Error taxonomy shared by every service.

Each error carries the HTTP status the API layer answers with and a short,
user-facing message. Storage details never go into the message.
"""


class ShopError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ShopError):
    status_code = 400
    default_message = "Bad request"


class ValidationError(BadRequest):
    """Malformed or missing request fields."""

    default_message = "Invalid request"


class Unauthorized(ShopError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ShopError):
    status_code = 404
    default_message = "Not found"


class Conflict(ShopError):
    status_code = 409
    default_message = "Conflict"


class InternalFailure(ShopError):
    pass
