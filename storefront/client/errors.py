class StorefrontError(Exception):
    """Base class for client-side storefront failures."""


class AuthenticationRequired(StorefrontError):
    """A cart or order operation was attempted without a signed-in identity."""

    def __init__(self, message="Must be signed in to perform this action"):
        super().__init__(message)


class PersistenceError(StorefrontError):
    """The storefront API rejected or failed a request."""

    def __init__(self, detail, status_code=None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class EmptyCart(StorefrontError):
    """Checkout was requested for a cart with no lines."""

    def __init__(self, message="Cannot check out an empty cart"):
        super().__init__(message)
