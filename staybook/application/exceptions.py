class UnknownFieldError(ValueError):
    """Raised when an input event names a field the booking form does not have."""
    pass


class FormNotFoundError(LookupError):
    """Raised when a booking form id is not mounted (never created or already torn down)."""
    pass


class BookingServiceContractError(RuntimeError):
    """Raised when the booking service answers 2xx without a booking id."""
    pass


class PropertyNotFoundError(LookupError):
    """Raised when the property service answers 404."""
    pass


class PropertyUpstreamError(RuntimeError):
    """Raised when the property service fails for any reason other than 404."""
    pass


class ReviewsUpstreamError(RuntimeError):
    """Raised when the reviews service fails (timeouts, network errors, bad payloads)."""
    pass
