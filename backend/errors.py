# backend/errors.py


class GenerationError(Exception):
    """Base error for the generate endpoint. `status_code` is the HTTP status it maps to."""

    status_code = 500


class ValidationError(GenerationError):
    status_code = 400


class ProviderError(GenerationError):
    """The video provider could not be called or gave back nothing usable."""

    status_code = 500
