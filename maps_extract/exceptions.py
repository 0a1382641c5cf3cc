"""Custom exceptions for the maps-extract library."""


class MapsExtractorError(Exception):
    """Base exception for all maps-extract errors."""

    status_code = 500


class ConfigurationError(MapsExtractorError):
    """Raised when configuration is invalid or incomplete."""

    status_code = 500


class ValidationError(MapsExtractorError):
    """Raised when an extraction request is missing required input."""

    status_code = 400


class UpstreamError(MapsExtractorError):
    """Raised when a Google Maps web service call does not succeed."""

    status_code = 500


class PlaceDetailsError(UpstreamError):
    """Raised when a single place details lookup fails."""
    pass
