class ShortenerError(Exception):
    """Base exception for all errors reported by the shortener service."""

    error_code = 'ShortenerError'


class InvalidUrlError(ShortenerError):
    """Raised when a URL fails the scheme/host check."""

    error_code = 'InvalidUrl'


class SlugAlreadyInUseError(ShortenerError):
    """Raised when creating a link with a slug that already maps to a link."""

    error_code = 'SlugAlreadyInUse'


class SlugNotFoundError(ShortenerError):
    """Raised when a slug does not map to any existing link."""

    error_code = 'SlugNotFound'


class ConfigurationError(ShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
