"""Error types raised across the submission pipeline."""


class QRSecureError(Exception):
    """Base class for qrsecure failures."""


class UnknownTemplateError(QRSecureError, ValueError):
    """Raised when a template id is not one of the registered kinds."""


class EncodingError(QRSecureError):
    """QR rendering failed; terminal for the submission."""


class HistoryPersistenceError(QRSecureError):
    """History storage could not be read or written."""
