"""Form to QR code generator with local history."""

__version__ = "0.1.0"
