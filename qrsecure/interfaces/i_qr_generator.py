"""QR image renderer interface (adapter pattern)."""

from typing import Protocol


class IQRGenerator(Protocol):
    """Interface for rendering a viewer URL as a QR image."""

    def generate(self, data: str) -> bytes:
        """Render data as PNG bytes.

        Raises when data does not fit in the largest QR symbol.
        """
        ...
