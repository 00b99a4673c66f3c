"""QR code generator adapter."""

import io
import qrcode
from PIL import Image
from ..interfaces import IQRGenerator

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeAdapter:
    """Adapter for QR code generation."""

    def __init__(
        self,
        size: int = 300,
        border: int = 2,
        fill_color: str = "#0A4D68",
        back_color: str = "#F0F8FF",
        error_correction: str = "M"
    ):
        if error_correction not in ERROR_CORRECTION_LEVELS:
            raise ValueError(
                f"unknown error correction level: {error_correction}"
            )
        self.size = size
        self.border = border
        self.fill_color = fill_color
        self.back_color = back_color
        self.error_correction = ERROR_CORRECTION_LEVELS[error_correction]

    def generate(self, data: str) -> bytes:
        """Generate a size x size QR code PNG from text.

        Raises qrcode.exceptions.DataOverflowError when data exceeds the
        largest symbol at the configured error correction level.
        """
        qr = qrcode.QRCode(
            version=None,
            box_size=1,
            border=self.border,
            error_correction=self.error_correction
        )
        qr.add_data(data)
        qr.make(fit=True)

        # Largest whole-pixel module that fits, then scale to exact size
        width = qr.modules_count + 2 * self.border
        qr.box_size = max(1, self.size // width)

        img = qr.make_image(
            fill_color=self.fill_color, back_color=self.back_color
        ).get_image()
        if img.size != (self.size, self.size):
            img = img.resize(
                (self.size, self.size), Image.Resampling.NEAREST
            )

        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()
