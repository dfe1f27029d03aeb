"""QR image renderer backed by the ``qrcode`` library."""

from __future__ import annotations

import io

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from ..domain.entities import DEFAULT_SIZE
from ..domain.errors import QRCapacityError, RenderUnavailableError
from ..domain.qr_renderer import DEFAULT_MIME, QRImageRenderer
from ..domain.validators import validate_size

# Mime type -> Pillow format name.
SUPPORTED_FORMATS = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
}


class QRCodeRenderer(QRImageRenderer):
    """Render payment URIs with ``qrcode`` and Pillow.

    Error correction is raised from L to M when a logo is requested, so the
    code still scans with its centre covered. The logo is not drawn here.
    """

    def __init__(self, border: int = 4):
        self.border = border

    def render(
        self,
        uri: str,
        size: int = DEFAULT_SIZE,
        show_logo: bool = False,
        mime: str = DEFAULT_MIME,
    ) -> bytes:
        image_format = SUPPORTED_FORMATS.get(mime)
        if image_format is None:
            raise RenderUnavailableError(f"unsupported image type: {mime}")

        validate_size(size)
        pixels = int(size)

        qr = qrcode.QRCode(
            version=None,
            error_correction=(
                qrcode.constants.ERROR_CORRECT_M
                if show_logo
                else qrcode.constants.ERROR_CORRECT_L
            ),
            box_size=1,
            border=self.border,
        )
        qr.add_data(uri)
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            # qrcode 8 reports an overflow as an invalid version 41
            raise QRCapacityError("payment URI does not fit in a QR code") from e

        # Largest whole-pixel module size, then scale to the exact target.
        qr.box_size = max(1, pixels // (qr.modules_count + 2 * self.border))
        img = qr.make_image(fill_color="black", back_color="white").get_image()
        img = img.convert("RGB").resize((pixels, pixels), Image.NEAREST)

        buffer = io.BytesIO()
        img.save(buffer, format=image_format)
        return buffer.getvalue()
