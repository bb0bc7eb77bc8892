"""Render a QRIS payload into a scannable image."""

from __future__ import annotations

import io
import logging

import qrcode
from PIL import Image

from .errors import RenderError
from .models import RenderOptions

logger = logging.getLogger(__name__)

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}
DEFAULT_RENDER_OPTIONS = RenderOptions()


def render_qr_image(payload: str, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> bytes:
    """Encode ``payload`` as a QR code and return the image bytes.

    The image is square, ``options.width`` pixels wide, with a quiet zone of
    ``options.margin`` modules.

    Raises:
        RenderError: if the payload does not fit or the image cannot be encoded.
    """
    level = ERROR_CORRECTION_LEVELS.get(options.error_correction.upper())
    if level is None:
        raise RenderError(f"Unknown error correction level: {options.error_correction!r}")
    try:
        qr = qrcode.QRCode(
            version=None,  # auto-size
            error_correction=level,
            box_size=1,  # rescaled below once the module count is known
            border=options.margin,
        )
        qr.add_data(payload)
        qr.make(fit=True)
        modules = qr.modules_count + 2 * options.margin
        if options.width < modules:
            raise RenderError(
                f"QR width {options.width}px is too small for {modules} modules"
            )
        qr.box_size = options.width // modules
        img = qr.make_image(fill_color=options.dark_color, back_color=options.light_color)
        image = img.get_image().convert("RGB")
        image = image.resize((options.width, options.width), Image.Resampling.NEAREST)
        buf = io.BytesIO()
        image.save(buf, format=options.image_format.upper())
    except RenderError:
        raise
    except Exception as error:
        raise RenderError(f"Failed to render QR image: {error}") from error

    logger.info("QR code generated successfully (%d bytes)", buf.tell())
    return buf.getvalue()
