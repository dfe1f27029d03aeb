"""QR image renderer interface."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod

from .entities import DEFAULT_SIZE

DEFAULT_MIME = "image/png"


class QRImageRenderer(ABC):
    """Abstract collaborator that turns a payment URI into a QR image."""

    @abstractmethod
    def render(
        self,
        uri: str,
        size: int = DEFAULT_SIZE,
        show_logo: bool = False,
        mime: str = DEFAULT_MIME,
    ) -> bytes:
        """Render ``uri`` as a ``size`` x ``size`` image encoded as ``mime``."""
        pass

    def data_url(
        self,
        uri: str,
        size: int = DEFAULT_SIZE,
        show_logo: bool = False,
        mime: str = DEFAULT_MIME,
    ) -> str:
        """Render ``uri`` and wrap the image bytes in a ``data:`` URL."""
        image = self.render(uri, size=size, show_logo=show_logo, mime=mime)
        return f"data:{mime};base64,{base64.b64encode(image).decode('ascii')}"
