"""BexQR: ARK payment URI codec and QR rendering service."""

__version__ = "1.0.0"
