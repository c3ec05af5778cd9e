"""Rhythm-game helpers: easing curves, song metadata, text layout and QR codes."""

__version__ = "0.1.0"

__all__ = [
    "bitbuffer",
    "easing",
    "musicmeta",
    "qrcode",
    "qrimage",
    "qrtables",
    "reedsolomon",
    "segment",
    "textblock",
]