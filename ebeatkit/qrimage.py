"""A QR Code held as a flat module list and laid out as coloured squares."""

from __future__ import annotations

from dataclasses import dataclass

from .qrcode import encode_text
from .qrtables import Ecc

Color = tuple[int, int, int, int]

_LIGHT: Color = (255, 255, 255, 0)


@dataclass(frozen=True)
class Rectangle:
    """One module square to draw."""

    x: float
    y: float
    width: float
    height: float
    color: Color


class QrImage:
    """Generates a QR Code for a URL and lays it out as squares of a given colour."""

    def __init__(self) -> None:
        self.qr_size = 0
        self.modules: list[bool] = []
        self.color: Color = (0, 0, 0, 255)

    def generate(self, url: str) -> None:
        """Encode the URL at high error correction, modules stored row by row."""
        qr = encode_text(url, Ecc.HIGH)
        self.modules = [qr.module(x, y) for y in range(qr.size) for x in range(qr.size)]
        self.qr_size = qr.size

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def rectangles(self, x: float, y: float, size: float) -> list[Rectangle]:
        """Squares covering a size by size area at (x, y); light ones are transparent.

        Empty until a code has been generated.
        """
        if not self.qr_size:
            return []
        block = size / self.qr_size
        result = []
        for index, dark in enumerate(self.modules):
            row, column = divmod(index, self.qr_size)
            result.append(
                Rectangle(
                    x + column * block,
                    y + row * block,
                    block,
                    block,
                    self.color if dark else _LIGHT,
                )
            )
        return result