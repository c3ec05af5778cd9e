"""Word wrapping and alignment of a block of text measured by a font."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

Color = tuple[int, int, int, int]

_WORD_COLOR: Color = (150, 150, 150, 255)
_SPACE_COLOR: Color = (255, 255, 255, 255)
_SPACE = " "


class Alignment(Enum):
    """Horizontal alignment of the lines in a text block."""

    LEFT = "left"
    RIGHT = "right"
    JUSTIFIED = "justified"
    CENTER = "center"


class Font(Protocol):
    """What a text block needs from a font."""

    line_height: float

    def string_width(self, text: str) -> float: ...

    def string_height(self, text: str) -> float: ...


class FixedWidthFont:
    """A font in which every character has the same advance and height."""

    def __init__(self, char_width: float, char_height: float, line_height: float) -> None:
        self.char_width = char_width
        self.char_height = char_height
        self.line_height = line_height

    def string_width(self, text: str) -> float:
        return len(text) * self.char_width

    def string_height(self, text: str) -> float:
        return self.char_height if text else 0


@dataclass
class Word:
    """A word (or a single space) with its measured size and colour."""

    text: str
    width: float
    height: float
    color: Color

    @property
    def is_space(self) -> bool:
        return self.text == _SPACE


@dataclass(frozen=True)
class PlacedWord:
    """A word positioned for drawing, in screen coordinates."""

    text: str
    x: float
    y: float
    width: float
    scale: float
    color: Color
    word_index: int


class TextBlock:
    """Text split into words and wrapped into lines, with a uniform scale."""

    def __init__(self, font: Font) -> None:
        self.font = font
        self.raw_text = ""
        self.scale = 1.0
        self.tracking = 0.0
        self.words: list[Word] = []
        self.lines: list[list[int]] = []
        self.blank_space_word = Word(
            _SPACE, font.string_width("x"), font.string_height("i"), _SPACE_COLOR
        )

    def set_text(self, text: str) -> None:
        """Replace the text and lay it out on a single line."""
        self.raw_text = text
        self._load_words()
        self.wrap_text_force_lines(1)

    def _load_words(self) -> None:
        words: list[Word] = []
        for token in self.raw_text.split():
            words.append(
                Word(
                    token,
                    self.font.string_width(token),
                    self.font.string_height(token),
                    _WORD_COLOR,
                )
            )
            blank = self.blank_space_word
            words.append(Word(blank.text, blank.width, blank.height, blank.color))
        self.words = words
        if not words:
            self.lines = []

    def _trim_line(self, line: list[int]) -> list[int]:
        if line and self.words[line[0]].is_space:
            line = line[1:]
        if line and self.words[line[-1]].is_space:
            line = line[:-1]
        return line

    def wrap_text_x(self, line_width: float) -> int:
        """Wrap words into lines no wider than line_width; return the line count."""
        self.scale = 1.0
        if not self.words:
            self.lines = []
            return 0

        lines: list[list[int]] = []
        current: list[int] = []
        running = 0.0
        for index, word in enumerate(self.words):
            running += word.width
            if running > line_width:
                lines.append(current)
                current = []
                running = word.width
            current.append(index)
        lines.append(current)

        self.lines = [self._trim_line(line) for line in lines]
        return len(self.lines)

    def wrap_text_force_lines(self, line_count: int) -> bool:
        """Narrow the wrap width until exactly line_count lines form.

        Returns False when the count is skipped over. Raises ValueError for a
        count below one.
        """
        if line_count < 1:
            raise ValueError(f"line count must be at least 1: {line_count}")
        if not self.words:
            return False
        line_count = min(line_count, len(self.words))
        line_width = self._words_width() * (1.1 / line_count)
        while True:
            lines = self.wrap_text_x(line_width)
            if lines == line_count:
                return True
            if lines > line_count:
                return False
            line_width -= 10

    def wrap_text_area(self, width: float, height: float) -> None:
        """Choose the line count and scale that best fill a width by height area."""
        self.scale = 1.0
        if not self.words:
            return
        max_iterations = sum(len(line) for line in self.lines)
        if max_iterations == 0:
            return

        scales: dict[int, float] = {}
        for iteration in range(1, max_iterations + 1):
            self.wrap_text_force_lines(iteration)
            current_width = self.width()
            candidate = width / current_width if current_width else math.inf
            scales[iteration] = candidate if candidate * self.height() < height else -1.0

        best = 1
        available = False
        for iteration in range(1, max_iterations + 1):
            if scales[iteration] != -1:
                available = True
            if scales[iteration] > scales[best]:
                best = iteration

        if available:
            scale = scales[best]
        else:
            current_height = self.height()
            scale = height / current_height if current_height else math.inf

        self.wrap_text_force_lines(best)
        self.scale = scale

    def _words_width(self) -> float:
        return sum(word.width for word in self.words)

    def _line_width(self, line: list[int]) -> float:
        return sum(self.words[index].width for index in line)

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        color = (r, g, b, a)
        for word in self.words:
            word.color = color

    def set_tracking(self, tracking: float) -> None:
        self.tracking = tracking

    def force_scale(self, scale: float) -> None:
        self.scale = scale

    def width(self) -> float:
        """Width of the widest line, scaled."""
        if not self.words:
            return 0
        widest = max((self._line_width(line) for line in self.lines), default=0.0)
        return widest * self.scale

    def height(self) -> float:
        """Height of all lines, scaled."""
        if not self.words:
            return 0
        return self.font.line_height * self.scale * len(self.lines)

    def layout(
        self,
        x: float,
        y: float,
        alignment: Alignment = Alignment.LEFT,
        box_width: float | None = None,
    ) -> list[PlacedWord]:
        """Place every drawn word for the given anchor and alignment.

        Justified alignment needs box_width and raises ValueError without it.
        """
        if alignment is Alignment.JUSTIFIED and box_width is None:
            raise ValueError("justified alignment needs a box width")
        if not self.words:
            return []

        placed: list[PlacedWord] = []
        line_height = self.font.line_height
        scale = self.scale

        def place(index: int, px: float, py: float) -> None:
            word = self.words[index]
            placed.append(
                PlacedWord(word.text, px, py, word.width * scale, scale, word.color, index)
            )

        for line_number, line in enumerate(self.lines):
            baseline = line_height * (line_number + 1)
            cursor = 0.0

            if alignment is Alignment.LEFT:
                for index in line:
                    px = self.tracking * index + scale * (x + cursor)
                    place(index, px, scale * (y + baseline))
                    cursor += self.words[index].width

            elif alignment is Alignment.CENTER:
                half = self._line_width(line) / 2
                for index in line:
                    place(index, x + scale * (cursor - half), y + scale * baseline)
                    cursor += self.words[index].width

            elif alignment is Alignment.RIGHT:
                for index in reversed(line):
                    word = self.words[index]
                    place(index, x + scale * (-cursor - word.width), y + scale * baseline)
                    cursor += word.width

            else:
                spaces = sum(1 for index in line if self.words[index].is_space)
                solid = sum(
                    self.words[index].width for index in line if not self.words[index].is_space
                )
                per_space = (
                    ((box_width / scale) - (x / scale) - solid) / spaces if spaces else 0.0
                )
                for index in line:
                    word = self.words[index]
                    if word.is_space:
                        cursor += per_space
                    else:
                        place(index, x + scale * cursor, y + scale * baseline)
                        cursor += word.width

        return placed