"""Song metadata files and the library of songs found under a data folder."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class MusicMeta:
    """Metadata describing one song folder."""

    path: str = ""
    music_path: str = ""
    title: str = ""
    artist: str = ""
    jacket: str = ""
    bga: str = ""
    bga_start_pos: int = 0
    bga_end_pos: int = 0


def split_fields(text: str, delimiter: str) -> list[str]:
    """Split like repeated getline: no trailing empty field, empty text gives []."""
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _leading_int(value: str) -> int:
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"not an integer: {value!r}")
    return int(match.group(1))


def parse_meta_line(line: str, meta: MusicMeta, file_path: str) -> MusicMeta:
    """Apply one '#COMMAND value' line to meta and return it.

    Raises ValueError when the line carries no value.
    """
    fields = split_fields(line, " ")
    if len(fields) < 2:
        raise ValueError(f"metadata line has no value: {line!r}")
    command = fields[0][1:]
    value = fields[1].replace('"', "")

    if command == "TITLE":
        meta.title = value
    elif command == "ARTIST":
        meta.artist = value
    elif command == "JACKET":
        meta.jacket = file_path + value
    elif command == "BGA":
        meta.bga = file_path + value
    elif command == "MUSIC":
        meta.music_path = file_path + value
    elif command == "BGASTARTPOS":
        meta.bga_start_pos = _leading_int(value)
    elif command == "BGAENDPOS":
        meta.bga_end_pos = _leading_int(value)
    return meta


class MusicLibrary:
    """Songs found in the MusicData folder below a data path, plus the current pick."""

    META_FILE_NAME = "metadata.meta"

    def __init__(self, data_path: str | os.PathLike[str]) -> None:
        self.data_path = os.fspath(data_path)
        self.music_data_path = self.data_path + "/MusicData"
        self.current_number = 0
        self.difficulty = 0
        self.speed = 10
        self._meta: list[MusicMeta] = []

    def load(self) -> None:
        """Read the metadata of every song folder, in name order."""
        folder = Path(self.music_data_path)
        if not folder.is_dir():
            raise FileNotFoundError(f"music data folder not found: {self.music_data_path}")
        names = sorted(entry.name for entry in folder.iterdir() if not entry.name.startswith("."))

        songs = []
        for name in names:
            file_path = f"{self.music_data_path}/{name}/"
            meta = MusicMeta(path=file_path)
            meta_file = Path(file_path) / self.META_FILE_NAME
            if meta_file.is_file():
                for line in meta_file.read_text(encoding="utf-8").splitlines():
                    if line.startswith("#"):
                        parse_meta_line(line, meta, file_path)
            songs.append(meta)
        self._meta = songs

    def music_count(self) -> int:
        return len(self._meta)

    def music(self, number: int) -> MusicMeta:
        if not 0 <= number < len(self._meta):
            raise IndexError(f"no music number {number}")
        return self._meta[number]

    def current_path(self) -> str:
        return self.music(self.current_number).path

    def current_music_file(self) -> str:
        return self.music(self.current_number).music_path

    def current_difficulty_label(self) -> str:
        return str(self.difficulty)