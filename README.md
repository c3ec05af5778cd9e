# ebeatkit

Building blocks for a rhythm game, in plain Python with no dependencies.

- `ebeatkit.easing` has thirty easing curves: sine, quad, cubic, quart,
  quint, expo, circ, back, elastic and bounce, each in an in, out and in-out
  form. Call a curve directly, or look it up by its `Easing` member with
  `get_easing_function`. An unknown identifier raises `ValueError`.
- `ebeatkit.musicmeta` reads song folders into `MusicMeta` records and keeps
  them in a `MusicLibrary`.
- `ebeatkit.textblock` handles word wrapping and alignment (`Alignment.LEFT`,
  `RIGHT`, `CENTER`, `JUSTIFIED`) for a `TextBlock`. Text is measured with a
  `FixedWidthFont`, or with any object that has `line_height`,
  `string_width` and `string_height`.
- `ebeatkit.bitbuffer`, `ebeatkit.segment`, `ebeatkit.reedsolomon`,
  `ebeatkit.qrtables` and `ebeatkit.qrcode` make up a QR Code Model 2 encoder.
  It covers versions 1 to 40, all four error correction levels (`Ecc`), and
  the numeric, alphanumeric and byte modes.
- `ebeatkit.qrimage` lays a QR code out as coloured `Rectangle`s through
  `QrImage`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Easing

```python
from ebeatkit.easing import Easing, ease_out_quad, get_easing_function

ease_out_quad(0.5)                              # 0.75
curve = get_easing_function(Easing.EASE_IN_OUT_CUBIC)
curve(0.25)
```

## Song library

`MusicLibrary(data_path).load()` looks in `<data_path>/MusicData`. It raises
`FileNotFoundError` if that folder is missing.

- Every entry whose name does not start with a dot becomes one `MusicMeta`, in name order.
- The record's `path` is `<data_path>/MusicData/<name>/`.
- If the entry holds a `metadata.meta` file, each line of that file that starts with `#` is applied with `parse_meta_line`.

```python
from ebeatkit.musicmeta import MusicLibrary

library = MusicLibrary("data")
library.load()
for number in range(library.music_count()):
    song = library.music(number)          # IndexError if out of range
    print(song.title, song.artist, song.music_path)

library.current_number = 0
library.current_path()
library.current_music_file()
library.current_difficulty_label()        # str(library.difficulty)
```

A `metadata.meta` file looks like this:

```
#TITLE "Song"
#ARTIST "Someone"
#MUSIC "song.mp3"
#JACKET "jacket.png"
#BGA "movie.mp4"
#BGASTARTPOS 0
#BGAENDPOS 120
```

How `parse_meta_line` reads these lines:

- The value is the first space-separated field after the command, with double quotes removed. A title that contains spaces keeps only its first word.
- `MUSIC`, `JACKET` and `BGA` are prefixed with the song folder path.
- `BGASTARTPOS` and `BGAENDPOS` take the leading integer of the value.
- Unknown commands are ignored.
- A line with no value raises `ValueError`.

## QR codes

```python
from ebeatkit.qrcode import encode_text, encode_binary, encode_segments
from ebeatkit.qrtables import Ecc

qr = encode_text("HELLO WORLD", Ecc.HIGH)
print(qr.version, qr.size, qr.mask, qr.error_correction_level)
qr.module(0, 0)                 # True for a dark module
svg = qr.to_svg(4)              # SVG document with a 4-module border
other = qr.with_mask(3)         # same data, another mask
```

What the encoder does:

- The smallest version that fits is chosen.
- When `boost_ecl` is set, which is the default, the error correction level is raised as long as that needs no larger version.
- `encode_segments` accepts a version range and a fixed mask. With a mask of `-1` it picks the mask with the lowest penalty.
- If the data fits no version in the range, it raises `DataTooLongError`, a subclass of `ValueError`.

Laid out for drawing:

```python
from ebeatkit.qrimage import QrImage

image = QrImage()
image.generate("https://example.com/score")   # high error correction
image.set_color(0, 0, 0, 255)
for rect in image.rectangles(10, 10, 200.0):
    print(rect.x, rect.y, rect.width, rect.color)
```

Light modules come out with the transparent colour `(255, 255, 255, 0)`. Before `generate` has been called, `rectangles` returns an empty list.

## Text layout

```python
from ebeatkit.textblock import Alignment, FixedWidthFont, TextBlock

block = TextBlock(FixedWidthFont(10, 12, 16))
block.set_text("the quick brown fox jumps over the lazy dog")
block.wrap_text_x(120)                  # returns the number of lines
for placed in block.layout(0, 0, Alignment.LEFT):
    print(placed.text, placed.x, placed.y)

block.wrap_text_force_lines(3)          # True if exactly 3 lines formed
block.wrap_text_area(300, 100)          # picks a line count and a scale
block.width(), block.height()
```

`Alignment.JUSTIFIED` needs `box_width`; without it `layout` raises
`ValueError`.

## What it does not do

- It plays no audio.
- It draws nothing on screen. Text and QR codes come back as positions and colours for a renderer to use.
- It does not parse note charts.
- It has no game scenes and no command-line program.