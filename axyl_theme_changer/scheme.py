import json
import os
from dataclasses import dataclass

from .errors import (
    InvalidPaletteSize,
    IoFailure,
    MalformedInput,
    MissingInputFile,
    PathIsDirectory,
)

PALETTE_SIZE = 16

COLOR_NAMES = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

REQUIRED_FIELDS = ("theme", "color", "background", "foreground")


@dataclass(frozen=True)
class ColorScheme:
    """A named 16-color palette plus its default background and foreground.

    ``colors[0:8]`` are the normal colors and ``colors[8:16]`` the bright
    ones, both in ``COLOR_NAMES`` order.
    """

    theme: str
    colors: tuple
    background: str
    foreground: str

    @property
    def normal(self):
        return self.colors[:8]

    @property
    def bright(self):
        return self.colors[8:]


def parse_scheme(text, source="<input>"):
    try:
        data = json.loads(text)
    except (ValueError, UnicodeDecodeError, RecursionError) as err:
        raise MalformedInput(f'"{source}" is not valid JSON: {err}') from err

    if not isinstance(data, dict):
        raise MalformedInput(f'"{source}" must contain a JSON object')

    missing = [key for key in REQUIRED_FIELDS if key not in data]
    if missing:
        raise MalformedInput(f'"{source}" is missing fields: {", ".join(missing)}')

    for key in ("theme", "background", "foreground"):
        if not isinstance(data[key], str):
            raise MalformedInput(f'"{source}": field "{key}" must be a string')

    colors = data["color"]
    if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
        raise MalformedInput(f'"{source}": field "color" must be an array of strings')
    if len(colors) != PALETTE_SIZE:
        raise InvalidPaletteSize(source, len(colors), PALETTE_SIZE)

    return ColorScheme(
        theme=data["theme"],
        colors=tuple(colors),
        background=data["background"],
        foreground=data["foreground"],
    )


def verify_input_file(path):
    if not os.path.exists(path):
        raise MissingInputFile(path)
    if os.path.isdir(path):
        raise PathIsDirectory(path, role="input")


def verify_output_file(path):
    if os.path.isdir(path):
        raise PathIsDirectory(path)
    if os.path.exists(path):
        return
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as err:
        raise IoFailure(path, "create", err) from err


def load_scheme(path):
    verify_input_file(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as err:
        raise IoFailure(path, "read", err) from err
    return parse_scheme(raw, source=path)
