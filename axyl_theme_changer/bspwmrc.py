"""Point the ``theme=`` declaration in bspwmrc at a new theme.

bspwmrc picks its wallpaper from ``<wallpapers>/<theme>``, so the rewrite is
only attempted when the wallpaper directory exists. The edit is a plain
read-modify-write with no locking; concurrent runs against the same file
can lose an update.
"""

import os
import re
import warnings

from .errors import AssetDirectoryMissing, IoFailure
from .scheme import verify_output_file

THEME_LINE_RE = re.compile(r"theme=.*")

SKIPPED = "skipped"
REWRITTEN = "rewritten"


def replace_theme_line(contents, theme):
    report = []
    # only the first declaration is touched; the rest of the file is kept verbatim
    updated, count = THEME_LINE_RE.subn(lambda m: f"theme={theme}", contents, count=1)
    if count:
        report.append(f"theme -> {theme}")
    else:
        report.append("no theme= line found")
    return updated, report


def update_bspwmrc(theme, path, wallpaper_dir):
    """Rewrite the theme line of ``path``.

    Returns ``(outcome, report)`` with outcome ``SKIPPED`` when the wallpaper
    directory is missing (an ``AssetDirectoryMissing`` warning is issued and
    the file is left alone) or ``REWRITTEN`` once the file has been written.
    """
    if not os.path.isdir(wallpaper_dir):
        warnings.warn(
            "wallpaper change not in affect, could not find wallpaper "
            f'directory "{wallpaper_dir}"',
            AssetDirectoryMissing,
            stacklevel=2,
        )
        return SKIPPED, []

    verify_output_file(path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            original = f.read()
    except (OSError, UnicodeDecodeError) as err:
        raise IoFailure(path, "read", err) from err

    updated, report = replace_theme_line(original, theme)

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(updated)
    except OSError as err:
        raise IoFailure(path, "write", err) from err

    return REWRITTEN, report
