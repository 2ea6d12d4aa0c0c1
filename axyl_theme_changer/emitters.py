import re

from .errors import IoFailure
from .scheme import COLOR_NAMES, verify_output_file

ANSI_RESET = "\x1b[0m"
REPORT_COLOR_RE = re.compile(r"(#|0x)([0-9A-Fa-f]{6})\b")


def hex_to_rgb(hex_color):
    value = hex_color.lstrip("#")
    if len(value) != 6:
        return None
    try:
        return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def swatch(hex_color, label):
    rgb = hex_to_rgb(hex_color)
    if not rgb:
        return label
    r, g, b = rgb
    return f"\x1b[48;2;{r};{g};{b}m {label} {ANSI_RESET}"


def format_report_line(entry):
    match = REPORT_COLOR_RE.search(entry)
    if not match:
        return entry
    return f"{swatch(match.group(2), match.group(0))} {entry}"


def alacritty_color(value):
    # '#RRGGBB' -> '0xRRGGBB'; the payload itself is passed through untouched
    if value.startswith("#"):
        value = value[1:]
    return f"0x{value}"


def _alacritty_block(lines, report, label, colors):
    lines.append(f"  # {label.capitalize()} colors")
    lines.append(f"  {label}:")
    for name, value in zip(COLOR_NAMES, colors):
        key = f"{name}:"
        lines.append(f"    {key:<10}'{alacritty_color(value)}'")
        report.append(f"colors.{label}.{name} -> {alacritty_color(value)}")
    lines.append("")


def render_alacritty(scheme):
    """Render ``scheme`` as an Alacritty ``colors.yml`` document.

    Returns ``(text, report)`` where ``report`` lists every key written.
    """
    background = alacritty_color(scheme.background)
    foreground = alacritty_color(scheme.foreground)
    lines = [
        f"# Colors ({scheme.theme} Theme)",
        "colors:",
        "  # Default colors",
        "  primary:",
        f"    background: '{background}'",
        f"    foreground: '{foreground}'",
        "",
    ]
    report = [
        f"colors.primary.background -> {background}",
        f"colors.primary.foreground -> {foreground}",
    ]
    _alacritty_block(lines, report, "normal", scheme.normal)
    _alacritty_block(lines, report, "bright", scheme.bright)
    return "\n".join(lines) + "\n", report


def _polybar_block(lines, report, colors, prefix=""):
    for name, value in zip(COLOR_NAMES, colors):
        lines.append(f"{prefix}{name} = {value}")
        report.append(f"{prefix}{name} -> {value}")


def render_polybar(scheme):
    lines = [
        "[color]",
        f"background = {scheme.background}",
        f"foreground = {scheme.foreground}",
    ]
    report = [
        f"background -> {scheme.background}",
        f"foreground -> {scheme.foreground}",
    ]
    _polybar_block(lines, report, scheme.normal)
    _polybar_block(lines, report, scheme.bright, prefix="alt")
    return "\n".join(lines) + "\n", report


def write_file(path, contents):
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)
    except OSError as err:
        raise IoFailure(path, "write", err) from err


def write_alacritty(scheme, path):
    verify_output_file(path)
    contents, report = render_alacritty(scheme)
    write_file(path, contents)
    return report


def write_polybar(scheme, path):
    verify_output_file(path)
    contents, report = render_polybar(scheme)
    write_file(path, contents)
    return report
