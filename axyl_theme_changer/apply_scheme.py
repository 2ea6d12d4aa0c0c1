#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
import warnings
from dataclasses import dataclass

from .bspwmrc import REWRITTEN, update_bspwmrc
from .emitters import format_report_line, write_alacritty, write_polybar
from .errors import AssetDirectoryMissing, RefreshFailed, ThemeChangerError
from .scheme import load_scheme

DEFAULT_BSPWM_DIR = os.path.join("~", ".config", "bspwm")

REFRESH_COMMANDS = [
    ["pkill", "polybar"],
    ["bspc", "wm", "-r"],
]


@dataclass
class Config:
    """Destination files for a run, plus the wallpaper directory gating bspwmrc."""

    alacritty_path: str
    polybar_path: str
    bspwmrc_path: str
    wallpaper_dir: str

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        base = environ.get("AXTC_BSPWM_DIR", DEFAULT_BSPWM_DIR)
        paths = {
            "alacritty_path": environ.get(
                "AXTC_ALACRITTY", os.path.join(base, "alacritty", "colors.yml")
            ),
            "polybar_path": environ.get("AXTC_POLYBAR", os.path.join(base, "polybar", "colors")),
            "bspwmrc_path": environ.get("AXTC_BSPWMRC", os.path.join(base, "bspwmrc")),
            "wallpaper_dir": environ.get("AXTC_WALLPAPERS", os.path.join(base, "wallpapers")),
        }
        return cls(**{name: os.path.expanduser(value) for name, value in paths.items()})

    def override(self, args):
        for field in ("alacritty_path", "polybar_path", "bspwmrc_path", "wallpaper_dir"):
            value = getattr(args, field, None)
            if value:
                setattr(self, field, value)
        return self


def apply_scheme(scheme_path, config):
    """Parse ``scheme_path`` and project it into every configured file.

    The scheme is fully validated before any output is touched. Returns a
    list of ``(path, report)`` pairs for the files that were written.
    """
    scheme = load_scheme(scheme_path)

    reports = [
        (config.alacritty_path, write_alacritty(scheme, config.alacritty_path)),
        (config.polybar_path, write_polybar(scheme, config.polybar_path)),
    ]
    outcome, report = update_bspwmrc(scheme.theme, config.bspwmrc_path, config.wallpaper_dir)
    if outcome == REWRITTEN:
        reports.append((config.bspwmrc_path, report))
    return reports


def issue_refresh(spawn=None):
    spawn = spawn or subprocess.Popen
    for command in REFRESH_COMMANDS:
        try:
            spawn(command)
        except OSError as err:
            raise RefreshFailed(command, err) from err


def print_reports(reports):
    for path, report in reports:
        print(f"==> {os.path.basename(path)}")
        if report:
            for entry in report:
                print(f"  - {format_report_line(entry)}")
        else:
            print("  - no matches")

    print("Done.")


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="axtc",
        description="Apply a JSON color scheme to Alacritty, Polybar and bspwm.",
    )
    parser.add_argument("scheme", help="Path to the JSON color scheme")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress per-file reporting")
    parser.add_argument(
        "--no-refresh",
        action="store_true",
        help="Do not restart polybar and bspwm after writing",
    )
    paths = parser.add_argument_group("destinations")
    paths.add_argument("--alacritty", dest="alacritty_path", help="Alacritty colors.yml")
    paths.add_argument("--polybar", dest="polybar_path", help="Polybar colors file")
    paths.add_argument("--bspwmrc", dest="bspwmrc_path", help="bspwm startup script")
    paths.add_argument("--wallpapers", dest="wallpaper_dir", help="Wallpaper directory")
    return parser.parse_args(argv)


def main(argv):
    args = parse_args(argv)
    config = Config.from_env().override(args)

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", AssetDirectoryMissing)
            reports = apply_scheme(args.scheme, config)
        for warning in caught:
            if issubclass(warning.category, AssetDirectoryMissing):
                print(f"axtc: WARNING: {warning.message}", file=sys.stderr)
            else:
                warnings.showwarning(
                    warning.message, warning.category, warning.filename, warning.lineno
                )

        if not args.quiet:
            print_reports(reports)

        if not args.no_refresh:
            issue_refresh()
    except ThemeChangerError as err:
        print(f"axtc: ERROR: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))


def main_cli():
    return sys.exit(main(sys.argv[1:]))
