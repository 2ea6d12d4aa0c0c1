import json

import pytest

NORD_COLORS = [
    "#3b4252", "#bf616a", "#a3be8c", "#ebcb8b",
    "#81a1c1", "#b48ead", "#88c0d0", "#e5e9f0",
    "#4c566a", "#d08770", "#a3be8c", "#ebcb8b",
    "#5e81ac", "#b48ead", "#8fbcbb", "#eceff4",
]


@pytest.fixture
def nord_data():
    return {
        "theme": "nord",
        "color": list(NORD_COLORS),
        "background": "#2e3440",
        "foreground": "#d8dee9",
    }


@pytest.fixture
def nord_file(tmp_path, nord_data):
    path = tmp_path / "nord.json"
    path.write_text(json.dumps(nord_data))
    return path


@pytest.fixture
def nord_scheme(nord_data):
    from axyl_theme_changer.scheme import parse_scheme

    return parse_scheme(json.dumps(nord_data))


@pytest.fixture
def deny_open(monkeypatch):
    """Make ``open`` inside the given module fail for the given mode prefix."""

    def deny(module, mode_prefix):
        real_open = open

        def fake_open(path, mode="r", *args, **kwargs):
            if mode.startswith(mode_prefix):
                raise PermissionError(13, "Permission denied", str(path))
            return real_open(path, mode, *args, **kwargs)

        monkeypatch.setattr(module, "open", fake_open, raising=False)

    return deny
