class ThemeChangerError(Exception):
    """Base class for every condition that aborts a run."""


class MalformedInput(ThemeChangerError, ValueError):
    pass


class InvalidPaletteSize(ThemeChangerError, ValueError):
    def __init__(self, path, actual, expected=16):
        self.path = path
        self.actual = actual
        self.expected = expected
        super().__init__(
            f'"{path}" contains invalid JSON, length of color array is {actual}, '
            f"expected {expected}"
        )


class MissingInputFile(ThemeChangerError):
    def __init__(self, path):
        self.path = path
        super().__init__(f'provided file "{path}" does not exist')


class PathIsDirectory(ThemeChangerError):
    def __init__(self, path, role="output"):
        self.path = path
        super().__init__(f'designated {role} file with path "{path}" is a directory')


class IoFailure(ThemeChangerError):
    def __init__(self, path, action, err):
        self.path = path
        self.action = action
        super().__init__(f'could not {action} "{path}": {getattr(err, "strerror", None) or err}')


class RefreshFailed(ThemeChangerError):
    def __init__(self, command, err):
        self.command = command
        super().__init__(f"failed to run {' '.join(command)}: {err}")


class AssetDirectoryMissing(UserWarning):
    pass
