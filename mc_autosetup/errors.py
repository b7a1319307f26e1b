from __future__ import annotations
from typing import Optional


class SetupError(Exception):
    """Base error. ``exit_code`` is what the CLI exits with."""

    exit_code = 1

    def __init__(self, message: str, *, exit_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class EnvironmentCheckError(SetupError):
    pass


class UnsupportedPlatformError(EnvironmentCheckError):
    pass


class MissingRuntimeError(EnvironmentCheckError):
    pass


class WorkspaceError(SetupError):
    pass


class WorkspaceExistsError(WorkspaceError):
    # benign abort, nothing was created
    exit_code = 0


class VersionError(SetupError):
    pass


class VersionParseError(VersionError):
    pass


class UnsupportedVersionError(VersionError):
    pass


class NetworkError(SetupError):
    def __init__(self, message: str, *, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class PatchError(SetupError):
    pass


class LineOutOfRangeError(PatchError):
    def __init__(self, path, index: int, total: int):
        super().__init__(f"{path}: line {index} out of range ({total} lines)")
        self.path = path
        self.index = index
        self.total = total


class ConfigKeyError(PatchError):
    pass


class ProcessError(SetupError):
    def __init__(self, message: str, *, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode
