"""Custom error types for configuration management."""


class CccError(Exception):
    """Base error for the configuration manager."""
    pass


class DuplicateNameError(CccError):
    def __init__(self, name: str) -> None:
        super().__init__(f"configuration with name '{name}' already exists")
        self.name = name


class NotFoundError(CccError):
    def __init__(self, name: str) -> None:
        super().__init__(f"configuration with name '{name}' not found")
        self.name = name


class ActiveProfileDeletionError(CccError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"cannot delete active configuration '{name}'. "
            "Please activate another configuration first")
        self.name = name


class CorruptStoreError(CccError):
    """Store file exists but does not hold a configuration list."""
    def __init__(self, path, detail: str = "") -> None:
        msg = f"failed to parse config file {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.path = path


class CorruptSettingsError(CccError):
    """Claude settings file is not a JSON object with an ``env`` map.

    Activation downgrades this to a warning and starts from defaults.
    """
    def __init__(self, path, detail: str = "") -> None:
        msg = f"failed to parse existing {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.path = path


class FileIOError(CccError):
    """Reading or writing a file or directory failed."""
    def __init__(self, action: str, path, detail: str = "") -> None:
        msg = f"failed to {action} {path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.action = action
        self.path = path


class UnsupportedPlatformError(CccError):
    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported platform ({platform}), settings not applied")
        self.platform = platform
