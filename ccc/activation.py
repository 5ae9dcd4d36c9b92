"""Apply a profile where Claude Code reads it.

One ActivationTarget is picked per invocation from the platform:
environment variables on Windows, ~/.claude/settings.json on Linux and
macOS. Each target also knows how to discover an existing setup for the
first-run import.
"""
import logging
import os
import stat
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ccc.config import AUTH_TOKEN_ENV, BASE_URL_ENV, claude_settings_path
from ccc.display import mask_secret
from ccc.errors import CorruptSettingsError, FileIOError, UnsupportedPlatformError
from ccc.importer import import_from_environment, import_from_settings
from ccc.models import Profile
from ccc.settings import apply_profile, default_settings, parse_settings
from ccc.store import write_json

logger = logging.getLogger(__name__)


@dataclass
class ActivationResult:
    """What an activation did, for display. Values are already masked."""
    target: str
    details: List[Tuple[str, str]] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class ActivationTarget:
    """Where an activated profile is written for Claude Code to read.

    Subclasses implement ``apply``. ``discover`` returns the profile already
    configured there, used for the first-run import.
    """
    name = 'none'

    def apply(self, profile: Profile) -> ActivationResult:
        raise NotImplementedError

    def discover(self) -> Optional[Profile]:
        """Profile Claude Code is currently configured with, if any."""
        return None


class EnvironmentTarget(ActivationTarget):
    """Process environment plus permanent user variables via ``setx``."""
    name = 'environment'

    def __init__(self, environ=None) -> None:
        self.environ = os.environ if environ is None else environ

    def discover(self) -> Optional[Profile]:
        return import_from_environment(self.environ)

    def _setx(self, key: str, value: str) -> Optional[str]:
        """Persist one variable; return a warning on failure."""
        try:
            proc = subprocess.run(['setx', key, value], capture_output=True, text=True)
        except OSError as e:
            return f"Failed to set permanent {key}: {e}"
        if proc.returncode != 0:
            output = (proc.stdout + proc.stderr).strip()
            return f"Failed to set permanent {key}: exit status {proc.returncode}\nOutput: {output}"
        return None

    def apply(self, profile: Profile) -> ActivationResult:
        self.environ[BASE_URL_ENV] = profile.base_url
        self.environ[AUTH_TOKEN_ENV] = profile.api_key
        result = ActivationResult(self.name, details=[
            (BASE_URL_ENV, profile.base_url),
            (AUTH_TOKEN_ENV, mask_secret(profile.api_key)),
        ])
        for key, value in ((BASE_URL_ENV, profile.base_url), (AUTH_TOKEN_ENV, profile.api_key)):
            warning = self._setx(key, value)
            if warning:
                logger.debug("setx %s failed", key)
                result.warnings.append(warning)
            else:
                result.notes.append(f"Successfully set permanent {key}")
        result.notes.append("Permanent environment variables will be available "
                            "in new command prompt windows.")
        return result


class SettingsFileTarget(ActivationTarget):
    """The ``env`` map of Claude Code's settings.json.

    The file is rewritten atomically. An existing file keeps its mode and a
    new one is created owner read/write only (0o600).
    """
    name = 'settings'

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else claude_settings_path()

    def discover(self) -> Optional[Profile]:
        return import_from_settings(self.path)

    def _read(self, warnings: List[str]):
        """Existing settings and file mode, or defaults when absent or corrupt."""
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return default_settings(), None
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError('read', self.path, getattr(e, 'strerror', None) or str(e)) from e
        mode = stat.S_IMODE(self.path.stat().st_mode)
        try:
            return parse_settings(text, self.path), mode
        except CorruptSettingsError as e:
            warnings.append(f"{e}, creating new one")
            return default_settings(), mode

    def apply(self, profile: Profile) -> ActivationResult:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileIOError('create directory', self.path.parent, e.strerror or str(e)) from e
        result = ActivationResult(self.name)
        current, mode = self._read(result.warnings)
        write_json(self.path, apply_profile(current, profile),
                   mode=0o600 if mode is None else mode)
        logger.debug("Updated %s for '%s'", self.path, profile.name)
        result.details = [
            ('Settings file', str(self.path)),
            ('Base URL', profile.base_url),
            ('API Key', mask_secret(profile.api_key)),
        ]
        return result


class UnsupportedTarget(ActivationTarget):
    name = 'unsupported'

    def __init__(self, platform: str) -> None:
        self.platform = platform

    def apply(self, profile: Profile) -> ActivationResult:
        raise UnsupportedPlatformError(self.platform)


def select_target(platform: str, settings_path: Optional[Path] = None,
                  environ=None) -> ActivationTarget:
    if platform == 'win32':
        return EnvironmentTarget(environ)
    if platform.startswith('linux') or platform == 'darwin':
        return SettingsFileTarget(settings_path)
    return UnsupportedTarget(platform)
