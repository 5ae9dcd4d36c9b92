"""Runtime configuration: file locations and fixed names."""
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

STORE_FILENAME = 'ccc-config.json'
STORE_PATH_ENV = 'CCC_CONFIG'

BASE_URL_ENV = 'ANTHROPIC_BASE_URL'
AUTH_TOKEN_ENV = 'ANTHROPIC_AUTH_TOKEN'
TIMEOUT_ENV = 'API_TIMEOUT_MS'
NONESSENTIAL_TRAFFIC_ENV = 'CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC'

# Written into settings.json only when the user has not set them
SETTINGS_DEFAULTS = {
    TIMEOUT_ENV: '3000000',
    NONESSENTIAL_TRAFFIC_ENV: 1,
}


def executable_dir() -> Path:
    """Directory holding the running ``ccc`` executable."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


def claude_dir(home: Optional[Path] = None) -> Path:
    return (home or Path.home()) / '.claude'


def claude_settings_path(home: Optional[Path] = None) -> Path:
    return claude_dir(home) / 'settings.json'


@dataclass(frozen=True)
class AppConfig:
    """Paths and platform for one invocation."""
    store_path: Path
    settings_path: Path
    platform: str = sys.platform

    @classmethod
    def resolve(cls, config_path: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None,
                platform: Optional[str] = None) -> 'AppConfig':
        """Resolve the store path: explicit option, then $CCC_CONFIG, then beside the executable."""
        env = os.environ if environ is None else environ
        if config_path:
            store = Path(config_path).expanduser()
        elif env.get(STORE_PATH_ENV):
            store = Path(env[STORE_PATH_ENV]).expanduser()
        else:
            store = executable_dir() / STORE_FILENAME
        cfg = cls(store_path=store, settings_path=claude_settings_path(),
                  platform=platform or sys.platform)
        logger.debug("Store: %s, settings: %s, platform: %s",
                     cfg.store_path, cfg.settings_path, cfg.platform)
        return cfg
