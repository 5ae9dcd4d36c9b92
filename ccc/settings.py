"""Claude Code settings.json document: defaults, parsing and merging a profile in.

Values keep whatever JSON type they were read with (``"3000000"`` stays a
string, ``1`` stays an int) so rewriting the file never changes keys ccc
does not own.
"""
import copy
import json
from typing import Any, Dict, Union

from ccc.config import AUTH_TOKEN_ENV, BASE_URL_ENV, SETTINGS_DEFAULTS
from ccc.errors import CorruptSettingsError
from ccc.models import Profile

SettingValue = Union[str, int, float, bool, None, list, dict]
Settings = Dict[str, Any]


def default_settings() -> Settings:
    """Fresh skeleton used when settings.json is missing or unreadable."""
    return {'env': {AUTH_TOKEN_ENV: '', BASE_URL_ENV: '', **SETTINGS_DEFAULTS}}


def parse_settings(text: str, path='settings.json') -> Settings:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptSettingsError(path, str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CorruptSettingsError(path, f"expected an object, got {type(data).__name__}")
    env = data.get('env')
    if env is not None and not isinstance(env, dict):
        raise CorruptSettingsError(path, "'env' must be an object")
    return data


def apply_profile(settings: Settings, profile: Profile) -> Settings:
    """Return a copy of ``settings`` pointing Claude Code at ``profile``.

    The two credential keys are always overwritten; the defaults are only
    added when absent.
    """
    merged = copy.deepcopy(settings)
    env: Dict[str, SettingValue] = merged.get('env') or {}
    env[AUTH_TOKEN_ENV] = profile.api_key
    env[BASE_URL_ENV] = profile.base_url
    for key, value in SETTINGS_DEFAULTS.items():
        env.setdefault(key, value)
    merged['env'] = env
    return merged
