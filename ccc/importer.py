"""First-run import of credentials Claude Code is already configured with."""
import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import urlsplit

from ccc.config import AUTH_TOKEN_ENV, BASE_URL_ENV
from ccc.models import Profile

logger = logging.getLogger(__name__)

DEFAULT_NAME = 'default'


def _host(netloc: str) -> str:
    """Host part of a netloc, case kept, without userinfo, port or brackets."""
    host = netloc.rpartition('@')[2]
    if host.startswith('['):
        return host[1:host.find(']')]
    return host.partition(':')[0]


def extract_name(base_url: str) -> str:
    """Derive a profile name from the URL's domain.

    api.anthropic.com -> anthropic, anthropic.com -> anthropic,
    localhost -> localhost. Not public-suffix aware. The host keeps its case
    and a URL with a bad port counts as unparseable.
    """
    if not base_url:
        return DEFAULT_NAME
    try:
        parts = urlsplit(base_url)
        parts.port
    except ValueError:
        return DEFAULT_NAME
    hostname = _host(parts.netloc)
    if not hostname:
        return DEFAULT_NAME
    if hostname.startswith('www.'):
        hostname = hostname[4:]
    labels = hostname.split('.')
    if len(labels) >= 3:
        return labels[1]
    return labels[0]


def _imported(base_url, api_key) -> Optional[Profile]:
    if not isinstance(base_url, str) or not isinstance(api_key, str):
        return None
    if not base_url or not api_key:
        return None
    return Profile(name=extract_name(base_url), base_url=base_url,
                   api_key=api_key, active=True)


def import_from_environment(environ: Optional[Mapping[str, str]] = None) -> Optional[Profile]:
    """Import from ANTHROPIC_BASE_URL / ANTHROPIC_AUTH_TOKEN."""
    env = os.environ if environ is None else environ
    profile = _imported(env.get(BASE_URL_ENV), env.get(AUTH_TOKEN_ENV))
    if profile is None:
        logger.debug("Nothing to import from environment")
    return profile


def import_from_settings(path: Path) -> Optional[Profile]:
    """Import from the ``env`` map of an existing Claude settings.json."""
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        logger.debug("Nothing to import from %s: %s", path, e)
        return None
    env = data.get('env') if isinstance(data, dict) else None
    if not isinstance(env, dict):
        return None
    return _imported(env.get(BASE_URL_ENV), env.get(AUTH_TOKEN_ENV))
