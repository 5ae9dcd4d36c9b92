"""Masking and table rendering for profile listings."""
from typing import Dict, List

from ccc.models import Collection, Profile

MASK_CHAR = '*'
HEADERS = ('Name', 'Status', 'Base URL', 'API Key')


def mask_secret(secret: str) -> str:
    """Keep the first and last 4 characters of keys longer than 8."""
    if len(secret) <= 8:
        return MASK_CHAR * len(secret)
    return secret[:4] + MASK_CHAR * (len(secret) - 8) + secret[-4:]


def _status(p: Profile) -> str:
    return 'Active' if p.active else 'Inactive'


def _sorted(collection: Collection) -> List[Profile]:
    # Copy, so the stored order is untouched
    return sorted(collection.profiles, key=lambda p: p.name)


def render_table(collection: Collection) -> List[str]:
    """Lines of a fixed-width table: header, dashes, one row per profile."""
    rows = [(p.name, _status(p), p.base_url, mask_secret(p.api_key))
            for p in _sorted(collection)]
    widths = [max([len(h)] + [len(r[i]) for r in rows]) + 2
              for i, h in enumerate(HEADERS)]

    def line(cells) -> str:
        return ''.join(c.ljust(w) for c, w in zip(cells, widths))

    lines = [line(HEADERS), line(['-' * (w - 2) for w in widths])]
    lines.extend(line(r) for r in rows)
    return lines


def profiles_as_json(collection: Collection) -> List[Dict]:
    return [{'name': p.name, 'status': _status(p).lower(), 'base_url': p.base_url,
             'api_key': mask_secret(p.api_key)} for p in _sorted(collection)]
