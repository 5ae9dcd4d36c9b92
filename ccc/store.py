"""JSON file store for the profile collection."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, NamedTuple, Optional

from ccc.errors import CccError, CorruptStoreError, FileIOError
from ccc.models import Collection, Profile

logger = logging.getLogger(__name__)

STORE_MODE = 0o600


class LoadResult(NamedTuple):
    collection: Collection
    imported: Optional[Profile] = None


def write_json(path: Path, data: Any, mode: int = STORE_MODE) -> None:
    """Write ``data`` as indented JSON via a temp file in the same directory.

    The temp file is created with ``mode`` and then renamed over ``path``,
    so readers see either the old or the new file.
    """
    path = Path(path)
    payload = json.dumps(data, indent=2) + '\n'
    try:
        fd, tmp = tempfile.mkstemp(prefix=f'.{path.name}.', dir=str(path.parent))
    except OSError as e:
        raise FileIOError('write', path, e.strerror or str(e)) from e
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(payload)
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except OSError as e:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise FileIOError('write', path, e.strerror or str(e)) from e
    logger.debug("Wrote %s (%d bytes)", path, len(payload))


def save(path: Path, collection: Collection) -> None:
    write_json(path, collection.to_dict())


def _read(path: Path) -> Collection:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FileIOError('read', path, e.strerror or str(e)) from e
    try:
        return Collection.from_dict(json.loads(raw))
    except (ValueError, TypeError) as e:
        raise CorruptStoreError(path, str(e)) from e


def load(path: Path, target=None) -> LoadResult:
    """Load the collection at ``path``.

    When no store exists yet, ``target.discover()`` may supply a profile from
    the platform's current settings; it is saved right away and returned as
    ``imported``.
    """
    path = Path(path)
    if path.exists():
        collection = _read(path)
        logger.debug("Loaded %d configurations from %s", len(collection), path)
        return LoadResult(collection)

    discovered = target.discover() if target is not None else None
    if discovered is None:
        logger.debug("No store at %s, starting empty", path)
        return LoadResult(Collection())

    discovered.active = True
    collection = Collection([discovered])
    try:
        save(path, collection)
    except CccError as e:
        logger.warning("Could not save imported configuration: %s", e)
        return LoadResult(collection)
    return LoadResult(collection, imported=discovered)
