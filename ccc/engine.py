"""Operations behind each command: load, change, save, activate."""
import logging
from dataclasses import dataclass
from typing import Optional

from ccc import models, store
from ccc.activation import ActivationResult, ActivationTarget, select_target
from ccc.config import AppConfig
from ccc.errors import UnsupportedPlatformError
from ccc.models import Collection, Profile

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    collection: Collection
    profile: Optional[Profile] = None
    imported: Optional[Profile] = None
    activation: Optional[ActivationResult] = None


def target_for(cfg: AppConfig) -> ActivationTarget:
    return select_target(cfg.platform, cfg.settings_path)


def _load(cfg: AppConfig, target: Optional[ActivationTarget]):
    return store.load(cfg.store_path, target or target_for(cfg))


def list_profiles(cfg: AppConfig, target: Optional[ActivationTarget] = None) -> OperationResult:
    """Read-only; never rewrites the store."""
    loaded = _load(cfg, target)
    return OperationResult(loaded.collection, imported=loaded.imported)


def add(cfg: AppConfig, name: str, base_url: str, api_key: str,
        target: Optional[ActivationTarget] = None) -> OperationResult:
    loaded = _load(cfg, target)
    profile = models.add_profile(loaded.collection, name, base_url, api_key)
    store.save(cfg.store_path, loaded.collection)
    logger.debug("Added '%s' (active=%s)", name, profile.active)
    return OperationResult(loaded.collection, profile, loaded.imported)


def update(cfg: AppConfig, name: str, base_url: Optional[str] = None,
           api_key: Optional[str] = None,
           target: Optional[ActivationTarget] = None) -> OperationResult:
    loaded = _load(cfg, target)
    profile = models.update_profile(loaded.collection, name, base_url, api_key)
    store.save(cfg.store_path, loaded.collection)
    return OperationResult(loaded.collection, profile, loaded.imported)


def delete(cfg: AppConfig, name: str,
           target: Optional[ActivationTarget] = None) -> OperationResult:
    loaded = _load(cfg, target)
    profile = models.delete_profile(loaded.collection, name)
    store.save(cfg.store_path, loaded.collection)
    return OperationResult(loaded.collection, profile, loaded.imported)


def activate(cfg: AppConfig, name: str,
             target: Optional[ActivationTarget] = None) -> OperationResult:
    """Mark ``name`` active, save, then apply it to the platform.

    The store is saved before the platform write, so a failed or unsupported
    platform write still leaves the profile marked active. An unsupported
    platform is reported as a warning.
    """
    target = target or target_for(cfg)
    loaded = store.load(cfg.store_path, target)
    profile = models.set_active(loaded.collection, name)
    store.save(cfg.store_path, loaded.collection)
    result = OperationResult(loaded.collection, profile, loaded.imported)
    try:
        result.activation = target.apply(profile)
    except UnsupportedPlatformError as e:
        result.activation = ActivationResult(target.name, warnings=[str(e)])
    return result
