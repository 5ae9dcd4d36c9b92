"""Profiles and the collection operations that keep at most one active."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ccc.errors import ActiveProfileDeletionError, DuplicateNameError, NotFoundError

_FIELD_TYPES = (('name', str), ('base_url', str), ('api_key', str), ('active', bool))


@dataclass
class Profile:
    """One named endpoint/key pair."""
    name: str
    base_url: str = ''
    api_key: str = ''
    active: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Profile':
        """Build from a store entry. Missing fields default, unknown ones are dropped.

        Raises TypeError when a known field holds the wrong JSON type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        values = {}
        for key, typ in _FIELD_TYPES:
            if data.get(key) is None:
                continue
            # bool is an int subclass, so check exact JSON types
            if type(data[key]) is not typ:
                raise TypeError(f"field '{key}' must be {typ.__name__}, "
                                f"got {type(data[key]).__name__}")
            values[key] = data[key]
        return cls(**{'name': '', **values})

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'base_url': self.base_url,
                'api_key': self.api_key, 'active': self.active}


@dataclass
class Collection:
    """Profiles in insertion order, persisted as one unit."""
    profiles: List[Profile] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.profiles)

    def __iter__(self):
        return iter(self.profiles)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Collection':
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")
        entries = data.get('configurations')
        if entries is None:
            return cls()
        if not isinstance(entries, list):
            raise TypeError("'configurations' must be a list")
        return cls([Profile.from_dict(e) for e in entries])

    def to_dict(self) -> Dict[str, Any]:
        return {'configurations': [p.to_dict() for p in self.profiles]}


def find_profile(collection: Collection, name: str) -> Optional[Profile]:
    for p in collection.profiles:
        if p.name == name:
            return p
    return None


def _require(collection: Collection, name: str) -> Profile:
    p = find_profile(collection, name)
    if p is None:
        raise NotFoundError(name)
    return p


def active_profile(collection: Collection) -> Optional[Profile]:
    return next((p for p in collection.profiles if p.active), None)


def add_profile(collection: Collection, name: str, base_url: str, api_key: str) -> Profile:
    """Append a new profile. The first profile of an empty collection starts active."""
    if find_profile(collection, name) is not None:
        raise DuplicateNameError(name)
    profile = Profile(name=name, base_url=base_url, api_key=api_key,
                      active=len(collection.profiles) == 0)
    collection.profiles.append(profile)
    return profile


def update_profile(collection: Collection, name: str, base_url: Optional[str] = None,
                   api_key: Optional[str] = None) -> Profile:
    """Overwrite the non-empty fields given; leave the rest alone."""
    profile = _require(collection, name)
    if base_url:
        profile.base_url = base_url
    if api_key:
        profile.api_key = api_key
    return profile


def delete_profile(collection: Collection, name: str) -> Profile:
    profile = _require(collection, name)
    if profile.active:
        raise ActiveProfileDeletionError(name)
    collection.profiles = [p for p in collection.profiles if p.name != name]
    return profile


def set_active(collection: Collection, name: str) -> Profile:
    """Make ``name`` the only active profile."""
    profile = _require(collection, name)
    for p in collection.profiles:
        p.active = p is profile
    return profile
