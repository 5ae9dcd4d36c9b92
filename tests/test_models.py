"""Tests for profiles and collection operations."""
import copy
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from ccc.errors import ActiveProfileDeletionError, DuplicateNameError, NotFoundError
from ccc.models import (Collection, Profile, active_profile, add_profile, delete_profile,
                        find_profile, set_active, update_profile)


def _active_count(c: Collection) -> int:
    return sum(1 for p in c if p.active)


class TestFind:
    def test_exact_match(self, collection):
        assert find_profile(collection, 'beta').base_url == 'https://beta.example.com/v1'

    def test_case_sensitive(self, collection):
        assert find_profile(collection, 'Beta') is None

    def test_missing(self, collection):
        assert find_profile(collection, 'delta') is None

    def test_active_profile(self, collection):
        assert active_profile(collection).name == 'beta'
        assert active_profile(Collection()) is None


class TestAdd:
    def test_first_profile_is_active(self):
        c = Collection()
        p = add_profile(c, 'a', 'https://x.test', '12345678')
        assert p.active
        assert len(c) == 1

    def test_later_profiles_inactive(self, collection):
        p = add_profile(collection, 'delta', 'https://d.test', 'k')
        assert not p.active
        assert collection.profiles[-1] is p
        assert _active_count(collection) == 1

    def test_duplicate_rejected(self, collection):
        before = copy.deepcopy(collection)
        with pytest.raises(DuplicateNameError):
            add_profile(collection, 'beta', 'https://other', 'k')
        assert collection == before

    def test_add_after_all_inactive_stays_inactive(self):
        c = Collection([Profile('a', 'u', 'k', False)])
        assert not add_profile(c, 'b', 'u', 'k').active


class TestUpdate:
    def test_updates_url_only(self, collection):
        p = update_profile(collection, 'gamma', base_url='https://new.gamma.dev')
        assert p.base_url == 'https://new.gamma.dev'
        assert p.api_key == 'sk-gamma-0123456789'

    def test_updates_key_only(self, collection):
        p = update_profile(collection, 'gamma', api_key='sk-new')
        assert p.base_url == 'https://api.gamma.dev'
        assert p.api_key == 'sk-new'

    def test_empty_values_ignored(self, collection):
        p = update_profile(collection, 'gamma', base_url='', api_key='')
        assert p.base_url == 'https://api.gamma.dev'
        assert p.api_key == 'sk-gamma-0123456789'

    def test_noop_update(self, collection):
        before = copy.deepcopy(collection)
        update_profile(collection, 'beta')
        assert collection == before

    def test_missing(self, collection):
        with pytest.raises(NotFoundError):
            update_profile(collection, 'delta', base_url='x')

    def test_does_not_change_active(self, collection):
        update_profile(collection, 'beta', api_key='sk-rotated')
        assert find_profile(collection, 'beta').active


class TestDelete:
    def test_deletes_inactive_preserving_order(self, collection):
        delete_profile(collection, 'gamma')
        assert [p.name for p in collection] == ['beta', 'alpha']

    def test_active_rejected(self, collection):
        before = copy.deepcopy(collection)
        with pytest.raises(ActiveProfileDeletionError):
            delete_profile(collection, 'beta')
        assert collection == before

    def test_missing(self, collection):
        with pytest.raises(NotFoundError):
            delete_profile(collection, 'delta')


class TestSetActive:
    def test_switches_active(self, collection):
        set_active(collection, 'alpha')
        assert [p.name for p in collection if p.active] == ['alpha']

    def test_idempotent(self, collection):
        set_active(collection, 'gamma')
        once = copy.deepcopy(collection)
        set_active(collection, 'gamma')
        assert collection == once

    def test_missing_leaves_state(self, collection):
        before = copy.deepcopy(collection)
        with pytest.raises(NotFoundError):
            set_active(collection, 'delta')
        assert collection == before

    def test_repairs_multiple_actives(self):
        c = Collection([Profile('a', active=True), Profile('b', active=True)])
        set_active(c, 'b')
        assert _active_count(c) == 1

    def test_invariant_over_sequence(self):
        c = Collection()
        for name in ['a', 'b', 'c', 'd']:
            add_profile(c, name, f'https://{name}.test', 'k' * 10)
            assert _active_count(c) <= 1
        set_active(c, 'c')
        delete_profile(c, 'a')
        update_profile(c, 'd', api_key='new-key')
        set_active(c, 'd')
        assert _active_count(c) == 1
        assert active_profile(c).name == 'd'


class TestSerialization:
    def test_to_dict_field_order(self):
        p = Profile('a', 'https://x', 'k', True)
        assert list(p.to_dict()) == ['name', 'base_url', 'api_key', 'active']

    def test_missing_fields_default(self):
        p = Profile.from_dict({'name': 'a'})
        assert p == Profile('a', '', '', False)

    def test_unknown_fields_ignored(self):
        p = Profile.from_dict({'name': 'a', 'base_url': 'u', 'api_key': 'k',
                               'active': True, 'comment': 'hi'})
        assert p == Profile('a', 'u', 'k', True)
        assert 'comment' not in p.to_dict()

    def test_wrong_type_rejected(self):
        with pytest.raises(TypeError):
            Profile.from_dict({'name': 'a', 'active': 'yes'})
        with pytest.raises(TypeError):
            Profile.from_dict({'name': 1})

    def test_collection_null_configurations(self):
        assert len(Collection.from_dict({'configurations': None})) == 0
        assert len(Collection.from_dict({})) == 0

    def test_collection_not_a_list(self):
        with pytest.raises(TypeError):
            Collection.from_dict({'configurations': {'a': 1}})
