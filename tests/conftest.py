"""Shared test fixtures for ccc tests."""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ccc.activation import SettingsFileTarget
from ccc.config import AppConfig
from ccc.models import Collection, Profile


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / 'bin' / 'ccc-config.json'


@pytest.fixture
def settings_path(tmp_path):
    """~/.claude/settings.json inside a throwaway home."""
    return tmp_path / 'home' / '.claude' / 'settings.json'


@pytest.fixture
def app_config(store_path, settings_path):
    store_path.parent.mkdir(parents=True, exist_ok=True)
    return AppConfig(store_path=store_path, settings_path=settings_path, platform='linux')


@pytest.fixture
def settings_target(settings_path):
    return SettingsFileTarget(settings_path)


@pytest.fixture
def collection():
    """Three profiles, stored out of name order, 'beta' active."""
    return Collection([
        Profile('gamma', 'https://api.gamma.dev', 'sk-gamma-0123456789', False),
        Profile('beta', 'https://beta.example.com/v1', 'sk-beta-abcdefghij', True),
        Profile('alpha', 'https://alpha.io', 'short', False),
    ])
