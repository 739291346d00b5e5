# availability_notifier/test_factory.py
"""
설정 선택 및 핸들러 팩토리 테스트

사용법: python -m pytest availability_notifier/test_factory.py -v
"""

from unittest.mock import patch

import firebase_admin
import pytest

from availability_notifier import create_handler, init_firebase
from availability_notifier.core.config import (
    DEFAULT_NOTIFICATION_BODY, DEFAULT_NOTIFICATION_TITLE,
    ProductionConfig, TestingConfig, get_config
)
from availability_notifier.handlers.availability import AvailabilityChangeHandler

class FakeConfig(TestingConfig):
    FIREBASE_DATABASE_URL = 'https://demo-project-default-rtdb.firebaseio.com'
    FIREBASE_CREDENTIALS_PATH = None

class MissingCredentialsConfig(FakeConfig):
    FIREBASE_CREDENTIALS_PATH = '/nonexistent/service-account.json'

def test_get_config_by_name():
    assert get_config('testing') is TestingConfig

def test_get_config_defaults_to_production(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)

    assert get_config() is ProductionConfig

def test_get_config_unknown_name():
    with pytest.raises(ValueError):
        get_config('staging')

def test_init_firebase_only_once():
    """이미 초기화된 App 이 있으면 다시 초기화하지 않아야 함"""
    existing = object()
    with patch.object(firebase_admin, '_apps', {'[DEFAULT]': existing}), \
            patch.object(firebase_admin, 'get_app', return_value=existing), \
            patch.object(firebase_admin, 'initialize_app') as mock_init:
        assert init_firebase(TestingConfig) is existing

    mock_init.assert_not_called()

def test_init_firebase_uses_database_url():
    with patch.object(firebase_admin, '_apps', {}), \
            patch.object(firebase_admin, 'initialize_app') as mock_init:
        init_firebase(FakeConfig)

    mock_init.assert_called_once_with(None, {'databaseURL': 'https://demo-project-default-rtdb.firebaseio.com'})

def test_init_firebase_missing_credentials_file():
    with patch.object(firebase_admin, '_apps', {}), \
            patch.object(firebase_admin, 'initialize_app') as mock_init:
        with pytest.raises(FileNotFoundError):
            init_firebase(MissingCredentialsConfig)

    mock_init.assert_not_called()

def test_default_notification_text():
    assert DEFAULT_NOTIFICATION_TITLE == 'Usuario disponible'
    assert DEFAULT_NOTIFICATION_BODY == 'Un usuario ha activado disponibilidad. Toca para seguirlo.'

def test_create_handler_wires_services():
    app = object()
    with patch.dict('availability_notifier.core.config.config_by_name', {'fake': FakeConfig}), \
            patch.object(firebase_admin, '_apps', {}), \
            patch.object(firebase_admin, 'initialize_app', return_value=app), \
            patch('availability_notifier.services.user_service.db') as mock_db:
        handler = create_handler('fake')

    assert isinstance(handler, AvailabilityChangeHandler)
    assert handler.notification_service.app is app
    assert handler.notification_title == FakeConfig.NOTIFICATION_TITLE
    assert handler.notification_body == FakeConfig.NOTIFICATION_BODY
    mock_db.reference.assert_called_once_with(FakeConfig.USERS_PATH, app=app)
