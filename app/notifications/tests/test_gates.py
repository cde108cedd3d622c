"""
Tests for the permission gate.
"""

import logging

import pytest

from notifications.conf import NotificationConfig
from notifications.gates import load_ability_checker, may_notify
from workspace.tests.factories import RepositoryFactory
from workspace.models import Privacy


def _config(path):
    return NotificationConfig(host="https://docs.example.com", ability_checker=path)


def raising_checker(user, target):
    raise RuntimeError("ability backend down")


def allow_all(user, target):
    return True


@pytest.fixture(autouse=True)
def clear_checker_cache():
    load_ability_checker.cache_clear()
    yield
    load_ability_checker.cache_clear()


class TestMayNotify:

    def test_absent_recipient_is_denied(self, db):
        repo = RepositoryFactory()

        assert may_notify(None, repo, config=_config(f"{__name__}.allow_all")) is False

    def test_delegates_to_ability_checker(self, user, config):
        public = RepositoryFactory(privacy=Privacy.PUBLIC)
        private = RepositoryFactory(privacy=Privacy.PRIVATE)

        assert may_notify(user, public, config=config) is True
        assert may_notify(user, private, config=config) is False

    def test_checker_error_fails_closed(self, user, caplog):
        repo = RepositoryFactory()

        with caplog.at_level(logging.WARNING, logger="notifications.gates"):
            allowed = may_notify(user, repo, config=_config(f"{__name__}.raising_checker"))

        assert allowed is False
        assert "denying notification" in caplog.text

    def test_unimportable_checker_fails_closed(self, user):
        repo = RepositoryFactory()

        assert may_notify(user, repo, config=_config("nowhere.can_read")) is False

    def test_checker_is_loaded_from_dotted_path(self):
        assert load_ability_checker(f"{__name__}.allow_all") is allow_all
