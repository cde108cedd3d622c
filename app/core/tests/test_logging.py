"""
Tests for the log scrubbing filter.
"""

import logging

import pytest

from core.logging import FILTERED, SensitiveDataFilter, is_sensitive, scrub


def make_record(msg, args=()):
    return logging.LogRecord(
        name="notifications.services",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestIsSensitive:

    @pytest.mark.parametrize(
        "key", ["password", "API_KEY", "refresh_token", "draft_body", "body_html"]
    )
    def test_sensitive_keys(self, key):
        assert is_sensitive(key)

    @pytest.mark.parametrize("key", ["email", "notify_type", "target_id"])
    def test_plain_keys(self, key):
        assert not is_sensitive(key)


class TestScrub:

    def test_mapping_values_are_replaced(self):
        data = {"email": "a@example.com", "password": "hunter2"}

        assert scrub(data) == {"email": "a@example.com", "password": FILTERED}

    def test_nested_structures(self):
        data = {"meta": [{"token": "abc"}, "ok"]}

        assert scrub(data) == {"meta": [{"token": FILTERED}, "ok"]}

    def test_key_value_pairs_in_text(self):
        assert scrub("login user=7 password=hunter2") == f"login user=7 password={FILTERED}"

    def test_quoted_values(self):
        assert scrub("body: 'hello world' done") == f"body: {FILTERED} done"

    def test_text_without_pairs_is_unchanged(self):
        message = "Notification 4 created for user 9"

        assert scrub(message) == message

    def test_other_types_pass_through(self):
        assert scrub(42) == 42


class TestSensitiveDataFilter:

    def test_scrubs_message(self):
        record = make_record("secret=xyz sent")

        assert SensitiveDataFilter().filter(record) is True
        assert record.getMessage() == f"secret={FILTERED} sent"

    def test_scrubs_tuple_args(self):
        record = make_record("payload %s", ("token=abc",))

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == f"payload token={FILTERED}"

    def test_scrubs_mapping_args(self):
        record = make_record("%(email)s %(password)s", ({"email": "a@b.c", "password": "pw"},))

        SensitiveDataFilter().filter(record)

        assert record.getMessage() == f"a@b.c {FILTERED}"
