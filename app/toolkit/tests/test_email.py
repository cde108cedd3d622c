"""
Tests for EmailService.send_raw against Django's locmem mail backend.
"""

import pytest
from django.core import mail

from toolkit.helpers import mask_email
from toolkit.protocols import EmailSender
from toolkit.services.email import EmailService

LOCMEM = "django.core.mail.backends.locmem.EmailBackend"


@pytest.fixture(autouse=True)
def locmem_mail(settings):
    settings.EMAIL_BACKEND = LOCMEM
    settings.DEFAULT_FROM_EMAIL = "noreply@example.com"


class TestSendRaw:

    def test_sends_text_and_html_alternatives(self):
        sent = EmailService.send_raw(
            to="user@example.com",
            subject="Hello",
            body_text="plain",
            body_html="<p>html</p>",
        )

        assert sent is True
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["user@example.com"]
        assert message.from_email == "noreply@example.com"
        assert message.alternatives[0][0] == "<p>html</p>"

    def test_passes_custom_headers(self):
        EmailService.send_raw(
            to=["user@example.com"],
            subject="Hello",
            body_text="plain",
            headers={"In-Reply-To": "<thread@example.com>"},
        )

        assert mail.outbox[0].extra_headers["In-Reply-To"] == "<thread@example.com>"

    def test_returns_false_on_transport_error(self, mocker):
        mocker.patch(
            "toolkit.services.email.EmailMultiAlternatives.send",
            side_effect=ConnectionError("smtp down"),
        )

        assert EmailService.send_raw("user@example.com", "Hi", "plain") is False

    def test_raises_when_not_silent(self, mocker):
        mocker.patch(
            "toolkit.services.email.EmailMultiAlternatives.send",
            side_effect=ConnectionError("smtp down"),
        )

        with pytest.raises(ConnectionError):
            EmailService.send_raw(
                "user@example.com", "Hi", "plain", fail_silently=False
            )


def test_email_service_satisfies_protocol():
    assert isinstance(EmailService(), EmailSender)


@pytest.mark.parametrize(
    "address,expected",
    [
        ("john.doe@example.com", "j***@example.com"),
        ("j@example.com", "***@example.com"),
        ("not-an-email", "***"),
    ],
)
def test_mask_email(address, expected):
    assert mask_email(address) == expected
