"""
Shared test fixtures for the trimming test suite.
"""
import pytest

from mailtrim.classification.classifier import line_classifier


def body(*lines: str) -> str:
    return "\n".join(lines)


# ==========================================================================
# Classifier
# ==========================================================================

@pytest.fixture
def classifier():
    return line_classifier


# ==========================================================================
# Sample email bodies
# ==========================================================================

@pytest.fixture
def gmail_reply():
    return body(
        "Sounds good, see you then.",
        "",
        "On Mon, Jan 5, 2015 at 10:00 AM, John Doe <john@example.com> wrote:",
        "> Are we still on for tomorrow?",
        ">",
        "> John",
    )


@pytest.fixture
def outlook_forward_with_signature():
    """Coded as t e s e h h h h t."""
    return body(
        "Please see below.",
        "",
        "Sent from my iPhone",
        "",
        "From: Alice Smith <alice@example.com>",
        "Sent: Monday, January 5, 2015 10:00 AM",
        "To: Bob <bob@example.com>",
        "Subject: Quarterly report",
        "Here is the report.",
    )


@pytest.fixture
def german_outlook_reply():
    return body(
        "Hallo Peter,",
        "",
        "anbei die Unterlagen.",
        "",
        "Viele Grüße",
        "Hans",
        "",
        "-----Ursprüngliche Nachricht-----",
        "Von: Peter Müller <peter@example.de>",
        "Gesendet: Montag, 5. Januar 2015 10:00",
        "An: Hans Schmidt <hans@example.de>",
        "Betreff: Unterlagen",
    )


@pytest.fixture
def plain_text():
    return body(
        "Hi team,",
        "",
        "The release went out this morning.",
        "Thanks everyone!",
    )
