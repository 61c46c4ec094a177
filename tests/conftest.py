"""Shared fixtures for the commentguard test suite."""

import pytest

from commentguard.content import CommentContent


class FakeAkismetClient:
    """In-memory stand-in for AkismetClient that records calls."""

    def __init__(self, valid=True, verify_error=None, result=False, error=None):
        self.valid = valid
        self.verify_error = verify_error
        self.result = result
        self.error = error
        self.verify_calls = 0
        self.calls = []
        self.closed = False

    def verify_key(self):
        self.verify_calls += 1
        if self.verify_error:
            raise self.verify_error
        return self.valid

    def _act(self, name, content):
        self.calls.append((name, content))
        if self.error:
            raise self.error
        return self.result

    def comment_check(self, content):
        return self._act("comment_check", content)

    def submit_spam(self, content):
        return self._act("submit_spam", content)

    def submit_ham(self, content):
        return self._act("submit_ham", content)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_client():
    """Fake client with a valid key that reports ham."""
    return FakeAkismetClient()


@pytest.fixture
def sample_content():
    """A typical blog comment."""
    return CommentContent(
        user_ip="203.0.113.7",
        user_agent="Mozilla/5.0 (X11; Linux x86_64)",
        referrer="https://example.com/posts/1",
        comment_author="Jane Doe",
        comment_author_email="jane@example.com",
        comment_author_url="https://jane.example.com",
        comment_content="Great article, thanks for sharing!",
    )
