"""Akismet REST API client."""

import logging
from typing import Dict, Optional

import requests

from .. import __version__
from ..content import CommentContent

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://rest.akismet.com/1.1"

USER_AGENT = f"commentguard/{__version__} | Akismet-Gateway"

# Body Akismet sends for accepted spam/ham submissions
SUBMIT_ACK = "Thanks for making the web a better place."


class AkismetAPIError(Exception):
    """Akismet request failed or returned an unexpected response."""

    pass


class AkismetClient:
    """Blocking Akismet client built on a shared requests session."""

    def __init__(
        self,
        api_key: str,
        blog: str,
        timeout: float = 10.0,
        api_url: str = DEFAULT_API_URL,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.blog = blog
        self.timeout = timeout
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _post(self, endpoint: str, data: Dict[str, str]) -> requests.Response:
        """POST form data to an Akismet endpoint."""
        url = f"{self.api_url}/{endpoint}"
        logger.debug(f"POST {url}")
        try:
            response = self.session.post(url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise AkismetAPIError(f"Request to {endpoint} failed: {e}") from e

        if not response.ok:
            raise AkismetAPIError(
                f"{endpoint} returned HTTP {response.status_code}: {response.text[:200]}"
            )
        return response

    def _unexpected(self, endpoint: str, response: requests.Response) -> AkismetAPIError:
        """Build an error for a body Akismet only sends on bad requests."""
        message = f"Unexpected {endpoint} response: {response.text.strip()[:100]!r}"
        debug_help = response.headers.get("X-akismet-debug-help")
        if debug_help:
            message += f" ({debug_help})"
        return AkismetAPIError(message)

    def _content_params(self, content: CommentContent) -> Dict[str, str]:
        params = {"api_key": self.api_key, "blog": self.blog}
        params.update(content.to_params())
        return params

    def verify_key(self) -> bool:
        """Check the API key against the configured blog."""
        response = self._post("verify-key", {"key": self.api_key, "blog": self.blog})
        body = response.text.strip()
        if body == "valid":
            return True
        if body == "invalid":
            logger.debug(
                f"Key rejected: {response.headers.get('X-akismet-debug-help', 'no details')}"
            )
            return False
        raise self._unexpected("verify-key", response)

    def comment_check(self, content: CommentContent) -> bool:
        """Return True if Akismet classifies the comment as spam."""
        response = self._post("comment-check", self._content_params(content))
        body = response.text.strip()
        if body == "true":
            if response.headers.get("X-akismet-pro-tip") == "discard":
                logger.debug("Akismet flagged comment as blatant spam")
            return True
        if body == "false":
            return False
        raise self._unexpected("comment-check", response)

    def _submit(self, endpoint: str, content: CommentContent) -> bool:
        response = self._post(endpoint, self._content_params(content))
        if response.text.strip() == SUBMIT_ACK:
            return True
        raise self._unexpected(endpoint, response)

    def submit_spam(self, content: CommentContent) -> bool:
        """Report a missed spam comment."""
        return self._submit("submit-spam", content)

    def submit_ham(self, content: CommentContent) -> bool:
        """Report a false positive."""
        return self._submit("submit-ham", content)

    def close(self) -> None:
        """Release the HTTP session."""
        self.session.close()
