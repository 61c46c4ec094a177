"""Spam-check gateway: verify the Akismet key, then act."""

import logging
import threading
from enum import Enum
from typing import Any, Optional

from .content import CommentContent

logger = logging.getLogger(__name__)

ABANDONED_MESSAGE = "Akismet is not ready, operation abandoned"
SPAM_MESSAGE = "spam!"


class ActionType(Enum):
    """Gateway actions."""

    CHECK_SPAM = "check_spam"
    SUBMIT_SPAM = "submit_spam"
    SUBMIT_HAM = "submit_ham"


# Client method invoked for each action
CLIENT_METHODS = {
    ActionType.CHECK_SPAM: "comment_check",
    ActionType.SUBMIT_SPAM: "submit_spam",
    ActionType.SUBMIT_HAM: "submit_ham",
}


class GatewayError(Exception):
    """Base error raised by the gateway."""

    kind = "gateway_error"


class VerificationFailed(GatewayError):
    """Akismet key is invalid or could not be verified."""

    kind = "verification_failed"


class SpamDetected(GatewayError):
    """Akismet classified the content as spam."""

    kind = "spam_detected"

    def __init__(self, message: str = SPAM_MESSAGE):
        super().__init__(message)


class ProviderError(GatewayError):
    """Akismet call failed after successful verification."""

    kind = "provider_error"

    def __init__(self, action: ActionType):
        super().__init__(f"Akismet {action.value} failed")
        self.action = action


class SpamCheckGateway:
    """
    Forward comment moderation requests to Akismet.

    Every public operation re-verifies the API key before calling Akismet.
    A failed verification abandons the operation and returns
    ABANDONED_MESSAGE, or raises VerificationFailed when ``strict`` is set.

    The ``verified`` attribute reflects the startup check only and never
    gates an operation.
    """

    def __init__(self, client, strict: bool = False, verify_on_start: bool = True):
        self.client = client
        self.strict = strict
        self.verified: Optional[bool] = None
        self._startup_thread: Optional[threading.Thread] = None

        if verify_on_start:
            self._startup_thread = threading.Thread(
                target=self._initial_verify, daemon=True, name="AkismetVerify"
            )
            self._startup_thread.start()

    def _initial_verify(self) -> None:
        """Startup check: record key status, never raise."""
        try:
            self.verify()
        except VerificationFailed as e:
            self.verified = False
            logger.warning(f"Akismet startup verification failed, gateway cannot work: {e}")
        else:
            self.verified = True
            logger.info("Akismet key is valid, ready to work")

    def wait_for_startup(self, timeout: Optional[float] = None) -> Optional[bool]:
        """Wait for the startup check and return the key status."""
        if self._startup_thread is not None:
            self._startup_thread.join(timeout)
        return self.verified

    def verify(self) -> bool:
        """Verify the API key. Raises VerificationFailed if it is not valid."""
        try:
            valid = self.client.verify_key()
        except Exception as e:
            raise VerificationFailed(str(e)) from e
        if not valid:
            raise VerificationFailed("Akismet key is invalid")
        return True

    def check_spam(self, content: CommentContent) -> Any:
        """Check a comment. Raises SpamDetected if Akismet flags it."""
        return self._run(ActionType.CHECK_SPAM, content)

    def submit_spam(self, content: CommentContent) -> Any:
        """Report a comment as spam."""
        return self._run(ActionType.SUBMIT_SPAM, content)

    def submit_ham(self, content: CommentContent) -> Any:
        """Report a comment as ham."""
        return self._run(ActionType.SUBMIT_HAM, content)

    def _run(self, action: ActionType, content: CommentContent) -> Any:
        """Verify the key, then dispatch the action to the client."""
        try:
            self.verify()
        except VerificationFailed as e:
            logger.warning(f"{ABANDONED_MESSAGE} ({action.value}): {e}")
            if self.strict:
                raise
            return ABANDONED_MESSAGE

        logger.info(f"Akismet {action.value} in progress...")
        method = getattr(self.client, CLIENT_METHODS[action])
        try:
            result = method(content)
        except Exception as e:
            logger.error(f"Akismet {action.value} failed: {e}")
            raise ProviderError(action) from e

        if action is ActionType.CHECK_SPAM and result:
            logger.warning(f"Akismet {action.value}: content flagged as spam")
            raise SpamDetected()

        logger.info(f"Akismet {action.value} succeeded")
        return result
