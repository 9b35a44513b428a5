"""
This module provides CsrfRetry, the state machine responsible for:
- detecting the platform's "token missing/invalid" rejection
- storing the fresh x-csrf-token carried by that rejection
- re-issuing the identical request exactly once.

Roblox has no endpoint to fetch a CSRF token up front. The token is learned
reactively: a protected request without a valid token is answered with 403 and
the current token in the x-csrf-token response header.
"""

import logging
from enum import Enum

from roblox_sdk.classifier import ClassifiedResponse
from roblox_sdk.classifier import Outcome
from roblox_sdk.executor import RequestDescriptor
from roblox_sdk.executor import RequestExecutor
from roblox_sdk.session import SessionState

logger = logging.getLogger("roblox_sdk.auth")


class CsrfState(str, Enum):
    INITIAL = "initial"
    AWAITING_TOKEN = "awaiting_token"
    RETRIED = "retried"
    DONE = "done"


class CsrfRetry:
    """
    Runs one logical call through the CSRF challenge-response protocol.

    At most one automatic retry happens per call, and only for descriptors
    marked ``requires_csrf``. The token is committed to the session only once
    a complete rejection response has been received, so a call cancelled
    mid-flight leaves the session untouched.

    Args:
        session (SessionState): Where the refreshed token is stored.
        executor (RequestExecutor): Performs the individual attempts.
    """

    def __init__(self, session: SessionState, executor: RequestExecutor):
        self.session = session
        self.executor = executor

    @staticmethod
    def _transition(state: CsrfState, descriptor: RequestDescriptor) -> None:
        # State is per call; concurrent calls each run their own sequence.
        logger.debug("CSRF %s: %s %s", state.value, descriptor.method, descriptor.url)

    async def send(self, descriptor: RequestDescriptor) -> ClassifiedResponse:
        """
        Execute ``descriptor``, retrying once with a fresh token if challenged.

        Returns:
            ClassifiedResponse: The final classification. A second CSRF
            rejection is reported as AUTH_REQUIRED.
        """
        self._transition(CsrfState.INITIAL, descriptor)
        result = await self.executor.execute(descriptor)

        if not descriptor.requires_csrf or result.outcome is not Outcome.CSRF_REJECTED:
            self._transition(CsrfState.DONE, descriptor)
            return result

        self._transition(CsrfState.AWAITING_TOKEN, descriptor)
        self.session.set_csrf_token(result.csrf_token)

        self._transition(CsrfState.RETRIED, descriptor)
        result = await self.executor.execute(descriptor)

        self._transition(CsrfState.DONE, descriptor)
        if result.outcome is Outcome.CSRF_REJECTED:
            logger.error("CSRF token rejected twice for %s %s", descriptor.method, descriptor.url)
            return ClassifiedResponse(
                Outcome.AUTH_REQUIRED,
                result.status_code,
                result.headers,
                message="CSRF token rejected after refresh",
            )
        return result
