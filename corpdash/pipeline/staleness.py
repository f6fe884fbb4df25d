"""Staleness guard: discard results of superseded asynchronous requests.

Each request is tagged with a monotonically increasing sequence number.
A result is applied only if its number is still the latest one issued;
anything older is dropped, never merged or applied out of order.
"""

import logging

logger = logging.getLogger(__name__)


class RequestSequencer:
    """Issues request numbers and answers whether a number is still current.

    Usage::

        seq = RequestSequencer()
        req = seq.issue()
        result = await do_request()
        if seq.is_current(req):
            ...  # apply result
    """

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        """Return a new request number, superseding every earlier one."""
        self._latest += 1
        return self._latest

    def is_current(self, seq: int) -> bool:
        """Return True if ``seq`` is the most recently issued number."""
        current = seq == self._latest
        if not current:
            logger.debug("Request %d superseded by %d", seq, self._latest)
        return current
