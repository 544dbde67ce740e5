"""Bookkeeping of outstanding requests and their responses."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

_UINT32 = 0xFFFFFFFF
_RANDOM_LIMIT = _UINT32 & 0x7FFFFFFF
_ROLLING_MASK = _UINT32 >> 22


class RequestType(Enum):
    """Kind of request that is waiting for a response."""

    NONE = 0
    ANY = 1
    TEXT_MESSAGE = 2
    TRACE_ROUTE = 3
    POSITION = 4


class EventType(Enum):
    """Why a request callback is invoked."""

    FOUND = 0
    REMOVED = 1
    TIMEOUT = 2


@dataclass
class Request:
    """A pending request: its target, creation time, kind and callback."""

    id: int
    timestamp: float
    type: RequestType
    cookie: Any = None
    callback: Optional[Callable[["Request", EventType, int], None]] = field(default=None, repr=False)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ResponseHandler:
    """Keeps pending requests keyed by packet id and expires them after a timeout."""

    def __init__(
        self,
        timeout: float,
        clock: Callable[[], float] = _monotonic_ms,
        rng: Optional[random.Random] = None,
    ):
        self.max_time = timeout
        self.clock = clock
        self.rng = rng or random.Random()
        self.request_id_counter = 0
        self.pending: dict[int, Request] = {}
        self._rolling_packet_id = self.rng.randrange(_RANDOM_LIMIT)

    def __len__(self) -> int:
        return len(self.pending)

    def __contains__(self, request_id: int) -> bool:
        return request_id in self.pending

    def add_request(
        self,
        target: int,
        request_type: RequestType,
        cookie: Any = None,
        callback: Optional[Callable[[Request, EventType, int], None]] = None,
    ) -> int:
        """Register a request and return the packet id under which it is kept."""
        self.request_id_counter += 1
        request_id = self.generate_packet_id()
        self.pending[request_id] = Request(target, self.clock(), request_type, cookie, callback)
        return request_id

    @staticmethod
    def _notify(req: Request, match: RequestType, event: EventType, passed: Optional[int]) -> None:
        if req.callback and passed is not None and (match is RequestType.ANY or match is req.type):
            req.callback(req, event, passed)

    def find_request(
        self, request_id: int, match: RequestType = RequestType.ANY, passed: Optional[int] = None
    ) -> Optional[Request]:
        """Return a pending request; notify its callback if ``passed`` is given and the type matches."""
        req = self.pending.get(request_id)
        if req is not None:
            self._notify(req, match, EventType.FOUND, passed)
        return req

    def remove_request(
        self, request_id: int, match: RequestType = RequestType.ANY, passed: Optional[int] = None
    ) -> Optional[Request]:
        """Remove and return a pending request, notifying its callback like find_request."""
        req = self.pending.get(request_id)
        if req is None:
            return None
        logger.debug("removing request %08x", request_id)
        self._notify(req, match, EventType.REMOVED, passed)
        del self.pending[request_id]
        return req

    def generate_packet_id(self) -> int:
        """Return a packet id: a rolling 10-bit counter combined with random upper bits."""
        self._rolling_packet_id = (self._rolling_packet_id + 1) & _ROLLING_MASK
        return (self._rolling_packet_id | (self.rng.randrange(_RANDOM_LIMIT) << 10)) & _UINT32

    def task_handler(self) -> None:
        """Drop every request older than the timeout, notifying its callback."""
        if self.pending:
            logger.debug("ResponseHandler has %d pending request(s)", len(self.pending))
        now = self.clock()
        for request_id, req in list(self.pending.items()):
            if req.timestamp + self.max_time < now:
                logger.debug("removing timed out request %08x", request_id)
                if req.callback:
                    req.callback(req, EventType.TIMEOUT, 0)
                del self.pending[request_id]