"""
Output sink for human-readable device records.

The sink is the only boundary of the system: every state transition,
every notified listener and every room bulk operation produces one text
line, in strict call order.
"""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Callable, List, Optional, TextIO

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    """Get current UTC time (for default factory)."""
    return datetime.now(UTC)


@dataclass(frozen=True)
class Record:
    """
    A single line of output.

    Attributes:
        text: The human-readable line (no trailing newline)
        source: What produced it ("device", "room", "listener")
        device_name: Name of the device the line refers to, if any
        timestamp: When the record was emitted
    """

    text: str
    source: str
    device_name: Optional[str] = None
    timestamp: datetime = field(default_factory=_utc_now)


class RecordFilter:
    """Filter for record subscriptions, by source and/or device name."""

    def __init__(
        self,
        source: Optional[str] = None,
        device_name: Optional[str] = None,
    ):
        self.source = source
        self.device_name = device_name

    def matches(self, record: Record) -> bool:
        """
        Check if a record matches this filter.

        Args:
            record: The record to check

        Returns:
            True if the record matches the filter
        """
        if self.source and record.source != self.source:
            return False

        if self.device_name and record.device_name != self.device_name:
            return False

        return True


RecordHandler = Callable[[Record], None]


def _handler_name(handler: RecordHandler) -> str:
    """Name of a handler for log messages, including partials and callable objects."""
    return getattr(handler, "__name__", repr(handler))


class OutputSink:
    """
    Ordered, synchronous record stream.

    Records are kept in emission order, optionally echoed to a text stream,
    and handed to subscribers. Subscribers are wrapped in try/except so a bad
    handler cannot interrupt a device transition.
    """

    def __init__(self, stream: Optional[TextIO] = None, echo: bool = True) -> None:
        """
        Initialize the sink.

        Args:
            stream: Where echoed lines go (None = sys.stdout at emit time)
            echo: Write each record's text to the stream
        """
        self._stream = stream
        self._echo = echo
        self._records: List[Record] = []
        self._handlers: List[tuple[RecordFilter, RecordHandler]] = []

    @property
    def records(self) -> List[Record]:
        """All records emitted so far, oldest first."""
        return list(self._records)

    def lines(self) -> List[str]:
        """Text of all records emitted so far, oldest first."""
        return [r.text for r in self._records]

    def clear(self) -> None:
        """Forget the record history (subscribers are kept)."""
        self._records.clear()

    def subscribe(
        self,
        handler: RecordHandler,
        record_filter: Optional[RecordFilter] = None,
    ) -> None:
        """
        Subscribe to records.

        Args:
            handler: Callable that receives Record objects
            record_filter: Optional filter (None = receive all records)
        """
        if record_filter is None:
            record_filter = RecordFilter()

        self._handlers.append((record_filter, handler))
        logger.debug(f"Subscribed handler {_handler_name(handler)} to output sink")

    def unsubscribe(self, handler: RecordHandler) -> None:
        """
        Unsubscribe a handler from all records.

        Args:
            handler: The handler to unsubscribe
        """
        self._handlers = [(f, h) for f, h in self._handlers if h != handler]
        logger.debug(f"Unsubscribed handler {_handler_name(handler)}")

    def emit(self, text: str, source: str, device_name: Optional[str] = None) -> Record:
        """
        Emit one record.

        Args:
            text: The line to emit
            source: What produced it
            device_name: Device the line refers to, if any

        Returns:
            The emitted Record
        """
        record = Record(text=text, source=source, device_name=device_name)
        self._records.append(record)

        if self._echo:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(text + "\n")

        for record_filter, handler in self._handlers:
            if record_filter.matches(record):
                try:
                    handler(record)
                except Exception as e:
                    logger.error(
                        f"Error in record handler {_handler_name(handler)} "
                        f"for record from {record.source}: {e}",
                        exc_info=True,
                    )

        return record
