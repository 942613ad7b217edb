from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from diff_sentinel.domain.errors import SummaryAlreadyWrittenError
from diff_sentinel.domain.value_objects.summary_document import SummaryDocument


class ReporterPort(ABC):
    """Port for the CI reporting sink.

    Carries grouped log sections, leveled messages, machine-readable outputs,
    a fatal-failure signal and a write-once summary document.
    """

    def __init__(self) -> None:
        self.failed = False
        self.failure_message: str | None = None
        self._summary_written = False

    @abstractmethod
    def start_group(self, title: str) -> None:
        """Open a collapsible log section."""

    @abstractmethod
    def end_group(self) -> None:
        """Close the current log section."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Plain log line."""

    @abstractmethod
    def notice(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Expose a key/value pair to downstream automation."""

    @abstractmethod
    def _emit_failure(self, message: str) -> None: ...

    @abstractmethod
    def _emit_summary(self, markdown: str) -> None: ...

    def command_output(self, text: str) -> None:
        """Echo captured output of a command; it must not be read as reporter markup."""
        self.info(text)

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        self.start_group(title)
        try:
            yield
        finally:
            self.end_group()

    def set_failed(self, message: str) -> None:
        """Mark the run as failed with a human-readable message."""
        self.failed = True
        self.failure_message = message
        self._emit_failure(message)

    def write_summary(self, document: SummaryDocument) -> None:
        if self._summary_written:
            raise SummaryAlreadyWrittenError("Summary has already been written for this run")
        self._summary_written = True
        self._emit_summary(document.to_markdown())
