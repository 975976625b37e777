"""Browser messaging stub - forwards messages to a web messaging transport."""

from collections.abc import Mapping
from contextlib import suppress
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..domain.exceptions import InvalidArgumentError
from ..ports.logger import LoggerPort
from ..ports.messaging import MessagingStub, WebMessagingParams, WebMessagingTransport
from ..ports.metrics import MetricsPort
from .config import BrowserMessagingStubConfig, LogContext
from .in_memory_metrics import InMemoryMetrics
from .simple_logger import SimpleLogger


class BrowserMessagingStub(MessagingStub):
    """Messaging stub for a participant living in a browser window.

    Every ``transmit`` is handed to the shared web messaging transport exactly
    once, together with the destination window id. The stub keeps no state
    besides its settings and never retries; transport errors reach the caller
    unchanged.
    """

    def __init__(
        self,
        web_messaging_stub: WebMessagingTransport,
        window_id: str | None = None,
        *,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ):
        """Initialize the stub.

        Args:
            web_messaging_stub: Shared transport handle exposing ``transmit``.
                Borrowed, never closed by the stub.
            window_id: Destination window, None if unspecified.
            logger: Optional logger port. Defaults to SimpleLogger.
            metrics: Optional metrics port. Defaults to InMemoryMetrics.

        Raises:
            InvalidArgumentError: If the transport has no callable ``transmit``
                or ``window_id`` is neither None nor a string.
        """
        if not callable(getattr(web_messaging_stub, "transmit", None)):
            raise InvalidArgumentError(
                "web_messaging_stub must provide a callable transmit(params)",
                argument="web_messaging_stub",
            )
        try:
            self._config = BrowserMessagingStubConfig(window_id=window_id)
        except PydanticValidationError as e:
            raise InvalidArgumentError(
                f"window_id must be a string or None, got {type(window_id).__name__}",
                argument="window_id",
            ) from e

        self._web_messaging_stub = web_messaging_stub
        self._logger = logger or SimpleLogger()
        self._metrics = metrics or InMemoryMetrics()

    @classmethod
    def from_settings(
        cls,
        settings: Mapping[str, Any] | None,
        *,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ) -> "BrowserMessagingStub":
        """Build a stub from a ``{"webMessagingStub": ..., "windowId": ...}`` record."""
        if not isinstance(settings, Mapping):
            raise InvalidArgumentError(
                f"{cls.__name__} settings must be a mapping, got {type(settings).__name__}",
                argument="settings",
            )
        unknown = set(settings) - {"webMessagingStub", "windowId"}
        if unknown:
            raise InvalidArgumentError(
                f"Unknown settings for {cls.__name__}: {sorted(unknown)}",
                argument="settings",
            )
        if "webMessagingStub" not in settings:
            raise InvalidArgumentError(
                "webMessagingStub is required", argument="webMessagingStub"
            )
        return cls(
            settings["webMessagingStub"],
            settings.get("windowId"),
            logger=logger,
            metrics=metrics,
        )

    @property
    def window_id(self) -> str | None:
        """Destination window, None if unspecified."""
        return self._config.window_id

    @property
    def web_messaging_stub(self) -> WebMessagingTransport:
        """The borrowed transport handle."""
        return self._web_messaging_stub

    def transmit(self, message: Any) -> Any:
        """Forward ``message`` to the transport along with the window id."""
        params: WebMessagingParams = {"windowId": self._config.window_id, "message": message}
        log_ctx = LogContext(
            component="BrowserMessagingStub",
            operation="transmit",
            window_id=self._config.window_id,
            message_type=type(message).__name__,
        )

        try:
            with self._metrics.timer("messaging.browser.transmit.duration_ms"):
                result = self._web_messaging_stub.transmit(params)
        except Exception as e:
            self._metrics.increment("messaging.browser.transmit.error")
            # The transport error is re-raised even if the logger fails.
            with suppress(Exception):
                self._logger.error(
                    "Web messaging transport failed", **log_ctx.with_error(e).to_dict()
                )
            raise

        self._metrics.increment("messaging.browser.transmit")
        self._logger.debug("Forwarded message to web messaging transport", **log_ctx.to_dict())
        return result

    def __repr__(self) -> str:
        return f"BrowserMessagingStub(window_id={self._config.window_id!r})"
