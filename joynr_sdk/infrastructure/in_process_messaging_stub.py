"""In-process messaging stub - hands messages straight to a local skeleton."""

from typing import Any

from ..domain.exceptions import InvalidArgumentError
from ..ports.messaging import MessagingSkeleton, MessagingStub


class InProcessMessagingStub(MessagingStub):
    """Messaging stub for participants living in the same process."""

    def __init__(self, skeleton: MessagingSkeleton):
        if not callable(getattr(skeleton, "receive_message", None)):
            raise InvalidArgumentError(
                "skeleton must provide a callable receive_message(message)",
                argument="skeleton",
            )
        self._skeleton = skeleton

    def transmit(self, message: Any) -> Any:
        return self._skeleton.receive_message(message)
