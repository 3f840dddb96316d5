from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("zonegen")


@dataclass(slots=True)
class Diagnostics:
    """Fatal-diagnostic channel handed to backends by the driver.

    Backends report unrecoverable failures here instead of raising; the driver
    decides what a failed run means for the process.
    """

    fatal_messages: list[str] = field(default_factory=list)

    def panic(self, message: str) -> None:
        logger.critical(message)
        self.fatal_messages.append(message)
