"""Score sharing.

Composes the share message and hands it to the platform: the native
share handler when there is one, otherwise the clipboard, otherwise
the message is only displayed. Sharing never interrupts the game.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ShareOutcome(Enum):
    SHARED = "shared"        # Native share accepted
    CANCELLED = "cancelled"  # Native share declined by the user
    COPIED = "copied"        # Copied to clipboard
    DISPLAYED = "displayed"  # Nothing worked, show the link


@dataclass(frozen=True)
class ShareMessage:
    score: int
    title: str
    text: str
    url: str
    copy_text: str


@dataclass(frozen=True)
class ShareResult:
    outcome: ShareOutcome
    message: ShareMessage
    notice: str = ""  # Text the UI may show to the player


# Returns True when shared, False when the user declined.
NativeShareHandler = Callable[[ShareMessage], bool]
ClipboardCopier = Callable[[str], None]


def compose_message(score: int, title: str, url: str) -> ShareMessage:
    """Build the share texts for a score."""
    return ShareMessage(
        score=score,
        title=title,
        text=f"I scored {score} in {title}! Can you beat my score?\n\n{url}",
        url=url,
        copy_text=f"My score: {score}\n{title} - {url}",
    )


class ShareService:
    """Shares a score through the best available mechanism."""

    def __init__(
        self,
        title: str,
        url: str,
        native: Optional[NativeShareHandler] = None,
        copier: Optional[ClipboardCopier] = None,
    ) -> None:
        self.title = title
        self.url = url
        self._native = native
        self._copier = copier

    def share(self, score: int) -> ShareResult:
        message = compose_message(score, self.title, self.url)

        if self._native is not None:
            try:
                accepted = self._native(message)
            except Exception as e:
                logger.warning(f"Native share failed, falling back to clipboard: {e}")
            else:
                if accepted:
                    logger.info(f"Shared score {score}")
                    return ShareResult(ShareOutcome.SHARED, message)
                logger.info("Share cancelled")
                return ShareResult(ShareOutcome.CANCELLED, message)

        if self._copier is not None:
            try:
                self._copier(message.copy_text)
            except Exception as e:
                logger.warning(f"Clipboard copy failed: {e}")
            else:
                logger.info(f"Copied score {score} to clipboard")
                return ShareResult(
                    ShareOutcome.COPIED,
                    message,
                    notice="Score copied to clipboard! Share it with friends.",
                )

        return ShareResult(ShareOutcome.DISPLAYED, message, notice=f"Share this: {message.url}")
