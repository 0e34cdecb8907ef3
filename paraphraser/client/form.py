from typing import List, Optional

import structlog

from paraphraser.client.relay_client import RelayClient, RelayError
from paraphraser.models.completion import ParaphraseMode
from paraphraser.models.form import (
    Notification,
    NotificationLevel,
    ParaphraseFailure,
    ParaphraseResult,
    ParaphraseSuccess,
)
from paraphraser.models.prompt import DEFAULT_PARAPHRASE_TEMPLATE

logger = structlog.get_logger(__name__)

EMPTY_TEXT_MESSAGE = "Enter text to paraphrase!"
BUSY_MESSAGE = "A paraphrase is already in progress"
COPIED_MESSAGE = "Copied to clipboard"


class ParaphraseForm:
    """State and submit action of the paraphrase page.

    ``paraphrased_text`` and ``loading`` change only through :meth:`submit`.
    """

    def __init__(self, relay_client: RelayClient, template: str = DEFAULT_PARAPHRASE_TEMPLATE):
        self.relay_client = relay_client
        self.template = template
        self.original_text: str = ""
        self.paraphrase_mode: ParaphraseMode = ParaphraseMode.STANDARD
        self.paraphrased_text: str = ""
        self.loading: bool = False
        self.error: Optional[str] = None
        self.notifications: List[Notification] = []

    @property
    def prompt(self) -> str:
        return self.template.format(text=self.original_text, mode=self.paraphrase_mode.value)

    @property
    def word_count(self) -> int:
        return len(self.original_text.split())

    @property
    def word_count_label(self) -> str:
        if not self.word_count:
            return ""
        return f"{self.word_count} word(s)"

    def set_mode(self, mode: ParaphraseMode | str) -> None:
        self.paraphrase_mode = ParaphraseMode(mode)

    def notify(self, level: NotificationLevel, message: str) -> None:
        self.notifications.append(Notification(level=level, message=message))

    def drain_notifications(self) -> List[Notification]:
        notifications, self.notifications = self.notifications, []
        return notifications

    async def submit(self) -> ParaphraseResult:
        if not self.original_text:
            self.notify(NotificationLevel.ERROR, EMPTY_TEXT_MESSAGE)
            return ParaphraseFailure(reason=EMPTY_TEXT_MESSAGE)
        if self.loading:
            self.notify(NotificationLevel.WARNING, BUSY_MESSAGE)
            return ParaphraseFailure(reason=BUSY_MESSAGE)

        self.loading = True
        self.error = None
        try:
            data = await self.relay_client.paraphrase(self.prompt)
            text = self._extract_content(data)
        except RelayError as e:
            return self._fail(str(e))
        finally:
            self.loading = False

        if text is None:
            return self._fail("The paraphrase service returned an unexpected response")
        self.paraphrased_text = text
        logger.info("Paraphrase received", mode=self.paraphrase_mode.value, words=len(text.split()))
        return ParaphraseSuccess(text=text)

    def copy_output(self) -> Optional[str]:
        if not self.paraphrased_text:
            return None
        self.notify(NotificationLevel.SUCCESS, COPIED_MESSAGE)
        return self.paraphrased_text

    def _fail(self, reason: str) -> ParaphraseFailure:
        logger.warning("Paraphrase failed", reason=reason)
        self.error = reason
        self.notify(NotificationLevel.ERROR, reason)
        return ParaphraseFailure(reason=reason)

    @staticmethod
    def _extract_content(data) -> Optional[str]:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) else None
