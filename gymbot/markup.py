"""Inline keyboard model and the outgoing message channel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class Button:
    """An inline keyboard button."""

    text: str
    callback_data: str


@dataclass
class InlineKeyboard:
    """An inline keyboard: a list of button rows."""

    rows: list[list[Button]] = field(default_factory=list)

    def add_in_rows(self, buttons: Iterable[Button], per_row: int = 2) -> None:
        """Append ``buttons`` in rows of ``per_row``; the last row may be shorter."""
        if per_row < 1:
            raise ValueError("per_row must be positive")
        row: list[Button] = []
        for button in buttons:
            row.append(button)
            if len(row) == per_row:
                self.rows.append(row)
                row = []
        if row:
            self.rows.append(row)

    def add_row(self, buttons: Iterable[Button]) -> None:
        """Append a single row of buttons."""
        self.rows.append(list(buttons))

    def copy(self) -> "InlineKeyboard":
        """Return a keyboard with copied rows."""
        return InlineKeyboard([list(row) for row in self.rows])


class Messenger:
    """Channel for outgoing chat messages.

    This implementation keeps every request in ``outbox``; a subclass that
    talks to a chat service overrides both methods.
    """

    def __init__(self) -> None:
        self.outbox: list[dict[str, Any]] = []

    def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: InlineKeyboard | None = None,
        parse_mode: str = "",
    ) -> dict[str, Any]:
        """Send a new message to ``chat_id``."""
        record = {
            "method": "send_message",
            "chat_id": chat_id,
            "text": text,
            "reply_markup": reply_markup,
            "parse_mode": parse_mode,
        }
        self.outbox.append(record)
        return record

    def edit_message_text(
        self,
        text: str,
        chat_id: int,
        message_id: int,
        reply_markup: InlineKeyboard | None = None,
        parse_mode: str = "",
    ) -> dict[str, Any]:
        """Replace the text and keyboard of an existing message."""
        record = {
            "method": "edit_message_text",
            "chat_id": chat_id,
            "message_id": message_id,
            "text": text,
            "reply_markup": reply_markup,
            "parse_mode": parse_mode,
        }
        self.outbox.append(record)
        return record