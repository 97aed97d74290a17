"""Inline keyboard buttons backed by serializable callback actions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from telegram import InlineKeyboardButton, InlineKeyboardMarkup


class MessageButtonAction(ABC):
    """Action carried in a button's callback data."""

    @abstractmethod
    def serialize(self) -> str: ...

    @classmethod
    @abstractmethod
    def deserialize(cls, data: str) -> MessageButtonAction | None:
        """Rebuild an action from callback data, or None if it is not ours."""


@dataclass(frozen=True)
class MessageButton:
    text: str
    action: MessageButtonAction

    def to_inline(self) -> InlineKeyboardButton:
        return InlineKeyboardButton(self.text, callback_data=self.action.serialize())


class MessageButtons:
    """Rows of buttons attached to an outgoing message."""

    def __init__(self, rows: Iterable[Iterable[MessageButton]]) -> None:
        self._rows = tuple(tuple(row) for row in rows)

    @property
    def rows(self) -> tuple[tuple[MessageButton, ...], ...]:
        return self._rows

    def __repr__(self) -> str:
        return f"MessageButtons({self._rows!r})"

    def to_markup(self) -> InlineKeyboardMarkup:
        return InlineKeyboardMarkup([[button.to_inline() for button in row] for row in self._rows])
