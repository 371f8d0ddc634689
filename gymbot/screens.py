"""Screens of the bot: inline keyboards and the messages that carry them."""

from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from .database import GymDatabase
from .history import NavigationHistory
from .i18n import translate
from .markup import Button, InlineKeyboard, Messenger

logger = logging.getLogger(__name__)

NEW_MESSAGE = -1
MAX_CUSTOM_BUTTONS = 8
CATEGORIES = ("abs", "arms", "chest", "legs", "spine")
RECORDS_ERROR = "❌ Ошибка при получении рекордов: "


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - _trunc_div(a, b) * b


class Screens:
    """Builds and sends the bot's menus for each user."""

    def __init__(
        self,
        db: GymDatabase,
        messenger: Messenger | None = None,
        history: NavigationHistory | None = None,
    ) -> None:
        self.db = db
        self.messenger = messenger if messenger is not None else Messenger()
        self.history = history if history is not None else NavigationHistory()

    # keyboards

    def back_button(self, user_id: int, callback_data: str) -> Button:
        """A "back" button that returns to ``callback_data``."""
        language = self.db.language(user_id)
        return Button(translate("back", language), "back_btn:" + callback_data)

    def back_keyboard(self, user_id: int) -> InlineKeyboard:
        """A keyboard holding only a button back to the previous screen."""
        keyboard = InlineKeyboard()
        keyboard.add_row([self.back_button(user_id, self.history.previous_state(user_id))])
        return keyboard

    def merge_keyboards(
        self, user_id: int, data: str, existing: InlineKeyboard | None = None
    ) -> InlineKeyboard:
        """Append the user's custom buttons whose callback starts with ``data``."""
        current_state = self.db.state(user_id)
        merged = existing.copy() if existing is not None else InlineKeyboard()
        deleting = current_state == "deleting"
        buttons = [
            Button(name, "delete_end:" + callback if deleting else callback)
            for name, callback in self.db.custom_buttons_like(user_id, data + "%")
        ]
        merged.add_in_rows(buttons)
        logger.debug("keyboard for %s has %d rows", user_id, len(merged.rows))
        return merged

    def merge_keyboards_with_exercise_data(
        self, user_id: int, existing: InlineKeyboard | None, exercise_name: str
    ) -> InlineKeyboard:
        """Append one button per recent record of ``exercise_name``."""
        merged = existing.copy() if existing is not None else InlineKeyboard()
        buttons = [
            Button(
                f"{training.exercise_name}: {training.weight} кг × {training.reps} "
                f"({training.training_date})",
                "custom_delete_end:" + training.callback_data,
            )
            for training in self.db.recent_trainings(user_id, exercise_name)
        ]
        merged.add_in_rows(buttons)
        return merged

    # screens

    def process_state(
        self,
        user_id: int,
        message_id: int,
        state: str,
        buttons: Iterable[tuple[str, str]] = (),
        use_db_buttons: bool = False,
        db_pattern: str = "",
        is_exercise_data: bool = False,
        exercise_name: str = "",
    ) -> InlineKeyboard:
        """Show a selection screen for ``state`` and return its keyboard."""
        self.history.add(user_id, state)

        keyboard = InlineKeyboard()
        keyboard.add_in_rows(Button(text, callback) for text, callback in buttons)

        if use_db_buttons and db_pattern:
            try:
                if is_exercise_data:
                    keyboard = self.merge_keyboards_with_exercise_data(
                        user_id, keyboard, exercise_name
                    )
                else:
                    keyboard = self.merge_keyboards(user_id, db_pattern, keyboard)
            except sqlite3.Error:
                logger.exception("could not load buttons for %s", user_id)

        keyboard.add_row([self.back_button(user_id, self.history.previous_state(user_id))])

        try:
            self.messenger.edit_message_text(
                translate("select", self.db.language(user_id)),
                user_id,
                message_id,
                reply_markup=keyboard,
            )
        except Exception:
            logger.exception("could not send the screen to %s", user_id)
        return keyboard

    def handle_exercise(self, user_id: int, message_id: int, exercise: str) -> None:
        """Show the menu of one exercise category with its custom buttons."""
        self.history.add(user_id, exercise)
        self.db.set_state(user_id, "resting")
        self.db.set_exercise(user_id, exercise)
        language = self.db.language(user_id)
        prefix = "btn_" + exercise + "%"

        fixed: list[Button] = []
        try:
            count = self.db.count_custom_buttons_like(user_id, prefix)
            if count < MAX_CUSTOM_BUTTONS:
                fixed.append(Button(translate("add_exercise", language), "add:" + exercise))
        except sqlite3.Error:
            logger.exception("could not count custom buttons for %s", user_id)
        fixed.append(
            Button(translate("delete_exercise", language), "delete_start:" + exercise)
        )

        base = InlineKeyboard()
        base.add_in_rows(fixed)
        try:
            keyboard = self.merge_keyboards(user_id, prefix, base)
        except sqlite3.Error:
            logger.exception("could not load custom buttons for %s", user_id)
            keyboard = base
        keyboard.add_row([self.back_button(user_id, self.history.previous_state(user_id))])

        text = translate("menu", language)
        try:
            if message_id == NEW_MESSAGE:
                self.messenger.send_message(user_id, text, reply_markup=keyboard)
            else:
                self.messenger.edit_message_text(text, user_id, message_id, reply_markup=keyboard)
        except Exception:
            logger.exception("could not send the exercise menu to %s", user_id)

    def handle_profile(self, user_id: int, message_id: int) -> None:
        """Show the user's activity statistics."""
        self.history.add(user_id, "profile")
        stats = self.db.user_stats(user_id)
        language = self.db.language(user_id)

        if stats is not None:
            seconds_online = stats.last_active - stats.created_at
            days = _trunc_div(seconds_online, 86400)
            hours = _trunc_div(_trunc_mod(seconds_online, 86400), 3600)
            minutes = _trunc_div(_trunc_mod(seconds_online, 3600), 60)
            message = (
                translate("your_profile", language)
                + "\n"
                + translate("time_spent", language)
                + f"{days}{translate('days', language)}"
                + f"{hours}{translate('minutes', language)}"
                + f"{minutes}{translate('seconds', language)}\n"
                + translate("messages", language)
                + str(stats.message_count)
                + "\n"
                + translate("buttons", language)
                + str(stats.button_count)
            )
        else:
            message = translate("no_information", language)

        keyboard = InlineKeyboard()
        keyboard.add_row([Button(translate("records", language), "records")])
        keyboard.add_row([self.back_button(user_id, "main_menu")])
        self._deliver(user_id, message_id, message, keyboard)

    def handle_records(self, user_id: int, message_id: int) -> None:
        """Show the list of categories to see records for."""
        language = self.db.language(user_id)
        self.history.add(user_id, "records")
        keyboard = InlineKeyboard()
        for category in CATEGORIES:
            keyboard.add_row([Button(translate(category, language), "records_cat_" + category)])
        keyboard.add_row([self.back_button(user_id, "records")])
        self.messenger.edit_message_text(
            translate("select_category", language),
            user_id,
            message_id,
            reply_markup=keyboard,
            parse_mode="HTML",
        )

    def handle_records_by_category(self, user_id: int, message_id: int, category: str) -> None:
        """Show the best weight and best repetitions recorded in ``category``."""
        language = self.db.language(user_id)
        self.history.add(user_id, "records_cat_" + category)
        title = translate(category, language) if category in CATEGORIES else category
        prefix = "btn_" + category + "%"
        message = translate("records_by_category", language) + title + "</b>\n"
        kg = translate("kg", language)

        try:
            heaviest = self.db.best_by_weight(user_id, prefix)
            if heaviest is not None:
                message += (
                    f"{translate('max_weight', language)}{heaviest.weight}{kg} "
                    f"({heaviest.exercise_name}, {heaviest.reps}"
                    f"{translate('reps', language)}{heaviest.training_date})\n"
                )
            most_reps = self.db.best_by_reps(user_id, prefix)
            if most_reps is not None:
                message += (
                    f"{translate('max_reps', language)}{most_reps.reps} "
                    f"({most_reps.exercise_name}, {most_reps.weight} {kg}, "
                    f"{most_reps.training_date})"
                )
            if heaviest is None and most_reps is None:
                message += translate("no_information_category", language)
        except sqlite3.Error as error:
            message = RECORDS_ERROR + str(error)

        keyboard = InlineKeyboard()
        keyboard.add_row([self.back_button(user_id, "records")])
        self._deliver(user_id, message_id, message, keyboard)

    def _deliver(
        self, user_id: int, message_id: int, text: str, keyboard: InlineKeyboard
    ) -> None:
        if message_id == NEW_MESSAGE:
            self.messenger.send_message(user_id, text, reply_markup=keyboard, parse_mode="HTML")
        else:
            self.messenger.edit_message_text(
                text, user_id, message_id, reply_markup=keyboard, parse_mode="HTML"
            )