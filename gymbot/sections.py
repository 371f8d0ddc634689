"""Handlers for the user's own sections and their training records."""

from __future__ import annotations

import logging

from .i18n import translate
from .markup import InlineKeyboard
from .screens import Screens

logger = logging.getLogger(__name__)

BUTTON_NOT_FOUND = "❌ Ошибка: кнопка не найдена."
ADD_EXERCISE_LABEL = "Добавить упражнение"
DELETE_EXERCISE_LABEL = "Удалить упражнение"


def handle_custom_user_section(
    screens: Screens,
    callback: str,
    user_id: int,
    message_id: int,
    is_exercise_data: bool,
) -> InlineKeyboard | None:
    """Open a custom section (or its training records) for the user.

    Returns the keyboard that was shown, or ``None`` when the custom button
    behind ``callback`` does not exist.
    """
    db = screens.db

    if is_exercise_data:
        button_pressed = db.button_pressed(user_id)
        kg = translate("kg", db.language(user_id))
        for training in db.latest_trainings(user_id):
            logger.debug(
                "%s | %s%s × %s (%s)",
                training.exercise_name,
                training.weight,
                kg,
                training.reps,
                training.training_date,
            )
        db.set_button_pressed(user_id, callback)
        db.set_state(user_id, "resting")
        return screens.process_state(
            user_id,
            message_id,
            callback,
            (),
            use_db_buttons=True,
            db_pattern=button_pressed + "_%",
            is_exercise_data=True,
        )

    if not db.custom_button_name(user_id, callback):
        screens.messenger.send_message(user_id, BUTTON_NOT_FOUND)
        return None

    db.set_button_pressed(user_id, callback)
    db.set_state(user_id, "resting")
    return screens.process_state(
        user_id,
        message_id,
        callback,
        [
            (ADD_EXERCISE_LABEL, "add:" + callback),
            (DELETE_EXERCISE_LABEL, "delete_start:" + callback),
        ],
        use_db_buttons=True,
        db_pattern="btn_" + callback + "%",
    )


def view_user_results(screens: Screens, user_id: int, button_name: str) -> str:
    """Send the user their latest results for ``button_name`` and return the text."""
    text = screens.db.results_message(user_id, button_name)
    screens.messenger.send_message(user_id, text)
    return text