"""SQLite storage for users, custom buttons, training records and stats."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike

from .i18n import translate

DATABASE_PATH = "gym.db3"

_USER_FIELDS = frozenset({"state", "exercise", "button_pressed", "language"})

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS users (
        user_id INTEGER PRIMARY KEY,
        state TEXT DEFAULT '',
        exercise TEXT DEFAULT '',
        button_pressed TEXT DEFAULT '',
        language TEXT DEFAULT ''
    )""",
    """CREATE TABLE IF NOT EXISTS user_stats (
        user_id INTEGER PRIMARY KEY,
        created_at INTEGER,
        last_active INTEGER,
        message_count INTEGER DEFAULT 0,
        button_count INTEGER DEFAULT 0
    )""",
    """CREATE TABLE IF NOT EXISTS custom_buttons (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        button_name TEXT,
        callback_data TEXT,
        FOREIGN KEY(user_id) REFERENCES users(user_id)
    )""",
    """CREATE TABLE IF NOT EXISTS user_trainings (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER,
        exercise_name TEXT,
        weight INTEGER,
        reps INTEGER,
        training_date TEXT,
        callback_data TEXT,
        FOREIGN KEY(user_id) REFERENCES users(user_id),
        FOREIGN KEY(exercise_name) REFERENCES custom_buttons(button_name) ON DELETE CASCADE
    )""",
    """CREATE TRIGGER IF NOT EXISTS delete_user_trainings_after_button_deleted
        AFTER DELETE ON custom_buttons
        FOR EACH ROW
        BEGIN
            DELETE FROM user_trainings WHERE exercise_name = OLD.button_name;
        END""",
)

_TRAINING_COLUMNS = (
    "COALESCE(exercise_name, ''), CAST(weight AS INTEGER), CAST(reps AS INTEGER), "
    "COALESCE(training_date, ''), COALESCE(callback_data, '')"
)


@dataclass(frozen=True)
class Training:
    """One recorded set of an exercise."""

    exercise_name: str
    weight: int
    reps: int
    training_date: str
    callback_data: str

    @classmethod
    def _from_row(cls, row: tuple) -> "Training":
        name, weight, reps, date, callback = row
        return cls(name, weight or 0, reps or 0, date, callback)


@dataclass(frozen=True)
class UserStats:
    """Activity counters for a user; times are Unix seconds."""

    created_at: int
    last_active: int
    message_count: int
    button_count: int


class GymDatabase:
    """Access to the bot's SQLite database."""

    def __init__(self, path: str | PathLike[str] = DATABASE_PATH) -> None:
        self.path = path
        self._conn = sqlite3.connect(path, isolation_level=None)

    def __enter__(self) -> "GymDatabase":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()

    def create_schema(self) -> None:
        """Create the tables and trigger if they do not exist yet."""
        for statement in _SCHEMA:
            self._conn.execute(statement)

    def ensure_user(self, user_id: int) -> None:
        """Register ``user_id`` if it is not known yet."""
        self._conn.execute("INSERT OR IGNORE INTO users (user_id) VALUES (?)", (user_id,))

    # custom buttons

    def save_user_button(self, user_id: int, button_name: str, callback_data: str) -> None:
        self._conn.execute(
            "INSERT INTO custom_buttons (user_id, button_name, callback_data) VALUES (?, ?, ?)",
            (user_id, button_name, callback_data),
        )

    def delete_user_button(self, user_id: int, callback_data: str) -> None:
        self._conn.execute(
            "DELETE FROM custom_buttons WHERE user_id = ? AND callback_data = ?",
            (user_id, callback_data),
        )

    def is_custom_user_section(self, callback: str, user_id: int) -> bool:
        """Whether ``callback`` belongs to one of the user's custom buttons."""
        row = self._conn.execute(
            "SELECT 1 FROM custom_buttons WHERE user_id = ? AND callback_data = ?",
            (user_id, callback),
        ).fetchone()
        return row is not None

    def custom_buttons_like(self, user_id: int, pattern: str) -> list[tuple[str, str]]:
        """Return ``(button_name, callback_data)`` pairs whose callback matches a LIKE pattern."""
        rows = self._conn.execute(
            "SELECT COALESCE(button_name, ''), COALESCE(callback_data, '') "
            "FROM custom_buttons WHERE user_id = ? AND callback_data LIKE ?",
            (user_id, pattern),
        )
        return [(name, callback) for name, callback in rows]

    def count_custom_buttons_like(self, user_id: int, pattern: str) -> int:
        (count,) = self._conn.execute(
            "SELECT COUNT(*) FROM custom_buttons WHERE user_id = ? AND callback_data LIKE ?",
            (user_id, pattern),
        ).fetchone()
        return count

    # training records

    def save_user_results(
        self,
        user_id: int,
        weight: str,
        reps: str,
        training_date: str,
        button_name: str,
        callback_data: str,
    ) -> None:
        self._conn.execute(
            "INSERT INTO user_trainings "
            "(user_id, exercise_name, weight, reps, training_date, callback_data) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (user_id, button_name, weight, reps, training_date, callback_data),
        )

    def delete_user_results(self, user_id: int, callback_data: str) -> None:
        self._conn.execute(
            "DELETE FROM user_trainings WHERE user_id = ? AND callback_data = ?",
            (user_id, callback_data),
        )

    def results_message(self, user_id: int, button_name: str) -> str:
        """Text listing the latest ten results for an exercise, in the user's language."""
        rows = self._conn.execute(
            "SELECT weight, reps, training_date FROM user_trainings "
            "WHERE user_id = ? AND exercise_name = ? ORDER BY training_date DESC LIMIT 10",
            (user_id, button_name),
        ).fetchall()
        language = self.language(user_id)
        kg = translate("kg", language)
        lines = [translate("last_results", language) + "\n"]
        for weight, reps, date in rows:
            lines.append(
                f"• {button_name} — {_text(weight)}{kg} × {_text(reps)} ({_text(date)})\n"
            )
        if not rows:
            lines.append(translate("no_information", language))
        return "".join(lines)

    def recent_trainings(self, user_id: int, exercise_name: str) -> list[Training]:
        """Latest ten records of one exercise, newest date first."""
        rows = self._conn.execute(
            f"SELECT {_TRAINING_COLUMNS} FROM user_trainings "
            "WHERE user_id = ? AND exercise_name = ? ORDER BY training_date DESC LIMIT 10",
            (user_id, exercise_name),
        )
        return [Training._from_row(row) for row in rows]

    def latest_trainings(self, user_id: int) -> list[Training]:
        """Latest ten records over all exercises, newest date first."""
        rows = self._conn.execute(
            f"SELECT {_TRAINING_COLUMNS} FROM user_trainings "
            "WHERE user_id = ? ORDER BY training_date DESC LIMIT 10",
            (user_id,),
        )
        return [Training._from_row(row) for row in rows]

    def best_by_weight(self, user_id: int, pattern: str) -> Training | None:
        """The heaviest record whose callback matches a LIKE pattern."""
        return self._best(user_id, pattern, "weight")

    def best_by_reps(self, user_id: int, pattern: str) -> Training | None:
        """The record with most repetitions whose callback matches a LIKE pattern."""
        return self._best(user_id, pattern, "reps")

    def _best(self, user_id: int, pattern: str, column: str) -> Training | None:
        row = self._conn.execute(
            f"SELECT {_TRAINING_COLUMNS} FROM user_trainings "
            f"WHERE user_id = ? AND callback_data LIKE ? ORDER BY {column} DESC LIMIT 1",
            (user_id, pattern),
        ).fetchone()
        return None if row is None else Training._from_row(row)

    # user fields

    def get_single_value(self, query: str, user_id: int, second_param: str = "") -> str:
        """Run ``query`` and return its first column as text, or "" if absent."""
        params: tuple = (user_id, second_param) if second_param else (user_id,)
        row = self._conn.execute(query, params).fetchone()
        if row is None or row[0] is None:
            return ""
        return _text(row[0])

    def button_pressed(self, user_id: int) -> str:
        return self.get_single_value("SELECT button_pressed FROM users WHERE user_id = ?", user_id)

    def custom_button_name(self, user_id: int, callback_data: str) -> str:
        return self.get_single_value(
            "SELECT button_name FROM custom_buttons WHERE user_id = ? AND callback_data = ?",
            user_id,
            callback_data,
        )

    def state(self, user_id: int) -> str:
        return self.get_single_value("SELECT state FROM users WHERE user_id = ?", user_id)

    def language(self, user_id: int) -> str:
        return self.get_single_value("SELECT language FROM users WHERE user_id = ?", user_id)

    def set_user_field(self, user_id: int, field_name: str, value: str) -> None:
        """Update one text column of the user's row."""
        if field_name not in _USER_FIELDS:
            raise ValueError(f"unknown user field: {field_name!r}")
        self._conn.execute(
            f"UPDATE users SET {field_name} = ? WHERE user_id = ?", (value, user_id)
        )

    def set_state(self, user_id: int, state: str) -> None:
        self.set_user_field(user_id, "state", state)

    def set_exercise(self, user_id: int, exercise: str) -> None:
        self.set_user_field(user_id, "exercise", exercise)

    def set_button_pressed(self, user_id: int, callback_data: str) -> None:
        self.set_user_field(user_id, "button_pressed", callback_data)

    def set_language(self, user_id: int, language: str) -> None:
        self.set_user_field(user_id, "language", language)

    # activity statistics

    def user_stats(self, user_id: int) -> UserStats | None:
        row = self._conn.execute(
            "SELECT COALESCE(created_at, 0), COALESCE(last_active, 0), "
            "COALESCE(message_count, 0), COALESCE(button_count, 0) "
            "FROM user_stats WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        return None if row is None else UserStats(*(int(value) for value in row))

    def record_message(self, user_id: int) -> None:
        """Count a message from the user and refresh the activity time."""
        self._conn.execute(
            "INSERT INTO user_stats (user_id, created_at, last_active, message_count) "
            "VALUES (?, strftime('%s','now'), strftime('%s','now'), 1) "
            "ON CONFLICT(user_id) DO UPDATE SET "
            "last_active = strftime('%s','now'), message_count = message_count + 1",
            (user_id,),
        )

    def record_click(self, user_id: int) -> None:
        """Count a button press from the user and refresh the activity time."""
        self._conn.execute(
            "INSERT INTO user_stats (user_id, last_active, button_count) "
            "VALUES (?, strftime('%s','now'), 1) "
            "ON CONFLICT(user_id) DO UPDATE SET "
            "last_active = strftime('%s','now'), button_count = button_count + 1",
            (user_id,),
        )


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)