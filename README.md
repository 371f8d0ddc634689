# gymbot

gymbot is the core of a chat bot that helps people log their strength
training. Users sort exercises into categories (chest, back, arms, abs, legs)
and add their own exercise buttons. They record the weight and reps of each
set, then look up their latest results and personal records. The interface
strings are available in English, Russian and Polish.

The package holds the bot's storage, navigation history and screens. It does
not depend on any particular chat service. The screens send through a
`Messenger`, and the package builds the message text and inline keyboards
for it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building blocks

- **`gymbot.database.GymDatabase`** wraps an SQLite file. The default path is
  `gym.db3`, and `":memory:"` also works. It can be used as a context
  manager, which closes the connection on exit.
  - `create_schema()` creates the tables and a trigger. The trigger deletes
    the training records of a custom button when that button is deleted.
  - `ensure_user()` registers a user.
  - Custom buttons: `save_user_button()`, `delete_user_button()`,
    `is_custom_user_section()`, `custom_buttons_like()`,
    `count_custom_buttons_like()`.
  - Training records: `save_user_results()`, `delete_user_results()`,
    `recent_trainings()`, `latest_trainings()`, `best_by_weight()`,
    `best_by_reps()`. These return `Training` records.
    `results_message()` returns the text of the latest ten results.
  - User fields: `state()`, `language()`, `button_pressed()` and
    `custom_button_name()` read them. `set_state()`, `set_exercise()`,
    `set_button_pressed()`, `set_language()` and `set_user_field()` write
    them. `set_user_field()` raises `ValueError` for an unknown column.
  - Activity counters: `record_message()` and `record_click()` update them,
    and `user_stats()` returns them as a `UserStats`.
- **`gymbot.history.NavigationHistory`** remembers the screens each user has
  opened, so that the "Back" button knows where to go.
  - It keeps up to 20 screens per user by default.
  - A repeat of the latest screen is not recorded.
  - Methods: `add`, `go_back`, `previous_state`, `states`. When there is
    nothing to go back to, `go_back` and `previous_state` return
    `"menu_back"`.
- **`gymbot.markup`** provides `Button`, `InlineKeyboard` and `Messenger`.
  - `InlineKeyboard` has `add_in_rows`, `add_row` and `copy`.
  - The default `Messenger` sends nothing. It appends every
    `send_message` and `edit_message_text` request to its `outbox` list.
- **`gymbot.i18n`** provides `translate(key, language)` and
  `make_button(key, callback_data, language)`. A missing language falls back
  to English, and an unknown key is returned unchanged.
- **`gymbot.screens.Screens`** ties a database, a messenger and a navigation
  history together. It builds and sends each menu:
  - `handle_exercise` shows an exercise category. The user's custom buttons
    are laid out two per row. The "add" button is shown only while the
    category has fewer than 8 custom buttons.
  - `handle_profile` shows time online and usage counters.
  - `handle_records` lists the categories.
  - `handle_records_by_category` shows the heaviest set and the set with the
    most reps in a category.
  - `process_state` shows a generic selection screen.

  Passing `-1` as the message id sends a new message. Any other id edits the
  existing message.
- **`gymbot.sections`** has two functions:
  - `handle_custom_user_section` handles presses on a user's custom buttons.
    It returns the keyboard it showed, or `None` when the button is unknown.
  - `view_user_results` sends the list of recent results and returns its
    text.

## Example

```python
from gymbot.database import GymDatabase
from gymbot.screens import Screens

with GymDatabase(":memory:") as db:
    db.create_schema()
    db.ensure_user(1)
    db.set_language(1, "en")
    db.save_user_button(1, "Bench press", "btn_chest_bench")
    db.save_user_results(1, "80", "5", "2024-05-01", "Bench press", "btn_chest_bench")
    print(db.results_message(1, "Bench press"))
    # 📝 Latest results:
    # • Bench press — 80kg × 5 (2024-05-01)

    screens = Screens(db)
    screens.handle_exercise(1, -1, "chest")
    print(screens.messenger.outbox[-1]["text"])  # 🏠 Main menu:
```

## What the package does not do

The package does not connect to any chat service, and it has no command that
runs a bot. It does not read bot tokens or configuration, and it does not
receive or dispatch incoming messages and button presses. To use it with a
real chat service, subclass `Messenger` and override `send_message` and
`edit_message_text`. Then call the `Screens` and `gymbot.sections` handlers
from your own update loop.