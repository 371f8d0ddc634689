import pytest

from gymbot.database import GymDatabase
from gymbot.history import NavigationHistory
from gymbot.markup import Button, InlineKeyboard, Messenger
from gymbot.screens import Screens

USER = 42


@pytest.fixture
def db():
    database = GymDatabase(":memory:")
    database.create_schema()
    database.ensure_user(USER)
    database.set_language(USER, "en")
    yield database
    database.close()


@pytest.fixture
def screens(db):
    return Screens(db, Messenger(), NavigationHistory())


def _callbacks(keyboard):
    return [[button.callback_data for button in row] for row in keyboard.rows]


def test_back_button(screens):
    button = screens.back_button(USER, "menu")
    assert button == Button("⬅ Back", "back_btn:menu")


def test_back_button_uses_language(screens, db):
    db.set_language(USER, "pl")
    assert screens.back_button(USER, "x").text == "⬅ Wstecz"


def test_back_keyboard_with_empty_history(screens):
    keyboard = screens.back_keyboard(USER)
    assert _callbacks(keyboard) == [["back_btn:menu_back"]]


def test_back_keyboard_points_to_previous_state(screens):
    screens.history.add(USER, "main_menu")
    screens.history.add(USER, "training")
    assert _callbacks(screens.back_keyboard(USER)) == [["back_btn:main_menu"]]


def test_merge_keyboards_rows_of_two_after_existing(screens, db):
    for index in range(3):
        db.save_user_button(USER, f"Ex{index}", f"btn_chest_{index}")
    db.save_user_button(USER, "Other", "btn_legs_0")
    existing = InlineKeyboard([[Button("a", "a")]])
    merged = screens.merge_keyboards(USER, "btn_chest", existing)
    assert _callbacks(merged) == [
        ["a"],
        ["btn_chest_0", "btn_chest_1"],
        ["btn_chest_2"],
    ]
    assert existing.rows == [[Button("a", "a")]]


def test_merge_keyboards_in_deleting_state(screens, db):
    db.save_user_button(USER, "Bench", "btn_chest_1")
    db.set_state(USER, "deleting")
    merged = screens.merge_keyboards(USER, "btn_chest", None)
    assert merged.rows == [[Button("Bench", "delete_end:btn_chest_1")]]


def test_merge_keyboards_with_exercise_data(screens, db):
    db.save_user_results(USER, "50", "10", "2024-01-01", "Bench", "btn_chest_1")
    merged = screens.merge_keyboards_with_exercise_data(USER, InlineKeyboard(), "Bench")
    assert merged.rows == [
        [Button("Bench: 50 кг × 10 (2024-01-01)", "custom_delete_end:btn_chest_1")]
    ]


def test_merge_keyboards_with_exercise_data_other_exercise_ignored(screens, db):
    db.save_user_results(USER, "50", "10", "2024-01-01", "Squat", "btn_legs_1")
    merged = screens.merge_keyboards_with_exercise_data(USER, None, "Bench")
    assert merged.rows == []


def test_process_state_sends_select_screen(screens):
    screens.history.add(USER, "main_menu")
    keyboard = screens.process_state(USER, 7, "training", [("A", "a"), ("B", "b"), ("C", "c")])
    assert _callbacks(keyboard) == [["a", "b"], ["c"], ["back_btn:main_menu"]]
    sent = screens.messenger.outbox[-1]
    assert sent["method"] == "edit_message_text"
    assert sent["text"] == "Select: "
    assert sent["message_id"] == 7
    assert sent["reply_markup"] is keyboard
    assert screens.history.states(USER) == ["main_menu", "training"]


def test_process_state_with_db_buttons(screens, db):
    db.save_user_button(USER, "Bench", "btn_chest_1")
    keyboard = screens.process_state(
        USER, 1, "chest", [("A", "a")], use_db_buttons=True, db_pattern="btn_chest"
    )
    assert _callbacks(keyboard) == [["a"], ["btn_chest_1"], ["back_btn:menu_back"]]


def test_process_state_without_pattern_ignores_db(screens, db):
    db.save_user_button(USER, "Bench", "btn_chest_1")
    keyboard = screens.process_state(USER, 1, "chest", [], use_db_buttons=True)
    assert _callbacks(keyboard) == [["back_btn:menu_back"]]


def test_process_state_survives_messenger_failure(db):
    class FailingMessenger(Messenger):
        def edit_message_text(self, *args, **kwargs):
            raise RuntimeError("network down")

    screens = Screens(db, FailingMessenger())
    keyboard = screens.process_state(USER, 1, "state", [("A", "a")])
    assert _callbacks(keyboard) == [["a"], ["back_btn:menu_back"]]


def test_handle_exercise_sets_user_fields_and_sends(screens, db):
    db.save_user_button(USER, "Bench", "btn_chest_1")
    screens.handle_exercise(USER, -1, "chest")
    assert db.state(USER) == "resting"
    sent = screens.messenger.outbox[-1]
    assert sent["method"] == "send_message"
    assert sent["text"] == "🏠 Main menu:"
    assert _callbacks(sent["reply_markup"]) == [
        ["add:chest", "delete_start:chest"],
        ["btn_chest_1"],
        ["back_btn:menu_back"],
    ]
    assert screens.history.states(USER) == ["chest"]


def test_handle_exercise_hides_add_when_full(screens, db):
    for index in range(8):
        db.save_user_button(USER, f"Ex{index}", f"btn_chest_{index}")
    screens.handle_exercise(USER, 3, "chest")
    sent = screens.messenger.outbox[-1]
    assert sent["method"] == "edit_message_text"
    rows = _callbacks(sent["reply_markup"])
    assert rows[0] == ["delete_start:chest"]
    assert sum(len(row) for row in rows[1:-1]) == 8
    assert all(len(row) <= 2 for row in rows)


def test_handle_profile_without_stats(screens):
    screens.handle_profile(USER, 5)
    sent = screens.messenger.outbox[-1]
    assert sent["text"] == "Nothing yet 😕"
    assert sent["parse_mode"] == "HTML"
    assert _callbacks(sent["reply_markup"]) == [["records"], ["back_btn:main_menu"]]


def test_handle_profile_with_stats(screens, db):
    db.record_message(USER)
    screens.handle_profile(USER, -1)
    sent = screens.messenger.outbox[-1]
    assert sent["method"] == "send_message"
    assert sent["text"].startswith("📊 <b>Your profile</b>\n⏳ Time spent: ")
    assert "💬 Messages entered: 1" in sent["text"]
    assert sent["text"].endswith("🔘 Buttons pressed: 0")
    assert screens.history.states(USER) == ["profile"]


def test_handle_records_lists_categories_in_order(screens):
    screens.handle_records(USER, 9)
    sent = screens.messenger.outbox[-1]
    assert sent["text"] == "🏆 <b>Select a category</b>"
    assert _callbacks(sent["reply_markup"]) == [
        ["records_cat_abs"],
        ["records_cat_arms"],
        ["records_cat_chest"],
        ["records_cat_legs"],
        ["records_cat_spine"],
        ["back_btn:records"],
    ]
    assert sent["reply_markup"].rows[2][0].text == "💪Chest"


def test_records_by_category_without_data(screens):
    screens.handle_records_by_category(USER, 2, "chest")
    sent = screens.messenger.outbox[-1]
    assert sent["text"] == (
        "🏋️ <b>Records: 💪Chest</b>\n🙁 No data available for this category."
    )
    assert _callbacks(sent["reply_markup"]) == [["back_btn:records"]]
    assert screens.history.states(USER) == ["records_cat_chest"]


def test_records_by_category_with_data(screens, db):
    db.save_user_results(USER, "100", "3", "2024-02-01", "Bench", "btn_chest_1")
    db.save_user_results(USER, "60", "15", "2024-02-02", "Fly", "btn_chest_2")
    db.save_user_results(USER, "200", "20", "2024-02-03", "Squat", "btn_legs_1")
    screens.handle_records_by_category(USER, -1, "chest")
    text = screens.messenger.outbox[-1]["text"]
    assert "🏋️ <b>Max weight:</b> 100kg (Bench, 3 reps, 2024-02-01)\n" in text
    assert text.endswith("🔁 <b>Max reps:</b> 15 (Fly, 60 kg, 2024-02-02)")
    assert "Squat" not in text


def test_records_by_unknown_category_uses_raw_title(screens):
    screens.handle_records_by_category(USER, 2, "neck")
    text = screens.messenger.outbox[-1]["text"]
    assert text.startswith("🏋️ <b>Records: neck</b>\n")