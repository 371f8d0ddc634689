import pytest

from gymbot.markup import Button, InlineKeyboard, Messenger


def _buttons(count):
    return [Button(f"b{i}", f"cb{i}") for i in range(count)]


def test_add_in_rows_pairs_buttons():
    buttons = _buttons(3)
    keyboard = InlineKeyboard()
    keyboard.add_in_rows(buttons)
    assert keyboard.rows == [buttons[:2], buttons[2:]]


def test_add_in_rows_even_count_has_full_rows():
    keyboard = InlineKeyboard()
    keyboard.add_in_rows(_buttons(4))
    assert [len(row) for row in keyboard.rows] == [2, 2]


def test_add_in_rows_custom_width_keeps_order():
    buttons = _buttons(7)
    keyboard = InlineKeyboard()
    keyboard.add_in_rows(buttons, per_row=3)
    assert [b for row in keyboard.rows for b in row] == buttons
    assert all(len(row) <= 3 for row in keyboard.rows)


def test_add_in_rows_rejects_zero_width():
    with pytest.raises(ValueError):
        InlineKeyboard().add_in_rows(_buttons(2), per_row=0)


def test_add_in_rows_empty_adds_nothing():
    keyboard = InlineKeyboard()
    keyboard.add_in_rows([])
    assert keyboard.rows == []


def test_add_row_appends_after_existing():
    buttons = _buttons(3)
    keyboard = InlineKeyboard()
    keyboard.add_in_rows(buttons[:2])
    keyboard.add_row([buttons[2]])
    assert keyboard.rows[-1] == [buttons[2]]
    assert len(keyboard.rows) == 2


def test_copy_is_independent():
    keyboard = InlineKeyboard()
    keyboard.add_in_rows(_buttons(2))
    clone = keyboard.copy()
    clone.add_row(_buttons(1))
    clone.rows[0].append(Button("x", "y"))
    assert len(keyboard.rows) == 1
    assert len(keyboard.rows[0]) == 2
    assert clone.rows[0][:2] == keyboard.rows[0]


def test_messenger_records_send_and_edit():
    messenger = Messenger()
    keyboard = InlineKeyboard([[Button("a", "b")]])
    messenger.send_message(5, "hello", keyboard, "HTML")
    messenger.edit_message_text("bye", 5, 11, keyboard)
    assert [m["method"] for m in messenger.outbox] == ["send_message", "edit_message_text"]
    assert messenger.outbox[0]["text"] == "hello"
    assert messenger.outbox[0]["parse_mode"] == "HTML"
    assert messenger.outbox[1]["message_id"] == 11
    assert messenger.outbox[1]["reply_markup"] is keyboard