# tests/test_menu_connector.py

from __future__ import annotations

from task_tracker.connectors.menu_connector import MENU_OPTIONS, run_menu_loop


def test_menu_options_cover_add_list_complete_quit() -> None:
    assert [(o.key, o.command) for o in MENU_OPTIONS] == [
        ("1", "add"),
        ("2", "list"),
        ("3", "complete"),
        ("4", "quit"),
    ]


def test_menu_end_to_end_scenario(state, ui) -> None:
    ui.feed(
        "1", "Buy milk",
        "1", "Walk dog",
        "3", "1",
        "2",
        "3", "5",
        "4",
    )

    run_menu_loop(state)

    assert ui.texts("success")[:2] == ["Task 1 added!", "Task 2 added!"]
    assert ui.texts("error") == ["Task 5 not found"]
    assert [(t.id, t.completed) for t in ui.rendered[0]] == [(1, True), (2, False)]
    assert not state.running
    # Menu shown before each of the six selections.
    assert ui.menus == 6
    assert "Enter task description" in ui.prompts


def test_menu_rejects_invalid_choices_and_continues(state, ui) -> None:
    ui.feed("9", "add", "", "3", "x", "1", "   ", "4")

    run_menu_loop(state)

    errors = ui.texts("error")
    assert errors[0].startswith("Invalid choice: '9'")
    assert errors[1].startswith("Invalid choice: 'add'")
    assert errors[2].startswith("Invalid choice: ''")
    assert errors[3] == "Invalid task ID"
    assert errors[4] == "Task description must not be empty."
    assert len(state.task_store) == 0
    assert not state.running


def test_menu_eof_mid_prompt_exits_cleanly(state, ui) -> None:
    ui.feed("1")

    run_menu_loop(state)

    assert len(state.task_store) == 0
    assert ui.texts("error") == []
