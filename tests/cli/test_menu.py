"""Tests for the interactive numbered menu."""

import pytest

from userdesk.domain.entities import User
from userdesk.infrastructure.cli.app import app
from userdesk.infrastructure.cli.menu import MENU_OPTIONS, run_menu


def scripted(*answers):
    """Answer prompts in order, then signal end of input."""
    remaining = iter(answers)

    def ask(_prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return ask


def test_menu_lists_all_options():
    assert list(MENU_OPTIONS) == ["1", "2", "3", "4", "5", "6", "0"]


async def test_exit_choice(user_service, capsys):
    await run_menu(user_service, scripted("0"))

    assert "Goodbye!" in capsys.readouterr().out


async def test_end_of_input_stops_loop(user_service, capsys):
    await run_menu(user_service, scripted())

    assert "Goodbye!" in capsys.readouterr().out


async def test_invalid_choice_keeps_looping(user_service, capsys):
    await run_menu(user_service, scripted("9", "abc", "0"))

    out = capsys.readouterr().out
    assert out.count("Invalid choice. Please try again.") == 2


async def test_create_then_list(user_service, capsys):
    await run_menu(
        user_service,
        scripted("1", "Ann", "ann@example.com", "30", "3", "0"),
    )

    out = capsys.readouterr().out
    assert "User created successfully" in out
    assert "ann@example.com" in out
    assert (await user_service.get_all_users()).unwrap() == [
        User(id=1, name="Ann", email="ann@example.com", age=30)
    ]


async def test_create_with_bad_age_does_not_save(user_service, capsys):
    await run_menu(user_service, scripted("1", "Ann", "ann@example.com", "old", "0"))

    assert "Error: Age must be a valid number!" in capsys.readouterr().out
    assert (await user_service.get_all_users()).unwrap() == []


async def test_validation_failure_is_printed(user_service, capsys):
    await run_menu(user_service, scripted("1", "", "ann@example.com", "", "0"))

    assert "Name cannot be empty" in capsys.readouterr().out


async def test_get_user_with_non_numeric_id(user_service, capsys):
    await run_menu(user_service, scripted("2", "one", "0"))

    assert "Error: ID must be a valid number!" in capsys.readouterr().out


async def test_update_keeps_blank_fields(user_service, capsys):
    await user_service.create_user("Ann", "ann@example.com", 30)

    await run_menu(user_service, scripted("4", "1", "Annie", "", "", "0"))

    assert "User updated successfully" in capsys.readouterr().out
    assert (await user_service.get_user_by_id(1)).unwrap() == User(
        id=1, name="Annie", email="ann@example.com", age=30
    )


async def test_update_missing_user(user_service, capsys):
    await run_menu(user_service, scripted("4", "8", "0"))

    assert "User not found with ID: 8" in capsys.readouterr().out


async def test_delete_and_find(user_service, capsys):
    await user_service.create_user("Ann", "ann@example.com", 30)

    await run_menu(
        user_service,
        scripted("6", "ann@example.com", "5", "1", "6", "ann@example.com", "0"),
    )

    out = capsys.readouterr().out
    assert "User deleted successfully." in out
    assert "User not found with email: ann@example.com" in out


async def test_unexpected_error_does_not_end_loop(user_service, capsys, monkeypatch):
    async def broken():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(user_service, "get_all_users", broken)

    await run_menu(user_service, scripted("3", "0"))

    out = capsys.readouterr().out
    assert "An unexpected error occurred:" in out
    assert "kaboom" in out
    assert "Goodbye!" in out


@pytest.mark.parametrize("choice", ["0\n", ""])
def test_menu_command_reads_stdin(runner, db_args, choice):
    result = runner.invoke(app, [*db_args, "menu"], input=choice)

    assert result.exit_code == 0
    assert "User Service" in result.stdout
    assert "Goodbye!" in result.stdout
