"""End-to-end tests for the one-shot user commands."""

from userdesk.infrastructure.cli.app import app


def create(runner, db_args, name="Ann", email="ann@example.com", age="30"):
    args = [*db_args, "create", name, email]
    if age is not None:
        args += ["--age", age]
    return runner.invoke(app, args)


class TestCreateCommand:
    def test_create_prints_new_id(self, runner, db_args):
        result = create(runner, db_args)

        assert result.exit_code == 0
        assert "User created successfully" in result.stdout
        assert "(ID 1)" in result.stdout

    def test_create_without_age(self, runner, db_args):
        result = create(runner, db_args, age=None)

        assert result.exit_code == 0

    def test_invalid_email_exits_with_error(self, runner, db_args):
        result = create(runner, db_args, email="not-an-email")

        assert result.exit_code == 1
        assert "✗ validation: Email must contain @ symbol" in result.stdout

    def test_duplicate_email_is_conflict(self, runner, db_args):
        create(runner, db_args)

        result = create(runner, db_args, name="Other")

        assert result.exit_code == 1
        assert "✗ conflict:" in result.stdout


class TestReadCommands:
    def test_get_existing_user(self, runner, db_args):
        create(runner, db_args)

        result = runner.invoke(app, [*db_args, "get", "1"])

        assert result.exit_code == 0
        assert "ann@example.com" in result.stdout

    def test_get_missing_user(self, runner, db_args):
        result = runner.invoke(app, [*db_args, "get", "9"])

        assert result.exit_code == 1
        assert "User not found with ID: 9" in result.stdout

    def test_get_non_positive_id(self, runner, db_args):
        result = runner.invoke(app, [*db_args, "get", "0"])

        assert result.exit_code == 1
        assert "User ID must be positive" in result.stdout

    def test_list_users(self, runner, db_args):
        create(runner, db_args)
        create(runner, db_args, name="Bob", email="bob@example.com", age=None)

        result = runner.invoke(app, [*db_args, "list"])

        assert result.exit_code == 0
        assert "Ann" in result.stdout
        assert "Bob" in result.stdout

    def test_list_empty(self, runner, db_args):
        result = runner.invoke(app, [*db_args, "list"])

        assert result.exit_code == 0
        assert "No users found." in result.stdout

    def test_find_by_email(self, runner, db_args):
        create(runner, db_args)

        found = runner.invoke(app, [*db_args, "find", "ann@example.com"])
        missing = runner.invoke(app, [*db_args, "find", "nobody@example.com"])

        assert found.exit_code == 0
        assert "Ann" in found.stdout
        assert missing.exit_code == 1
        assert "User not found with email" in missing.stdout


class TestWriteCommands:
    def test_update_changes_only_given_fields(self, runner, db_args):
        create(runner, db_args)

        result = runner.invoke(app, [*db_args, "update", "1", "--name", "Annie"])
        shown = runner.invoke(app, [*db_args, "get", "1"])

        assert result.exit_code == 0
        assert "User updated successfully" in result.stdout
        assert "Annie" in shown.stdout
        assert "ann@example.com" in shown.stdout

    def test_update_missing_user(self, runner, db_args):
        result = runner.invoke(app, [*db_args, "update", "5", "--name", "Ghost"])

        assert result.exit_code == 1
        assert "✗ not found: User not found with id: 5" in result.stdout

    def test_delete_user(self, runner, db_args):
        create(runner, db_args)

        deleted = runner.invoke(app, [*db_args, "delete", "1"])
        again = runner.invoke(app, [*db_args, "delete", "1"])

        assert deleted.exit_code == 0
        assert "deleted successfully" in deleted.stdout
        assert again.exit_code == 1
        assert "✗ not found" in again.stdout
