"""Smoke tests for CLI command structure - high value, low maintenance."""

from userdesk.infrastructure.cli.app import app


class TestCoreCommandStructure:
    """Test that core command structure exists and is accessible."""

    def test_main_help_shows_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("create", "get", "list", "update", "delete", "find", "menu"):
            assert command in result.stdout

    def test_version_command_works(self, runner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "UserDesk" in result.stdout

    def test_init_db_creates_database_file(self, runner, db_args, tmp_path):
        result = runner.invoke(app, [*db_args, "init-db"])

        assert result.exit_code == 0
        assert "Database initialized" in result.stdout
        assert (tmp_path / "cli.db").exists()

    def test_update_help_lists_options(self, runner):
        result = runner.invoke(app, ["update", "--help"])

        assert result.exit_code == 0
        assert "--email" in result.stdout
        assert "--age" in result.stdout
