"""Smoke tests for the phonebook CLI."""

from typer.testing import CliRunner

from src.phonebook.cli import app
from src.phonebook.runtime.config.config_data import ConfigData, DatabaseConfig
from src.phonebook.runtime.context import with_context

runner = CliRunner()


def test_show_config_lists_settings():
    result = runner.invoke(app, ["show-config"])

    assert result.exit_code == 0
    assert "database.url" in result.output
    assert "contacts.max_page_size" in result.output


def test_init_db_creates_tables():
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_show_config_masks_database_password():
    override = ConfigData(
        database=DatabaseConfig(url="postgresql://user:s3cret@db/phonebook")
    )

    with with_context(override):
        result = runner.invoke(app, ["show-config"])

    assert result.exit_code == 0
    assert "s3cret" not in result.output
    assert "postgresql://user:***@db/phonebook" in result.output
