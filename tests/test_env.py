"""Tests for environment configuration."""

from unittest.mock import patch

import pytest

from slashkit.env import DISCORD_URL, Env


class TestEnv:
    """Test suite for Env."""

    def test_new_reads_environment(self) -> None:
        """Test values taken from the process environment."""
        with patch.dict(
            "os.environ",
            {"BOT_TOKEN": "abc", "APPLICATION_ID": "42", "DEV": "0"},
            clear=True,
        ):
            env = Env.new()

        assert env.bot_token == "abc"
        assert env.application_id == 42
        assert env.discord_url == DISCORD_URL
        assert env.dev is False
        assert env.logfire_token is None

    def test_bot_id_from_token(self) -> None:
        """Test that the application id is decoded from the token."""
        env = Env(bot_token="MTIwMDAwMDAwMDAwMDAwMDAwMg.Gabcde.signature")

        assert env.bot_id == 1200000000000000002

    def test_explicit_application_id_wins(self) -> None:
        """Test that APPLICATION_ID overrides the token."""
        env = Env(bot_token="MTIwMDAwMDAwMDAwMDAwMDAwMg.x.y", application_id=7)

        assert env.bot_id == 7

    def test_bot_id_requires_configuration(self) -> None:
        """Test the error without token or application id."""
        with pytest.raises(ValueError):
            Env().bot_id


class TestConfigureLogfire:
    """Test suite for configure_logfire."""

    def test_token_and_environment_passed(self) -> None:
        """Test the logfire settings derived from Env."""
        from slashkit.env import configure_logfire

        with patch("slashkit.env.logfire.configure") as configure:
            configure_logfire(Env(logfire_token="lf", dev=False))

        kwargs = configure.call_args.kwargs
        assert kwargs["token"] == "lf"
        assert kwargs["send_to_logfire"] == "if-token-present"
        assert kwargs["environment"] == "prod"
        assert kwargs["console"] is False
