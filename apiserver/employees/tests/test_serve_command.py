"""
Tests for the serve management command (database bootstrap + listen).
"""
from unittest.mock import call, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import OperationalError, connections

SERVE_CALL_COMMAND = "employees.management.commands.serve.call_command"
SERVE_UVICORN_RUN = "employees.management.commands.serve.uvicorn.run"


class TestServeCommand:

    def test_connection_failure_aborts(self):
        with patch.object(connections["default"], "ensure_connection", side_effect=OperationalError("refused")), \
                patch(SERVE_CALL_COMMAND) as mock_call, \
                patch(SERVE_UVICORN_RUN) as mock_run:
            with pytest.raises(CommandError, match="failed to connect the database cause refused"):
                call_command("serve")

        mock_call.assert_not_called()
        mock_run.assert_not_called()

    def test_migration_failure_aborts(self):
        with patch.object(connections["default"], "ensure_connection"), \
                patch(SERVE_CALL_COMMAND, side_effect=OperationalError("no schema")) as mock_call, \
                patch(SERVE_UVICORN_RUN) as mock_run:
            with pytest.raises(CommandError, match="failed to auto migrate into the database cause no schema"):
                call_command("serve")

        assert mock_call.call_count == 1
        assert mock_call.call_args.args == ("migrate",)
        mock_run.assert_not_called()

    def test_migrates_then_serves_asgi_app_with_uvicorn(self):
        with patch.object(connections["default"], "ensure_connection"), \
                patch(SERVE_CALL_COMMAND) as mock_call, \
                patch(SERVE_UVICORN_RUN) as mock_run:
            call_command("serve", "--port", "8080", "--workers", "4", verbosity=0)

        assert mock_call.call_args_list == [
            call("migrate", database="default", interactive=False, verbosity=0),
        ]
        mock_run.assert_called_once_with(
            "apiserver.asgi:application",
            host="0.0.0.0",
            port=8080,
            workers=4,
            lifespan="off",
            log_config=None,
        )

    def test_defaults_from_settings(self, settings):
        with patch.object(connections["default"], "ensure_connection"), \
                patch(SERVE_CALL_COMMAND) as mock_call, \
                patch(SERVE_UVICORN_RUN) as mock_run:
            call_command("serve", "--skip-migrate")

        mock_call.assert_not_called()
        assert mock_run.call_args.kwargs["port"] == settings.SERVER_PORT
        assert mock_run.call_args.kwargs["workers"] == settings.SERVER_WORKERS
