import subprocess

from pytest_mock import MockerFixture
from structlog.testing import capture_logs

from resolvergen.formatting import format_code

CODE = "export type Id=string\n"


def test_format_code(mocker: MockerFixture):
    run = mocker.patch(
        "resolvergen.formatting.subprocess.run",
        return_value=subprocess.CompletedProcess(
            args=[],
            returncode=0,
            stdout="export type Id = string;\n",
            stderr="",
        ),
    )

    assert format_code(CODE, command="npx prettier") == "export type Id = string;\n"
    run.assert_called_once_with(
        ["npx", "prettier", "--parser", "typescript"],
        input=CODE,
        capture_output=True,
        text=True,
        check=False,
    )


def test_format_code_syntax_error(mocker: MockerFixture):
    mocker.patch(
        "resolvergen.formatting.subprocess.run",
        return_value=subprocess.CompletedProcess(
            args=[],
            returncode=2,
            stdout="",
            stderr="SyntaxError: ';' expected.",
        ),
    )

    with capture_logs() as logs:
        assert format_code(CODE) == CODE

    (entry,) = logs
    assert entry["log_level"] == "warning"
    assert entry["error"] == "SyntaxError: ';' expected."


def test_format_code_without_prettier(mocker: MockerFixture):
    mocker.patch(
        "resolvergen.formatting.subprocess.run",
        side_effect=FileNotFoundError("prettier"),
    )

    with capture_logs() as logs:
        assert format_code(CODE) == CODE

    (entry,) = logs
    assert entry["log_level"] == "warning"
    assert entry["command"] == "prettier"
