"""Reporter that speaks the GitHub Actions workflow-command protocol.

Log lines and annotations go to stdout as ``::command::`` lines; outputs and
the step summary are appended to the files named by ``GITHUB_OUTPUT`` and
``GITHUB_STEP_SUMMARY``.
"""

import os
import sys
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from loguru import logger

from diff_sentinel.domain.ports.reporter_port import ReporterPort


def escape_data(value: str) -> str:
    """Escape a workflow-command message body."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsReporter(ReporterPort):
    def __init__(
        self,
        stream: TextIO | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__()
        self.stream = stream or sys.stdout
        env = os.environ if env is None else env
        self.output_file = Path(env["GITHUB_OUTPUT"]) if env.get("GITHUB_OUTPUT") else None
        self.summary_file = (
            Path(env["GITHUB_STEP_SUMMARY"]) if env.get("GITHUB_STEP_SUMMARY") else None
        )

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def _command(self, command: str, message: str = "", **properties: str) -> None:
        props = ",".join(f"{k}={escape_property(v)}" for k, v in properties.items())
        head = f"{command} {props}" if props else command
        self._write(f"::{head}::{escape_data(message)}")

    def start_group(self, title: str) -> None:
        self._command("group", title)

    def end_group(self) -> None:
        self._command("endgroup")

    def info(self, message: str) -> None:
        self._write(message)

    def command_output(self, text: str) -> None:
        # Lines such as "::endgroup::" in captured output stay literal
        token = uuid.uuid4().hex
        self._command("stop-commands", token)
        self._write(text)
        self._write(f"::{token}::")

    def notice(self, message: str) -> None:
        self._command("notice", message)

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def set_output(self, name: str, value: str) -> None:
        if self.output_file is None:
            # Runners without GITHUB_OUTPUT only understand the legacy command
            self._write("")
            self._command("set-output", value, name=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: name or value contains delimiter {delimiter}")
        with self.output_file.open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        logger.debug("Set output {}={!r}", name, value)

    def _emit_failure(self, message: str) -> None:
        self._command("error", message)

    def _emit_summary(self, markdown: str) -> None:
        if self.summary_file is None:
            logger.debug("GITHUB_STEP_SUMMARY not set, printing summary to the log")
            self._write(markdown)
            return
        with self.summary_file.open("a", encoding="utf-8") as f:
            f.write(markdown)
