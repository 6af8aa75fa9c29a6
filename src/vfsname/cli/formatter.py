import json
import typer
from typing import Any
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

# Create a stderr console for logging
error_console = Console(stderr=True)

class OutputFormatter:
    """
    Handles output formatting for the CLI.
    Keeps system messages (stderr) apart from data (stdout).
    """

    @staticmethod
    def log(message: str, severity: str = "info") -> None:
        """
        Print system messages to stderr with color coding.
        """
        style = "white"
        prefix = "[VFS]"

        if severity == "warning":
            style = "yellow"
        elif severity == "error":
            style = "red"
        elif severity == "success":
            style = "green"

        error_console.print(f"[{style}]{escape(prefix + ' ' + message)}[/{style}]", highlight=False, soft_wrap=True)

    @staticmethod
    def print_data(data: Any) -> None:
        """
        Print a result to stdout: strings as-is, everything else as JSON.
        """
        if isinstance(data, str):
            typer.echo(data)
            return

        if isinstance(data, bool):
            typer.echo("true" if data else "false")
            return

        def json_serializer(obj):
            if isinstance(obj, BaseModel):
                return obj.model_dump(mode='json')
            return str(obj)

        try:
            output = json.dumps(data, indent=2, default=json_serializer)
            typer.echo(output)
        except TypeError as e:
            OutputFormatter.log(f"JSON Serialization failed: {e}", severity="error")
            typer.echo(str(data))
