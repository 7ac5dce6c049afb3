"""Command-line access to the Forvo API."""

import asyncio
import json
from typing import Any

import typer

from forvomcp.client import ForvoClient
from forvomcp.config import settings
from forvomcp.logging_config import configure_logging
from forvomcp.operations import Operation
from forvomcp.request import redact_url

app = typer.Typer(add_completion=False, help="Call one Forvo API operation and print the JSON response.")


async def _fetch(key: str, operation: Operation, params: dict[str, Any]) -> Any:
    async with ForvoClient(key, base_url=settings.base_url, timeout=settings.timeout_seconds) as forvo:
        return await forvo.call(operation, params)


@app.command()
def main(
    operation: str = typer.Argument(
        ..., help=f"Operation: {', '.join(op.command_name for op in Operation)}"
    ),
    params: str = typer.Option("{}", "--params", "-p", help='Parameters as JSON, e.g. \'{"word": "apple"}\''),
    key: str = typer.Option(None, "--key", help="Forvo API key (defaults to FORVO_API_KEY)"),
    output: str = typer.Option(None, "--output", "-o", help="Save to file"),
):
    """Fetch data from the Forvo API."""
    configure_logging()

    try:
        op = Operation.from_command_name(operation)
        extra_params = json.loads(params)
    except (ValueError, json.JSONDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    api_key = key or settings.api_key
    if not api_key:
        typer.echo("Error: FORVO_API_KEY is not set. Pass --key or set the environment variable.", err=True)
        raise typer.Exit(1)

    try:
        result = asyncio.run(_fetch(api_key, op, extra_params))
    except Exception as e:
        typer.echo(f"Error: {redact_url(str(e))}", err=True)
        raise typer.Exit(1) from e

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        typer.echo(f"Saved to {output}")
    else:
        typer.echo(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
