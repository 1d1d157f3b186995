"""IFC QA CLI.

Usage:
    python -m ifc_qa validate <model.ifc> [--rules rules.json] [--output issues.json]
    python -m ifc_qa summary <model.ifc>

All commands print JSON to stdout. Logging goes to stderr (--verbose).
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ifc_qa import __version__
from ifc_qa.analyzer import analyze, analyze_with_rules, default_rules
from ifc_qa.store import InputNotFoundError
from ifc_qa.validators.config import RuleConfigError, load_rules

app = typer.Typer(
    name="ifc_qa",
    help="IFC QA: rule-based quality checks for IFC building models.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _write_json(text: str, output: str) -> Path:
    """Write JSON text to a file. Creates parent dirs if needed."""
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def validate(
    ifc_path: str = typer.Argument(..., help="Path to the IFC file"),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Rule set JSON file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also write issues JSON here"),
):
    """Run the QA rules on an IFC model."""
    try:
        rule_list = load_rules(rules) if rules else default_rules()
        result = analyze_with_rules(ifc_path, rule_list)
    except (InputNotFoundError, RuleConfigError) as e:
        _fail(str(e))

    data = {
        "ok": True,
        "rules": [r.rule_id for r in rule_list],
        "counts": result.counts(),
        "result": result.model_dump(mode="json", by_alias=True),
    }
    if output:
        data["written"] = str(_write_json(result.to_json(), output))
    _output(data)


@app.command()
def summary(ifc_path: str = typer.Argument(..., help="Path to the IFC file")):
    """Product counts and property set coverage."""
    try:
        model_summary = analyze(ifc_path)
    except InputNotFoundError as e:
        _fail(str(e))
    _output({"ok": True, "summary": model_summary.model_dump(mode="json", by_alias=True)})


@app.command()
def version() -> None:
    """Show version."""
    typer.echo(f"ifc-qa v{__version__}")


if __name__ == "__main__":
    app()
