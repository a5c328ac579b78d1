"""
Command-line argument processing and validation for docfrag.

Raw CLI inputs are validated into a frozen ``ScanConfig`` so the command body
never deals with unchecked values.
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from ..events import FunctionMode
from .config import OutputFormat, ScanConfig


def _format_validation_errors(validation_error: ValidationError) -> str:
    """
    Format Pydantic validation errors into user-friendly CLI messages.

    Args:
        validation_error: The Pydantic ValidationError to format.

    Returns:
        A formatted string with bullet points for each error.
    """
    error_lines = []
    for error in validation_error.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        message = error["msg"]
        error_lines.append(f"  • {field}: {message}")

    return "\n".join(error_lines)


def _validate_paths(paths: list[Path]) -> tuple[Path, ...]:
    """
    Check that every path exists.

    Raises:
        typer.BadParameter: If a path does not exist.
    """
    missing = [str(p) for p in paths if not p.exists()]
    if missing:
        raise typer.BadParameter(f"Path does not exist: {', '.join(missing)}")
    return tuple(paths)


def create_scan_config(
    *,
    paths: list[Path],
    encoding: str,
    max_workers: int,
    as_json: bool,
    event_mode: FunctionMode | None,
    show_content: bool,
) -> ScanConfig:
    """
    Construct a validated ScanConfig from CLI arguments.

    Args:
        paths: Files or directories to scan.
        encoding: Text encoding of the source files.
        max_workers: Number of threads used to scan files.
        as_json: Print JSON instead of a table.
        event_mode: When set, print a fragment event of this mode.
        show_content: Include fragment content in table output.

    Returns:
        A fully validated and immutable ScanConfig instance.

    Raises:
        typer.BadParameter: If any validation fails.
    """
    validated_paths = _validate_paths(paths)
    output = OutputFormat.JSON if as_json or event_mode is not None else OutputFormat.TABLE

    try:
        return ScanConfig(
            paths=validated_paths,
            encoding=encoding.strip(),
            max_workers=max_workers,
            output=output,
            event_mode=event_mode,
            show_content=show_content,
        )
    except ValidationError as e:
        error_details = _format_validation_errors(e)
        raise typer.BadParameter(f"Invalid scan configuration:\n{error_details}") from e
