import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, TextIO

import typer
from pydantic import ValidationError

from signedword.i256.eval import I256Op, OpRecord, OpResult, eval_record

app = typer.Typer(help="Evaluate checked 256-bit signed integer operations.")
logger = logging.getLogger(__name__)


class _RowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _parse_operand(value: str | None, name: str) -> int | None:
    """Parse a decimal or 0x-prefixed signed int. Raises typer.BadParameter."""
    if value is None:
        return None
    text = value.strip().replace("_", "")
    negative = text.startswith("-")
    digits = text[1:] if text[:1] in ("+", "-") else text
    try:
        base = 10
        if digits.lower().startswith("0x"):
            digits, base = digits[2:], 16
        # One leading sign at most, and none after the 0x prefix.
        if not digits[:1].isalnum():
            raise ValueError(f"unexpected character in {digits!r}")
        parsed = int(digits, base)
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid {name} '{value}': expected a decimal or 0x hex integer"
        ) from err
    return -parsed if negative else parsed


def _iter_validated_records(input_file: Path) -> Iterator[OpRecord]:
    with input_file.open("r", encoding="utf-8") as input_handle:
        for line_number, line in enumerate(input_handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                yield OpRecord.model_validate_json(stripped)
            except ValidationError as err:
                first_error = err.errors(include_url=False)[0]
                if first_error["type"] == "json_invalid":
                    raise _RowError(
                        line_number=line_number,
                        reason=f"malformed JSON ({first_error['msg']})",
                    ) from err
                loc = ".".join(str(item) for item in first_error["loc"])
                message = first_error["msg"]
                raise _RowError(
                    line_number=line_number,
                    reason=f"invalid record at '{loc or '<root>'}': {message}",
                ) from err


def _render_row_error(input_file: Path, error: _RowError) -> str:
    return (
        f"Error: invalid JSONL row in {input_file} at line "
        f"{error.line_number}: {error.reason}"
    )


def _safe_unlink(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return


@contextmanager
def _atomic_output(output: Path) -> Iterator[TextIO]:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output.name}.",
        suffix=".tmp",
        dir=output.parent,
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            yield handle
        os.replace(tmp, output)
    except Exception:
        _safe_unlink(tmp)
        raise


def _write_result_line(handle: TextIO, result: OpResult) -> None:
    handle.write(result.model_dump_json())
    handle.write("\n")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


# Negative operands such as -3 would otherwise parse as options.
@app.command("eval", context_settings={"ignore_unknown_options": True})
def eval_command(
    op: Annotated[I256Op, typer.Argument(help="Operation name")],
    lhs: Annotated[
        str, typer.Argument(help="Left operand, e.g. 5, -3 or 0x1f")
    ],
    rhs: Annotated[
        str | None,
        typer.Argument(help="Right operand or shift amount"),
    ] = None,
) -> None:
    """Evaluate a single operation and print the result as JSON."""
    raw = {
        "op": op,
        "lhs": _parse_operand(lhs, "lhs"),
        "rhs": _parse_operand(rhs, "rhs"),
    }
    try:
        record = OpRecord.model_validate(raw)
    except ValidationError as err:
        message = err.errors(include_url=False)[0]["msg"]
        typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(1) from err

    result = eval_record(record)
    typer.echo(result.model_dump_json())
    if result.error is not None:
        raise typer.Exit(1)


@app.command()
def batch(
    input_file: Annotated[Path, typer.Argument(help="Input JSONL file")],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output JSONL file")
    ],
) -> None:
    """Evaluate every record of a JSONL file."""
    total = 0
    failed = 0
    try:
        with _atomic_output(output) as handle:
            for record in _iter_validated_records(input_file):
                result = eval_record(record)
                total += 1
                if result.error is not None:
                    failed += 1
                _write_result_line(handle, result)
    except _RowError as err:
        typer.echo(_render_row_error(input_file, err), err=True)
        raise typer.Exit(1) from err

    logger.debug("evaluated %d records from %s", total, input_file)
    typer.echo(f"Evaluated: {total}, Failed: {failed}")
