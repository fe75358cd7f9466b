"""
exprguard command line.

Usage:
    exprguard check-resource snapshot.json --config guard.json
    exprguard check-resource snapshot.json -a host -a port
    exprguard check-operation write.json --config guard.json -v

Exit codes:
    0: compatible
    1: rejected (expressions found in watched attributes)
    2: invalid input or configuration
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import click

from exprguard.cli.console import (
    print_decision,
    print_error,
    print_failure,
    print_success,
    print_watch_set,
)
from exprguard.cli.logging_setup import setup_logging
from exprguard.domain.exceptions import (
    ConfigurationError,
    TransformationFailedError,
    UnsupportedValueError,
)
from exprguard.domain.models import EMPTY_ADDRESS, WRITE_ATTRIBUTE_OPERATION
from exprguard.guards.reject_expressions import RejectExpressionValuesGuard
from exprguard.infrastructure.context import (
    InMemoryTransformationContext,
    format_address,
)
from exprguard.infrastructure.loader import (
    load_guard_config,
    load_operation,
    load_resource,
)

logger = logging.getLogger("exprguard.cli")

EXIT_REJECTED = 1
EXIT_INVALID = 2

F = TypeVar("F", bound=Callable[..., Any])


def guard_options(func: F) -> F:
    """
    Decorator adding the guard and logging options to a click command.

    Options added:
        --config: Path to guard.json
        -a/--attribute: Watched attribute (repeatable)
        --log-file: Path to log file
        -v/--verbose: Enable verbose logging
    """

    @click.option(
        "--config",
        "config_path",
        default=None,
        type=click.Path(exists=True, dir_okay=False),
        help="Path to guard.json listing the watched attributes",
    )
    @click.option(
        "-a",
        "--attribute",
        "attributes",
        multiple=True,
        help="Watched attribute name (repeatable)",
    )
    @click.option(
        "--log-file",
        default=None,
        type=click.Path(),
        help="Path to log file",
    )
    @click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose (DEBUG) logging to console",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _build_guard(
    config_path: str | None, attributes: tuple[str, ...]
) -> RejectExpressionValuesGuard:
    if config_path and attributes:
        raise click.UsageError("Use either --config or --attribute, not both")
    if config_path:
        return load_guard_config(Path(config_path))
    if attributes:
        return RejectExpressionValuesGuard(attributes)
    raise click.UsageError("Provide --config or at least one --attribute")


@click.group()
@click.version_option(package_name="exprguard")
def cli() -> None:
    """Reject unresolved ${...} expressions in watched configuration attributes."""


@cli.command("check-resource")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@guard_options
def check_resource(
    snapshot: str,
    config_path: str | None,
    attributes: tuple[str, ...],
    log_file: str | None,
    verbose: bool,
) -> None:
    """Validate a whole resource snapshot, failing with every offending attribute."""
    setup_logging("exprguard", log_file=log_file, verbose=verbose)
    try:
        guard = _build_guard(config_path, attributes)
        resource = load_resource(Path(snapshot))
    except ConfigurationError as e:
        print_error(str(e), hint="Check the file against the exprguard schemas")
        sys.exit(EXIT_INVALID)

    if verbose:
        print_watch_set(guard.attribute_names)

    context = InMemoryTransformationContext()
    try:
        guard.transform_resource(context, EMPTY_ADDRESS, resource)
    except UnsupportedValueError as e:
        logger.info("Resource %s rejected", snapshot)
        print_failure(str(e), details=f"Snapshot: {snapshot}")
        sys.exit(EXIT_REJECTED)

    print_success(f"{snapshot}: no expressions in watched attributes")


@cli.command("check-operation")
@click.argument("operation_file", type=click.Path(exists=True, dir_okay=False))
@guard_options
def check_operation(
    operation_file: str,
    config_path: str | None,
    attributes: tuple[str, ...],
    log_file: str | None,
    verbose: bool,
) -> None:
    """Attach a rejection decision to an operation request."""
    setup_logging("exprguard", log_file=log_file, verbose=verbose)
    try:
        guard = _build_guard(config_path, attributes)
        operation = load_operation(Path(operation_file))
    except ConfigurationError as e:
        print_error(str(e), hint="Check the file against the exprguard schemas")
        sys.exit(EXIT_INVALID)

    if verbose:
        print_watch_set(guard.attribute_names)

    if operation.name == WRITE_ATTRIBUTE_OPERATION:
        transformer = guard.write_attribute_transformer
    else:
        transformer = guard
    try:
        transformed = transformer.transform_operation(
            None, operation.address, operation
        )
    except TransformationFailedError as e:
        print_error(str(e))
        sys.exit(EXIT_INVALID)

    print_decision(format_address(operation.address), transformed)
    if transformed.reject_operation():
        print_failure(transformed.failure_description or "Operation rejected")
        sys.exit(EXIT_REJECTED)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
