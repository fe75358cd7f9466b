"""
Fixtures describing the exprguard layering.

The pure domain sits at the bottom, detection guards on top of it, the JSON
adapters above those and the click command line outermost.
"""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of the src/exprguard tree."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "exprguard")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """
    domain, guards, infrastructure and cli, innermost first.

    Module names are relative to the source root ('src.exprguard.guards').
    The schemas package sits outside the layering; infrastructure uses it.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.exprguard.domain"])
        .layer("guards")
        .containing_modules(["src.exprguard.guards"])
        .layer("infrastructure")
        .containing_modules(["src.exprguard.infrastructure"])
        .layer("cli")
        .containing_modules(["src.exprguard.cli"])
    )
