# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

Provides the paths of the bundled .tro artifacts and a builder for small
in-memory VisualTopo documents.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

# =============================================================================
# Path Constants
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"

# =============================================================================
# Document Building Blocks
# =============================================================================

PREAMBLE = "Version 5.11\nVerification 1\n\n"

DEFAULT_HEADER = (
    "Trou Test Cave,700.0,200.0,150.0,UTM31\n"
    "Club Test Club\n"
    "Couleur 10,20,30\n"
)

SET_HEADER = "Param Deca Degd Clino Degd 0.0000 Dir,Dir,Dir Arr 255,0,0 01/01/2020 A"

DATA_LINE = "A1 A2 10.00 120.00 -5.00 * * * * N I * N"


def build_tro(
    header: str = DEFAULT_HEADER,
    sets: list[tuple[str, list[str]]] | None = None,
    trailer: str = "",
) -> str:
    """Build a VisualTopo document.

    Args:
        header: Header block lines, each terminated by a newline
        sets: (set header line, data lines) pairs
        trailer: Text appended after the last set

    Returns:
        The document text
    """
    text = PREAMBLE + header + "\n"
    for set_header, data_lines in sets or []:
        text += set_header + "\n\n"
        text += "".join(f"{line}\n" for line in data_lines)
        text += "\n"
    return text + trailer


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def artifacts_dir() -> Path:
    """Return path to test artifacts directory."""
    return ARTIFACTS_DIR


@pytest.fixture
def sample_tro_path() -> Path:
    """Return path of the decimal degrees sample file."""
    return ARTIFACTS_DIR / "sample.tro"


@pytest.fixture
def sexagesimal_tro_path() -> Path:
    """Return path of the sexagesimal sample file."""
    return ARTIFACTS_DIR / "sexagesimal.tro"


@pytest.fixture
def make_tro() -> Callable[..., str]:
    """Return the document builder."""
    return build_tro


@pytest.fixture
def set_header() -> str:
    return SET_HEADER


@pytest.fixture
def data_line() -> str:
    return DATA_LINE
