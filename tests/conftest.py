"""Pytest configuration and shared fixtures for the notion2html test suite."""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import make_block, make_page

from notion2html.ast.nodes import Page

# Hypothesis profiles; select with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary directory for output files."""
    yield tmp_path


@pytest.fixture
def simple_page() -> Page:
    """A page with a header, a paragraph and a divider."""
    return make_page(
        [
            make_block("h1", "header", "Intro"),
            make_block("p1", "text", "Hello world"),
            make_block("d1", "divider"),
        ]
    )


@pytest.fixture
def no_katex(monkeypatch):
    """Make sure no katex binary is found on PATH."""
    monkeypatch.setattr("notion2html.utils.katex.shutil.which", lambda name: None)
