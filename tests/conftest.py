"""Shared test fixtures for the adfify test suite."""

from __future__ import annotations

import pytest

from adfify.api import ADFConverter
from adfify.config import AdfifyConfig
from adfify.converter.adf_to_md import ADFToMarkdownRenderer
from adfify.converter.md_to_adf import MarkdownToADFConverter


@pytest.fixture
def config() -> AdfifyConfig:
    """Default test configuration."""
    return AdfifyConfig()


@pytest.fixture
def converter(config: AdfifyConfig) -> MarkdownToADFConverter:
    """Markdown-to-ADF converter using the default test config."""
    return MarkdownToADFConverter(config)


@pytest.fixture
def renderer() -> ADFToMarkdownRenderer:
    """ADF-to-Markdown renderer."""
    return ADFToMarkdownRenderer()


@pytest.fixture
def adf(config: AdfifyConfig) -> ADFConverter:
    """Facade converter using the default test config."""
    return ADFConverter(config)
