"""Shared fixtures for gqlbridge tests.

The bundled sample schema (schema/schema.graphql) models a social media
scheduling API and is loaded once per session. Focused cases build small
schemas from inline SDL with ``parse_schema``.
"""

from __future__ import annotations

import pytest
from graphql import GraphQLSchema

from gqlbridge.loader import load_schema


@pytest.fixture(scope="session")
def schema() -> GraphQLSchema:
    """The bundled sample schema."""
    return load_schema()
