"""Tests for the schema presenter."""

from io import StringIO

import pytest
from rich.console import Console

from params_deserializer import ParamsDeserializer
from params_deserializer.cli.presenters.schema import SchemaPresenter
from tests.fixtures.deserializers import CamelUserDeserializer, UserDeserializer


def _render(deserializer_cls) -> str:
    console = Console(file=StringIO(), width=120)
    SchemaPresenter(console=console).present(deserializer_cls)
    return console.file.getvalue()


@pytest.mark.unit
def test_presenter_lists_attributes():
    output = _render(UserDeserializer)
    assert "UserDeserializer schema" in output
    assert "full_name" in output
    assert "has_many" in output
    assert "each: AddressDeserializer" in output
    assert "Root key: user (discarded)" in output
    assert "Key format" not in output


@pytest.mark.unit
def test_presenter_shows_inherited_key_format():
    output = _render(CamelUserDeserializer)
    assert "Key format: lower_camel" in output


@pytest.mark.unit
def test_presenter_empty_deserializer():
    output = _render(ParamsDeserializer)
    assert "ParamsDeserializer schema" in output
    assert "Root key" not in output
