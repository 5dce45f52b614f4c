"""Unit tests for the command-line interface."""

import json
import textwrap

import pytest
from click.testing import CliRunner

from schemacraft.cli import cli, load_target
from schemacraft.core.exceptions import DuplicatePrimaryKeyError, SchemaLoadError
from schemacraft.domain.entities.collection import Collection
from schemacraft.domain.services.builder import Builder

SCHEMA_MODULE = textwrap.dedent(
    """
    from schemacraft import Builder

    builder = Builder(strict_primary_key=False)

    articles = builder.collection("articles").sort("sort")
    articles.primary_key("id", "uuid")
    articles.string("title").notNullable()
    articles.integer("sort")
    articles.file("attachment")

    broken = Builder(strict_primary_key=False)
    broken.collection("pages").sort("missing")


    def build():
        return builder


    not_a_schema = 42
    """
)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema_defs.py"
    path.write_text(SCHEMA_MODULE)
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestLoadTarget:

    def test_builder_attribute(self, schema_file):
        assert isinstance(load_target(f"{schema_file}:builder"), Builder)

    def test_default_attribute_is_builder(self, schema_file):
        assert isinstance(load_target(str(schema_file)), Builder)

    def test_callable_attribute(self, schema_file):
        assert isinstance(load_target(f"{schema_file}:build"), Builder)

    def test_collection_attribute(self, schema_file):
        assert isinstance(load_target(f"{schema_file}:articles"), Collection)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="not found"):
            load_target(f"{tmp_path / 'missing.py'}:builder")

    def test_missing_module(self):
        with pytest.raises(SchemaLoadError, match="Cannot import"):
            load_target("schemacraft_no_such_module:builder")

    def test_missing_attribute(self, schema_file):
        with pytest.raises(SchemaLoadError, match="has no attribute"):
            load_target(f"{schema_file}:nothing")

    def test_wrong_type(self, schema_file):
        with pytest.raises(SchemaLoadError, match="must be a Builder"):
            load_target(f"{schema_file}:not_a_schema")


class TestRenderCommand:

    def test_render_builder_to_stdout(self, runner, schema_file):
        result = runner.invoke(cli, ["render", f"{schema_file}:builder"])

        assert result.exit_code == 0, result.output
        document = json.loads(result.stdout)
        assert [c["collection"] for c in document["collections"]] == ["articles"]
        assert [f["field"] for f in document["collections"][0]["fields"]] == [
            "id",
            "title",
            "sort",
            "attachment",
        ]
        assert document["relations"][0]["related_collection"] == "directus_files"

    def test_render_collection(self, runner, schema_file):
        result = runner.invoke(cli, ["render", f"{schema_file}:articles", "--indent", "0"])

        assert result.exit_code == 0, result.output
        document = json.loads(result.stdout)
        assert document["collection"] == "articles"
        assert document["meta"] == {"sort_field": "sort"}

    def test_render_to_file(self, runner, schema_file, tmp_path):
        output = tmp_path / "schema.json"

        result = runner.invoke(cli, ["render", f"{schema_file}:builder", "-o", str(output)])

        assert result.exit_code == 0, result.output
        document = json.loads(output.read_text())
        assert document["collections"][0]["fields"][0]["schema"]["primary_key"] is True

    def test_render_bad_target(self, runner, schema_file):
        result = runner.invoke(cli, ["render", f"{schema_file}:not_a_schema"])

        assert result.exit_code == 1
        assert "must be a Builder" in result.output


class TestCheckCommand:

    def test_check_passes(self, runner, schema_file):
        result = runner.invoke(cli, ["check", f"{schema_file}:builder"])

        assert result.exit_code == 0
        assert "OK" in result.output

    def test_check_reports_errors(self, runner, schema_file):
        result = runner.invoke(cli, ["check", f"{schema_file}:broken"])

        assert result.exit_code == 1
        assert "pages.meta.sort_field" in result.output
        assert "sort_field_unknown" in result.output


DATACLASS_MODULE = textwrap.dedent(
    """
    from __future__ import annotations

    from dataclasses import dataclass

    from schemacraft import Builder


    @dataclass
    class Options:
        length: int = 120


    builder = Builder(strict_primary_key=False)
    builder.collection("notes").string("body", Options().length)
    """
)

FAILING_MODULE = textwrap.dedent(
    """
    from schemacraft import Builder

    builder = Builder(strict_primary_key=True)
    notes = builder.collection("notes")
    notes.primary_key("id", "integer")
    notes.primary_key("uid", "uuid")
    """
)


class TestLoadTargetModuleExecution:

    def test_file_with_dataclass(self, tmp_path):
        path = tmp_path / "dataclass_defs.py"
        path.write_text(DATACLASS_MODULE)

        builder = load_target(f"{path}:builder")

        assert builder.get_collection("notes").find_field("body").schema == {"max_length": 120}

    def test_render_file_with_dataclass(self, runner, tmp_path):
        path = tmp_path / "dataclass_defs.py"
        path.write_text(DATACLASS_MODULE)

        result = runner.invoke(cli, ["render", f"{path}:builder"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["collections"][0]["collection"] == "notes"

    def test_error_in_file_becomes_load_error(self, tmp_path):
        path = tmp_path / "failing_defs.py"
        path.write_text(FAILING_MODULE)

        with pytest.raises(SchemaLoadError, match="Error while loading") as exc_info:
            load_target(f"{path}:builder")

        assert isinstance(exc_info.value.__cause__, DuplicatePrimaryKeyError)

    def test_render_file_that_raises(self, runner, tmp_path):
        path = tmp_path / "failing_defs.py"
        path.write_text(FAILING_MODULE)

        result = runner.invoke(cli, ["render", f"{path}:builder"])

        assert result.exit_code == 1
        assert "Error while loading" in result.output
        assert "already has primary key 'id'" in result.output

    def test_error_in_callable_becomes_load_error(self, tmp_path):
        path = tmp_path / "callable_defs.py"
        path.write_text("def build():\n    raise RuntimeError('boom')\n")

        with pytest.raises(SchemaLoadError, match="boom"):
            load_target(f"{path}:build")
