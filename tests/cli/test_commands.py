"""Tests for the pdz CLI commands."""

import json

import pytest

from params_deserializer.cli.main import app

USER_TARGET = "tests.fixtures.deserializers:UserDeserializer"


@pytest.mark.unit
class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "pdz" in result.output


@pytest.mark.unit
class TestGenerate:
    def test_creates_file(self, runner, tmp_path):
        result = runner.invoke(app, ["generate", "LineItem", "--dir", str(tmp_path)])
        assert result.exit_code == 0
        path = tmp_path / "line_item_deserializer.py"
        assert "class LineItemDeserializer(ParamsDeserializer):" in path.read_text()

    def test_uses_configured_directory(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["generate", "user"], env={"PD_DESERIALIZERS_DIR": "app/des"})
        assert result.exit_code == 0
        assert (tmp_path / "app" / "des" / "user_deserializer.py").exists()

    def test_existing_file_fails_without_force(self, runner, tmp_path):
        runner.invoke(app, ["generate", "user", "--dir", str(tmp_path)])
        result = runner.invoke(app, ["generate", "user", "--dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "already" in result.output

        result = runner.invoke(app, ["generate", "user", "--dir", str(tmp_path), "--force"])
        assert result.exit_code == 0

    def test_skip(self, runner, tmp_path):
        result = runner.invoke(app, ["generate", "user", "--dir", str(tmp_path), "--skip"])
        assert result.exit_code == 0
        assert not (tmp_path / "user_deserializer.py").exists()

    def test_invalid_resource(self, runner, tmp_path):
        result = runner.invoke(app, ["generate", "2fast", "--dir", str(tmp_path)])
        assert result.exit_code == 1


@pytest.mark.unit
class TestDeserialize:
    def test_from_file(self, runner, tmp_path, user_params):
        params_file = tmp_path / "params.json"
        params_file.write_text(json.dumps(user_params))

        result = runner.invoke(app, ["deserialize", USER_TARGET, str(params_file)])
        assert result.exit_code == 0, result.output
        output = json.loads(result.output)
        assert output["full_name"] == "Ada Lovelace"
        assert output["addresses"][1] == {"street": "2 High St", "city": "Leeds", "postal_code": "LS1"}

    def test_from_stdin(self, runner):
        result = runner.invoke(
            app, ["deserialize", USER_TARGET], input='{"user": {"id": 1, "admin": true}}'
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"id": 1}

    def test_show_schema(self, runner):
        result = runner.invoke(app, ["deserialize", USER_TARGET, "--show-schema"], input="{}")
        assert result.exit_code == 0, result.output
        assert "UserDeserializer schema" in result.output
        assert "full_name" in result.output
        assert "Root key: user (discarded)" in result.output

    def test_type_mismatch_exits_with_error(self, runner):
        result = runner.invoke(app, ["deserialize", USER_TARGET], input='{"user": "oops"}')
        assert result.exit_code == 1
        assert "must be a mapping" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(app, ["deserialize", USER_TARGET], input="{not json")
        assert result.exit_code == 1
        assert "Cannot read params" in result.output

    @pytest.mark.parametrize(
        "target",
        [
            "tests.fixtures.deserializers",
            "tests.fixtures.deserializers:Missing",
            "tests.fixtures.deserializers:pytest",
            "tests.fixtures.no_such_module:UserDeserializer",
        ],
    )
    def test_bad_target(self, runner, target):
        result = runner.invoke(app, ["deserialize", target], input="{}")
        assert result.exit_code == 2


@pytest.mark.unit
class TestConfigCommands:
    def test_validate_clean(self, runner):
        result = runner.invoke(app, ["config", "validate"])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_validate_reports_errors(self, runner):
        result = runner.invoke(app, ["config", "validate"], env={"LOG_LEVEL": "LOUD"})
        assert result.exit_code == 1
        assert "LOG_LEVEL" in result.output

    def test_show(self, runner):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "PD_DESERIALIZERS_DIR" in result.output
