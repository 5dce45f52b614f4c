import json

from schemacraft.core.config import Settings
from schemacraft.core.logging import configure_logging, get_logger


def test_json_logging_to_stderr(capsys):
    configure_logging(Settings(environment="production", log_format="json", log_level="INFO"))

    get_logger("schemacraft.test").info("Schema written", collections=2)

    captured = capsys.readouterr()
    assert captured.out == ""
    entry = json.loads(captured.err.strip().splitlines()[-1])
    assert entry["message"] == "Schema written"
    assert entry["collections"] == 2
    assert entry["level"] == "info"


def test_level_filtering(capsys):
    configure_logging(Settings(environment="production", log_format="json", log_level="WARNING"))

    get_logger().info("hidden")
    get_logger().warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_logger_name_is_kept(capsys):
    configure_logging(Settings(environment="production", log_format="json", log_level="INFO"))

    get_logger("schemacraft.cli").info("named")
    get_logger().info("unnamed")

    lines = capsys.readouterr().err.strip().splitlines()
    assert json.loads(lines[-2])["logger"] == "schemacraft.cli"
    assert json.loads(lines[-1])["logger"] == "schemacraft"
