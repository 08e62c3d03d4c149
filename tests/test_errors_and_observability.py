import json
from pathlib import Path

from perftune.errors import (
    AssetError,
    ErrorCode,
    ManifestError,
    SerializationError,
    ValidationError,
)
from perftune.observability import StructuredLogger


def test_error_codes_are_stable_and_machine_readable() -> None:
    errors = [
        ValidationError("bad input"),
        AssetError("missing script"),
        SerializationError("bad option"),
        ManifestError("bad file"),
    ]
    assert [error.code for error in errors] == [
        ErrorCode.VALIDATION.value,
        ErrorCode.ASSET.value,
        ErrorCode.SERIALIZATION.value,
        ErrorCode.MANIFEST.value,
    ]


def test_error_string_and_payload_include_hint_and_context() -> None:
    error = AssetError(
        "Unable to read script asset 'reboot'.",
        hint="Check the asset directory.",
        context={"path": "/assets/scripts/reboot.sh", "empty": ""},
    )

    text = str(error)
    assert "Hint: Check the asset directory." in text
    assert "path: /assets/scripts/reboot.sh" in text
    assert "empty" not in text
    assert error.to_dict() == {
        "code": "E_ASSET",
        "message": text,
        "context": {"path": "/assets/scripts/reboot.sh", "empty": ""},
        "hint": "Check the asset directory.",
    }


def test_logger_filters_by_profile_and_writes_json_lines(tmp_path: Path) -> None:
    logger = StructuredLogger()
    logger.log(operation="load_script", profile="a", component="ignition", message="one")
    logger.log(
        operation="build_ignition",
        profile="b",
        component="ignition",
        message="two",
        extra={"files": 2},
    )

    assert [r["message"] for r in logger.records_for_profile("a")] == ["one"]

    path = logger.to_json_lines(tmp_path / "logs" / "render.jsonl")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["operation"] for line in lines] == ["load_script", "build_ignition"]
    assert json.loads(lines[1])["extra"] == {"files": 2}
