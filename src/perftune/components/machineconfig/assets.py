"""Loads the shell scripts embedded into the ignition document."""

from __future__ import annotations

from pathlib import Path

from perftune.errors import AssetError

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"


def script_asset_path(assets_dir: str | Path, script_name: str) -> Path:
    return Path(assets_dir) / "scripts" / f"{script_name}.sh"


def load_script(assets_dir: str | Path, script_name: str) -> bytes:
    """Read ``<assets_dir>/scripts/<script_name>.sh`` as raw bytes."""
    path = script_asset_path(assets_dir, script_name)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise AssetError(
            f"Unable to read script asset {script_name!r}.",
            hint="Point assets_dir at a directory containing scripts/<name>.sh.",
            context={"script": script_name, "path": str(path), "reason": exc.strerror or str(exc)},
        ) from exc
