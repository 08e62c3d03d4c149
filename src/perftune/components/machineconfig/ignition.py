"""Assembles the ignition document carrying tuning scripts and their units."""

from __future__ import annotations

import base64
import binascii
from pathlib import Path

from perftune.errors import ValidationError
from perftune.models import IgnitionConfig, IgnitionFile, IgnitionUnit, PerformanceProfile
from perftune.observability import StructuredLogger

from .assets import load_script
from .config import DEFAULT_RENDER_CONFIG, PRE_BOOT_TUNING, REBOOT, SCRIPT_NAMES, RenderConfig
from .systemd import (
    get_pre_boot_tuning_unit_options,
    get_reboot_unit_options,
    get_systemd_service,
    serialize_unit_options,
)


def encode_content_source(content: bytes, *, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    encoded = base64.standard_b64encode(content).decode("ascii")
    return f"{config.content_source},{encoded}"


def decode_content_source(source: str) -> bytes:
    """Inverse of ``encode_content_source`` for any base64 data URI."""
    _, sep, payload = source.partition(",")
    if not sep:
        raise ValidationError("Content source is not a data URI.", context={"source": source})
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValidationError(
            "Content source payload is not valid base64.",
            hint=str(exc),
            context={"source": source},
        ) from exc


def get_ignition_config(
    assets_dir: str | Path,
    profile: PerformanceProfile,
    *,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
    logger: StructuredLogger | None = None,
) -> IgnitionConfig:
    files: list[IgnitionFile] = []
    for script in SCRIPT_NAMES:
        content = load_script(assets_dir, script)
        if logger is not None:
            logger.log(
                operation="load_script",
                profile=profile.name,
                component="ignition",
                message="Loaded script asset.",
                extra={"script": script, "bytes": len(content)},
            )
        files.append(
            IgnitionFile(
                path=config.script_path(script),
                filesystem=config.filesystem,
                source=encode_content_source(content, config=config),
                mode=config.script_mode,
            )
        )

    # Admission guarantees nonIsolated; an absent value renders empty.
    non_isolated_cpus = profile.cpu.non_isolated or ""
    pre_boot_tuning_service = serialize_unit_options(
        get_pre_boot_tuning_unit_options(non_isolated_cpus, config=config)
    )
    reboot_service = serialize_unit_options(get_reboot_unit_options(config=config))
    if logger is not None:
        for name in (PRE_BOOT_TUNING, REBOOT):
            logger.log(
                operation="render_unit",
                profile=profile.name,
                component="ignition",
                message="Rendered systemd unit.",
                extra={"unit": get_systemd_service(name)},
            )

    units = (
        IgnitionUnit(name=get_systemd_service(PRE_BOOT_TUNING), contents=pre_boot_tuning_service),
        IgnitionUnit(name=get_systemd_service(REBOOT), contents=reboot_service),
    )
    ignition = IgnitionConfig(version=config.ignition_version, files=tuple(files), units=units)
    if logger is not None:
        logger.log(
            operation="build_ignition",
            profile=profile.name,
            component="ignition",
            message="Assembled ignition config.",
            extra={"files": len(ignition.files), "units": len(ignition.units)},
        )
    return ignition
