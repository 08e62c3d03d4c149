"""Systemd unit options for the pre-boot tuning and reboot services.

Boot order on a tuned node is: apply the CPU affinity environment
(pre-boot-tuning), reboot so kernel-level changes take effect, and only then
start the workload scheduler. Units are modelled as ordered sequences of
``UnitOption`` triples rather than mappings so repeated keys (several
``Before=`` lines) survive and rendering is stable.
"""

from __future__ import annotations

from collections.abc import Iterable

from perftune.errors import SerializationError
from perftune.models import UnitOption

from .config import DEFAULT_RENDER_CONFIG, PRE_BOOT_TUNING, REBOOT, RenderConfig

SYSTEMD_SECTION_UNIT = "Unit"
SYSTEMD_SECTION_SERVICE = "Service"
SYSTEMD_SECTION_INSTALL = "Install"

SYSTEMD_DESCRIPTION = "Description"
SYSTEMD_WANTS = "Wants"
SYSTEMD_AFTER = "After"
SYSTEMD_BEFORE = "Before"
SYSTEMD_ENVIRONMENT = "Environment"
SYSTEMD_TYPE = "Type"
SYSTEMD_REMAIN_AFTER_EXIT = "RemainAfterExit"
SYSTEMD_EXEC_START = "ExecStart"
SYSTEMD_WANTED_BY = "WantedBy"

SYSTEMD_SERVICE_TYPE_ONESHOT = "oneshot"
SYSTEMD_TARGET_MULTI_USER = "multi-user.target"
SYSTEMD_TARGET_NETWORK_ONLINE = "network-online.target"
SYSTEMD_TRUE = "true"

ENVIRONMENT_NON_ISOLATED_CPUS = "NON_ISOLATED_CPUS"

PRE_BOOT_TUNING_DESCRIPTION = "Preboot tuning patch"
REBOOT_DESCRIPTION = "Reboot initiated by pre-boot-tuning"


def get_systemd_service(service_name: str) -> str:
    return f"{service_name}.service"


def get_systemd_environment(key: str, value: str) -> str:
    return f"{key}={value}"


def get_pre_boot_tuning_unit_options(
    non_isolated_cpus: str,
    *,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> list[UnitOption]:
    return [
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_DESCRIPTION, PRE_BOOT_TUNING_DESCRIPTION),
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_BEFORE, config.workload_service),
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_BEFORE, get_systemd_service(REBOOT)),
        UnitOption(
            SYSTEMD_SECTION_SERVICE,
            SYSTEMD_ENVIRONMENT,
            get_systemd_environment(ENVIRONMENT_NON_ISOLATED_CPUS, non_isolated_cpus),
        ),
        UnitOption(SYSTEMD_SECTION_SERVICE, SYSTEMD_TYPE, SYSTEMD_SERVICE_TYPE_ONESHOT),
        UnitOption(SYSTEMD_SECTION_SERVICE, SYSTEMD_REMAIN_AFTER_EXIT, SYSTEMD_TRUE),
        UnitOption(
            SYSTEMD_SECTION_SERVICE,
            SYSTEMD_EXEC_START,
            config.script_path(PRE_BOOT_TUNING),
        ),
        UnitOption(SYSTEMD_SECTION_INSTALL, SYSTEMD_WANTED_BY, SYSTEMD_TARGET_MULTI_USER),
    ]


def get_reboot_unit_options(*, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> list[UnitOption]:
    return [
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_DESCRIPTION, REBOOT_DESCRIPTION),
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_WANTS, SYSTEMD_TARGET_NETWORK_ONLINE),
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_AFTER, SYSTEMD_TARGET_NETWORK_ONLINE),
        UnitOption(SYSTEMD_SECTION_UNIT, SYSTEMD_BEFORE, config.workload_service),
        UnitOption(SYSTEMD_SECTION_SERVICE, SYSTEMD_TYPE, SYSTEMD_SERVICE_TYPE_ONESHOT),
        UnitOption(SYSTEMD_SECTION_SERVICE, SYSTEMD_REMAIN_AFTER_EXIT, SYSTEMD_TRUE),
        UnitOption(SYSTEMD_SECTION_SERVICE, SYSTEMD_EXEC_START, config.script_path(REBOOT)),
        UnitOption(SYSTEMD_SECTION_INSTALL, SYSTEMD_WANTED_BY, SYSTEMD_TARGET_MULTI_USER),
    ]


def serialize_unit_options(options: Iterable[UnitOption]) -> str:
    """Render options to unit-file text.

    Options are grouped under ``[Section]`` headers in first-seen section order;
    within a section, lines keep the order they were supplied in. Sections are
    separated by a single blank line.
    """
    grouped: dict[str, list[UnitOption]] = {}
    for option in options:
        _check_option(option)
        grouped.setdefault(option.section, []).append(option)

    blocks: list[str] = []
    for section, section_options in grouped.items():
        lines = [f"[{section}]"]
        lines.extend(f"{option.key}={option.value}" for option in section_options)
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def _check_option(option: UnitOption) -> None:
    """Reject options whose text would inject extra lines into the unit file."""
    if not option.section or not option.key:
        raise SerializationError(
            "Unit options require a non-empty section and key.",
            context={"section": option.section, "key": option.key},
        )
    for field_name in ("section", "key", "value"):
        text = getattr(option, field_name)
        if "\n" in text or "\r" in text:
            raise SerializationError(
                f"Unit option {field_name} must not contain line breaks.",
                hint="Line breaks would split the option across lines of the unit file.",
                context={"section": option.section, "key": option.key},
            )
