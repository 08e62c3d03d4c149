"""Machine config rendering for performance-sensitive node pools."""

from __future__ import annotations

from pathlib import Path

from perftune.components import get_component_name
from perftune.components.profile import get_machine_config_label
from perftune.models import (
    KERNEL_TYPE_DEFAULT,
    KERNEL_TYPE_REALTIME,
    KernelType,
    MachineConfig,
    PerformanceProfile,
)
from perftune.observability import StructuredLogger

from .assets import DEFAULT_ASSETS_DIR, load_script
from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .ignition import get_ignition_config
from .kernel import BASE_KERNEL_ARGS, get_kernel_args
from .systemd import serialize_unit_options


def new(
    assets_dir: str | Path,
    profile: PerformanceProfile,
    *,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
    logger: StructuredLogger | None = None,
) -> MachineConfig:
    """Return the machine config for a performance profile.

    Reads the two tuning scripts from ``assets_dir`` and nothing else; any
    asset or serialization error propagates and no machine config is produced.
    """
    name = get_component_name(profile.name, config.name_prefix)
    ignition = get_ignition_config(assets_dir, profile, config=config, logger=logger)
    kernel_arguments = get_kernel_args(profile.hugepages, profile.cpu.isolated)
    machine_config = MachineConfig(
        name=name,
        labels=get_machine_config_label(profile),
        config=ignition,
        kernel_arguments=tuple(kernel_arguments),
        kernel_type=get_kernel_type(profile),
    )
    if logger is not None:
        logger.log(
            operation="machine_config_complete",
            profile=profile.name,
            component="machineconfig",
            message="Rendered machine config.",
            extra={"name": name, "kernel_type": machine_config.kernel_type},
        )
    return machine_config


def get_kernel_type(profile: PerformanceProfile) -> KernelType:
    if profile.real_time_kernel_enabled:
        return KERNEL_TYPE_REALTIME
    return KERNEL_TYPE_DEFAULT


__all__ = [
    "BASE_KERNEL_ARGS",
    "DEFAULT_ASSETS_DIR",
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "get_ignition_config",
    "get_kernel_args",
    "get_kernel_type",
    "load_script",
    "new",
    "serialize_unit_options",
]
