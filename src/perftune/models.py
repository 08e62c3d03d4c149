"""Core typed dataclasses for performance profiles and rendered machine configs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

# CPU lists such as "0-1,4" are carried verbatim and never parsed here.
CPUSet = str
HugePageSize = str
KernelType = Literal["default", "realtime"]

KERNEL_TYPE_DEFAULT: KernelType = "default"
KERNEL_TYPE_REALTIME: KernelType = "realtime"


@dataclass(frozen=True, slots=True)
class CPU:
    isolated: CPUSet | None = None
    non_isolated: CPUSet | None = None


@dataclass(frozen=True, slots=True)
class HugePage:
    size: HugePageSize
    count: int


@dataclass(frozen=True, slots=True)
class HugePages:
    default_hugepages_size: HugePageSize | None = None
    pages: tuple[HugePage, ...] = ()


@dataclass(frozen=True, slots=True)
class RealTimeKernel:
    enabled: bool | None = None


@dataclass(frozen=True, slots=True)
class PerformanceProfile:
    """Read-only view of a PerformanceProfile custom resource."""

    name: str
    cpu: CPU = field(default_factory=CPU)
    hugepages: HugePages | None = None
    real_time_kernel: RealTimeKernel | None = None
    node_selector: Mapping[str, str] = field(default_factory=dict)
    machine_config_label: Mapping[str, str] | None = None
    machine_config_pool_selector: Mapping[str, str] | None = None

    @property
    def real_time_kernel_enabled(self) -> bool:
        """True only when the flag is present and explicitly set."""
        return (
            self.real_time_kernel is not None
            and self.real_time_kernel.enabled is not None
            and self.real_time_kernel.enabled
        )


@dataclass(frozen=True, slots=True)
class UnitOption:
    section: str
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class IgnitionFile:
    path: str
    filesystem: str
    source: str
    mode: int


@dataclass(frozen=True, slots=True)
class IgnitionUnit:
    name: str
    contents: str
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class IgnitionConfig:
    version: str
    files: tuple[IgnitionFile, ...] = ()
    units: tuple[IgnitionUnit, ...] = ()


@dataclass(frozen=True, slots=True)
class MachineConfig:
    name: str
    config: IgnitionConfig
    labels: Mapping[str, str] = field(default_factory=dict)
    kernel_arguments: tuple[str, ...] = ()
    kernel_type: KernelType = KERNEL_TYPE_DEFAULT


__all__ = [
    "CPU",
    "CPUSet",
    "HugePage",
    "HugePageSize",
    "HugePages",
    "IgnitionConfig",
    "IgnitionFile",
    "IgnitionUnit",
    "KERNEL_TYPE_DEFAULT",
    "KERNEL_TYPE_REALTIME",
    "KernelType",
    "MachineConfig",
    "PerformanceProfile",
    "RealTimeKernel",
    "UnitOption",
]
