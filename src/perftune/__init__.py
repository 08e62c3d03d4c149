"""Public package entrypoint for the performance profile renderer."""

from .components.machineconfig import DEFAULT_ASSETS_DIR, RenderConfig, new
from .errors import (
    AssetError,
    ManifestError,
    PerfTuneError,
    SerializationError,
    ValidationError,
)
from .manifest import (
    machine_config_to_dict,
    parse_profile,
    read_profile,
    serialize_machine_config,
    write_machine_config,
)
from .models import (
    CPU,
    HugePage,
    HugePages,
    IgnitionConfig,
    IgnitionFile,
    IgnitionUnit,
    MachineConfig,
    PerformanceProfile,
    RealTimeKernel,
    UnitOption,
)
from .observability import StructuredLogger

__all__ = [
    "AssetError",
    "CPU",
    "DEFAULT_ASSETS_DIR",
    "HugePage",
    "HugePages",
    "IgnitionConfig",
    "IgnitionFile",
    "IgnitionUnit",
    "MachineConfig",
    "ManifestError",
    "PerfTuneError",
    "PerformanceProfile",
    "RealTimeKernel",
    "RenderConfig",
    "SerializationError",
    "StructuredLogger",
    "UnitOption",
    "ValidationError",
    "machine_config_to_dict",
    "new",
    "parse_profile",
    "read_profile",
    "serialize_machine_config",
    "write_machine_config",
]
