"""Fixed rendering constants and the overridable subset bundled as RenderConfig."""

from __future__ import annotations

from dataclasses import dataclass

from perftune.components import COMPONENT_NAME_PREFIX

DEFAULT_IGNITION_VERSION = "2.2.0"
DEFAULT_FILESYSTEM = "root"
DEFAULT_IGNITION_CONTENT_SOURCE = "data:text/plain;charset=utf-8;base64"
DEFAULT_SCRIPT_MODE = 0o700

BASH_SCRIPTS_DIR = "/usr/local/bin"
PRE_BOOT_TUNING = "pre-boot-tuning"
REBOOT = "reboot"
SCRIPT_NAMES: tuple[str, ...] = (PRE_BOOT_TUNING, REBOOT)

SYSTEMD_SERVICE_KUBELET = "kubelet.service"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Knobs passed from the caller to the renderer; defaults are the stock values."""

    ignition_version: str = DEFAULT_IGNITION_VERSION
    filesystem: str = DEFAULT_FILESYSTEM
    content_source: str = DEFAULT_IGNITION_CONTENT_SOURCE
    script_mode: int = DEFAULT_SCRIPT_MODE
    scripts_dir: str = BASH_SCRIPTS_DIR
    workload_service: str = SYSTEMD_SERVICE_KUBELET
    name_prefix: str = COMPONENT_NAME_PREFIX

    def script_path(self, script_name: str) -> str:
        return f"{self.scripts_dir}/{script_name}.sh"


DEFAULT_RENDER_CONFIG = RenderConfig()
