"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from perftune.models import CPU, HugePage, HugePages, PerformanceProfile, RealTimeKernel

PRE_BOOT_TUNING_SCRIPT = b"#!/usr/bin/env bash\necho tuning \"${NON_ISOLATED_CPUS}\"\n"
REBOOT_SCRIPT = b"#!/usr/bin/env bash\nsystemctl reboot\n"


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Provide an asset directory holding both tuning scripts."""
    root = tmp_path / "assets"
    scripts = root / "scripts"
    scripts.mkdir(parents=True)
    (scripts / "pre-boot-tuning.sh").write_bytes(PRE_BOOT_TUNING_SCRIPT)
    (scripts / "reboot.sh").write_bytes(REBOOT_SCRIPT)
    return root


@pytest.fixture
def profile() -> PerformanceProfile:
    return PerformanceProfile(
        name="manual",
        cpu=CPU(isolated="2-3", non_isolated="0-1"),
        hugepages=HugePages(pages=(HugePage(size="1G", count=4),)),
        real_time_kernel=RealTimeKernel(enabled=True),
        node_selector={"node-role.kubernetes.io/worker-rt": ""},
    )
