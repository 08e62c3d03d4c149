"""Kernel command-line assembly for performance-tuned nodes."""

from __future__ import annotations

from perftune.models import CPUSet, HugePages

# Always emitted first and in this order; rendered configs are diffed by content.
BASE_KERNEL_ARGS: tuple[str, ...] = (
    "nohz=on",
    "nosoftlockup",
    "nmi_watchdog=0",
    "audit=0",
    "mce=off",
    "irqaffinity=0",
    "skew_tick=1",
    "processor.max_cstate=1",
    "idle=poll",
    "intel_pstate=disable",
    "intel_idle.max_cstate=0",
    "intel_iommu=on",
    "iommu=pt",
)


def get_kernel_args(hugepages: HugePages | None, isolated_cpus: CPUSet | None) -> list[str]:
    kargs = list(BASE_KERNEL_ARGS)

    if isolated_cpus is not None:
        kargs.append(f"isolcpus={isolated_cpus}")

    if hugepages is not None:
        if hugepages.default_hugepages_size is not None:
            kargs.append(f"default_hugepagesz={hugepages.default_hugepages_size}")
        for page in hugepages.pages:
            kargs.append(f"hugepagesz={page.size}")
            kargs.append(f"hugepages={page.count}")

    return kargs
