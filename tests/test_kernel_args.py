from perftune.components.machineconfig.kernel import BASE_KERNEL_ARGS, get_kernel_args
from perftune.models import HugePage, HugePages


def test_base_arguments_only_when_nothing_optional_is_set() -> None:
    assert get_kernel_args(None, None) == list(BASE_KERNEL_ARGS)
    assert len(BASE_KERNEL_ARGS) == 13


def test_base_arguments_are_fixed_and_first() -> None:
    kargs = get_kernel_args(
        HugePages(default_hugepages_size="1G", pages=(HugePage(size="2M", count=128),)),
        "4-7",
    )

    assert kargs[: len(BASE_KERNEL_ARGS)] == [
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
    ]


def test_isolcpus_only_when_isolated_cpus_set() -> None:
    assert not any(arg.startswith("isolcpus=") for arg in get_kernel_args(None, None))
    assert get_kernel_args(None, "2-3")[-1] == "isolcpus=2-3"


def test_default_hugepage_size_only_when_set() -> None:
    without_default = get_kernel_args(HugePages(pages=(HugePage(size="1G", count=1),)), None)
    with_default = get_kernel_args(HugePages(default_hugepages_size="1G"), None)

    assert not any(arg.startswith("default_hugepagesz=") for arg in without_default)
    assert with_default[len(BASE_KERNEL_ARGS):] == ["default_hugepagesz=1G"]


def test_each_page_contributes_size_then_count_in_input_order() -> None:
    hugepages = HugePages(
        default_hugepages_size="2M",
        pages=(HugePage(size="1G", count=4), HugePage(size="2M", count=256)),
    )

    kargs = get_kernel_args(hugepages, "1,3-5")

    assert kargs[len(BASE_KERNEL_ARGS):] == [
        "isolcpus=1,3-5",
        "default_hugepagesz=2M",
        "hugepagesz=1G",
        "hugepages=4",
        "hugepagesz=2M",
        "hugepages=256",
    ]


def test_values_pass_through_unvalidated() -> None:
    kargs = get_kernel_args(HugePages(pages=(HugePage(size="bogus", count=0),)), "not-a-cpu-list")

    assert "isolcpus=not-a-cpu-list" in kargs
    assert kargs[-2:] == ["hugepagesz=bogus", "hugepages=0"]


def test_returns_fresh_list_each_call() -> None:
    first = get_kernel_args(None, None)
    first.append("extra")

    assert get_kernel_args(None, None) == list(BASE_KERNEL_ARGS)
