import pytest

from drillbook.computer import (
    CPU,
    Computer,
    IntelCPU,
    IntelMemory,
    IntelVideoCard,
    LenovoCPU,
    LenovoMemory,
    LenovoVideoCard,
    Memory,
    VideoCard,
)


def test_intel_computer_works():
    computer = Computer(IntelCPU(), IntelVideoCard(), IntelMemory())
    assert computer.work() == [
        "电脑开始工作了！",
        "Intel的CPU开始计算了",
        "Intel的显卡开始显示了",
        "Intel的内存条开始存储了",
    ]


def test_lenovo_computer_works():
    computer = Computer(LenovoCPU(), LenovoVideoCard(), LenovoMemory())
    assert computer.work() == [
        "电脑开始工作了！",
        "Lenovo的CPU开始计算了",
        "Lenovo的显卡开始显示了",
        "Lenovo的内存条开始存储了",
    ]


def test_mixed_computer_works():
    computer = Computer(LenovoCPU(), IntelVideoCard(), LenovoMemory())
    assert computer.work() == [
        "电脑开始工作了！",
        "Lenovo的CPU开始计算了",
        "Intel的显卡开始显示了",
        "Lenovo的内存条开始存储了",
    ]


@pytest.mark.parametrize("abstract", [CPU, VideoCard, Memory])
def test_parts_are_abstract(abstract):
    with pytest.raises(TypeError):
        abstract()


def test_work_reflects_each_part():
    cpu, card, memory = IntelCPU(), LenovoVideoCard(), IntelMemory()
    lines = Computer(cpu, card, memory).work()
    assert lines[1:] == [cpu.calculate(), card.display(), memory.storage()]