"""A computer assembled from interchangeable parts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class CPU(ABC):
    @abstractmethod
    def calculate(self) -> str:
        """Describe the processor at work."""


class VideoCard(ABC):
    @abstractmethod
    def display(self) -> str:
        """Describe the video card at work."""


class Memory(ABC):
    @abstractmethod
    def storage(self) -> str:
        """Describe the memory at work."""


class IntelCPU(CPU):
    def calculate(self) -> str:
        return "Intel的CPU开始计算了"


class IntelVideoCard(VideoCard):
    def display(self) -> str:
        return "Intel的显卡开始显示了"


class IntelMemory(Memory):
    def storage(self) -> str:
        return "Intel的内存条开始存储了"


class LenovoCPU(CPU):
    def calculate(self) -> str:
        return "Lenovo的CPU开始计算了"


class LenovoVideoCard(VideoCard):
    def display(self) -> str:
        return "Lenovo的显卡开始显示了"


class LenovoMemory(Memory):
    def storage(self) -> str:
        return "Lenovo的内存条开始存储了"


@dataclass
class Computer:
    """A processor, a video card and memory working together."""

    cpu: CPU
    video_card: VideoCard
    memory: Memory

    def work(self) -> list[str]:
        """Set every part to work and return what happened, in order."""
        return [
            "电脑开始工作了！",
            self.cpu.calculate(),
            self.video_card.display(),
            self.memory.storage(),
        ]