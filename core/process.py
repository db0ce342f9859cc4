"""
프로세스 및 PCB (Process Control Block) 관리 모듈
"""

from enum import Enum


class ProcessState(Enum):
    """프로세스 상태"""
    NEW = "New"
    READY = "Ready"
    RUNNING = "Running"
    TERMINATED = "Terminated"


class Process:
    """
    프로세스 제어 블록 (PCB)
    도착/버스트 시간과 마지막 실행의 통계 정보를 관리
    """

    def __init__(self, arrival_time: int, burst_time: int, name: str):
        """
        프로세스 초기화

        Args:
            arrival_time: 도착 시간 (ms, 0 이상)
            burst_time: CPU 버스트 시간 (ms, 1 이상)
            name: 프로세스 이름 ("P0", "P1", ...)
        """
        if arrival_time < 0:
            raise ValueError(f"Arrival time cannot be negative: {arrival_time}")
        if burst_time < 1:
            raise ValueError(f"Burst time must be greater than zero: {burst_time}")

        self.arrival_time = arrival_time
        self.burst_time = burst_time
        self.name = name

        self.reset()

    def reset(self):
        """실행 상태 초기화 (같은 프로세스 집합으로 여러 번 시뮬레이션)"""
        self.state = ProcessState.NEW
        self.remaining_time = self.burst_time
        self.completion_time = 0
        self.turnaround_time = 0
        self.waiting_time = 0

    def execute(self, time_units: int = 1) -> bool:
        """
        프로세스 실행 (남은 CPU 시간 감소)

        Args:
            time_units: 실행할 시간 단위

        Returns:
            남은 시간이 0이 되었는지 여부
        """
        if time_units > self.remaining_time:
            raise ValueError(f"{self.name} has only {self.remaining_time}ms left, "
                             f"cannot run for {time_units}ms")

        self.remaining_time -= time_units
        return self.remaining_time == 0

    def is_completed(self) -> bool:
        return self.remaining_time == 0

    def calculate_stats(self):
        """반환 시간 및 대기 시간 계산 (종료 후에만 의미 있음)"""
        self.turnaround_time = self.completion_time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time

    def __repr__(self):
        return f"{self.name}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.name}: Arrival={self.arrival_time}, Burst={self.burst_time}, " \
               f"Remaining={self.remaining_time}"
