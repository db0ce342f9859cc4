"""
스케줄러 기본 프레임워크: 시뮬레이션 상태, 통계 및 이벤트 출력
"""

from collections import deque
from copy import deepcopy
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Deque, Dict, List, Optional

from .output import OutputSink, StreamOutput
from .process import Process

# 프론트엔드 기본 타임 퀀텀 (ms)
DEFAULT_TIME_QUANTUM = 5

# 평균값은 소수점 둘째 자리까지 (반올림: 짝수 쪽으로)
AVERAGE_PLACES = Decimal("0.01")


@dataclass
class GanttEntry:
    """Gantt Chart 엔트리 (프로세스의 연속 CPU 구간)"""
    name: str
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class SimulationState:
    """
    시뮬레이션 1회 실행의 상태

    프로세스 리스트는 스케줄러와 공유하고, 나머지는 실행마다 새로 생성
    """
    processes: List[Process]
    time_quantum: int
    run_queue: Deque[Process] = field(default_factory=deque)
    current_time: int = 0
    running_time: int = 0  # 큐 맨 앞 프로세스가 연속으로 CPU를 점유한 시간
    num_complete: int = 0
    busy_time: int = 0
    context_switches: int = 0
    gantt_chart: List[GanttEntry] = field(default_factory=list)

    def is_complete(self) -> bool:
        return self.num_complete == len(self.processes)

    def get_process_index(self, name: str) -> int:
        """프로세스 리스트에서 이름으로 인덱스 검색"""
        for index, process in enumerate(self.processes):
            if process.name == name:
                return index
        raise RuntimeError(f"Process {name} is in the runqueue but not in the process list")


def round_average(total: int, count: int) -> Decimal:
    """total / count 를 소수점 둘째 자리로 반올림"""
    return (Decimal(total) / Decimal(count)).quantize(AVERAGE_PLACES, rounding=ROUND_HALF_EVEN)


class SchedulerStats:
    """스케줄링 통계"""

    def __init__(self):
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.context_switches = 0
        self.cpu_busy_time = 0
        self.total_simulation_time = 0
        self.process_count = 0

    def calculate_averages(self) -> Dict:
        """평균 계산"""
        if self.process_count == 0:
            return {
                'avg_waiting_time': Decimal("0.00"),
                'avg_turnaround_time': Decimal("0.00"),
                'cpu_utilization': 0.0,
                'context_switches': 0,
                'total_time': 0
            }

        return {
            'avg_waiting_time': round_average(self.total_waiting_time, self.process_count),
            'avg_turnaround_time': round_average(self.total_turnaround_time, self.process_count),
            'cpu_utilization': (self.cpu_busy_time / self.total_simulation_time * 100)
                               if self.total_simulation_time > 0 else 0.0,
            'context_switches': self.context_switches,
            'total_time': self.total_simulation_time
        }


class BaseScheduler:
    """
    기본 스케줄러 클래스
    프로세스 리스트와 이벤트 출력 등 공통 기능 제공
    """

    def __init__(self, output: Optional[OutputSink] = None, name: str = "Base Scheduler"):
        self.output = output if output is not None else StreamOutput()
        self.name = name
        self.processes: List[Process] = []
        self.next_process_id = 0
        self.state: Optional[SimulationState] = None
        self.stats = SchedulerStats()
        self.event_log: List[str] = []
        self.run_log_start = 0  # 마지막 실행의 첫 이벤트 로그 인덱스

    def log_event(self, message: str):
        """이벤트 로그 기록 및 출력"""
        self.event_log.append(message)
        self.output.append_line(message)

    def clear_log(self):
        """이벤트 로그 비우기"""
        self.event_log.clear()
        self.run_log_start = 0

    def add_process(self, arrival_time: int, burst_time: int) -> Process:
        """
        프로세스 추가

        Args:
            arrival_time: 도착 시간 (ms)
            burst_time: CPU 버스트 시간 (ms)

        Returns:
            생성된 프로세스
        """
        name = f"P{self.next_process_id}"
        process = Process(arrival_time, burst_time, name)
        self.processes.append(process)
        self.next_process_id += 1

        self.log_event(f"Process {name} has been added "
                       f"(Arrival: {arrival_time}ms, Burst: {burst_time}ms)")
        return process

    def remove_all(self):
        """모든 프로세스 제거 (이름은 다시 P0부터)"""
        self.processes.clear()
        self.next_process_id = 0

    def run_simulation(self, time_quantum: int) -> bool:
        """
        시뮬레이션 실행 (하위 클래스에서 구현)

        Returns:
            시뮬레이션이 실행되었는지 여부
        """
        raise NotImplementedError("Subclasses must implement run_simulation()")

    def get_current_snapshot(self) -> Dict:
        """마지막 실행의 현재 상태 스냅샷"""
        if self.state is None:
            return {'time': 0, 'running': None, 'run_queue': [], 'terminated': 0}

        return {
            'time': self.state.current_time,
            'running': self.state.run_queue[0] if self.state.run_queue else None,
            'run_queue': list(self.state.run_queue),
            'terminated': self.state.num_complete,
            'context_switches': self.state.context_switches,
            'latest_log': self.event_log[-1] if self.event_log else ""
        }

    def get_results(self) -> Dict:
        """
        마지막 실행 결과 반환

        Returns:
            결과 딕셔너리 (알고리즘 이름, 통계, Gantt Chart, 로그, 프로세스)
        """
        return {
            'algorithm': self.name,
            'statistics': self.stats.calculate_averages(),
            'gantt_chart': list(self.state.gantt_chart) if self.state else [],
            'event_log': self.event_log[self.run_log_start:],
            'processes': [deepcopy(p) for p in self.processes]
        }
