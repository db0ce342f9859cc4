"""
Round Robin 스케줄러
Runqueue의 각 프로세스는 최대 한 타임 퀀텀 동안 CPU를 사용한 뒤
큐의 맨 뒤로 이동
"""

from typing import Callable, Optional

from core.output import OutputSink
from core.process import ProcessState
from core.scheduler_base import BaseScheduler, GanttEntry, SchedulerStats, SimulationState

Emit = Callable[[str], None]


def insert_arrivals(state: SimulationState, emit: Emit):
    """프로세스 도착 처리 (생성 순서대로 runqueue에 추가)"""
    for process in state.processes:
        if process.arrival_time == state.current_time:
            process.state = ProcessState.READY
            state.run_queue.append(process)
            emit(f"{state.current_time} ms: {process.name} added to runqueue")


def check_complete(state: SimulationState, emit: Emit):
    """남은 시간이 없는 큐 맨 앞 프로세스 종료 처리"""
    if not state.run_queue or not state.run_queue[0].is_completed():
        return

    index = state.get_process_index(state.run_queue[0].name)
    process = state.processes[index]
    process.completion_time = state.current_time
    process.state = ProcessState.TERMINATED
    emit(f"{state.current_time} ms: {process.name} has terminated")

    state.run_queue.popleft()
    state.num_complete += 1
    state.running_time = 0


def switch_context(state: SimulationState, emit: Emit):
    """타임 퀀텀 만료 시 문맥 전환 (맨 앞 프로세스를 맨 뒤로)"""
    # 큐에 하나만 있으면 계속 실행
    if len(state.run_queue) > 1 and state.running_time == state.time_quantum:
        process = state.run_queue.popleft()
        process.state = ProcessState.READY
        emit(f"{state.current_time} ms: {process.name} has been paused")
        state.run_queue.append(process)
        state.running_time = 0
        state.context_switches += 1


def run_current_process(state: SimulationState, emit: Emit):
    """큐 맨 앞 프로세스를 한 시간 단위 실행"""
    if not state.run_queue:
        return

    process = state.run_queue[0]
    process.execute(1)
    process.state = ProcessState.RUNNING
    state.busy_time += 1

    if state.running_time == 0:
        emit(f"{state.current_time} ms: {process.name} has started running")
        state.gantt_chart.append(GanttEntry(process.name, state.current_time,
                                            state.current_time + 1))
    else:
        state.gantt_chart[-1].end_time = state.current_time + 1

    state.running_time += 1


def tick(state: SimulationState, emit: Emit):
    """시뮬레이션을 한 시간 단위 진행"""
    # 1. 프로세스 도착 처리
    insert_arrivals(state, emit)

    # 2. 현재 프로세스 종료 확인
    check_complete(state, emit)

    # 3. 타임 퀀텀 만료 확인
    switch_context(state, emit)

    # 4. CPU 실행
    run_current_process(state, emit)

    state.current_time += 1


class RoundRobinScheduler(BaseScheduler):
    """
    Round Robin 스케줄러
    같은 프로세스 집합을 다른 퀀텀으로 반복 시뮬레이션할 수 있도록 프로세스를 보관
    """

    def __init__(self, output: Optional[OutputSink] = None):
        super().__init__(output, "Round Robin")
        self.time_quantum: Optional[int] = None

    def reset(self):
        """시뮬레이션 실행 전 초기화"""
        self.state = SimulationState(self.processes, self.time_quantum)
        for process in self.processes:
            process.reset()

    def run_simulation(self, time_quantum: int) -> bool:
        """
        모든 프로세스가 종료될 때까지 시뮬레이션 실행

        Args:
            time_quantum: 타임 퀀텀 (ms, 1 이상)

        Returns:
            프로세스가 없으면 False
        """
        if time_quantum < 1:
            raise ValueError(f"Time quantum must be greater than zero: {time_quantum}")

        if not self.processes:
            self.log_event("ERROR: No processes have been entered!")
            return False

        self.time_quantum = time_quantum
        self.name = f"Round Robin (q={time_quantum})"
        self.reset()
        self.run_log_start = len(self.event_log)
        self.run()
        return True

    def run(self):
        """틱 루프 실행 후 통계 계산"""
        self.log_event("******** Simulation Started ********")

        while not self.state.is_complete():
            tick(self.state, self.log_event)

        self.log_event("******** Simulation Finished ********")

        self.calculate_stats()

    def calculate_stats(self):
        """프로세스별 및 평균 반환/대기 시간 계산"""
        stats = SchedulerStats()
        stats.process_count = len(self.processes)
        stats.context_switches = self.state.context_switches
        stats.cpu_busy_time = self.state.busy_time
        # 루프는 마지막 종료 후 한 틱 뒤에 끝남
        stats.total_simulation_time = self.state.current_time - 1

        for process in self.processes:
            process.calculate_stats()
            stats.total_turnaround_time += process.turnaround_time
            stats.total_waiting_time += process.waiting_time

            self.log_event(f"{process.name}: Turnaround Time = {process.turnaround_time}ms, "
                           f"Waiting Time = {process.waiting_time}ms")

        self.stats = stats
        averages = stats.calculate_averages()
        self.log_event(f"Average Turnaround Time = {averages['avg_turnaround_time']}ms")
        self.log_event(f"Average Waiting Time = {averages['avg_waiting_time']}ms")
