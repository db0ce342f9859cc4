#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Round Robin 스케줄러 시뮬레이터 - 메인 실행 파일 (콘솔)
"""

import os
import re
import sys

from core.output import OutputSink, StreamOutput
from core.scheduler_base import DEFAULT_TIME_QUANTUM
from schedulers.round_robin import RoundRobinScheduler
from utils.input_parser import InputParser, InputValidationError
from utils.visualization import Visualizer

RESULTS_DIR = "simulation_results"

# 퀀텀 비교 실행에 사용할 타임 퀀텀
COMPARE_QUANTA = [1, 2, 4, 8]


def print_banner():
    """배너 출력"""
    print("\n" + "=" * 60)
    print(" " * 12 + "Round Robin Scheduler Simulator")
    print("=" * 60 + "\n")


def print_menu():
    """메뉴 출력"""
    print("\n" + "=" * 60)
    print("  1. Add process")
    print("  2. Load processes from file")
    print("  3. Generate random processes")
    print("  4. Show processes")
    print("  5. Remove all processes")
    print("  6. Run simulation")
    print("  7. Compare time quanta")
    print("  0. Quit")
    print("=" * 60)


def prompt(message: str, default: str) -> str:
    value = input(f"{message} [{default}]: ").strip()
    return value if value else default


def add_process(scheduler: RoundRobinScheduler):
    """도착 시간과 버스트 시간을 입력받아 프로세스 추가"""
    try:
        arrival_time = InputParser.parse_arrival_time(prompt("Arrival time (ms)", "0"))
        burst_time = InputParser.parse_burst_time(prompt("Burst time (ms)", "0"))
    except InputValidationError as e:
        print(e)
        return

    scheduler.add_process(arrival_time, burst_time)


def load_processes(scheduler: RoundRobinScheduler):
    filename = input("File path: ").strip()
    for arrival_time, burst_time in InputParser.parse_file(filename):
        scheduler.add_process(arrival_time, burst_time)


def generate_processes(scheduler: RoundRobinScheduler):
    try:
        count = InputParser.parse_burst_time(prompt("Number of processes", "5"))
    except InputValidationError:
        print("[ERROR] Number of processes must be a positive number.")
        return

    for arrival_time, burst_time in InputParser.generate_random_processes(num_processes=count):
        scheduler.add_process(arrival_time, burst_time)


def remove_all(scheduler: RoundRobinScheduler):
    """모든 프로세스 제거"""
    scheduler.remove_all()
    scheduler.clear_log()
    print("All processes have been removed.")
    print("Please submit processes to be simulated...")


def read_time_quantum():
    try:
        return InputParser.parse_time_quantum(prompt("Time quantum (ms)", str(DEFAULT_TIME_QUANTUM)))
    except InputValidationError as e:
        print(e)
        return None


def run_simulation(scheduler: RoundRobinScheduler):
    """시뮬레이션 1회 실행 및 결과 저장 여부 확인"""
    time_quantum = read_time_quantum()
    if time_quantum is None:
        return

    if not scheduler.run_simulation(time_quantum):
        return

    if input("\nSave results? (y/n): ").strip().lower() == 'y':
        save_results([scheduler.get_results()])


class _Discard(OutputSink):
    def append_line(self, line: str):
        pass


def compare_quanta(scheduler: RoundRobinScheduler):
    """같은 프로세스 집합을 여러 퀀텀으로 실행"""
    if not scheduler.processes:
        print("ERROR: No processes have been entered!")
        return

    results = []
    output = scheduler.output
    # 비교 실행의 이벤트는 출력하지 않고 비교표만 출력
    scheduler.output = _Discard()
    try:
        for time_quantum in COMPARE_QUANTA:
            scheduler.run_simulation(time_quantum)
            results.append(scheduler.get_results())
    finally:
        scheduler.output = output

    save_results(results)


def safe_filename(name: str) -> str:
    """'Round Robin (q=4)' -> 'Round_Robin_q_4'"""
    safe = re.sub(r'[^A-Za-z0-9]+', '_', name)
    return safe.strip('_')


def save_results(results, output_dir=None):
    """결과 저장 (통계 출력, 차트 및 텍스트 보고서)"""
    output_dir = output_dir or RESULTS_DIR
    os.makedirs(output_dir, exist_ok=True)

    visualizer = Visualizer()
    visualizer.print_statistics_table(results)

    for result in results:
        save_path = os.path.join(output_dir, f"gantt_{safe_filename(result['algorithm'])}.png")
        visualizer.draw_gantt_chart(result['gantt_chart'], result['algorithm'],
                                    save_path=save_path, show=False)

    if len(results) > 1:
        visualizer.compare_runs(results, save_path=os.path.join(output_dir, "comparison.png"),
                                show=False)

    save_results_to_file(results, os.path.join(output_dir, "results.txt"))
    print(f"[DONE] Results saved to '{output_dir}/'")


def save_results_to_file(results, filename):
    """결과를 텍스트 파일로 저장 (프로세스 상세 및 이벤트 로그)"""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write("=" * 70 + "\n")
        f.write("Round Robin Scheduler Simulation Results\n")
        f.write("=" * 70 + "\n")

        for result in results:
            stats = result['statistics']
            f.write(f"\n{result['algorithm']}\n")
            f.write("-" * 70 + "\n")
            f.write(f"{'Name':<6} {'Arrival':>8} {'Burst':>8} {'Completion':>12} "
                    f"{'Turnaround':>12} {'Waiting':>10}\n")

            for process in result['processes']:
                f.write(f"{process.name:<6} {process.arrival_time:>8} {process.burst_time:>8} "
                        f"{process.completion_time:>12} {process.turnaround_time:>12} "
                        f"{process.waiting_time:>10}\n")

            f.write(f"Average Turnaround Time = {stats['avg_turnaround_time']}ms\n")
            f.write(f"Average Waiting Time = {stats['avg_waiting_time']}ms\n")
            f.write(f"Context Switches = {stats['context_switches']}\n")
            f.write(f"CPU Utilization = {stats['cpu_utilization']:.2f}%\n")

            f.write("\nEvent Log\n")
            for line in result['event_log']:
                f.write(line + "\n")

    print(f"[DONE] Report written to {filename}")


def main():
    """메인 함수"""
    print_banner()

    scheduler = RoundRobinScheduler(StreamOutput())
    print("Please submit processes to be simulated...")

    actions = {
        '1': add_process,
        '2': load_processes,
        '3': generate_processes,
        '4': lambda s: InputParser.print_process_summary(s.processes),
        '5': remove_all,
        '6': run_simulation,
        '7': compare_quanta,
    }

    while True:
        print_menu()
        choice = input("\nSelect: ").strip()

        if choice == '0':
            print("\nGoodbye!")
            break

        action = actions.get(choice)
        if action is None:
            print("[ERROR] Invalid choice. Try again.")
            continue

        action(scheduler)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user.")
        sys.exit(0)
