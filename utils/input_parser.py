"""
입력 데이터 파서 및 프로세스 생성 모듈
"""

import csv
import random
from typing import List, Tuple

# (도착 시간, 버스트 시간)
ProcessSpec = Tuple[int, int]


class InputValidationError(ValueError):
    """유효한 값으로 변환할 수 없는 사용자 입력"""


class InputParser:
    """사용자 입력 검증 및 입력 파일 파서"""

    @staticmethod
    def _parse_int(text: str, label: str) -> int:
        try:
            return int(str(text).strip())
        except ValueError:
            raise InputValidationError(f"ERROR: {label} must be a number!")

    @staticmethod
    def parse_arrival_time(text: str) -> int:
        """도착 시간: 0 이상의 정수"""
        arrival_time = InputParser._parse_int(text, "Arrival time")
        if arrival_time < 0:
            raise InputValidationError("ERROR: Arrival time value cannot be negative!")
        return arrival_time

    @staticmethod
    def parse_burst_time(text: str) -> int:
        """버스트 시간: 1 이상의 정수"""
        burst_time = InputParser._parse_int(text, "Burst time")
        if burst_time < 1:
            raise InputValidationError("ERROR: Burst time value must be greater than zero!")
        return burst_time

    @staticmethod
    def parse_time_quantum(text: str) -> int:
        """타임 퀀텀: 1 이상의 정수"""
        time_quantum = InputParser._parse_int(text, "Time quantum")
        if time_quantum < 1:
            raise InputValidationError("ERROR: Time quantum must be greater than zero!")
        return time_quantum

    @staticmethod
    def parse_file(filename: str) -> List[ProcessSpec]:
        """
        CSV 파일에서 프로세스 정보 읽기

        파일 형식: 도착시간,버스트시간
        예: 0,5

        Args:
            filename: 입력 파일 경로

        Returns:
            (도착 시간, 버스트 시간) 리스트
        """
        processes = []

        try:
            with open(filename, 'r', encoding='utf-8', newline='') as f:
                for row in csv.reader(f):
                    # 주석 및 빈 줄 제거
                    if not row or not row[0].strip() or row[0].strip().startswith('#'):
                        continue

                    try:
                        processes.append(InputParser._parse_row(row))
                    except InputValidationError as e:
                        print(f"[WARNING] Skipping line {','.join(row)}: {e}")

            print(f"Loaded {len(processes)} processes from {filename}")
            return processes

        except FileNotFoundError:
            print(f"[ERROR] File '{filename}' not found")
            return []

    @staticmethod
    def _parse_row(row: List[str]) -> ProcessSpec:
        if len(row) < 2:
            raise InputValidationError(f"ERROR: expected 2 fields, got {len(row)}")

        return (InputParser.parse_arrival_time(row[0]),
                InputParser.parse_burst_time(row[1]))

    @staticmethod
    def generate_random_processes(num_processes: int = 5,
                                  max_arrival: int = 10,
                                  max_burst: int = 10,
                                  seed: int = None) -> List[ProcessSpec]:
        """
        랜덤 프로세스 생성

        Args:
            num_processes: 생성할 프로세스 수
            max_arrival: 최대 도착 시간
            max_burst: 최대 CPU 버스트 시간
            seed: 랜덤 시드

        Returns:
            (도착 시간, 버스트 시간) 리스트
        """
        rng = random.Random(seed)

        processes = [(rng.randint(0, max_arrival), rng.randint(1, max_burst))
                     for _ in range(num_processes)]

        print(f"Generated {num_processes} random processes")
        return processes

    @staticmethod
    def save_processes_to_file(processes: List[ProcessSpec], filename: str):
        """프로세스 리스트를 parse_file() 형식으로 저장"""
        with open(filename, 'w', encoding='utf-8', newline='') as f:
            f.write("# Round Robin Simulator Input Data\n")
            f.write("# Format: ArrivalTime,BurstTime\n")

            writer = csv.writer(f, lineterminator='\n')
            for arrival_time, burst_time in processes:
                writer.writerow([arrival_time, burst_time])

        print(f"Saved {len(processes)} processes to {filename}")

    @staticmethod
    def print_process_summary(processes):
        """프로세스 요약 정보 출력"""
        print("\n" + "=" * 50)
        print("Process Summary")
        print("=" * 50)
        print(f"{'Name':<6} {'Arrival':>10} {'Burst':>10}")
        print("-" * 50)

        for p in processes:
            print(f"{p.name:<6} {p.arrival_time:>10} {p.burst_time:>10}")

        print("=" * 50)
        print(f"Total processes: {len(processes)}")
        print(f"Total burst time: {sum(p.burst_time for p in processes)}ms\n")
