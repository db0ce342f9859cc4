"""
Round Robin 스케줄러 시뮬레이터 - FastAPI 백엔드
"""

import threading

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Dict, Any

from core.output import ListOutput
from core.scheduler_base import DEFAULT_TIME_QUANTUM
from schedulers.round_robin import RoundRobinScheduler

# 요청 크기 제한 (시뮬레이션 시간은 최대 도착 시간 + 버스트 합에 비례)
MAX_ARRIVAL_TIME = 100_000
MAX_BURST_TIME = 100_000
MAX_PROCESSES = 1_000

app = FastAPI(
    title="Round Robin Scheduler Simulator",
    description="Round Robin CPU 스케줄링 시뮬레이터",
    version="1.0.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# /processes 로 구성하는 세션 프로세스 집합
session_output = ListOutput()
session = RoundRobinScheduler(session_output)
# 실행은 스레드풀에서 수행되므로 세션 접근은 직렬화
session_lock = threading.Lock()


# Pydantic 모델
class ProcessInput(BaseModel):
    arrival_time: int = Field(ge=0, le=MAX_ARRIVAL_TIME)
    burst_time: int = Field(ge=1, le=MAX_BURST_TIME)


class RunRequest(BaseModel):
    time_quantum: int = Field(DEFAULT_TIME_QUANTUM, ge=1)


class SimulationRequest(BaseModel):
    processes: List[ProcessInput] = Field(max_length=MAX_PROCESSES)
    time_quantum: int = Field(DEFAULT_TIME_QUANTUM, ge=1)


class GanttEntry(BaseModel):
    name: str
    start_time: int
    end_time: int


class ProcessResult(BaseModel):
    name: str
    arrival_time: int
    burst_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int


class SimulationResult(BaseModel):
    algorithm: str
    time_quantum: int
    lines: List[str]
    gantt_chart: List[GanttEntry]
    processes: List[ProcessResult]
    statistics: Dict[str, Any]


def process_to_dict(process) -> Dict:
    return {
        'name': process.name,
        'arrival_time': process.arrival_time,
        'burst_time': process.burst_time,
        'completion_time': process.completion_time,
        'turnaround_time': process.turnaround_time,
        'waiting_time': process.waiting_time
    }


def build_result(scheduler: RoundRobinScheduler) -> Dict:
    """스케줄러의 마지막 실행 결과를 응답 형식으로 변환"""
    result = scheduler.get_results()
    statistics = result['statistics']

    return {
        'algorithm': result['algorithm'],
        'time_quantum': scheduler.time_quantum,
        'lines': result['event_log'],
        'gantt_chart': [
            {'name': e.name, 'start_time': e.start_time, 'end_time': e.end_time}
            for e in result['gantt_chart']
        ],
        'processes': [process_to_dict(p) for p in result['processes']],
        'statistics': {
            # 이벤트 로그와 같은 소수점 둘째 자리 문자열
            'avg_turnaround_time': str(statistics['avg_turnaround_time']),
            'avg_waiting_time': str(statistics['avg_waiting_time']),
            'cpu_utilization': round(statistics['cpu_utilization'], 2),
            'context_switches': statistics['context_switches'],
            'total_time': statistics['total_time']
        }
    }


@app.get("/")
async def root():
    return {"message": "Round Robin Scheduler Simulator API", "version": "1.0.0"}


@app.get("/processes")
def list_processes():
    """세션 프로세스 목록"""
    with session_lock:
        return {"processes": [process_to_dict(p) for p in session.processes]}


@app.post("/processes")
def add_process(process: ProcessInput):
    """세션에 프로세스 추가"""
    with session_lock:
        if len(session.processes) >= MAX_PROCESSES:
            raise HTTPException(status_code=400,
                                detail=f"ERROR: At most {MAX_PROCESSES} processes can be entered!")
        added = session.add_process(process.arrival_time, process.burst_time)
        return {"process": process_to_dict(added), "line": session.event_log[-1]}


@app.delete("/processes")
def remove_all_processes():
    """세션 프로세스 전체 제거 및 출력 초기화"""
    with session_lock:
        session.remove_all()
        session.clear_log()
        session_output.clear()
        session_output.append_line("All processes have been removed.")
        session_output.append_line("Please submit processes to be simulated...")
    return {"message": "All processes have been removed."}


@app.get("/output")
def get_output():
    """세션에서 지금까지 출력된 모든 라인"""
    with session_lock:
        return {"lines": list(session_output.lines)}


@app.post("/run", response_model=SimulationResult)
def run_session(request: RunRequest):
    """세션 프로세스 시뮬레이션"""
    with session_lock:
        if not session.run_simulation(request.time_quantum):
            raise HTTPException(status_code=400, detail=session.event_log[-1])
        return build_result(session)


@app.post("/simulate", response_model=SimulationResult)
def simulate(request: SimulationRequest):
    """요청에 포함된 프로세스 집합 시뮬레이션"""
    scheduler = RoundRobinScheduler(ListOutput())
    for p in request.processes:
        scheduler.add_process(p.arrival_time, p.burst_time)

    if not scheduler.run_simulation(request.time_quantum):
        raise HTTPException(status_code=400, detail=scheduler.event_log[-1])
    return build_result(scheduler)
