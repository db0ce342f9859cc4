"""
Core modules for the Round Robin Scheduler Simulator
"""

from .process import Process, ProcessState
from .output import OutputSink, ListOutput, StreamOutput
from .scheduler_base import (BaseScheduler, SchedulerStats, SimulationState, GanttEntry,
                             DEFAULT_TIME_QUANTUM)

__all__ = [
    'Process',
    'ProcessState',
    'OutputSink',
    'ListOutput',
    'StreamOutput',
    'BaseScheduler',
    'SchedulerStats',
    'SimulationState',
    'GanttEntry',
    'DEFAULT_TIME_QUANTUM'
]
