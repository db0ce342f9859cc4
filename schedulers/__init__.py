"""
CPU Scheduling Algorithms
"""

from .round_robin import RoundRobinScheduler, tick

__all__ = [
    'RoundRobinScheduler',
    'tick'
]
