"""
시뮬레이터 이벤트 라인 출력 모듈
"""

import sys
from typing import List, TextIO


class OutputSink:
    """
    추가 전용 라인 출력
    스케줄러는 append_line()만 호출하며, 라인의 목적지는 하위 클래스가 결정
    """

    def append_line(self, line: str):
        raise NotImplementedError("Subclasses must implement append_line()")


class ListOutput(OutputSink):
    """메모리에 라인 수집 (테스트, HTTP API용)"""

    def __init__(self):
        self.lines: List[str] = []

    def append_line(self, line: str):
        self.lines.append(line)

    def clear(self):
        self.lines.clear()


class StreamOutput(OutputSink):
    """텍스트 스트림에 라인 출력 (기본값: stdout)"""

    def __init__(self, stream: TextIO = None):
        self.stream = stream if stream is not None else sys.stdout

    def append_line(self, line: str):
        self.stream.write(line + "\n")
        self.stream.flush()
