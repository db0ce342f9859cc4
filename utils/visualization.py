"""
시각화 모듈: Gantt Chart 및 실행 비교 그래프 생성
"""

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from typing import List, Dict
from core.scheduler_base import GanttEntry


class Visualizer:
    """시뮬레이션 결과 시각화"""

    def __init__(self):
        # 프로세스별 색상 설정
        self.colors = plt.cm.Set3.colors

    def process_color(self, name: str):
        """프로세스 이름에 대응하는 색상"""
        return self.colors[_name_order(name) % len(self.colors)]

    def legend_handles(self, names: List[str]) -> List[mpatches.Patch]:
        """프로세스별 범례 항목"""
        return [mpatches.Patch(color=self.process_color(name), label=name) for name in names]

    def draw_gantt_chart(self, gantt_data: List[GanttEntry], title: str,
                         save_path: str = None, show: bool = True):
        """
        Gantt Chart 그리기

        Args:
            gantt_data: 실행의 CPU 구간 리스트
            title: 차트 제목 (보통 알고리즘 이름)
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부
        """
        if not gantt_data:
            print(f"No Gantt chart data for {title}")
            return

        fig, ax = plt.subplots(figsize=(16, 6))

        # 프로세스마다 한 행 (번호 순)
        names = sorted({entry.name for entry in gantt_data}, key=_name_order)
        name_to_y = {name: idx for idx, name in enumerate(names)}

        for entry in gantt_data:
            y_pos = name_to_y[entry.name]
            ax.barh(y_pos, entry.duration, left=entry.start_time, height=0.8,
                    color=self.process_color(entry.name), edgecolor='black', linewidth=0.5)

            # 충분히 긴 구간만 이름 표시
            if entry.duration > 1:
                ax.text(entry.start_time + entry.duration / 2, y_pos, entry.name,
                        ha='center', va='center', fontsize=8, fontweight='bold')

        ax.set_yticks(range(len(names)))
        ax.set_yticklabels(names)
        ax.set_xlabel('Time (ms)', fontsize=12)
        ax.set_ylabel('Process', fontsize=12)
        ax.set_title(f'Gantt Chart - {title}', fontsize=14, fontweight='bold')
        ax.grid(axis='x', alpha=0.3)

        ax.legend(handles=self.legend_handles(names), loc='upper right')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Gantt chart saved to {save_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def compare_runs(self, results: List[Dict], save_path: str = None, show: bool = True):
        """
        여러 실행의 성능 비교 그래프 (예: 같은 프로세스, 다른 퀀텀)

        Args:
            results: 각 실행의 get_results() 결과 리스트
            save_path: 저장 경로
            show: 화면에 표시할지 여부
        """
        if not results:
            print("No results to compare")
            return

        labels = [r['algorithm'] for r in results]
        panels = [
            ('avg_waiting_time', 'Average Waiting Time', 'skyblue', '{:.2f}'),
            ('avg_turnaround_time', 'Average Turnaround Time', 'lightcoral', '{:.2f}'),
            ('cpu_utilization', 'CPU Utilization (%)', 'lightgreen', '{:.1f}%'),
            ('context_switches', 'Context Switches', 'plum', '{:.0f}'),
        ]

        fig, axes = plt.subplots(2, 2, figsize=(16, 12))
        fig.suptitle('Round Robin Performance Comparison', fontsize=16, fontweight='bold')

        for ax, (key, label, color, fmt) in zip(axes.flat, panels):
            values = [float(r['statistics'][key]) for r in results]
            bars = ax.bar(range(len(labels)), values, color=color, edgecolor='black')
            ax.set_xticks(range(len(labels)))
            ax.set_xticklabels(labels, rotation=45, ha='right', fontsize=9)
            ax.set_ylabel(label, fontsize=11)
            ax.set_title(f'{label} Comparison', fontsize=12, fontweight='bold')
            ax.grid(axis='y', alpha=0.3)
            if key == 'cpu_utilization':
                ax.set_ylim(0, 100)

            for bar, value in zip(bars, values):
                ax.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                        fmt.format(value), ha='center', va='bottom', fontsize=9)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            print(f"Comparison chart saved to {save_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    def print_statistics_table(self, results: List[Dict]):
        """통계를 표 형식으로 출력"""
        print("\n" + "=" * 100)
        print("Round Robin Performance Comparison")
        print("=" * 100)
        print(f"{'Run':<30} {'Avg Waiting':>14} {'Avg Turnaround':>16} "
              f"{'CPU Util(%)':>12} {'Switches':>10} {'Total':>8}")
        print("-" * 100)

        for result in results:
            stats = result['statistics']
            print(f"{result['algorithm']:<30} "
                  f"{stats['avg_waiting_time']:>14} "
                  f"{stats['avg_turnaround_time']:>16} "
                  f"{stats['cpu_utilization']:>12.2f} "
                  f"{stats['context_switches']:>10} "
                  f"{stats['total_time']:>8}")

        print("=" * 100 + "\n")

    def print_process_details(self, results: Dict):
        """개별 프로세스의 상세 정보 출력"""
        print(f"\n{'=' * 70}")
        print(f"Process Details - {results['algorithm']}")
        print(f"{'=' * 70}")
        print(f"{'Name':<6} {'Arrival':>8} {'Burst':>8} {'Completion':>12} "
              f"{'Turnaround':>12} {'Waiting':>10}")
        print(f"{'-' * 70}")

        for process in results['processes']:
            print(f"{process.name:<6} "
                  f"{process.arrival_time:>8} "
                  f"{process.burst_time:>8} "
                  f"{process.completion_time:>12} "
                  f"{process.turnaround_time:>12} "
                  f"{process.waiting_time:>10}")

        print(f"{'=' * 70}\n")


def _name_order(name: str) -> int:
    """프로세스 이름의 번호 ("P12" -> 12)"""
    digits = name.lstrip('P')
    return int(digits) if digits.isdigit() else 0
