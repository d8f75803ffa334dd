#!/usr/bin/env python3
"""
Generate performance graphs from the benchmark results of the interface generator.

Reads src/benchmarking/benchmark_results.json (written by benchmark.py) and
saves a single PNG with one chart per benchmark.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import matplotlib.pyplot as plt
import numpy as np


RESULTS_FILE = Path(__file__).parent / "src" / "benchmarking" / "benchmark_results.json"
OUTPUT_FILE = Path(__file__).parent / "performance_analysis.png"

COLORS = ['#4ECDC4', '#45B7D1', '#2ECC71', '#FFA07A']


def plot_results(results: Dict[str, Any], output_path: Path) -> Path:
    """Render benchmark results to output_path and return it."""
    fig = plt.figure(figsize=(16, 5))
    fig.suptitle('json2interface: Performance Analysis', fontsize=16, fontweight='bold')

    # ============ Graph 1: Time by Document Shape ============
    ax1 = plt.subplot(1, 3, 1)

    by_shape = results.get("by_shape", {})
    shapes = list(by_shape.keys())
    times = [by_shape[s]["avg_ms"] for s in shapes]

    bars = ax1.bar(shapes, times, color=COLORS[:len(shapes)], edgecolor='black', linewidth=1.5)
    ax1.set_xlabel('Document Shape', fontsize=10, fontweight='bold')
    ax1.set_ylabel('Time (ms)', fontsize=10, fontweight='bold')
    ax1.set_title('Average Time by Shape', fontsize=11, fontweight='bold')
    plt.setp(ax1.xaxis.get_majorticklabels(), rotation=15, ha='right', fontsize=8)
    ax1.grid(axis='y', alpha=0.3)

    for bar, val in zip(bars, times):
        ax1.text(bar.get_x() + bar.get_width()/2., bar.get_height(),
                 f'{val:.3f}ms', ha='center', va='bottom', fontsize=8, fontweight='bold')

    # ============ Graph 2: Scaling with Array Length ============
    ax2 = plt.subplot(1, 3, 2)

    by_length = results.get("by_array_length", {})
    lengths = np.array([int(n) for n in by_length.keys()])
    length_times = np.array(list(by_length.values()))

    ax2.plot(lengths, length_times, marker='o', color='#2ECC71', linewidth=2)
    if len(lengths) and lengths.min() > 0:
        ax2.set_xscale('log')
    ax2.set_xlabel('Top-level Array Length', fontsize=10, fontweight='bold')
    ax2.set_ylabel('Time (ms)', fontsize=10, fontweight='bold')
    ax2.set_title('Scaling with Array Length', fontsize=11, fontweight='bold')
    ax2.grid(alpha=0.3)

    # ============ Graph 3: Memory by Document Shape ============
    ax3 = plt.subplot(1, 3, 3)

    memory = results.get("memory_mb", {})
    mem_shapes = list(memory.keys())
    x = np.arange(len(mem_shapes))

    ax3.barh(x, list(memory.values()), color=COLORS[:len(mem_shapes)], edgecolor='black', linewidth=1)
    ax3.set_yticks(x)
    ax3.set_yticklabels(mem_shapes, fontsize=8)
    ax3.set_xlabel('RSS Growth (MB)', fontsize=10, fontweight='bold')
    ax3.set_title('Memory by Shape', fontsize=11, fontweight='bold')
    ax3.grid(axis='x', alpha=0.3)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return output_path


def main():
    """Read the saved benchmark results and write the chart."""
    if not RESULTS_FILE.exists():
        print("Error: benchmark_results.json not found. Run benchmark.py first.")
        return 1

    with open(RESULTS_FILE) as f:
        results = json.load(f)

    output = plot_results(results, OUTPUT_FILE)
    print(f"✓ Saved performance graphs to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
