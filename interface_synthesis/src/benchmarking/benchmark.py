#!/usr/bin/env python3
"""
Benchmarking and profiling suite for interface generation.

Measures performance across document shape dimensions (depth, width, array length).
"""

import json
import time
import sys
from pathlib import Path
from typing import Dict, List, Any
import psutil
import os

sys.path.insert(0, str(Path(__file__).parent.parent / "lib"))

from json2interface import generate
from generate_examples import SampleDocumentGenerator


RESULTS_FILE = Path(__file__).parent / "benchmark_results.json"

SHAPES = {
    "shallow+narrow": {"depth": 1, "width": 5},
    "shallow+wide": {"depth": 1, "width": 50},
    "deep+narrow": {"depth": 6, "width": 3},
    "deep+wide": {"depth": 4, "width": 8},
}


class BenchmarkSuite:
    """Benchmarking and profiling for interface generation."""

    def __init__(self, samples_per_shape: int = 10, seed: int = 42):
        """Initialize benchmark suite."""
        self.samples_per_shape = samples_per_shape
        self.generator = SampleDocumentGenerator(seed=seed)
        self.results: Dict[str, Any] = {}

    def load_documents(self, depth: int, width: int) -> List[str]:
        """Generate sample documents and serialize them, so parsing is part of the measurement."""
        documents = self.generator.generate_documents(
            count=self.samples_per_shape, depth=depth, width=width
        )
        return [json.dumps(doc) for doc in documents]

    def benchmark_by_shape(self):
        """Benchmark generation by document shape."""
        print("=== Benchmarking by Shape ===\n")

        by_shape = {}

        for shape, params in SHAPES.items():
            times = []

            for json_data in self.load_documents(**params):
                start = time.perf_counter()
                _ = generate(json_data)
                elapsed = time.perf_counter() - start

                times.append(elapsed)

            avg = sum(times) / len(times)
            print(f"  {shape:<20} {avg*1000:8.3f}ms  ({len(times)} samples)")

            by_shape[shape] = {"avg_ms": avg * 1000, "samples": len(times)}

        self.results["by_shape"] = by_shape

    def benchmark_by_array_length(self):
        """Benchmark how performance scales with the length of a top-level array."""
        print("\n=== Benchmarking by Array Length ===\n")

        by_length = {}
        element = self.generator.generate_document(depth=3, width=5)

        # Only the first element is sampled, so this measures parsing cost
        for count in [1, 10, 100, 1000]:
            json_data = json.dumps([element] * count)

            start = time.perf_counter()
            _ = generate(json_data)
            elapsed = time.perf_counter() - start

            print(f"  {count:5d} elements: {elapsed*1000:8.3f}ms")

            by_length[str(count)] = elapsed * 1000

        self.results["by_array_length"] = by_length

    def benchmark_memory_usage(self):
        """Benchmark memory usage during generation."""
        print("\n=== Memory Usage ===\n")

        process = psutil.Process(os.getpid())
        memory = {}

        for shape, params in SHAPES.items():
            json_data = self.load_documents(**params)[0]

            mem_start = process.memory_info().rss / (1024 * 1024)  # MB

            _ = generate(json_data)

            mem_end = process.memory_info().rss / (1024 * 1024)  # MB
            mem_used = mem_end - mem_start

            print(f"  {shape:<20} {mem_used:8.2f} MB")

            memory[shape] = mem_used

        self.results["memory_mb"] = memory

    def run_all_benchmarks(self) -> Dict[str, Any]:
        """Run all benchmarks."""
        print("Starting Benchmarking Suite\n")
        print("=" * 70)

        self.benchmark_by_shape()
        self.benchmark_by_array_length()
        self.benchmark_memory_usage()

        print("\n" + "=" * 70)
        print("Benchmarking Complete")

        return self.results

    def save_results(self, path: Path = RESULTS_FILE):
        """Write the collected results as JSON."""
        with open(path, "w") as f:
            json.dump(self.results, f, indent=2)
        print(f"Results saved to {path}")


def main():
    """Run benchmarks."""
    suite = BenchmarkSuite()
    suite.run_all_benchmarks()
    suite.save_results()


if __name__ == "__main__":
    main()
