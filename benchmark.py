#!/usr/bin/env python3
"""
Performance Benchmark Script for AVLTree

Benchmarks:
1. Sequential insert throughput
2. Random insert throughput
3. Membership lookups (hits and misses)
4. Random removal throughput
5. Full ordered iteration
6. Range query performance
7. Mixed workload (lookup/insert/remove)

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Final tree height

Configuration:
- LOG_LEVEL: logging level (default INFO)
- AVLSET_BENCH_SEED: random seed (default: unseeded)
- argv[1] == "quick": small run for fast feedback
"""

import logging
import os
import random
import statistics
import sys
import time
from typing import List

from avlset import AVLTree

logger = logging.getLogger(__name__)


class PerformanceTest:
    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)
        self.tree = AVLTree()

    def reset(self):
        """Start from an empty tree."""
        self.tree.clear()

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_ms": min(latencies) / 1_000_000,
            "max_ms": max(latencies) / 1_000_000,
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def _timed(self, name: str, values: List[int], operation) -> dict:
        latencies = []
        start_time = time.perf_counter_ns()

        for i, value in enumerate(values):
            op_start = time.perf_counter_ns()
            operation(value)
            latencies.append(time.perf_counter_ns() - op_start)

            if (i + 1) % 10000 == 0:
                logger.debug(f"{name}: {i + 1}/{len(values)} operations")

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        count = len(values)
        return {
            "test": name,
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed if elapsed > 0 else float("inf"),
            "tree_size": self.tree.size(),
            "tree_height": self.tree.height(),
            **self.calculate_stats(latencies),
        }

    def bench_sequential_insert(self, count: int) -> dict:
        """Benchmark inserting ascending values."""
        print_header(f"Sequential Insert Test: {count} operations")
        results = self._timed("Sequential Insert", list(range(count)), self.tree.insert)
        self.print_results(results)
        return results

    def bench_random_insert(self, count: int) -> dict:
        """Benchmark inserting shuffled values."""
        print_header(f"Random Insert Test: {count} operations")
        values = list(range(count))
        self.rng.shuffle(values)
        results = self._timed("Random Insert", values, self.tree.insert)
        self.print_results(results)
        return results

    def bench_contains(self, count: int, key_range: int) -> dict:
        """Benchmark membership lookups over a key range."""
        print_header(f"Contains Test: {count} lookups over {key_range} keys")
        hits = 0

        def lookup(value: int) -> None:
            nonlocal hits
            if self.tree.contains(value):
                hits += 1

        values = [self.rng.randrange(key_range) for _ in range(count)]
        results = self._timed("Contains", values, lookup)
        results["hits"] = hits
        results["hit_rate"] = hits / count if count else 0.0
        self.print_results(results)
        return results

    def bench_random_remove(self, count: int) -> dict:
        """Benchmark removing shuffled values."""
        print_header(f"Random Remove Test: {count} operations")
        values = list(range(count))
        self.rng.shuffle(values)
        results = self._timed("Random Remove", values, self.tree.remove)
        self.print_results(results)
        return results

    def bench_iteration(self) -> dict:
        """Benchmark a full ordered traversal."""
        print_header(f"Iteration Test: {self.tree.size()} elements")
        start_time = time.perf_counter_ns()
        visited = sum(1 for _ in self.tree)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Iteration",
            "count": visited,
            "elapsed_sec": elapsed,
            "ops_per_sec": visited / elapsed if elapsed > 0 else float("inf"),
        }
        self.print_results(results)
        return results

    def bench_range_query(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        """Benchmark range iteration."""
        print_header(f"Range Query Test: {num_queries} queries, {range_size} key ranges")
        total_results = 0

        def query(start: int) -> None:
            nonlocal total_results
            total_results += sum(1 for _ in self.tree.iterator(start, start + range_size))

        starts = [self.rng.randint(0, max(0, total_keys - range_size)) for _ in range(num_queries)]
        results = self._timed("Range Query", starts, query)
        results["queries_per_sec"] = results.pop("ops_per_sec")
        results["total_results"] = total_results
        results["avg_results_per_query"] = total_results / num_queries if num_queries else 0.0
        self.print_results(results)
        return results

    def bench_mixed_workload(self, count: int, read_ratio: float, key_range: int) -> dict:
        """Benchmark interleaved lookups, inserts and removes."""
        print_header(f"Mixed Workload Test: {count} operations, {read_ratio:.0%} reads")
        reads = 0

        def step(value: int) -> None:
            nonlocal reads
            roll = self.rng.random()
            if roll < read_ratio:
                self.tree.contains(value)
                reads += 1
            elif roll < read_ratio + (1 - read_ratio) / 2:
                self.tree.insert(value)
            else:
                self.tree.remove(value)

        values = [self.rng.randrange(key_range) for _ in range(count)]
        results = self._timed("Mixed Workload", values, step)
        results["reads"] = reads
        self.print_results(results)
        return results

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results.get('count', 'N/A')}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")

        if 'ops_per_sec' in results:
            print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")

        if 'hit_rate' in results:
            print(f"  Hit rate: {results['hit_rate']*100:.2f}%")

        if 'queries_per_sec' in results:
            print(f"  Query throughput: {results['queries_per_sec']:.2f} queries/sec")
            print(f"  Avg results per query: {results['avg_results_per_query']:.2f}")

        if 'tree_height' in results:
            print(f"  Tree: {results['tree_size']} elements, height {results['tree_height']}")

        if 'median_ms' in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.3f}/{results['p95_ms']:.3f}/{results['p99_ms']:.3f} ms")


def print_header(title: str):
    print(f"\n{'='*60}")
    print(title)
    print(f"{'='*60}")


def print_summary(all_results: List[dict]):
    print(f"\n{'#'*60}")
    print(f"# SUMMARY")
    print(f"{'#'*60}")

    for i, result in enumerate(all_results, 1):
        print(f"\n{i}. {result['test']}")
        if 'ops_per_sec' in result:
            print(f"   Throughput: {result['ops_per_sec']:.2f} ops/sec")
        if 'queries_per_sec' in result:
            print(f"   Throughput: {result['queries_per_sec']:.2f} queries/sec")
        if 'median_ms' in result:
            print(f"   Latency p50: {result['median_ms']:.3f} ms")


def run_comprehensive_tests(seed: int | None = None) -> List[dict]:
    """Run comprehensive performance tests."""
    test = PerformanceTest(seed)
    all_results = []

    print(f"\n{'#'*60}")
    print(f"# AVLTree Performance Test Suite")
    print(f"{'#'*60}")

    logger.info("Phase 1: sequential build")
    all_results.append(test.bench_sequential_insert(count=100000))
    all_results.append(test.bench_contains(count=100000, key_range=200000))
    all_results.append(test.bench_iteration())
    all_results.append(test.bench_range_query(num_queries=1000, range_size=500, total_keys=100000))

    logger.info("Phase 2: random build and teardown")
    test.reset()
    all_results.append(test.bench_random_insert(count=100000))
    all_results.append(test.bench_random_remove(count=100000))

    logger.info("Phase 3: mixed workload")
    all_results.append(test.bench_mixed_workload(count=100000, read_ratio=0.7, key_range=200000))
    all_results.append(test.bench_mixed_workload(count=100000, read_ratio=0.9, key_range=200000))

    print_summary(all_results)
    return all_results


def run_quick_tests(seed: int | None = None, count: int = 10000) -> List[dict]:
    """Run quick performance tests for faster feedback."""
    test = PerformanceTest(seed)

    print(f"\n{'#'*60}")
    print(f"# Quick Performance Test")
    print(f"{'#'*60}")

    return [
        test.bench_random_insert(count=count),
        test.bench_contains(count=count, key_range=count * 2),
        test.bench_iteration(),
        test.bench_range_query(num_queries=max(1, count // 100), range_size=100, total_keys=count),
        test.bench_random_remove(count=count),
    ]


def main(argv: List[str]) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    raw_seed = os.environ.get("AVLSET_BENCH_SEED")
    seed = int(raw_seed) if raw_seed else None
    logger.info(f"Benchmark seed: {seed}")

    if len(argv) > 1 and argv[1] == "quick":
        run_quick_tests(seed)
    else:
        run_comprehensive_tests(seed)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
