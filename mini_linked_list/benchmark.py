"""
Linked list benchmark runner

Times the left-side (O(1)) and right-side (O(n)) operations of both list
disciplines over exponentially growing inputs and writes the results to CSV.

Usage examples:
    python -m mini_linked_list.benchmark
    python -m mini_linked_list.benchmark --output lists.csv --base-input 50 --doublings 4
"""

import argparse
import csv
import logging
import random
import statistics
import sys
import time

import coloredlogs

from .datastructures import ArenaLinkedList, LinkedList

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_CSV = "linked_list_performance.csv"

DISCIPLINES = {
    "owned-chain": LinkedList,
    "arena": ArenaLinkedList,
}


# ----------------------------
# Helper Functions
# ----------------------------

def sample_inputs(size: int, iterations: int, rng: random.Random):
    """Draw one random integer list per iteration; every discipline replays the same draws."""
    return [[rng.randrange(1000000) for _ in range(size)] for _ in range(iterations)]


def time_discipline(factory, operation, inputs):
    """Time `operation` against a fresh `factory` list for each input.

    Returns ``(avg_ms, std_ms)`` over the inputs.
    """
    samples = []
    for data in inputs:
        start = time.perf_counter()
        operation(factory, data)
        samples.append((time.perf_counter() - start) * 1000)

    std = statistics.stdev(samples) if len(samples) > 1 else 0.0
    return statistics.mean(samples), std


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_push_left(factory, data):
    lst = factory()
    for item in data:
        lst.push_left(item)
    return lst


def op_push_right(factory, data):
    lst = factory()
    for item in data:
        lst.push_right(item)
    return lst


def op_pop_left(factory, data):
    lst = op_push_left(factory, data)
    while lst:
        lst.pop_left()
    return lst


def op_pop_right(factory, data):
    lst = op_push_left(factory, data)
    while lst:
        lst.pop_right()
    return lst


def op_collect(factory, data):
    lst = op_push_left(factory, data)
    lst.collect()
    return lst


OPERATIONS = {
    "push_left": op_push_left,
    "push_right": op_push_right,
    "pop_left": op_pop_left,
    "pop_right": op_pop_right,
    "collect": op_collect,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, doublings: int = 6, iterations: int = 5,
                   seed=None):
    """Run exponential performance tests for both disciplines; return rows written.

    Inputs are drawn once per size, so both disciplines are timed on identical data.
    """
    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(doublings)]
    rows = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Discipline",
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Std Dev Time (ms)",
        ])

        for size in input_sizes:
            inputs = sample_inputs(size, iterations, rng)
            for op_name, op_func in OPERATIONS.items():
                for disc_name, factory in DISCIPLINES.items():
                    avg_time, std_time = time_discipline(factory, op_func, inputs)
                    writer.writerow([disc_name, size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                    rows += 1
                    logger.info(
                        "%-11s | %-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                        disc_name, op_name, size, avg_time, std_time,
                    )

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows


# ----------------------------
# CLI parser setup
# ----------------------------

def build_parser():
    """Build the argparse command-line parser."""
    p = argparse.ArgumentParser(
        prog="python -m mini_linked_list.benchmark",
        description="Benchmark both linked list disciplines",
    )
    p.add_argument("--output", default=DEFAULT_OUTPUT_CSV)
    p.add_argument("--base-input", type=int, default=100)
    p.add_argument("--doublings", type=int, default=6)
    p.add_argument("--iterations", type=int, default=5)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


# ----------------------------
# Main Entry Point
# ----------------------------

def main(argv=None):
    """Entry point when invoked via `python -m mini_linked_list.benchmark`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.base_input < 1 or args.doublings < 1 or args.iterations < 1:
        parser.error("--base-input, --doublings and --iterations must be positive")

    coloredlogs.install(level=args.log_level, logger=logging.getLogger("mini_linked_list"))
    return run_benchmarks(args.output, args.base_input, args.doublings, args.iterations, args.seed)


if __name__ == "__main__":
    main()
