"""Benchmark insertion and lookup in the keyed trie."""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path

import matplotlib.pyplot as plt
import psutil

from src.custom_data_structures.Trie.Trie import Trie

NUMBER_OF_KEYS_IN_EACH_BENCHMARK = [1_000, 10_000, 100_000, 250_000]
KEY_LENGTH_RANGE = (4, 16)
RESULTS_DIR = Path(__file__).parent.parent / "static" / "benchmarks" / "trie"
SEED = 42


def generate_keys(number_of_keys: int, rng: random.Random) -> list[str]:
    """Generate unique random lowercase keys.

    Args:
        number_of_keys (int): How many keys to generate.
        rng (random.Random): The random generator to draw from.

    Returns:
        list[str]: The generated keys, in generation order.

    """
    keys: set[str] = set()
    while len(keys) < number_of_keys:
        length = rng.randint(*KEY_LENGTH_RANGE)
        keys.add("".join(rng.choices(string.ascii_lowercase, k=length)))
    return list(keys)


def benchmark_trie(keys: list[str]) -> dict[str, float | int]:
    """Insert every key, then look every key up, measuring both phases.

    Args:
        keys (list[str]): The keys to be inserted and looked up.

    Returns:
        dict[str, float | int]: Timings in milliseconds and memory usage
        in bytes.

    """
    process = psutil.Process()
    rss_before = process.memory_info().rss

    gc.collect()
    tracemalloc.start()

    trie: Trie[int] = Trie()
    start = time.perf_counter()
    for index, key in enumerate(keys):
        trie.insert(key, index)
    insert_time_ms = (time.perf_counter() - start) * 1000

    _, peak_memory = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    start = time.perf_counter()
    for index, key in enumerate(keys):
        if trie.get_value(key) != index:
            raise ValueError(f"Lookup of '{key}' returned a wrong value")
    lookup_time_ms = (time.perf_counter() - start) * 1000

    rss_after = process.memory_info().rss

    return {
        "insert_time_ms": insert_time_ms,
        "lookup_time_ms": lookup_time_ms,
        "traced_peak_memory": peak_memory,
        "rss_delta": rss_after - rss_before,
    }


def plot_results(
    results: dict[int, dict[str, float | int]],
    metric: str,
    ylabel: str,
    title: str,
) -> None:
    """Plot one metric per key count as a bar chart and save it."""
    y_values = [float(results[n][metric]) for n in results]

    try:
        plt.figure(figsize=(8, 5))
        x = range(len(y_values))
        plt.bar(x, y_values, color="steelblue")
        plt.xticks(x, [str(n) for n in results])
        plt.xlabel("Keys")
        plt.ylabel(ylabel)
        plt.title(title)

        for i, v in enumerate(y_values):
            plt.text(i, v + 0.01, f"{v:.2f}", ha="center", va="bottom")

        plt.tight_layout()
        plt.savefig(RESULTS_DIR / f"benchmark_{metric}.png")

    finally:
        plt.close("all")


def main() -> None:
    """Main function."""
    rng = random.Random(SEED)
    results: dict[int, dict[str, float | int]] = {}

    for number_of_keys in NUMBER_OF_KEYS_IN_EACH_BENCHMARK:
        print(f"\nBenchmarking with {number_of_keys} keys...")
        keys = generate_keys(number_of_keys, rng)
        results[number_of_keys] = benchmark_trie(keys)
        print(
            f"Insert: {results[number_of_keys]['insert_time_ms']:.2f} ms, "
            f"lookup: {results[number_of_keys]['lookup_time_ms']:.2f} ms",
        )

        # Force garbage collection
        del keys
        gc.collect()

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    plot_results(
        results,
        "insert_time_ms",
        "Execution Time (ms)",
        "Trie Insert Time",
    )
    plot_results(
        results,
        "lookup_time_ms",
        "Execution Time (ms)",
        "Trie Lookup Time",
    )
    plot_results(
        results,
        "traced_peak_memory",
        "Peak Memory (bytes)",
        "Trie Memory Usage",
    )

    with open(RESULTS_DIR / "results.json", "w") as f:
        json.dump(results, f, indent=4)


if __name__ == "__main__":
    main()
