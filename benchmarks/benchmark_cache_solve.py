import argparse
import time

import numpy as np

import cachematrix


def benchmark_cache_solve(n, seed=None):
    print(f"\n--- Benchmarking cache_solve (N={n}) ---")

    rng = np.random.default_rng(seed)
    a_np = rng.standard_normal((n, n))
    expected = np.linalg.inv(a_np)

    cm = cachematrix.make_cache_matrix(a_np)

    # First call inverts.
    start = time.perf_counter()
    inv1 = cachematrix.cache_solve(cm)
    miss_time = time.perf_counter() - start
    print(f"First call (miss):  {miss_time:.4f} s")

    # Second call should print the cache-hit notification and return at once.
    start = time.perf_counter()
    inv2 = cachematrix.cache_solve(cm)
    hit_time = time.perf_counter() - start
    print(f"Second call (hit):  {hit_time:.6f} s")

    speedup = miss_time / hit_time if hit_time > 0 else float("inf")
    print(f"Speedup:            {speedup:.1f}x")

    identical = np.array_equal(expected, inv1) and np.array_equal(expected, inv2)
    print(f"Identical to numpy.linalg.inv: {identical}")
    print(f"Stats: {cachematrix.cache_stats()}")
    return identical


def main():
    parser = argparse.ArgumentParser(description="Time cache_solve misses against hits.")
    parser.add_argument("--size", type=int, default=1000, help="matrix edge length")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    cachematrix.set_notification_sink(
        lambda event: print(f"[{event.op}] {event.message}")
    )
    benchmark_cache_solve(args.size, seed=args.seed)


if __name__ == "__main__":
    main()
