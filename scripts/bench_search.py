#!/usr/bin/env python3
"""Benchmark query: latency (p50, p95, p99) and QPS.

Usage:
  EMBEDDING_BACKEND=simple minirag &
  API_URL=http://localhost:8080 python scripts/bench_search.py [--num-docs 200] [--num-queries 100]

Each seeded document is a single short sentence so it stays within the
per-document chunk limit. The store is reset before seeding.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark query")
    parser.add_argument("--num-docs", type=int, default=200, help="Documents to upload before querying")
    parser.add_argument("--num-queries", type=int, default=50, help="Number of query requests")
    parser.add_argument("--output", type=str, default="", help="Optional output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8080").rstrip("/")

    with httpx.Client(timeout=60.0) as client:
        client.post(f"{api_url}/v1/reset").raise_for_status()
        print(f"Seeding {args.num_docs} documents...")
        for i in range(args.num_docs):
            client.post(
                f"{api_url}/v1/upload",
                params={"source": f"bench-{i}"},
                content=f"Benchmark document content {i} for search test.".encode(),
            ).raise_for_status()

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_queries} query requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_queries):
            t0 = time.perf_counter()
            r = client.post(f"{api_url}/v1/query", json={"query": "benchmark search"})
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful queries.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Query benchmark (store size={args.num_docs} docs, queries={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
