"""
Benchmark picomsgpack encode/decode against the msgpack distribution (if installed).
Compares time per call and peak memory (tracemalloc) per run.

Timing uses multiple runs and the median for more consistent results; warmup
reduces cold-cache effects. Use --iter, --warmup, --runs to tune.

Run from repo root:

  PYTHONPATH=src python benchmarks/msgpack.py
  PYTHONPATH=src python benchmarks/msgpack.py --brotli 5
  PYTHONPATH=src python benchmarks/msgpack.py --iter 5000 --runs 7   # slower, more stable

Or after pip install -e .:

  python benchmarks/msgpack.py
"""

from __future__ import annotations

import argparse
import gc
import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picomsgpack import Date, decode, encode  # noqa: E402

# Sample payloads: various shapes and sizes
SAMPLES: list[tuple[object, str]] = [
    (None, "null"),
    (42, "int"),
    (True, "bool"),
    ("hello", "str short"),
    (b"bytes", "bytes"),
    ({"a": 1, "b": 2}, "dict 2"),
    ([1, 2, 3], "list 3"),
    ({"k": "v", "n": 0, "b": True}, "dict mixed"),
    (list(range(100)), "list 100"),
    ({"x": "y" * 50}, "dict str val"),
    ([{"i": i} for i in range(20)], "list of dicts"),
    ([Date(1_700_000_000 + i, i) for i in range(20)], "list of dates"),
]

N_TIME = 2000
N_MEM = 500
WARMUP_DEFAULT = 200
TIMING_RUNS_DEFAULT = 5


def _load_implementations(quality: int | None) -> list[tuple[str, object, object]]:
    """(label, encode, decode). The first entry is the baseline for ratios."""
    impls: list[tuple[str, object, object]] = [
        (
            "picomsgpack",
            lambda v: encode(v, quality),
            lambda b: decode(b, quality is not None),
        )
    ]
    try:
        import msgpack
    except ImportError:
        print("  msgpack not installed; timing picomsgpack only.")
        return impls
    if quality is None:
        impls.append(
            (
                "msgpack",
                lambda v: msgpack.packb(v, use_bin_type=True, default=_msgpack_default),
                lambda b: msgpack.unpackb(b, raw=False),
            )
        )
    return impls


def _msgpack_default(obj: object) -> object:
    import msgpack

    if isinstance(obj, Date):
        return msgpack.Timestamp(obj.seconds, obj.nanoseconds)
    raise TypeError(f"unsupported type {type(obj)}")


def _time_per_call_median(
    fn: object,
    payload: object,
    n: int,
    warmup: int = WARMUP_DEFAULT,
    runs: int = TIMING_RUNS_DEFAULT,
) -> float:
    """Median over `runs` of the mean time per call, after `warmup` calls. GC is off while timing."""
    for _ in range(warmup):
        fn(payload)
    run_times: list[float] = []
    was_enabled = gc.isenabled()
    gc.disable()
    try:
        for _ in range(runs):
            start = time.perf_counter()
            for _ in range(n):
                fn(payload)
            run_times.append((time.perf_counter() - start) / n)
    finally:
        if was_enabled:
            gc.enable()
    run_times.sort()
    return run_times[runs // 2]


def _peak_memory_kb(fn: object, payload: object, n: int) -> float:
    tracemalloc.start()
    for _ in range(n):
        fn(payload)
    _current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def _print_table(title: str, labels: list[str], rows: list[tuple[str, list[float]]], fmt: str) -> None:
    print(f"  --- {title} ---")
    header = f"  {'payload':<16}" + "".join(f" {label[:12]:<14}" for label in labels)
    print(header)
    print("  " + "-" * (len(header) - 2))
    for sample_label, values in rows:
        print(f"  {sample_label:<16}" + "".join(f" {v:<14{fmt}}" for v in values))
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark picomsgpack encode/decode")
    parser.add_argument(
        "--iter",
        type=int,
        default=N_TIME,
        metavar="N",
        help=f"Iterations per timing run (default {N_TIME}); higher = more stable",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=WARMUP_DEFAULT,
        metavar="N",
        help=f"Warmup iterations before each timing run (default {WARMUP_DEFAULT})",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=TIMING_RUNS_DEFAULT,
        metavar="N",
        help=f"Timing runs per impl/payload; median is used (default {TIMING_RUNS_DEFAULT})",
    )
    parser.add_argument(
        "--brotli",
        type=int,
        default=None,
        metavar="Q",
        help="Compress strings at brotli quality Q (0-11); disables the msgpack comparison",
    )
    args = parser.parse_args()
    n_time = max(1, args.iter)
    warmup = max(0, args.warmup)
    runs = max(1, args.runs)

    impls = _load_implementations(args.brotli)
    labels = [label for label, _, _ in impls]

    print("Benchmark: MessagePack encode/decode")
    print("  " + ", ".join(labels))
    print(f"  Timing: n={n_time}, warmup={warmup}, runs={runs} (median)")
    print()

    for direction in ("encode", "decode"):
        time_rows: list[tuple[str, list[float]]] = []
        mem_rows: list[tuple[str, list[float]]] = []
        for payload, sample_label in SAMPLES:
            times: list[float] = []
            mems: list[float] = []
            for _label, enc, dec in impls:
                if direction == "encode":
                    fn, arg = enc, payload
                else:
                    fn, arg = dec, enc(payload)
                times.append(_time_per_call_median(fn, arg, n_time, warmup, runs) * 1000)
                mems.append(_peak_memory_kb(fn, arg, N_MEM))
            time_rows.append((sample_label, times))
            mem_rows.append((sample_label, mems))
        _print_table(f"{direction}: time per call (ms, median over runs)", labels, time_rows, ".4f")
        _print_table(f"{direction}: peak memory (KiB)", labels, mem_rows, ".2f")


if __name__ == "__main__":
    main()
