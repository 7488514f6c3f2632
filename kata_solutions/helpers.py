"""Small helpers for timing, printing and comparing solution results."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def measure_execution_time(fn: Callable[[], Any]) -> float:
    """Run ``fn`` once and return the elapsed wall time in seconds."""
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


def format_value(value: Any) -> str:
    """Render a value the way a plain ``%v`` verb would: lists as ``[a b c]``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: format_value(kv[0]))
        body = " ".join(f"{format_value(k)}:{format_value(v)}" for k, v in items)
        return f"map[{body}]"
    return str(value)


def _join(values: Iterable[str]) -> str:
    return "[" + ", ".join(values) + "]"


def print_array(arr: Sequence[int], name: str) -> None:
    """Print an integer sequence as ``name: [1, 2, 3]``."""
    print(f"{name}: {_join(str(v) for v in arr)}")


def print_2d_array(arr: Sequence[Sequence[int]], name: str) -> None:
    """Print each row of a 2-D integer array on its own indexed line."""
    print(f"{name}:")
    for index, row in enumerate(arr):
        print(f"  [{index}]: {_join(str(v) for v in row)}")


def print_string_array(arr: Sequence[str], name: str) -> None:
    """Print a string sequence with each element double-quoted."""
    print(f"{name}: {_join(f'\"{v}\"' for v in arr)}")


def compare_results(got: Any, want: Any, test_name: str) -> bool:
    """Print a comparison report and return whether both render identically."""
    equal = format_value(got) == format_value(want)
    print(f"テスト: {test_name}")
    print(f"  結果: {format_value(got)}")
    print(f"  期待: {format_value(want)}")
    print(f"  正解: {format_value(equal)}\n")
    return equal


def print_execution_time(duration: float, function_name: str) -> None:
    """Print a duration given in seconds, labelled with the function name."""
    print(f"⏱️  {function_name} の実行時間: {_format_duration(duration)}")


def _format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:g}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:g}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:g}µs"
    return f"{round(seconds * 1e9)}ns"