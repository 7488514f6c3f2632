"""Command-line entry point that reports which problem was requested."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Print a banner and either usage help or the chosen problem number."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("🚀 LeetCode Solutions")
    print("================================")

    if not args:
        print("使用方法:")
        print("  kata-solutions [problem_number]")
        print("例:")
        print("  kata-solutions 1")
        return 0

    problem_number = args[0]
    print(f"問題 {problem_number} を実行中...")
    print(f"問題 {problem_number} の実装は problems/ ディレクトリ内にあります")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())