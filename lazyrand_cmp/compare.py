"""Reference-vector comparison for the Python generator.

Validates that ``lazyrand.Generator`` reproduces outputs recorded from the
reference xoshiro256++ implementation (with the same seed expansion) for a
fixed set of seeds and operations. A mismatch means the mixer, the seed
expansion or one of the derived operations has drifted.

Scenarios live in ``vectors/*.json``. Each names a seed (or a raw starting
state), an operation, its arguments, and the expected results.
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

from lazyrand.generator import WORD_BITS, Generator

_VECTORS_DIR = Path(__file__).parent / "vectors"


@dataclass
class Scenario:
    """One recorded scenario."""

    name: str
    op: str
    expected: Any
    seed: Optional[int] = None
    state: Optional[list[int]] = None
    args: list[Any] = field(default_factory=list)
    count: int = 1
    word_bits: Optional[int] = None

    @staticmethod
    def from_dict(d: dict) -> Scenario:
        return Scenario(
            name=d["name"],
            op=d["op"],
            expected=d["expected"],
            seed=d.get("seed"),
            state=d.get("state"),
            args=d.get("args", []),
            count=d.get("count", 1),
            word_bits=d.get("word_bits"),
        )

    def make_generator(self) -> Generator:
        if self.state is not None:
            return Generator.from_state(self.state)
        if self.seed is None:
            raise ValueError(f"Scenario {self.name!r} has no seed or state")
        return Generator.from_seed(self.seed)


def _draw(method: str) -> Callable[[Generator, Scenario], Any]:
    def run(gen: Generator, scenario: Scenario) -> list[Any]:
        fn = getattr(gen, method)
        return [fn(*scenario.args) for _ in range(scenario.count)]

    return run


def _shuffled(gen: Generator, scenario: Scenario) -> list[Any]:
    items = list(scenario.args[0])
    gen.shuffle(items)
    return items


def _state(gen: Generator, scenario: Scenario) -> list[int]:
    return list(gen.state)


def _after(method: str) -> Callable[[Generator, Scenario], Any]:
    def run(gen: Generator, scenario: Scenario) -> list[int]:
        getattr(gen, method)()
        return [gen.next_u64() for _ in range(scenario.count)]

    return run


OPERATIONS: dict[str, Callable[[Generator, Scenario], Any]] = {
    "next_u64": _draw("next_u64"),
    "next_int": _draw("next_int"),
    "next_bool": _draw("next_bool"),
    "next_f64": _draw("next_f64"),
    "next_isize": _draw("next_isize"),
    "next_usize": _draw("next_usize"),
    "choice": _draw("choice"),
    "shuffle": _shuffled,
    "state": _state,
    "jump": _after("jump"),
    "long_jump": _after("long_jump"),
}


def load_scenarios(path: Path) -> list[Scenario]:
    with open(path) as f:
        data = json.load(f)
    return [Scenario.from_dict(d) for d in data["scenarios"]]


def vector_files() -> list[Path]:
    return sorted(_VECTORS_DIR.glob("*.json"))


TEST_SCENARIOS: list[Scenario] = [
    s for path in vector_files() for s in load_scenarios(path)
]


def compare_values(expected: Any, actual: Any) -> list[str]:
    """Element-wise diff of two result lists.

    Returns a list of error messages (empty on match).
    """
    if not isinstance(expected, list) or not isinstance(actual, list):
        return [] if expected == actual else [f"{expected!r} vs {actual!r}"]
    diffs = []
    if len(expected) != len(actual):
        diffs.append(f"length: {len(expected)} vs {len(actual)}")
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            diffs.append(f"[{i}]: expected {e!r}, got {a!r}")
    return diffs


def run_comparison(
    scenario: Scenario, verbose: bool = False
) -> tuple[bool, list[str]]:
    """Run one scenario against the Python generator.

    Returns:
        (success: bool, diffs: list of error messages)
    """
    op = OPERATIONS.get(scenario.op)
    if op is None:
        return False, [f"Unknown operation {scenario.op!r}"]

    actual = op(scenario.make_generator(), scenario)
    diffs = compare_values(scenario.expected, actual)

    if verbose and diffs:
        print("\nDifferences found:")
        for diff in diffs:
            print(f"  - {diff}")

    return len(diffs) == 0, diffs


def _format_result(
    name: str, success: bool, diffs: list[str], verbose: bool
) -> str:
    status = "PASS" if success else "FAIL"
    lines = [f"{status}  {name}"]
    if not success and not verbose:
        lines.extend(f"      {d}" for d in diffs[:5])
        if len(diffs) > 5:
            lines.append(f"      ... {len(diffs) - 5} more")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point with pytest-compatible exit codes."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compare the Python generator against reference vectors"
    )
    parser.add_argument(
        "--scenario",
        type=str,
        help="Run specific scenario by name",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed comparison output",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop on first failure",
    )
    args = parser.parse_args(argv)

    scenarios = TEST_SCENARIOS
    if args.scenario:
        scenarios = [s for s in scenarios if s.name == args.scenario]
        if not scenarios:
            print(f"Scenario '{args.scenario}' not found")
            return 1

    passed = 0
    failed = 0
    skipped = 0
    t0 = time.perf_counter()
    for scenario in scenarios:
        if scenario.word_bits is not None and scenario.word_bits != WORD_BITS:
            print(f"SKIP  {scenario.name} (needs {scenario.word_bits}-bit)")
            skipped += 1
            continue
        success, diffs = run_comparison(scenario, verbose=args.verbose)
        print(_format_result(scenario.name, success, diffs, args.verbose))
        if success:
            passed += 1
        else:
            failed += 1
            if args.fail_fast:
                print(f"\n{passed} passed, {failed} failed (stopped early)")
                return 1
    total = time.perf_counter() - t0

    print(
        f"\n{passed} passed, {failed} failed, {skipped} skipped"
        f" ({total:.2f}s total)"
    )
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
