"""Benchmarks for the early-exit traversals against their plain stdlib equivalents."""

import functools
import statistics
import timeit
from collections.abc import Callable
from typing import Annotated, Final, NamedTuple

import typer
from rich.console import Console
from rich.table import Table

import tidbits as tb

type BenchFn = Callable[[], object]

SIZES: Final = (1_000, 10_000, 100_000)
CALLS_BY_RUN: Final = 10

app = typer.Typer(help="Benchmarks for tidbits traversals.")

CONSOLE: Final = Console()


class Case(NamedTuple):
    """One benchmarked pair, both sides must give the same value."""

    name: str
    size: int
    ours: BenchFn
    baseline: BenchFn


def _cases(size: int) -> list[Case]:
    data = list(range(size))
    return [
        Case(
            "try_to_fold",
            size,
            lambda: tb.try_to_fold(data, lambda acc, n, _bail: acc + n, 0).unwrap(),
            lambda: functools.reduce(lambda acc, n: acc + n, data, 0),
        ),
        Case(
            "bailable_map",
            size,
            lambda: tb.bailable_map(data, lambda n, _bail: n * 2).unwrap(),
            lambda: [n * 2 for n in data],
        ),
    ]


def _median(fn: BenchFn, runs: int) -> float:
    return statistics.median(timeit.repeat(fn, number=CALLS_BY_RUN, repeat=runs))


@app.command()
def run(
    *,
    runs: Annotated[int, typer.Option("--runs", help="Repeats per case.")] = 5,
) -> None:
    """Time every case and print a comparison table."""
    table = Table(title="tidbits traversals")
    for column in ("name", "size", "tidbits (s)", "baseline (s)", "ratio"):
        table.add_column(column)

    for size in SIZES:
        for case in _cases(size):
            if case.ours() != case.baseline():
                CONSOLE.print(f"✗ {case.name} @ {size}: results differ", style="bold red")
                raise typer.Exit(code=1)
            ours = _median(case.ours, runs)
            baseline = _median(case.baseline, runs)
            table.add_row(
                case.name,
                str(size),
                f"{ours:.6f}",
                f"{baseline:.6f}",
                f"{ours / baseline:.2f}x",
            )

    CONSOLE.print(table)


if __name__ == "__main__":
    app()
