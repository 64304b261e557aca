"""Command line demonstration: optimise offsets for a sample corridor."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from greenwave.color import Color
from greenwave.junction import Junction, Point
from greenwave.optimizer import CrossoverType, GeneticOptimizer
from greenwave.phase import Phase
from greenwave.signal import Signal


def _sample_junctions() -> list[Junction]:
    return [
        Junction(
            [
                Phase(0, [Signal(30, Color.GREEN), Signal(20, Color.RED)]),
                Phase(1, [Signal(20, Color.GREEN), Signal(15, Color.RED)]),
            ],
            point=Point(0, 0),
        ),
        Junction(
            [
                Phase(10, [Signal(20, Color.RED), Signal(35, Color.GREEN), Signal(5, Color.YELLOW)]),
                Phase(11, [Signal(10, Color.RED), Signal(10, Color.GREEN), Signal(5, Color.YELLOW)]),
            ],
            point=Point(0, 200),
        ),
        Junction(
            [
                Phase(20, [Signal(45, Color.RED), Signal(10, Color.GREEN)]),
                Phase(21, [Signal(7, Color.RED), Signal(18, Color.GREEN), Signal(5, Color.YELLOW)]),
            ],
            point=Point(0, 450),
        ),
        Junction(
            [
                Phase(20, [Signal(40, Color.RED), Signal(15, Color.GREEN)]),
                Phase(21, [Signal(10, Color.RED), Signal(20, Color.GREEN)]),
            ],
            point=Point(0, 600),
        ),
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greenwave",
        description="Optimise traffic light offsets of a sample corridor for green waves.",
    )
    parser.add_argument("--speed", type=float, default=50.0, help="desired speed in km/h")
    parser.add_argument("--population", type=int, default=50, help="population size")
    parser.add_argument("--generations", type=int, default=100, help="number of generations")
    parser.add_argument("--mutation-rate", type=float, default=0.1, help="mutation probability")
    parser.add_argument("--tournament-size", type=int, default=3, help="tournament size")
    parser.add_argument(
        "--crossover",
        choices=[c.value for c in CrossoverType],
        default=CrossoverType.BLEND.value,
        help="crossover method",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the optimiser and print the fitness history and the offsets."""
    args = _parser().parse_args(argv)
    junctions = _sample_junctions()
    optimizer = GeneticOptimizer(
        junctions,
        args.speed,
        args.population,
        args.generations,
        args.mutation_rate,
        args.tournament_size,
        CrossoverType(args.crossover),
        random.Random(args.seed),
    )
    offsets = optimizer.optimize()
    print("Best fitness history:")
    for generation, fitness in enumerate(optimizer.best_fitness_history):
        print(f"Generation {generation}: {fitness:f}")
    print("Optimized offsets:")
    for position, offset in enumerate(offsets):
        print(f"Junction at position {position} has new offset {offset:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())