"""Optimisation of traffic light offsets for green waves."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from greenwave.green_wave import find_green_waves
from greenwave.green_wave_chain import merge_green_waves
from greenwave.junction import Junction


class Optimizer(ABC):
    """Something that computes offsets for a sequence of traffic lights."""

    @abstractmethod
    def optimize(self) -> list[float]:
        """Return the optimal offset of every junction, in seconds."""


class CrossoverType(Enum):
    """How two parents are combined into a child."""

    BLEND = "blend"
    UNIFORM = "uniform"

    def __str__(self) -> str:
        return self.value


@dataclass
class Individual:
    """A candidate solution: one offset per junction and its fitness."""

    offsets: list[float] = field(default_factory=list)
    fitness: float = 0.0


def blend_crossover(
    cycle_lengths: Sequence[float],
    parent1: Individual,
    parent2: Individual,
    rng: random.Random,
) -> Individual:
    """Child whose offsets are random weighted means of the parents' offsets."""
    offsets = [0.0]
    for i in range(1, len(cycle_lengths)):
        weight = rng.random()
        blended = weight * parent1.offsets[i] + (1 - weight) * parent2.offsets[i]
        offsets.append(math.fmod(blended, cycle_lengths[i]))
    return Individual(offsets[: len(cycle_lengths)])


def uniform_crossover(
    cycle_lengths: Sequence[float],
    parent1: Individual,
    parent2: Individual,
    rng: random.Random,
) -> Individual:
    """Child whose offsets are each taken from one parent at random."""
    offsets = [0.0]
    for i in range(1, len(cycle_lengths)):
        chosen = parent1.offsets[i] if rng.random() < 0.5 else parent2.offsets[i]
        offsets.append(math.fmod(chosen, cycle_lengths[i]))
    return Individual(offsets[: len(cycle_lengths)])


_CrossoverFunc = Callable[
    [Sequence[float], Individual, Individual, random.Random], Individual
]

_CROSSOVERS: dict[CrossoverType, _CrossoverFunc] = {
    CrossoverType.BLEND: blend_crossover,
    CrossoverType.UNIFORM: uniform_crossover,
}


class GeneticOptimizer(Optimizer):
    """Genetic algorithm searching offsets that maximise through green waves.

    The first junction's offset is always zero. Evaluating a candidate sets
    the offsets of the given junctions in place.
    """

    def __init__(
        self,
        junctions: Sequence[Junction],
        speed_kmh: float,
        population_size: int,
        generations: int,
        mutation_rate: float,
        tournament_size: int,
        crossover_type: CrossoverType | str = CrossoverType.BLEND,
        rng: Optional[random.Random] = None,
    ) -> None:
        if len(junctions) < 2:
            raise ValueError("at least two junctions are required")
        if speed_kmh <= 0:
            raise ValueError("speed must be positive")
        if population_size < 1:
            raise ValueError("population size must be at least 1")
        if generations < 1:
            raise ValueError("generations must be at least 1")
        if tournament_size < 1:
            raise ValueError("tournament size must be at least 1")
        self.junctions = list(junctions)
        self.cycle_lengths = [float(junction.total_duration) for junction in self.junctions]
        if any(length <= 0 for length in self.cycle_lengths):
            raise ValueError("every junction needs a cycle of positive duration")
        self.speed_kmh = speed_kmh
        self.population_size = population_size
        self.generations = generations
        self.mutation_rate = mutation_rate
        self.tournament_size = tournament_size
        self.crossover_type = CrossoverType(crossover_type)
        self._crossover = _CROSSOVERS[self.crossover_type]
        self.rng = rng if rng is not None else random.Random()
        self._history: list[float] = []

    @property
    def best_fitness_history(self) -> list[float]:
        """Best fitness reached after each generation run so far."""
        return list(self._history)

    def _create_individual(self) -> Individual:
        offsets = [0.0] + [self.rng.uniform(0, length) for length in self.cycle_lengths[1:]]
        return Individual(offsets)

    def _evaluate_fitness(self, individual: Individual) -> float:
        for junction, offset in zip(self.junctions, individual.offsets):
            junction.offset = int(offset)
        segments = find_green_waves(self.junctions, self.speed_kmh)
        max_depth = len(self.junctions)
        return sum(
            (wave.depth / max_depth) ** 2 * wave.bandwidth
            for wave in merge_green_waves(segments)
        )

    def _select_parent(self, population: Sequence[Individual]) -> Individual:
        tournament = [
            population[self.rng.randrange(len(population))]
            for _ in range(self.tournament_size)
        ]
        return max(tournament, key=lambda ind: ind.fitness)

    def _mutate(self, individual: Individual, generation: int) -> None:
        progress = generation / self.generations
        max_delta = 5 * (1 - progress) + 0.5 * progress
        for i in range(1, len(individual.offsets)):
            if self.rng.random() < self.mutation_rate:
                delta = self.rng.uniform(-max_delta, max_delta)
                individual.offsets[i] = math.fmod(
                    individual.offsets[i] + delta, self.cycle_lengths[i]
                )

    def optimize(self) -> list[float]:
        """Run the algorithm and return the offsets of the fittest individual.

        Raises RuntimeError if no individual yields any through green wave.
        """
        population = [self._create_individual() for _ in range(self.population_size)]
        best_fitness = 0.0
        best: Optional[Individual] = None
        for generation in range(self.generations):
            for individual in population:
                individual.fitness = self._evaluate_fitness(individual)
                if individual.fitness > best_fitness:
                    best_fitness = individual.fitness
                    best = individual
            if best is None:
                raise RuntimeError("no through green wave found for any individual")
            next_population = [best]
            while len(next_population) < self.population_size:
                parent1 = self._select_parent(population)
                parent2 = self._select_parent(population)
                child = self._crossover(self.cycle_lengths, parent1, parent2, self.rng)
                self._mutate(child, generation)
                next_population.append(child)
            population = next_population
            self._history.append(best_fitness)
        assert best is not None
        return list(best.offsets)