# greenwave

Tools for studying *green waves*: windows of time in which a vehicle
travelling at a steady speed meets a green light at each junction along a
corridor.

The package models signalised junctions, works out the green intervals each
one shows during its cycle, and finds the bands in which a vehicle can pass
from one junction to the next without stopping. It then chains those bands
into *through* green waves that span several junctions. A genetic optimiser
searches for cycle offsets that make those through waves long and wide.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Concepts

- `Color` (`greenwave.color`): the state a signal shows. Only
  `Color.GREEN` and `Color.GREENPRIORITY` count as green (`Color.is_green`).
- `Signal` (`greenwave.signal`): one colour and how long it lasts, in
  seconds. `min_duration` and `max_duration` default to the duration.
- `Phase` (`greenwave.phase`): an identifier and an ordered list of
  signals. `Phase.total_seconds` is the sum of their durations.
- `Junction` and `Point` (`greenwave.junction`): a cycle of phases at a
  point in the plane (metres), with an integer `offset` in seconds that
  shifts its cycle in time. `Junction.total_duration` is the length of the
  cycle. `Junction.green_intervals()` lists the green periods of the cycle,
  each tagged with the index of its phase, ignoring the offset.
- `GreenInterval` (`greenwave.green_interval`): a green period with its
  phase index. `GreenInterval.can_connect(other)` returns the overlap of two
  intervals, or `None` if they overlap by no more than 0.01 s.
- `GreenWave` (`greenwave.green_wave`): the band between two neighbouring
  junctions in which a vehicle that leaves on green at the first junction
  arrives on green at the second.
- `ThroughGreenWave` (`greenwave.through_green_wave`): a chain of intervals
  across several junctions, with its `depth` (how many junctions it spans)
  and its `bandwidth` (the length of the narrowest interval in the chain).

## Finding green waves

```python
from greenwave.color import Color
from greenwave.signal import Signal
from greenwave.phase import Phase
from greenwave.junction import Junction, Point
from greenwave.green_wave import find_green_waves
from greenwave.green_wave_chain import merge_green_waves

junctions = [
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
]

segments = find_green_waves(junctions, 40.0)  # desired speed in km/h
for wave in merge_green_waves(segments):
    print(wave.depth, wave.bandwidth)
```

`find_green_waves` returns one list of `GreenWave` objects for each pair of
neighbouring junctions. Each junction's green intervals are first shifted by
its offset and split where they wrap round the end of the cycle. Distances
come from the junctions' points and travel times from the desired speed.
`find_green_waves_between_intervals` does the same for two given lists of
intervals, a distance and a travel time.

`merge_green_waves` joins waves that line up in the same phase into
`ThroughGreenWave` objects spanning at least two segments. The lower-level
steps are `find_wave_connections`, `build_chains`,
`adjust_wave_by_connection`, `create_adjusted_segments` and
`extract_chains`, all in `greenwave.green_wave_chain`.

`find_green_waves` raises `ValueError` for an empty list of junctions, and
`extract_chains` and `merge_green_waves` raise `ValueError` for an empty
list of segments.

## Optimising offsets

```python
import random

from greenwave.optimizer import CrossoverType, GeneticOptimizer

optimizer = GeneticOptimizer(
    junctions,
    speed_kmh=50.0,
    population_size=50,
    generations=100,
    mutation_rate=0.1,
    tournament_size=3,
    crossover_type=CrossoverType.BLEND,
    rng=random.Random(42),
)
offsets = optimizer.optimize()
print(offsets)
print(optimizer.best_fitness_history)
```

The first junction's offset is always `0.0`. The others start uniformly
within their own cycle lengths and are reduced by the cycle length after
crossover and mutation. Each candidate is scored by summing, over all
through green waves, the square of (depth ÷ number of junctions) multiplied
by the bandwidth. Tournament selection picks the parents and the best
individual so far is carried into every new generation. Mutation steps
shrink from ±5 s towards ±0.5 s as the generations go by.

`CrossoverType.UNIFORM` (or `"uniform"`) takes each offset from one parent
or the other instead of blending the two (`blend_crossover`,
`uniform_crossover`). Pass a seeded `random.Random` for repeatable runs.

Scoring a candidate sets the `offset` of the given junctions in place. The
constructor raises `ValueError` for fewer than two junctions, a speed that
is not positive, a population, generation count or tournament size below 1,
or a junction whose cycle has no positive duration. `optimize()` raises
`RuntimeError` if no candidate in a generation yields any through green
wave. `GeneticOptimizer` is a subclass of the abstract `Optimizer`.

## Command line

```
greenwave
```

This runs the optimiser on a built-in four-junction corridor and prints the
best fitness reached in each generation and the resulting offset of each
junction. Options:

- `--speed` desired speed in km/h (default 50)
- `--population` population size (default 50)
- `--generations` number of generations (default 100)
- `--mutation-rate` mutation probability (default 0.1)
- `--tournament-size` tournament size (default 3)
- `--crossover` `blend` or `uniform` (default `blend`)
- `--seed` random seed

## What it does not do

The package reads no files: junctions, phases and signals are built in
Python code. The `greenwave` command only works on its built-in sample
corridor. Offsets are found for fixed signal durations; the
`min_duration` and `max_duration` of a signal are stored but not used by
the optimiser.