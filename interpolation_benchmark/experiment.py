import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

from .generators import GENERATORS, make_rng
from .searches import SEARCHES
from .utils import AtomicCounter, lerp
from .verification import VerificationFailure, verify_result


@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Settings shared by the sweep and the throughput benchmark.

    max_value: sorted lists hold values between 0 and this number (inclusive).
    max_size: the sweep covers list sizes from 1 to this many values.
    trials_per_size: how many times each test is repeated to gather min, max, average.
    perf_searches: how many searches are timed per list type in the throughput benchmark.
    """
    max_value: int = 2000
    max_size: int = 1000
    trials_per_size: int = 100
    perf_searches: int = 100000
    verify: bool = True
    seed: int | None = None
    verbose: bool = True

    def __post_init__(self):
        if self.max_value < 0:
            raise ValueError(f"max_value must be non-negative, got {self.max_value}")
        for name in ("max_size", "trials_per_size", "perf_searches"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")


@dataclass
class GuessStats:
    minimum: int = 0
    maximum: int = 0
    average: float = 0.0
    last: int = 0
    count: int = 0

    def update(self, guesses: int) -> None:
        self.count += 1
        if self.count == 1:
            self.minimum = self.maximum = guesses
        else:
            self.minimum = min(self.minimum, guesses)
            self.maximum = max(self.maximum, guesses)
        self.average = lerp(self.average, float(guesses), 1.0 / self.count)
        self.last = guesses


@dataclass
class GeneratorSweep:
    """
    Sweep results for one list generator.
    stats[strategy][size - 1] holds the guess statistics for lists of that size.
    sequence is the last list generated at the largest size.
    """
    generator: str
    stats: dict[str, list[GuessStats]] = field(default_factory=dict)
    sequence: list[int] = field(default_factory=list)
    failures: list[VerificationFailure] = field(default_factory=list)


@dataclass(frozen=True)
class ThroughputResult:
    strategy: str
    generator: str
    seconds: float
    guesses: int


def _report_failure(failure: VerificationFailure) -> None:
    print(failure.describe())


# --- Accuracy / Scaling Sweep ---

def run_generator_sweep(name: str, make_list, config: BenchmarkConfig, rng: np.random.Generator,
                        strategies: dict = None, on_failure=_report_failure) -> GeneratorSweep:
    """
    Runs every strategy against freshly generated lists of every size from 1 to
    config.max_size, repeating each size config.trials_per_size times.
    Mismatches against linear search are recorded and passed to on_failure; they never
    stop the sweep.
    """
    strategies = SEARCHES if strategies is None else strategies
    sweep = GeneratorSweep(generator=name)
    values = []

    for strategy_name, search in strategies.items():
        size_stats = []
        for size in range(1, config.max_size + 1):
            stats = GuessStats()
            for _ in range(config.trials_per_size):
                target = int(rng.integers(0, config.max_value, endpoint=True))
                values = make_list(size, config.max_value, rng)
                result = search(values, target)

                if config.verify:
                    failure = verify_result(values, target, result, name, strategy_name)
                    if failure is not None:
                        sweep.failures.append(failure)
                        if on_failure is not None:
                            on_failure(failure)

                stats.update(result.guesses)
            size_stats.append(stats)
        sweep.stats[strategy_name] = size_stats

    sweep.sequence = list(values)
    return sweep

def run_sweep(config: BenchmarkConfig, generators: dict = None, strategies: dict = None,
              num_workers: int = None, on_failure=_report_failure) -> dict[str, GeneratorSweep]:
    """
    Runs run_generator_sweep for every generator on a pool of worker threads.

    Workers claim generator indices from a shared counter until none are left. Each job
    gets its own random generator spawned from one root seed, so a seeded run gives the
    same results whatever the thread scheduling.
    Returns the sweeps keyed by generator name, in catalog order.
    """
    generators = GENERATORS if generators is None else generators
    strategies = SEARCHES if strategies is None else strategies
    jobs = list(generators.items())
    seeds = np.random.SeedSequence(config.seed).spawn(len(jobs))
    results = [None] * len(jobs)
    next_job = AtomicCounter()

    def worker():
        job_index = next_job.fetch_add(1)
        while job_index < len(jobs):
            name, make_list = jobs[job_index]
            if config.verbose:
                print(f"Starting {name}")
            rng = make_rng(seeds[job_index])
            results[job_index] = run_generator_sweep(name, make_list, config, rng, strategies, on_failure)
            if config.verbose:
                print(f"Done with {name}")
            job_index = next_job.fetch_add(1)

    if num_workers is None:
        num_workers = os.cpu_count() or 1
    with ThreadPoolExecutor(max_workers=num_workers) as pool:
        futures = [pool.submit(worker) for _ in range(num_workers)]
        for future in as_completed(futures):
            future.result()

    return {sweep.generator: sweep for sweep in results}


# --- Throughput Benchmark ---

def run_throughput(config: BenchmarkConfig, generators: dict = None, strategies: dict = None,
                   rng: np.random.Generator = None) -> list[ThroughputResult]:
    """
    Times a batch of config.perf_searches searches for every strategy on a list of
    config.max_size values from every generator.
    The same batch of targets is used for every combination. Runs on the calling
    thread only, so timings are not disturbed by other workers.
    """
    generators = GENERATORS if generators is None else generators
    strategies = SEARCHES if strategies is None else strategies
    if rng is None:
        rng = make_rng(config.seed)

    targets = rng.integers(0, config.max_value, size=config.perf_searches, endpoint=True).tolist()
    results = []

    strategy_iterator = tqdm(strategies.items(), desc="Throughput", unit="strategy",
                             disable=not config.verbose)
    for strategy_name, search in strategy_iterator:
        total_seconds = 0.0
        total_guesses = 0
        for generator_name, make_list in generators.items():
            values = make_list(config.max_size, config.max_value, rng)

            guesses = 0
            start_time = time.perf_counter()
            for target in targets:
                guesses += search(values, target).guesses
            elapsed = time.perf_counter() - start_time

            results.append(ThroughputResult(strategy_name, generator_name, elapsed, guesses))
            total_seconds += elapsed
            total_guesses += guesses
            if config.verbose:
                tqdm.write(f"  {strategy_name} {generator_name} : {elapsed:f} seconds")

        if total_guesses:
            strategy_iterator.set_postfix({'ns/guess': f'{total_seconds * 1e9 / total_guesses:.2f}'})

    return results
