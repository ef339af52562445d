import os
import argparse

from interpolation_benchmark.experiment import BenchmarkConfig, run_sweep, run_throughput
from interpolation_benchmark.generators import GENERATORS, make_rng
from interpolation_benchmark.reporting import build_guess_figure, format_throughput_table, write_sweep_csvs


def run_benchmark(config: BenchmarkConfig, out_dir: str = "out", num_workers: int = None,
                  plots: bool = False, sweep: bool = True, throughput: bool = True):
    """
    Runs the accuracy sweep across all list generators, writes the results to CSV,
    then runs the single threaded throughput benchmark and prints its summary.
    """
    print("--- Interpolation Search Benchmark ---")

    if sweep:
        print(f"\n1. Sweeping list sizes 1..{config.max_size} "
              f"({config.trials_per_size} runs per size, values 0..{config.max_value})...")
        sweeps = run_sweep(config, num_workers=num_workers)

        paths = write_sweep_csvs(sweeps, out_dir)
        for path in paths:
            print(f"Wrote {path}")

        if plots:
            for name, generator_sweep in sweeps.items():
                path = os.path.join(out_dir, f"{name}.html")
                build_guess_figure(generator_sweep).write_html(path)
                print(f"Wrote {path}")

        num_failures = sum(len(s.failures) for s in sweeps.values())
        if num_failures:
            print(f"Warning: {num_failures} verification failures.")

    if throughput:
        print(f"\n2. Timing {config.perf_searches} searches per list type...")
        results = run_throughput(config, rng=make_rng(config.seed))

        print("\n\n--- Throughput Results ---")
        print(format_throughput_table(results))

    print("-" * 80)


if __name__ == "__main__":
    defaults = BenchmarkConfig()
    parser = argparse.ArgumentParser(description="Compare linear, binary, line fit and hybrid search on sorted lists.")
    parser.add_argument("--max-value", type=int, default=defaults.max_value,
                        help="Lists hold values between 0 and this number (inclusive).")
    parser.add_argument("--max-size", type=int, default=defaults.max_size,
                        help="The sweep covers list sizes from 1 to this many values.")
    parser.add_argument("--trials", type=int, default=defaults.trials_per_size,
                        help="Runs per list size to gather min, max and average guesses.")
    parser.add_argument("--perf-searches", type=int, default=defaults.perf_searches,
                        help="Searches timed per list type in the throughput benchmark.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible runs. Uses OS entropy when omitted.")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker threads for the sweep. Defaults to the CPU count.")
    parser.add_argument("--out-dir", default="out", help="Directory for the CSV files.")
    parser.add_argument("--plots", action="store_true", help=f"Also write an HTML plot per list type ({', '.join(GENERATORS)}).")
    parser.add_argument("--no-verify", action="store_true", help="Skip checking results against linear search.")
    parser.add_argument("--skip-sweep", action="store_true", help="Only run the throughput benchmark.")
    parser.add_argument("--skip-throughput", action="store_true", help="Only run the sweep.")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output.")
    args = parser.parse_args()

    config = BenchmarkConfig(
        max_value=args.max_value,
        max_size=args.max_size,
        trials_per_size=args.trials,
        perf_searches=args.perf_searches,
        verify=not args.no_verify,
        seed=args.seed,
        verbose=not args.quiet,
    )
    run_benchmark(config, out_dir=args.out_dir, num_workers=args.workers, plots=args.plots,
                  sweep=not args.skip_sweep, throughput=not args.skip_throughput)
