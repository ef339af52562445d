import pandas as pd
import pytest

from interpolation_benchmark.experiment import BenchmarkConfig, GeneratorSweep, GuessStats, ThroughputResult, run_sweep
from interpolation_benchmark.generators import make_list_linear
from interpolation_benchmark.reporting import (
    build_guess_figure,
    format_throughput_table,
    sweep_to_dataframe,
    throughput_summary,
    throughput_to_dataframe,
    write_sweep_csvs,
)


def _sweep() -> GeneratorSweep:
    stats = []
    for size in range(1, 4):
        s = GuessStats()
        s.update(size)
        s.update(size + 2)
        stats.append(s)
    return GeneratorSweep(generator="Linear", stats={"Binary Search": stats}, sequence=[0, 5, 10])


def test_sweep_dataframe_layout() -> None:
    df = sweep_to_dataframe(_sweep())
    assert list(df.columns) == [
        "Sample Count",
        "Binary Search Min",
        "Binary Search Max",
        "Binary Search Avg",
        "Binary Search Single",
        "Sequence",
    ]
    assert df["Sample Count"].tolist() == [1, 2, 3]
    assert df["Binary Search Min"].tolist() == [1, 2, 3]
    assert df["Binary Search Max"].tolist() == [3, 4, 5]
    assert df["Binary Search Avg"].tolist() == pytest.approx([2.0, 3.0, 4.0])
    assert df["Binary Search Single"].tolist() == [3, 4, 5]
    assert df["Sequence"].tolist() == [0, 5, 10]


def test_write_sweep_csvs(tmp_path) -> None:
    config = BenchmarkConfig(max_value=100, max_size=8, trials_per_size=3, seed=5, verbose=False)
    sweeps = run_sweep(config, generators={"Linear": make_list_linear}, num_workers=2)
    paths = write_sweep_csvs(sweeps, str(tmp_path / "out"))
    assert len(paths) == 1
    df = pd.read_csv(paths[0])
    assert len(df) == 8
    assert df["Sequence"].tolist() == make_list_linear(8, 100)
    assert (df["Linear Search Min"] >= 1).all()


def _throughput() -> list[ThroughputResult]:
    return [
        ThroughputResult("Binary Search", "Linear", 0.5, 1000),
        ThroughputResult("Binary Search", "Log", 0.25, 500),
        ThroughputResult("Line Fit", "Linear", 0.1, 100),
        ThroughputResult("Line Fit", "Log", 0.3, 0),
    ]


def test_throughput_dataframe_rows() -> None:
    df = throughput_to_dataframe(_throughput())
    assert list(df.columns) == ["Strategy", "List", "Seconds", "Guesses"]
    assert len(df) == 4


def test_throughput_summary_per_strategy() -> None:
    summary = throughput_summary(_throughput())
    assert summary["Strategy"].tolist() == ["Binary Search", "Line Fit"]
    assert summary["Guesses"].tolist() == [1500, 100]
    assert summary["Seconds"].tolist() == pytest.approx([0.75, 0.4])
    assert summary["ns/Guess"].tolist() == pytest.approx([0.75e9 / 1500, 0.4e9 / 100])


def test_format_throughput_table_mentions_strategies() -> None:
    table = format_throughput_table(_throughput())
    assert "Binary Search" in table
    assert "Line Fit" in table
    assert "1,500" in table


def test_guess_figure_has_trace_per_strategy() -> None:
    fig = build_guess_figure(_sweep(), "Max")
    assert [trace.name for trace in fig.data] == ["Binary Search"]
    assert list(fig.data[0].y) == [3, 4, 5]
    with pytest.raises(ValueError):
        build_guess_figure(_sweep(), "Median")
