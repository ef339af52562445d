import os

import pandas as pd
import plotly.graph_objects as go
from tabulate import tabulate

from .experiment import GeneratorSweep, ThroughputResult


STATISTICS = ("Min", "Max", "Avg", "Single")


def sweep_to_dataframe(sweep: GeneratorSweep) -> pd.DataFrame:
    """
    Lays out a generator sweep one row per list size, with Min, Max, Avg and Single
    columns per strategy and the largest generated list in the Sequence column.
    """
    sizes = len(next(iter(sweep.stats.values()), []))
    columns = {"Sample Count": list(range(1, sizes + 1))}

    for strategy, size_stats in sweep.stats.items():
        columns[f"{strategy} Min"] = [s.minimum for s in size_stats]
        columns[f"{strategy} Max"] = [s.maximum for s in size_stats]
        columns[f"{strategy} Avg"] = [s.average for s in size_stats]
        columns[f"{strategy} Single"] = [s.last for s in size_stats]

    # the sequence is padded when the sweep covered more sizes than the list is long
    sequence = list(sweep.sequence[:sizes])
    columns["Sequence"] = sequence + [None] * (sizes - len(sequence))
    return pd.DataFrame(columns)

def write_sweep_csvs(sweeps: dict[str, GeneratorSweep], out_dir: str = "out") -> list[str]:
    """
    Writes one CSV per generator to out_dir/<generator>.csv.
    Returns the written paths.
    """
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for name, sweep in sweeps.items():
        path = os.path.join(out_dir, f"{name}.csv")
        sweep_to_dataframe(sweep).to_csv(path, index=False)
        paths.append(path)
    return paths


def throughput_to_dataframe(results: list[ThroughputResult]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Strategy": r.strategy, "List": r.generator, "Seconds": r.seconds, "Guesses": r.guesses}
            for r in results
        ],
        columns=["Strategy", "List", "Seconds", "Guesses"],
    )

def throughput_summary(results: list[ThroughputResult]) -> pd.DataFrame:
    """
    Totals time and guesses per strategy and derives the nanoseconds spent per guess.
    """
    df = throughput_to_dataframe(results)
    summary = df.groupby("Strategy", sort=False)[["Seconds", "Guesses"]].sum().reset_index()
    summary["ns/Guess"] = [
        seconds * 1e9 / guesses if guesses else 0.0
        for seconds, guesses in zip(summary["Seconds"], summary["Guesses"])
    ]
    return summary

def format_throughput_table(results: list[ThroughputResult]) -> str:
    summary = throughput_summary(results)
    headers = ["Search Method", "Total Time (s)", "Total Guesses", "Time per Guess (ns)"]
    table_data = [
        [row["Strategy"], f"{row['Seconds']:.4f}", f"{int(row['Guesses']):,}", f"{row['ns/Guess']:.2f}"]
        for _, row in summary.iterrows()
    ]
    return tabulate(table_data, headers=headers, tablefmt="grid")


def build_guess_figure(sweep: GeneratorSweep, statistic: str = "Avg") -> go.Figure:
    """
    Plots one guess-count curve per strategy against list size.
    statistic is one of Min, Max, Avg or Single.
    """
    if statistic not in STATISTICS:
        raise ValueError(f"Unknown statistic {statistic!r}, expected one of {list(STATISTICS)}")

    df = sweep_to_dataframe(sweep)
    fig = go.Figure()
    for strategy in sweep.stats:
        fig.add_trace(go.Scatter(
            x=df["Sample Count"],
            y=df[f"{strategy} {statistic}"],
            mode='lines',
            name=strategy,
            hovertemplate=f'{strategy}<br>Size: %{{x}}<br>Guesses: %{{y:.2f}}<extra></extra>'
        ))

    fig.update_layout(
        title=f"{sweep.generator} - {statistic} Guesses",
        xaxis_title="List Size",
        yaxis_title="Guesses",
        hovermode='x unified',
        showlegend=True,
    )
    return fig
