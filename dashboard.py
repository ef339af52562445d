import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from interpolation_benchmark.experiment import BenchmarkConfig, run_sweep, run_throughput
from interpolation_benchmark.generators import GENERATORS, get_generator, make_rng
from interpolation_benchmark.searches import SEARCHES, get_search
from interpolation_benchmark.reporting import (
    STATISTICS,
    build_guess_figure,
    sweep_to_dataframe,
    throughput_summary,
    throughput_to_dataframe,
)

st.set_page_config(page_title="Interpolation Search Benchmark Dashboard", layout="wide")

st.title("Interpolation Search Benchmark Dashboard")
st.markdown("Compare how many guesses linear, binary, line fit and hybrid search need on sorted lists of different shapes.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Lists")
max_value = st.sidebar.number_input(
    "Max Value",
    min_value=1,
    max_value=1000000,
    value=2000,
    step=100,
    help="Lists hold values between 0 and this number (inclusive)"
)
max_size = st.sidebar.number_input(
    "Max List Size",
    min_value=1,
    max_value=5000,
    value=200,
    step=50,
    help="The sweep covers list sizes from 1 to this many values"
)
selected_generators = st.sidebar.multiselect(
    "List Types",
    options=list(GENERATORS),
    default=list(GENERATORS),
)

st.sidebar.subheader("Runs")
trials_per_size = st.sidebar.number_input(
    "Runs per Size",
    min_value=1,
    max_value=1000,
    value=20,
    help="Number of random searches per list size to gather min, max and average"
)
perf_searches = st.sidebar.number_input(
    "Timed Searches",
    min_value=100,
    max_value=1000000,
    value=10000,
    step=1000,
    help="Searches per list type in the throughput benchmark"
)
seed_text = st.sidebar.text_input("Seed", value="", help="Leave empty to seed from OS entropy")
verify = st.sidebar.checkbox("Verify against linear search", value=True)

st.sidebar.subheader("Searches")
selected_searches = [name for name in SEARCHES if st.sidebar.checkbox(name, value=True)]

col1, col2 = st.columns([1, 3])

with col1:
    run_benchmark = st.button("Run Benchmark", type="primary", use_container_width=True)

with col2:
    st.info(f"Configuration: sizes 1..{max_size:,}, values 0..{max_value:,}, {trials_per_size} runs per size")

if 'sweeps' not in st.session_state:
    st.session_state.sweeps = None
    st.session_state.throughput = None

def run_benchmark_pipeline(config):
    """Run the sweep and the throughput benchmark for the selected lists and searches"""
    generators = {name: get_generator(name) for name in selected_generators}
    searches = {name: get_search(name) for name in selected_searches}

    progress_bar = st.progress(0)
    status_text = st.empty()
    failure_log = []

    status_text.text("Sweeping list sizes...")
    sweeps = run_sweep(config, generators=generators, strategies=searches, on_failure=failure_log.append)
    progress_bar.progress(70)

    status_text.text(f"Timing {config.perf_searches:,} searches per list type...")
    throughput = run_throughput(config, generators=generators, strategies=searches, rng=make_rng(config.seed))
    progress_bar.progress(100)
    status_text.text("Benchmark complete!")

    for failure in failure_log[:20]:
        st.warning(failure.describe())
    if len(failure_log) > 20:
        st.warning(f"... and {len(failure_log) - 20} more verification failures")

    return sweeps, throughput

if run_benchmark:
    if not selected_generators or not selected_searches:
        st.warning("Please select at least one list type and one search!")
    else:
        try:
            seed = int(seed_text) if seed_text.strip() else None
        except ValueError:
            st.error(f"Seed must be an integer, got {seed_text!r}")
        else:
            config = BenchmarkConfig(
                max_value=int(max_value),
                max_size=int(max_size),
                trials_per_size=int(trials_per_size),
                perf_searches=int(perf_searches),
                verify=verify,
                seed=seed,
                verbose=False,
            )
            with st.spinner("Running benchmark..."):
                st.session_state.sweeps, st.session_state.throughput = run_benchmark_pipeline(config)

# Display results
if st.session_state.sweeps is not None:
    st.markdown("---")
    st.subheader("Guesses by List Size")

    statistic = st.radio("Statistic", options=list(STATISTICS), index=2, horizontal=True)
    tabs = st.tabs(list(st.session_state.sweeps))
    for tab, (name, sweep) in zip(tabs, st.session_state.sweeps.items()):
        with tab:
            st.plotly_chart(build_guess_figure(sweep, statistic), use_container_width=True, key=f"guesses_{name}")

            sequence_fig = go.Figure()
            sequence_fig.add_trace(go.Scatter(
                x=list(range(len(sweep.sequence))),
                y=sweep.sequence,
                mode='lines',
                line=dict(color='seagreen', width=2),
                name='Values'
            ))
            sequence_fig.update_layout(
                title=f"{name} - Largest Generated List",
                xaxis_title="Index",
                yaxis_title="Value",
                height=300,
            )
            st.plotly_chart(sequence_fig, use_container_width=True, key=f"sequence_{name}")

            with st.expander("Raw table"):
                st.dataframe(sweep_to_dataframe(sweep), use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Throughput")

    summary = throughput_summary(st.session_state.throughput)
    st.dataframe(summary, use_container_width=True, hide_index=True)

    tab1, tab2 = st.tabs(["Time per Guess", "Per List Type"])

    with tab1:
        st.bar_chart(summary.set_index('Strategy')['ns/Guess'])

    with tab2:
        detail = throughput_to_dataframe(st.session_state.throughput)
        st.bar_chart(pd.pivot_table(detail, index='List', columns='Strategy', values='Seconds', sort=False))

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Configure Lists**: Set the value range, the largest list size and which list shapes to test
    2. **Configure Runs**: Set how many random searches are done per size and for the timing benchmark
    3. **Select Searches**: Choose which search methods to compare
    4. **Run Benchmark**: Click the "Run Benchmark" button
    5. **Analyze Results**: Compare guess counts per list size and the time spent per guess

    ### List Shapes

    - **Linear**: line fit search does very well compared to binary search
    - **Linear Outlier**: one huge value at the end makes line fit creep forward one element at a time
    - **Log**: binary search does better, line fit does not make enough progress
    - **Hybrid**: alternates line fit and binary steps to bound the bad cases
    """)
