import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from bytetrie import ByteTrie, STOP
from components.bench import run_benchmark, summarize
from components.work_loads import WorkLoad

# Configure page
st.set_page_config(
    page_title="ByteTrie Bench",
    page_icon="🌲",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🌲 ByteTrie Bench")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Benchmark", "Trie Explorer"]
    )

    st.markdown("---")
    st.subheader("Workload")
    workload_name = st.selectbox("Key source", ["numeric", "random", "ips"])
    num_keys = st.number_input("Number of keys", min_value=100, max_value=1_000_000, value=50_000, step=1_000)
    seed = st.number_input("Seed", min_value=0, value=42, step=1)

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🔄 Clear Results"):
        st.session_state.pop('results', None)
        st.session_state.pop('trie', None)
        st.session_state.pop('trie_for', None)
        st.rerun()


@st.cache_data(show_spinner=False)
def load_keys(name, n, s):
    return WorkLoad(seed=s).by_name(name, n)


def build_trie(keys):
    return ByteTrie((k, i) for i, k in enumerate(keys))


keys = load_keys(workload_name, int(num_keys), int(seed))

# Main content area
if page == "Home":
    st.header("Dictionary vs. Trie")

    st.markdown("""
    This dashboard times a plain `dict` against `ByteTrie`, a byte-per-edge prefix tree
    that enumerates keys in dictionary order and supports prefix-restricted scans.

    **Sections:**
    - ⏱️ Benchmark: store / get / ordered iteration / prefix scan timings
    - 🔍 Trie Explorer: browse the entries under any prefix
    """)

    signature = (workload_name, int(num_keys), int(seed))
    trie = st.session_state.get('trie') if st.session_state.get('trie_for') == signature else None
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Workload Keys", f"{len(keys):,}")

    with col2:
        st.metric("Distinct Keys", f"{len(set(keys)):,}")

    with col3:
        st.metric("Trie Nodes", "—" if trie is None else f"{trie.count_nodes():,}")

    with col4:
        avg_bf = None if trie is None else trie.count_nodes(get_avg_branch_factor=True)
        st.metric("Avg Branch Factor", "—" if avg_bf is None else f"{avg_bf:.2f}")

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    repeats = st.slider("Repeats", min_value=1, max_value=10, value=3)
    prefix = st.text_input("Prefix for scan", value=keys[0][:1])

    if st.button("Run benchmark"):
        with st.spinner("Timing..."):
            st.session_state['results'] = run_benchmark(keys, repeats=repeats, prefix=prefix)
            st.session_state['trie'] = build_trie(keys)
            st.session_state['trie_for'] = (workload_name, int(num_keys), int(seed))

    if 'results' in st.session_state:
        df = st.session_state['results']

        st.subheader("Summary (mean seconds)")
        st.dataframe(summarize(df))

        fig = px.bar(
            df.groupby(["operation", "structure"], as_index=False)["seconds"].mean(),
            x="operation", y="seconds", color="structure", barmode="group",
            title="Mean time per operation"
        )
        st.plotly_chart(fig, use_container_width=True)

        fig_ops = px.box(df, x="operation", y="ops_per_sec", color="structure",
                         title="Throughput across repeats", log_y=True)
        st.plotly_chart(fig_ops, use_container_width=True)

        with st.expander("Raw timings"):
            st.dataframe(df, use_container_width=True)
    else:
        st.info("👆 Press 'Run benchmark' to time the current workload")

elif page == "Trie Explorer":
    st.header("🔍 Trie Explorer")

    signature = (workload_name, int(num_keys), int(seed))
    if st.session_state.get('trie_for') != signature:
        st.session_state['trie'] = build_trie(keys)
        st.session_state['trie_for'] = signature
    trie = st.session_state['trie']

    col1, col2 = st.columns(2)
    with col1:
        prefix = st.text_input("Prefix", value="")
    with col2:
        limit = st.slider("Max entries", min_value=10, max_value=1_000, value=100)

    rows = []

    def collect(key, value):
        rows.append({"key": key.decode("utf-8", errors="replace"), "value": value})
        if len(rows) >= limit:
            return STOP

    trie.common_prefix_each_pair(prefix, collect)

    if rows:
        result = pd.DataFrame(rows)
        st.write(f"**{len(result)} entries** (dictionary order)")
        st.dataframe(result, use_container_width=True)

        lengths = result["key"].str.len().to_numpy()
        st.write(f"- Mean key length: {np.mean(lengths):.2f}")
        st.write(f"- Longest key: {int(np.max(lengths))}")
    else:
        st.warning("⚠️ No entries under this prefix")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | ByteTrie Bench
    </div>
    """,
    unsafe_allow_html=True
)
