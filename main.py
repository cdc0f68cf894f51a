from __future__ import annotations
import io
import logging

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import pandas as pd
import streamlit as st

from article_summarizer.datatypes import SummaryResult
from article_summarizer.graphing import build_adjacency, build_graph, to_networkx
from article_summarizer.loaders import SUPPORTED_EXTENSIONS, load_text
from article_summarizer.scoring import paragraph_budget
from article_summarizer.summarize import SummaryConfig, SummaryTrace, TextSummarizer

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

MAX_MATRIX_DISPLAY = 50

def _preview(text: str, n: int = 80) -> str:
    text = " ".join(text.split())
    return text[:n] + "..." if len(text) > n else text

def draw_similarity_figure(trace: SummaryTrace, sim_threshold: float):
    """Heatmap of the similarity matrix next to the thresholded sentence graph."""
    graph = build_graph(trace.sentences, trace.simM, threshold=sim_threshold)
    G = to_networkx(graph)
    selected = {ss.global_index for ss in trace.selected}

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))

    ax1.set_title("Similarity Matrix", fontsize=14, fontweight='bold')
    im = ax1.imshow(trace.simM, cmap="viridis")
    labels = [f"S{s.global_index+1}" for s in trace.sentences]
    ax1.set_xticks(range(len(labels)))
    ax1.set_yticks(range(len(labels)))
    ax1.set_xticklabels(labels, rotation=90, fontsize=7)
    ax1.set_yticklabels(labels, fontsize=7)
    fig.colorbar(im, ax=ax1, fraction=0.046, pad=0.04)

    ax2.set_title(f"Sentence Graph (similarity ≥ {sim_threshold})", fontsize=14, fontweight='bold')
    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax2, node_color=colors, node_size=800, alpha=0.8)

        edges = G.edges(data=True)
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax2,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')

        nx.draw_networkx_labels(G, pos, nx.get_node_attributes(G, "label"), ax=ax2,
                                font_size=10, font_weight='bold')
    ax2.set_aspect('equal')
    ax2.axis('off')

    plt.tight_layout()
    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    st.sidebar.header("Parameters")
    divisor = st.sidebar.slider(
        "Budget divisor",
        min_value=1,
        max_value=10,
        value=5,
        step=1,
        help="Each paragraph keeps floor(sentences / divisor) + 1 sentences"
    )
    threshold = st.sidebar.slider(
        "Graph threshold",
        min_value=0.05,
        max_value=2.0,
        value=0.5,
        step=0.05,
        help="Minimum similarity for an edge in the sentence graph"
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    return divisor, threshold, debug_mode

def show_result_metrics(result: SummaryResult):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Original Words", result.original_word_count)
    with col2:
        st.metric("Summary Words", result.summary_word_count)
    with col3:
        st.metric("Compression", f"{result.compression_ratio:.2%}")
    with col4:
        st.metric("Status", result.status.value)

def debug_pipeline(summarizer: TextSummarizer, text: str, sim_threshold: float) -> SummaryResult:
    """Run the pipeline and show every intermediate step."""
    with st.spinner("Running pipeline..."):
        trace = summarizer.trace(text)

    if not trace.sentences:
        st.warning(trace.result.summary or "Nothing to summarize")
        return trace.result

    st.header("Step 1: Segmentation")
    with st.expander("Sentences and Paragraphs", expanded=True):
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Sentences", len(trace.sentences))
        with col2:
            st.metric("Paragraphs", len(trace.paragraphs))
        sentences_df = pd.DataFrame([{
            "Sentence #": s.global_index + 1,
            "Paragraph": s.paragraph_index + 1,
            "Words": s.word_count,
            "Chars": s.char_length,
            "Text": _preview(s.text),
        } for s in trace.sentences])
        st.dataframe(sentences_df, use_container_width=True)

    st.header("Step 2: Similarity Matrix")
    with st.expander("Word-overlap Matrix", expanded=True):
        n = len(trace.sentences)
        if n <= MAX_MATRIX_DISPLAY:
            names = [f"S{i+1}" for i in range(n)]
            st.dataframe(pd.DataFrame(trace.simM, columns=names, index=names), use_container_width=True)
        else:
            st.info(f"Matrix too large to display ({n}×{n} = {n**2:,} cells)")
            off_diag = trace.simM[~np.eye(n, dtype=bool)]
            col1, col2, col3, col4 = st.columns(4)
            with col1:
                st.metric("Min Similarity", f"{off_diag.min():.3f}")
            with col2:
                st.metric("Max Similarity", f"{off_diag.max():.3f}")
            with col3:
                st.metric("Mean Similarity", f"{off_diag.mean():.3f}")
            with col4:
                st.metric("Std Similarity", f"{off_diag.std():.3f}")

    st.header("Step 3: Scoring and Selection")
    with st.expander("Scores per Paragraph", expanded=True):
        selected = {ss.global_index for ss in trace.selected}
        rows = []
        for p in trace.paragraphs:
            budget = paragraph_budget(len(p.sentences), summarizer.config.budget_divisor)
            for s in p.sentences:
                rows.append({
                    "Paragraph": p.index + 1,
                    "Budget": budget,
                    "Sentence #": s.global_index + 1,
                    "Score": round(trace.scored[s.global_index].score, 3),
                    "Selected": "✅" if s.global_index in selected else "❌",
                    "Text": _preview(s.text),
                })
        st.dataframe(pd.DataFrame(rows), use_container_width=True)

    st.header("Step 4: Similarity Graph")
    A = build_adjacency(build_graph(trace.sentences, trace.simM, threshold=sim_threshold))
    n_edges = int(A.sum() // 2)
    max_edges = len(A) * (len(A) - 1) // 2
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Edges", n_edges)
    with col2:
        st.metric("Graph Density", f"{n_edges / max_edges:.2%}" if max_edges else "n/a")
    if len(trace.sentences) <= MAX_MATRIX_DISPLAY:
        try:
            with st.spinner("Drawing graph..."):
                image = draw_similarity_figure(trace, sim_threshold)
            st.image(image, caption="Selected sentences are highlighted", use_column_width=True)
        except Exception as e:
            logger.exception("Could not draw similarity figure")
            st.error(f"Could not generate graph visualization: {e}")
    else:
        st.info(f"Graph too large to visualize ({len(trace.sentences)} nodes)")

    return trace.result

def main():
    st.title("Paragraph-budgeted Article Summarizer")
    st.write("Upload or paste an article to generate an extractive summary")

    divisor, threshold, debug_mode = create_sidebar_controls()
    summarizer = TextSummarizer(SummaryConfig(budget_divisor=divisor))

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=list(SUPPORTED_EXTENSIONS),
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)"
    )
    if uploaded_file is not None:
        text = load_text(uploaded_file.name, uploaded_file.read())
    else:
        text = st.text_area("Or paste article text", height=200)

    if text and st.button("Generate Summary", type="primary"):
        if debug_mode:
            st.markdown("---")
            st.title("Pipeline Debug Mode")
            try:
                result = debug_pipeline(summarizer, text, threshold)
            except Exception as e:
                logger.exception("Debug pipeline failed")
                result = SummaryResult.failure(str(e))
        else:
            with st.spinner("Generating summary..."):
                result = summarizer.summarize(text)

        st.markdown("---")
        st.header("Final Summary")
        if result.ok:
            st.text_area("Generated Summary", result.summary, height=150, disabled=True)
        else:
            st.warning(result.summary)
        show_result_metrics(result)

if __name__ == "__main__":
    main()
