from __future__ import annotations
from typing import List, Sequence
import networkx as nx
import numpy as np
from .datatypes import Edge, Graph, Sentence

def build_graph(sentences: Sequence[Sentence], simM: np.ndarray, threshold: float = 0.5) -> Graph:
    nodes = list(sentences)
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = float(simM[i][j])
            if w >= threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def build_adjacency(graph: Graph) -> np.ndarray:
    """0/1 symmetric adjacency matrix of the graph."""
    n = len(graph.nodes)
    A = np.zeros((n, n), dtype=int)
    if graph.edges:
        rows = [e.i for e in graph.edges]
        cols = [e.j for e in graph.edges]
        A[rows, cols] = 1
        A[cols, rows] = 1
    return A

def to_networkx(graph: Graph, preview_chars: int = 30) -> nx.Graph:
    G = nx.Graph()
    for i, s in enumerate(graph.nodes):
        preview = s.text[:preview_chars] + "..." if len(s.text) > preview_chars else s.text
        G.add_node(i, label=f"S{s.global_index+1}", preview=preview, paragraph=s.paragraph_index)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G
