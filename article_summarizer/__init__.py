from .datatypes import Sentence, ScoredSentence, Paragraph, Edge, Graph, SummaryStatus, SummaryResult, SummaryRecord
from .preprocessing import segment_text, group_into_paragraphs
from .features import common_words, build_similarity_matrix
from .graphing import build_graph, build_adjacency, to_networkx
from .scoring import score_sentences, paragraph_budget, select_sentences
from .summarize import SummaryConfig, SummaryTrace, TextSummarizer, assemble_summary, summarize
from .store import SummaryStore, InMemorySummaryStore, normalize_url, process_and_save_summary
