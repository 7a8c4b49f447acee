"""
Indexing and query engine package.

This package provides the pure-Python retrieval core:
- tokenizer: Space-delimited word splitting and text validation
- stop_words: Case-sensitive stop word set
- models: Document statuses, result records and parsed queries
- stats: Rating averages, term frequencies and IDF
- index: Inverted index with per-document metadata
- query_parser: Plus/minus query parsing
- ranker: TF-IDF scoring, filtering and top-K ordering
"""
