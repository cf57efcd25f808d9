"""Google Custom Search as an agent tool, with LLM summaries of the results."""

__version__ = "0.1.0"
