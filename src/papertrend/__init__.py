"""PaperTrend: trending research papers from Hugging Face as JSON."""

__version__ = "0.1.0"

__all__ = ["__version__"]
