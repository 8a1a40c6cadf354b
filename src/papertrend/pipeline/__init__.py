"""Processing pipelines."""

from .fetch import PaperPipeline

__all__ = ["PaperPipeline"]
