"""Processing pipeline — load → transform → summarise → export."""

from articlekit.pipeline.runner import ProcessingRunner, ProcessSummary, RunResult

__all__ = ["ProcessSummary", "ProcessingRunner", "RunResult"]
