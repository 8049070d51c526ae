"""Analysis engine boundary — outcome model and engine interface."""

from depstatus.engine.base import AnalysisEngine, AnalysisError
from depstatus.engine.models import AnalyzeDependenciesOutcome

__all__ = ["AnalysisEngine", "AnalysisError", "AnalyzeDependenciesOutcome"]
