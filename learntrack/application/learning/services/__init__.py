from .dependency_graph_service import CycleCheck, DependencyGraphService
from .progress_service import ProgressService, ProgressSummary

__all__ = ["CycleCheck", "DependencyGraphService", "ProgressService", "ProgressSummary"]
