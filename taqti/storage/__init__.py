from .analysis_store import AnalysisStore, StorageError

__all__ = ['AnalysisStore', 'StorageError']
