from .node import Node
from .poem_analyzer import PoemAnalyzer
from .service import AnalysisService

__all__ = ['Node', 'PoemAnalyzer', 'AnalysisService']
