from docintel.analysis.analyzer import AnalysisProvider, CascadeAnalyzer
from docintel.analysis.factory import AnalyzerFactory, ProviderConfig
from docintel.analysis.local_analyzer import LocalAnalyzer

__all__ = [
    "AnalysisProvider",
    "AnalyzerFactory",
    "CascadeAnalyzer",
    "LocalAnalyzer",
    "ProviderConfig",
]
