from analyzers.base import AnalysisResult, AnalyzerBase
from analyzers.facial_asymmetry import AsymmetryMetrics, FacialAsymmetryAnalyzer, OverallWeights
from analyzers.posture import PostureAnalyzer, PostureMetrics, PostureReferences

__all__ = [
    "AnalysisResult",
    "AnalyzerBase",
    "AsymmetryMetrics",
    "FacialAsymmetryAnalyzer",
    "OverallWeights",
    "PostureAnalyzer",
    "PostureMetrics",
    "PostureReferences",
]
