from .insights import analyze, AnalysisSummary, EmotionStat

__all__ = ["analyze", "AnalysisSummary", "EmotionStat"]
