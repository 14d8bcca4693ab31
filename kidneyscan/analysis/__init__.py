from kidneyscan.analysis.fingerprint import fingerprint
from kidneyscan.analysis.models import AnalysisResult, FileDescriptor, MediaCategory
from kidneyscan.analysis.synthesizer import analyze, synthesize

__all__ = [
    "AnalysisResult",
    "FileDescriptor",
    "MediaCategory",
    "analyze",
    "fingerprint",
    "synthesize",
]
