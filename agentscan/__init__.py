"""Codebase analysis that keeps AI agent configuration in sync with a project."""

from .models import AnalysisProfile, VerificationResult
from .profile import build_profile

__version__ = "1.1.0"

__all__ = ["AnalysisProfile", "VerificationResult", "build_profile", "__version__"]
