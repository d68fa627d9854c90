"""
Test harness for alias evaluation.
"""

from .facts import RecordingFacts

__all__ = ["RecordingFacts"]
