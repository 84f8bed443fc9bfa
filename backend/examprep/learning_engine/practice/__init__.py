"""
Practice selection.

Picks questions for a single practice request, biased toward the user's
current performance band and away from questions seen in the last week.
"""

from examprep.learning_engine.practice.service import PracticeSelection, select_practice_questions

__all__ = ["PracticeSelection", "select_practice_questions"]
