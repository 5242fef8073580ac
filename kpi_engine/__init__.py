"""
Agent KPI Engine

Scores agents' daily operational metrics against a fixed KPI registry,
converts the scores into rewards (XP and points) and rolls the daily
results into windows for dashboards and gamification.
"""

__version__ = "0.1.0"
