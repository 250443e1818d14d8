"""
Wellness Correlation Service

Fuses posture, hands and facial vision analyses into aggregate
wellness risk assessments, served over FastAPI.
"""
__version__ = "1.0.0"
