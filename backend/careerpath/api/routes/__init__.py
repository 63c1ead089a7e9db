"""API routes."""

from careerpath.api.routes import goals, insights, profile, skills

__all__ = ["goals", "insights", "profile", "skills"]
