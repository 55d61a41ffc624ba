"""Routers HTTP por feature (accounts / leave_requests / employments / job_grades)."""
