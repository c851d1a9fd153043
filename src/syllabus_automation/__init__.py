"""
Syllabus Automation

Loads per-course YAML configurations with their CSV schedule, assignment and
grading tables, validates them, and renders markdown/HTML syllabus fragments
for a static-site generator.
"""

__version__ = "0.1.0"
