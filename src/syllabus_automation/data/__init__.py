"""
Data module.

Loads the auxiliary CSV tables (schedule, assignments, grading scale)
referenced from a course configuration.
"""

from .tables import TableLoadError, TableLoadReport, load_data_files, load_table

__all__ = ["TableLoadError", "TableLoadReport", "load_data_files", "load_table"]
