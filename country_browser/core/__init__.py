"""
Core domain layer: country records, view state and the dataset view pipeline
"""

from .country import Country
from .view_state import SortKey, ViewState
from .pipeline import DatasetViewPipeline, VisibleSlice

__all__ = ["Country", "SortKey", "ViewState", "DatasetViewPipeline", "VisibleSlice"]
