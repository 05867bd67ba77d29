"""Merge phase: reconciliation, views and output.

Python 3.13+.
"""

from .command import MergeCommand, MergeReport
from .reconcile import add_discovered, reconcile
from .views import LocaleViews, all_view, build_views, filter_translations, untranslated_view
from .writer import output_path, write_view

__all__ = [
    "LocaleViews",
    "MergeCommand",
    "MergeReport",
    "add_discovered",
    "all_view",
    "build_views",
    "filter_translations",
    "output_path",
    "reconcile",
    "untranslated_view",
    "write_view",
]
