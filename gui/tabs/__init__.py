from .analysis_tab import AnalysisTabBindings, build_analysis_tab
from .ledger_tab import LedgerTabBindings, build_ledger_tab

__all__ = [
    "AnalysisTabBindings",
    "LedgerTabBindings",
    "build_analysis_tab",
    "build_ledger_tab",
]
