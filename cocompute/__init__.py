"""HTML pages and a cached total-compute statistic for a cooperative inference orchestrator."""

__version__ = "0.7.1"
__all__ = ["total_compute", "markup", "account", "landing", "quickstart"]