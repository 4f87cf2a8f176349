from .orchestrator import DashboardOrchestrator, LOAD_ERROR_MESSAGE

__all__ = ["DashboardOrchestrator", "LOAD_ERROR_MESSAGE"]
