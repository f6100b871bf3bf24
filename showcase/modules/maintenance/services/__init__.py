from .maintenance_service import MaintenanceService

__all__ = ["MaintenanceService"]
