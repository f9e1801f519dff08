from .auth_service import AuthService
from .id_registry_service import IdRegistryService
from .thumbnail_service import ThumbnailService
from .maintenance_service import MaintenanceService

__all__ = [
    "AuthService",
    "IdRegistryService",
    "ThumbnailService",
    "MaintenanceService"
]
