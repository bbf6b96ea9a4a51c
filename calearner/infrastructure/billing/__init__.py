from .store_service import SimulatedStoreService

__all__ = ["SimulatedStoreService"]
