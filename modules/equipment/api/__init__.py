from .client import DEFAULT_TIMEOUT, REQUEST_ERRORS, EquipmentApiClient

__all__ = ["DEFAULT_TIMEOUT", "REQUEST_ERRORS", "EquipmentApiClient"]
