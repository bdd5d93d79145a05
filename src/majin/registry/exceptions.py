"""
Registry-specific exceptions
"""

from majin.core.exceptions import RegistryError


class RegistryConnectionError(RegistryError):
    """Raised when the document store cannot be reached or an operation fails"""


class RegistryValidationError(RegistryError):
    """Raised when a record is missing required fields or has invalid values"""


class ModelNotFoundError(RegistryError):
    """Raised when no record exists for the given id"""

    def __init__(self, model_id: str, **kwargs):
        self.model_id = model_id
        super().__init__(f"Model not found: {model_id}", **kwargs)


class DuplicateModelError(RegistryError):
    """Raised when a write would leave two active records with the same name"""

    def __init__(self, name: str, **kwargs):
        self.name = name
        super().__init__(f"An active model named '{name}' already exists", **kwargs)
