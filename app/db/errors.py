"""Erreurs de la couche de persistance.

Les repositories lèvent ces exceptions, les services les traduisent en HTTPException.
"""


class StorageError(Exception):
    """Échec d'ouverture, d'écriture ou de lecture sur la base."""


class NotInitializedError(StorageError):
    def __init__(self, message: str = "database not initialized"):
        super().__init__(message)


class NotFoundError(StorageError):
    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")
