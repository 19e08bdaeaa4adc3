"""Persistence-specific exceptions."""


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class ConfigurationError(PersistenceError):
    """Raised when a backing service (Firestore, Cloud Storage) is not configured."""


class StoreError(PersistenceError):
    """Raised when a Firestore call fails. Wraps the underlying API error."""

    def __init__(self, operation: str, target: str, cause: Exception):
        self.operation = operation
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to {operation} {target}: {cause}")


class DocumentNotFoundError(PersistenceError):
    """Raised when a Firestore document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} not found")


class DocumentExistsError(PersistenceError):
    """Raised when creating a document whose id is already taken."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"{collection}/{doc_id} already exists")
