import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("structpatterns.storage")

DEFAULT_CONTENT = "Document content here..."


class Storage(ABC):
    kind = ""

    @abstractmethod
    def store(self, content: str) -> str:
        ...

    def _announce(self, content: str) -> str:
        text = f"Saving to {self.kind} Storage: {content}"
        logger.info("stored %d chars in %s storage", len(content), self.kind.lower())
        print(text)
        return text


class LocalStorage(Storage):
    kind = "Local"

    def store(self, content: str) -> str:
        return self._announce(content)


class CloudStorage(Storage):
    kind = "Cloud"

    def store(self, content: str) -> str:
        return self._announce(content)


class DatabaseStorage(Storage):
    kind = "Database"

    def store(self, content: str) -> str:
        return self._announce(content)


class Document(ABC):
    """A document type bound to whichever storage backend it was given."""

    def __init__(self, storage: Storage, content: str = DEFAULT_CONTENT):
        if not isinstance(storage, Storage):
            raise TypeError(f"storage must be a Storage, got {type(storage).__name__}")
        self.storage = storage
        self.content = content

    @abstractmethod
    def save(self) -> str:
        ...


class TextDocument(Document):
    def save(self) -> str:
        logger.debug("saving text document")
        return self.storage.store(self.content)


class PDFDocument(Document):
    def save(self) -> str:
        logger.debug("saving pdf document")
        return self.storage.store(self.content)


class XMLDocument(Document):
    def save(self) -> str:
        logger.debug("saving xml document")
        return self.storage.store(self.content)
