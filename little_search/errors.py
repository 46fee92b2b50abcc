"""Errors raised while loading the inputs of an index build."""


class SearchEngineError(Exception):
    """Base class for search engine input errors."""


class MissingDocumentIdentifier(SearchEngineError, ValueError):
    """A document identifier was None."""

    def __init__(self) -> None:
        super().__init__("Document identifier must not be None")


class DocumentNotFound(SearchEngineError, FileNotFoundError):
    """A document named in the document list could not be read."""

    def __init__(self, document: str) -> None:
        self.document = document
        super().__init__(f"Document not found: {document}")


class DocumentListSourceNotFound(SearchEngineError, FileNotFoundError):
    """The file listing the documents to index does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Document list file not found: {path}")


class NoiseWordSourceNotFound(SearchEngineError, FileNotFoundError):
    """The noise word file does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Noise word file not found: {path}")
