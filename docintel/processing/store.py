from docintel.processing.models import DocumentProcessingResult


class ResultStore:
    """In-memory cache of finished runs keyed by document id; last write wins."""

    def __init__(self) -> None:
        self._results: dict[str, DocumentProcessingResult] = {}

    def save(self, result: DocumentProcessingResult) -> None:
        self._results[result.document_id] = result

    def get(self, document_id: str) -> DocumentProcessingResult | None:
        return self._results.get(document_id)

    def all(self) -> list[DocumentProcessingResult]:
        return list(self._results.values())

    def remove(self, document_id: str) -> None:
        self._results.pop(document_id, None)
