from docintel.processing.batch import process_documents, processing_stats
from docintel.processing.processor import DocumentProcessor, build_processor
from docintel.processing.progress import ProgressBroker

__all__ = [
    "DocumentProcessor",
    "ProgressBroker",
    "build_processor",
    "process_documents",
    "processing_stats",
]
