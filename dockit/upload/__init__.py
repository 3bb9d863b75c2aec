from .progress import ProgressObserver, ProgressTracker, RichProgressObserver
from .uploader import PDF_CONTENT_TYPE, UploadResult, upload

__all__ = [
    "PDF_CONTENT_TYPE",
    "ProgressObserver",
    "ProgressTracker",
    "RichProgressObserver",
    "UploadResult",
    "upload",
]
