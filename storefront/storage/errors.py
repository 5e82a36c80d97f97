class StorageError(Exception):
    """Base class for record and media storage failures."""


class StoreLoadError(StorageError):
    """The backing document is missing or is not a JSON object."""


class StoreWriteError(StorageError):
    """Writing the backing document or an uploaded file failed."""


class RecordNotFound(StorageError):
    def __init__(self, collection: str, record_id):
        super().__init__(f"{collection}/{record_id} not found")
        self.collection = collection
        self.record_id = str(record_id)


class MediaNotFound(StorageError):
    def __init__(self, image_path: str):
        super().__init__(f"Image not found: {image_path}")
        self.image_path = image_path


class UploadRejected(StorageError):
    """An upload batch failed the count, type or size filter."""
