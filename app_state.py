from terminfo_decoder import decode_file
from terminfo_names import NameCatalog
from viewport import ViewportController


class AppState:
    def __init__(self, record, file_path=None, catalog=None):
        self.catalog = catalog if catalog is not None else NameCatalog()
        self.record = record
        self.file_path = file_path
        self.viewport = ViewportController(record.total_lines)

    @classmethod
    def from_file(cls, path, catalog=None):
        return cls(decode_file(path), path, catalog)

    @property
    def total_lines(self) -> int:
        return self.record.total_lines
