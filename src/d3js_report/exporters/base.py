"""Base exporter interface for rule result data files."""

from abc import ABC, abstractmethod

from ..models import DataFormat, Result


class BaseExporter(ABC):
    """Abstract base class for data exporters."""

    data_format: DataFormat

    @abstractmethod
    def format(self, result: Result) -> str:
        """Return the data file content for *result*."""

    @property
    def file_name(self) -> str:
        return self.data_format.file_name
