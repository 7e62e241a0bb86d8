"""Dataset adapters - Implementations of DatasetRepositoryPort.

Available implementations:
- FileDatasetRepository: Reads borders.txt, capdist.csv and state_name.tsv
"""

from .file_repository import FileDatasetRepository, parse_border_line

__all__ = ["FileDatasetRepository", "parse_border_line"]
