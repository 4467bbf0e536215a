"""mkv-editor - Batch-edit track and title metadata of Matroska collections."""

__version__ = "0.1.0"
