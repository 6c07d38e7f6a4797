from .file_reader import FileReader
from .aff import read_aff, Context
from .dic import read_dic

__all__ = [
    "FileReader",
    "Context",
    "read_aff",
    "read_dic"
]
