"""
Estrategias de backup para cada combinación de motor y método
"""
from .base_strategy import BackupStrategy
from .file_dump_strategy import FileDumpStrategy
from .mounted_directory_strategy import MountedDirectoryStrategy
from .staged_directory_strategy import StagedDirectoryStrategy

__all__ = [
    'BackupStrategy',
    'FileDumpStrategy',
    'MountedDirectoryStrategy',
    'StagedDirectoryStrategy'
]
