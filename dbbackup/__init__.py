"""
Herramienta de backup de bases de datos (PostgreSQL, MySQL, MariaDB, MongoDB)
vía docker run, docker exec o kubectl exec
"""
__version__ = "1.0.0"

from .config import Config
from .logger import LoggerService

__all__ = ['Config', 'LoggerService']
