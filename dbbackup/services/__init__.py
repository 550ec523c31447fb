"""
Servicios de la aplicación
"""
from .backup_service import BackupService
from .report_service import ReportService
from .scheduler_service import SchedulerService
from .size_inspector import SizeInspector

__all__ = [
    'BackupService',
    'ReportService',
    'SchedulerService',
    'SizeInspector'
]
