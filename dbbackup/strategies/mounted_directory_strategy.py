"""
Estrategia de backup de MongoDB con contenedor efímero
"""
from .base_strategy import BackupStrategy
from ..exceptions import RemoteExecutionError
from ..models import MountedDumpPlan
from ..transports import Transport


class MountedDirectoryStrategy(BackupStrategy):
    """mongodump escribe directamente en el directorio montado del host"""

    is_directory = True

    def execute(self, plan: MountedDumpPlan, transport: Transport) -> None:
        result = transport.execute(plan.command)
        if not result.ok:
            raise RemoteExecutionError(f"{transport.name} failed: {result.error_text()}")
