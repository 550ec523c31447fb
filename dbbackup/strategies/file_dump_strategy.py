"""
Estrategia de backup a archivo para PostgreSQL, MySQL y MariaDB
"""
from .base_strategy import BackupStrategy
from ..exceptions import ArtifactWriteError, RemoteExecutionError
from ..models import SingleCommandPlan
from ..transports import Transport


class FileDumpStrategy(BackupStrategy):
    """Captura la salida estándar del volcado y la guarda en el archivo destino"""

    def execute(self, plan: SingleCommandPlan, transport: Transport) -> None:
        """
        Ejecuta pg_dump o mysqldump y escribe el archivo .sql

        Args:
            plan: Plan con un solo comando
            transport: Transporte del método de ejecución
        """
        result = transport.execute(plan.command)
        if not result.ok:
            raise RemoteExecutionError(f"{transport.name} failed: {result.error_text()}")

        try:
            plan.destination.write_bytes(result.stdout)
        except OSError as e:
            raise ArtifactWriteError(f"failed to write backup file: {e}") from e

        self.logger.info(f"Volcado guardado en {plan.destination} ({len(result.stdout)} bytes)")
