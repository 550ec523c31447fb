"""
Estrategia de backup de MongoDB dentro de un contenedor o pod en ejecución

Protocolo en tres fases: crear en el directorio temporal remoto, copiar al
host y limpiar el directorio remoto.
"""
from .base_strategy import BackupStrategy
from ..exceptions import CopyError, DirectoryPreparationError, RemoteExecutionError
from ..models import DumpCommand, StagedDumpPlan
from ..transports import Transport


class StagedDirectoryStrategy(BackupStrategy):
    """Crea el volcado en el destino remoto, lo copia y limpia"""

    is_directory = True

    def execute(self, plan: StagedDumpPlan, transport: Transport) -> None:
        """
        Ejecuta las tres fases del protocolo

        Un fallo en la creación o en la copia aborta el trabajo; la limpieza
        solo se intenta tras una copia exitosa y su fallo no se reporta.

        Args:
            plan: Plan en tres fases
            transport: Transporte docker exec o kubectl exec
        """
        label = transport.target_label

        result = transport.execute(plan.create)
        if not result.ok:
            raise RemoteExecutionError(f"failed to create backup in {label}: {result.error_text()}")

        try:
            plan.destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryPreparationError(f"failed to create backup directory: {e}") from e

        result = transport.copy_out(plan.remote_artifact, plan.destination)
        if not result.ok:
            raise CopyError(f"failed to copy backup from {label}: {result.error_text()}")

        self._best_effort_cleanup(transport, plan.cleanup)

    def _best_effort_cleanup(self, transport: Transport, command: DumpCommand) -> None:
        """Elimina el directorio temporal remoto; los fallos solo se registran"""
        try:
            result = transport.execute(command)
        except Exception as e:  # pylint: disable=broad-except
            self.logger.warning(f"No se pudo limpiar el directorio remoto: {e}")
            return
        if not result.ok:
            self.logger.warning(f"No se pudo limpiar el directorio remoto: {result.error_text()}")
