"""
Transporte base: cómo llega un comando de volcado a su destino
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from ..exceptions import ConfigurationError
from ..logger import LoggerService
from ..models import BackupJob, DumpCommand
from ..process_runner import ProcessResult, ProcessRunner


class Transport(ABC):
    """Interfaz abstracta para los transportes (docker run, docker exec, kubectl exec)"""

    # Nombre usado en los mensajes de error, p. ej. "docker exec failed: ..."
    name = ""
    # "container" o "pod"; vacío si el transporte no tiene destino persistente
    target_label = ""

    def __init__(self, runner: ProcessRunner):
        self.runner = runner
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    @classmethod
    @abstractmethod
    def from_job(cls, job: BackupJob, runner: ProcessRunner, type_dir: Path) -> "Transport":
        """
        Crea el transporte para un trabajo

        Args:
            job: Trabajo de backup
            runner: Runner de procesos
            type_dir: Directorio local de backups del tipo de base de datos
        """
        pass

    @abstractmethod
    def exec_argv(self, command: DumpCommand) -> List[str]:
        """Argv completo que ejecuta el comando a través del transporte"""
        pass

    def exec_stdin(self, command: DumpCommand) -> Optional[bytes]:
        return None

    def exec_env(self, command: DumpCommand) -> Optional[Dict[str, str]]:
        return dict(command.secrets) or None

    def execute(self, command: DumpCommand) -> ProcessResult:
        """
        Ejecuta el comando y espera su finalización

        Args:
            command: Comando de volcado o de limpieza

        Returns:
            Resultado del proceso
        """
        argv = self.exec_argv(command)
        self.logger.info(f"Ejecutando: {' '.join(argv)}")
        return self.runner.run(argv, stdin=self.exec_stdin(command), env=self.exec_env(command))

    def copy_argv(self, remote_path: str, local_dir: Path) -> List[str]:
        raise ConfigurationError(f"{self.name} cannot copy files out of its target")

    def copy_out(self, remote_path: str, local_dir: Path) -> ProcessResult:
        """
        Copia un directorio remoto dentro de local_dir

        Args:
            remote_path: Ruta del artefacto dentro del destino
            local_dir: Directorio local que recibe la copia

        Returns:
            Resultado del proceso de copia
        """
        argv = self.copy_argv(remote_path, local_dir)
        self.logger.info(f"Copiando: {' '.join(argv)}")
        return self.runner.run(argv)
