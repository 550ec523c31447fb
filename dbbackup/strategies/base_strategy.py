"""
Estrategia base para backups (Strategy Pattern)
"""
from abc import ABC, abstractmethod
from pathlib import Path

from ..builders.command_builder import build_plan
from ..logger import LoggerService
from ..models import BackupJob, CommandPlan
from ..process_runner import ProcessRunner
from ..transports import Transport, create_transport


class BackupStrategy(ABC):
    """Interfaz abstracta para estrategias de backup (Open/Closed Principle)"""

    # True si el artefacto es un directorio (mongodump) y no un archivo
    is_directory = False

    def __init__(self, runner: ProcessRunner):
        """
        Inicializa la estrategia

        Args:
            runner: Runner usado para todos los procesos externos
        """
        self.runner = runner
        self.logger = LoggerService.get_logger(self.__class__.__name__)

    def build(self, job: BackupJob, destination: Path) -> CommandPlan:
        """
        Construye el plan de comandos del trabajo

        Args:
            job: Trabajo de backup
            destination: Ruta local del artefacto

        Returns:
            Plan de comandos
        """
        return build_plan(
            job.database_type,
            job.method,
            job.connection,
            destination,
            temp_dir=job.temp_dir,
        )

    @abstractmethod
    def execute(self, plan: CommandPlan, transport: Transport) -> None:
        """
        Ejecuta el plan a través del transporte

        Args:
            plan: Plan de comandos
            transport: Transporte del método de ejecución

        Raises:
            BackupError: si alguna etapa falla
        """
        pass

    def backup(self, job: BackupJob, plan: CommandPlan) -> None:
        """
        Crea el transporte del trabajo y ejecuta el plan

        Args:
            job: Trabajo de backup
            plan: Plan construido con build()
        """
        transport = create_transport(job, self.runner, plan.destination.parent)
        self.execute(plan, transport)
