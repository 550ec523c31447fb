"""
Servicio principal que orquesta los backups
"""
import time
from pathlib import Path
from typing import List, Optional, Sequence
from ..config import Config
from ..exceptions import BackupError, DirectoryPreparationError, MeasurementError
from ..factories.strategy_factory import BackupStrategyFactory
from ..logger import LoggerService
from ..models import BackupJob, BackupOutcome, DatabaseType
from ..process_runner import ProcessRunner, SubprocessRunner
from .size_inspector import SizeInspector


class BackupService:
    """Servicio principal que orquesta los backups"""
    
    def __init__(self, runner: Optional[ProcessRunner] = None, size_inspector: Optional[SizeInspector] = None):
        """
        Inicializa el servicio de backup
        
        Args:
            runner: Runner de procesos externos (subprocess por defecto)
            size_inspector: Inspector de tamaño (usa el mismo runner por defecto)
        """
        self.runner = runner or SubprocessRunner()
        self.size_inspector = size_inspector or SizeInspector(self.runner)
        self.logger = LoggerService.get_logger("BackupService")
    
    def run(self, jobs: Sequence[BackupJob]) -> List[BackupOutcome]:
        """
        Ejecuta el lote de forma secuencial
        
        Un fallo nunca detiene el lote: siempre hay un resultado por trabajo
        y en el mismo orden de la configuración.
        
        Args:
            jobs: Trabajos de backup en orden de configuración
        
        Returns:
            Lista de resultados
        """
        self.logger.info("=" * 70)
        self.logger.info(f"INICIANDO PROCESO DE BACKUP ({len(jobs)} base(s) de datos)")
        self.logger.info("=" * 70)
        
        outcomes = []
        for job in jobs:
            outcomes.append(self.backup_job(job))
        return outcomes
    
    def backup_job(self, job: BackupJob) -> BackupOutcome:
        """
        Realiza backup de una base de datos
        
        Args:
            job: Trabajo de backup
            
        Returns:
            Resultado del backup
        """
        self.logger.info("-" * 70)
        self.logger.info(
            f"[{job.type_name.upper()}] Iniciando backup de {job.connection.database} "
            f"(método: {job.method_name})"
        )
        start_time = time.monotonic()
        artifact_path = None
        size = None
        error = None
        
        try:
            strategy = BackupStrategyFactory.create(job.database_type, job.method, self.runner)
            type_dir = Path(job.backup_dir) / job.type_name
            destination = self.destination_for(job, type_dir)
            plan = strategy.build(job, destination)
            
            self._prepare_directory(type_dir)
            artifact_path = str(destination)
            strategy.backup(job, plan)
            
            try:
                size = self.size_inspector.measure(destination, strategy.is_directory)
            except MeasurementError as e:
                raise MeasurementError(f"backup created but failed to get size: {e}") from e
        except BackupError as e:
            error = str(e)
        except Exception as e:  # pylint: disable=broad-except
            error = f"unexpected backup failure: {e}"
        
        duration = time.monotonic() - start_time
        outcome = BackupOutcome(
            database_type=job.type_name,
            database_name=job.connection.database,
            success=error is None,
            artifact_path=artifact_path,
            size=size if error is None else None,
            error=error,
            duration_seconds=duration,
        )
        
        if outcome.success:
            self.logger.info(f"Backup exitoso: {outcome.artifact_path} ({outcome.size}, {duration:.2f}s)")
        else:
            self.logger.error(f"Backup fallido: {outcome.error} ({duration:.2f}s)")
        return outcome
    
    @staticmethod
    def destination_for(job: BackupJob, type_dir: Path) -> Path:
        """
        Calcula la ruta del artefacto
        
        Args:
            job: Trabajo de backup
            type_dir: Directorio del tipo de base de datos
        
        Returns:
            {type_dir}/{db}_{timestamp}.sql, o {type_dir}/{timestamp} para mongodb
        """
        timestamp = job.timestamp.strftime(Config.TIMESTAMP_FORMAT)
        if DatabaseType.parse(job.database_type).produces_directory:
            return type_dir / timestamp
        return type_dir / f"{job.connection.database}_{timestamp}.sql"
    
    @staticmethod
    def _prepare_directory(type_dir: Path) -> None:
        """Crea el directorio del tipo si no existe; nunca borra contenido previo"""
        try:
            type_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryPreparationError(f"failed to create backup directory: {e}") from e
