"""
Reporte de resultados del lote de backup
"""
from typing import Dict, List, Sequence
from ..config import Config
from ..logger import LoggerService
from ..models import BackupJob, BackupOutcome


class ReportService:
    """Muestra la configuración del lote y el resumen de resultados"""
    
    def __init__(self):
        self.logger = LoggerService.get_logger("ReportService")
    
    def print_config_summary(self, jobs: Sequence[BackupJob]) -> None:
        """
        Imprime el resumen de configuración antes de ejecutar
        
        Args:
            jobs: Trabajos de backup
        """
        self.logger.info("=" * 70)
        self.logger.info("RESUMEN DE CONFIGURACIÓN")
        self.logger.info("=" * 70)
        if not jobs:
            self.logger.warning("No hay bases de datos configuradas")
            return
        
        first = jobs[0]
        self.logger.info(f"Timestamp: {first.timestamp.strftime(Config.TIMESTAMP_FORMAT)}")
        self.logger.info(f"Directorio de backups: {first.backup_dir}")
        for index, job in enumerate(jobs, start=1):
            line = (f"  {index}. {job.type_name} - {job.connection.database} "
                    f"(host: {job.connection.host}, método: {job.method_name}")
            if job.method_name == "kubectl-exec":
                line += f", namespace: {job.namespace}, pod: {job.connection.pod}"
            elif job.method_name == "docker-exec":
                line += f", contenedor: {job.connection.container}"
            self.logger.info(line + ")")
    
    def print_summary(self, outcomes: List[BackupOutcome]) -> Dict[str, int]:
        """
        Imprime resumen de la operación de backup
        
        Args:
            outcomes: Resultados en orden de configuración
        
        Returns:
            Conteo de exitosos y fallidos
        """
        success_count = sum(1 for o in outcomes if o.success)
        failed_count = len(outcomes) - success_count
        total_time = sum(o.duration_seconds for o in outcomes)
        
        self.logger.info("=" * 70)
        self.logger.info("RESUMEN DEL PROCESO DE BACKUP")
        self.logger.info("=" * 70)
        
        for outcome in outcomes:
            if outcome.success:
                self.logger.info(str(outcome))
            else:
                self.logger.error(str(outcome))
        
        self.logger.info("-" * 70)
        self.logger.info(f"Total de bases de datos procesadas: {len(outcomes)}")
        self.logger.info(f"Backups exitosos: {success_count}")
        self.logger.info(f"Backups fallidos: {failed_count}")
        self.logger.info(f"Tiempo total: {total_time:.2f}s")
        self.logger.info("=" * 70)
        
        if failed_count > 0:
            self.logger.warning(
                f"ATENCIÓN: {failed_count} backup(s) fallaron. "
                "Revisa los errores arriba."
            )
        
        return {'successful': success_count, 'failed': failed_count}
