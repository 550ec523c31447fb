"""
Servicio de programación de tareas de backup
"""
import signal
import time
from typing import Callable, List, Optional

import schedule

from ..logger import LoggerService
from ..models import BackupJob, BackupOutcome
from .backup_service import BackupService
from .report_service import ReportService


class SchedulerService:
    """Ejecuta el lote de backup todos los días a las horas configuradas"""

    def __init__(
        self,
        backup_service: BackupService,
        job_factory: Callable[[], List[BackupJob]],
        schedules: List[str],
        report_service: Optional[ReportService] = None,
    ):
        """
        Inicializa el servicio de programación

        Args:
            backup_service: Servicio de backup a ejecutar
            job_factory: Construye el lote en cada ejecución (timestamp nuevo)
            schedules: Horas diarias en formato HH:MM
            report_service: Servicio de reporte de resultados
        """
        self.backup_service = backup_service
        self.job_factory = job_factory
        self.schedules = schedules
        self.report_service = report_service or ReportService()
        self.scheduler = schedule.Scheduler()
        self.logger = LoggerService.get_logger("SchedulerService")
        self.running = False

    def register(self) -> None:
        """Programa una ejecución diaria por cada hora configurada"""
        self.scheduler.clear()
        for schedule_time in self.schedules:
            self.scheduler.every().day.at(schedule_time).do(self.run_backup_job)

    def start(self, run_immediately: bool = False, poll_seconds: int = 30):
        """
        Bloquea ejecutando los backups pendientes hasta recibir SIGINT/SIGTERM

        Args:
            run_immediately: Ejecuta un lote antes de esperar al primer horario
            poll_seconds: Intervalo entre revisiones de tareas pendientes
        """
        signal.signal(signal.SIGINT, self._handle_signal)
        signal.signal(signal.SIGTERM, self._handle_signal)
        self.register()
        self.logger.info(
            f"Scheduler iniciado ({', '.join(self.schedules)}); "
            f"próxima ejecución: {self.get_next_run()}"
        )

        if run_immediately:
            self.run_backup_job()

        self.running = True
        while self.running:
            self.scheduler.run_pending()
            time.sleep(poll_seconds)
        self.logger.info("Scheduler detenido")

    def run_backup_job(self) -> List[BackupOutcome]:
        """
        Construye y ejecuta un lote nuevo

        Returns:
            Resultados del lote (vacío si el lote no pudo construirse)
        """
        try:
            outcomes = self.backup_service.run(self.job_factory())
        except Exception as e:  # pylint: disable=broad-except
            self.logger.error(f"Error crítico durante backup: {e}", exc_info=True)
            return []

        self.report_service.print_summary(outcomes)
        return outcomes

    def stop(self) -> None:
        """Termina el bucle tras la revisión en curso y descarta las tareas"""
        self.running = False
        self.scheduler.clear()

    def _handle_signal(self, signum, frame):
        self.logger.info(f"Señal recibida: {signal.Signals(signum).name}")
        self.stop()

    def get_next_run(self) -> str:
        """Fecha de la próxima ejecución programada"""
        next_run = self.scheduler.next_run
        if next_run:
            return next_run.strftime('%Y-%m-%d %H:%M:%S')
        return "sin ejecuciones programadas"
