"""
Transportes de ejecución para cada método de backup
"""
from pathlib import Path

from ..models import BackupJob, ExecutionMethod
from ..process_runner import ProcessRunner
from .base_transport import Transport
from .container_exec_transport import ContainerExecTransport
from .container_run_transport import EphemeralContainerTransport
from .pod_exec_transport import PodExecTransport

_TRANSPORTS = {
    ExecutionMethod.DOCKER_RUN: EphemeralContainerTransport,
    ExecutionMethod.DOCKER_EXEC: ContainerExecTransport,
    ExecutionMethod.KUBECTL_EXEC: PodExecTransport,
}


def create_transport(job: BackupJob, runner: ProcessRunner, type_dir: Path) -> Transport:
    """
    Crea el transporte que corresponde al método del trabajo

    Args:
        job: Trabajo de backup
        runner: Runner de procesos
        type_dir: Directorio local de backups del tipo de base de datos

    Returns:
        Instancia de Transport

    Raises:
        ConfigurationError: si el método no es válido
    """
    method = ExecutionMethod.parse(job.method)
    return _TRANSPORTS[method].from_job(job, runner, type_dir)


__all__ = [
    'Transport',
    'EphemeralContainerTransport',
    'ContainerExecTransport',
    'PodExecTransport',
    'create_transport',
]
