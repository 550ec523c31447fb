"""
Transporte por contenedor en ejecución (docker exec / docker cp)
"""
from pathlib import Path
from typing import List

from ..models import BackupJob, DumpCommand
from ..process_runner import ProcessRunner
from .base_transport import Transport


class ContainerExecTransport(Transport):
    """Ejecuta dentro de un contenedor Docker existente"""

    name = "docker exec"
    target_label = "container"

    def __init__(self, runner: ProcessRunner, container: str):
        super().__init__(runner)
        self.container = container

    @classmethod
    def from_job(cls, job: BackupJob, runner: ProcessRunner, type_dir: Path) -> "ContainerExecTransport":
        return cls(runner, container=job.connection.container)

    def exec_argv(self, command: DumpCommand) -> List[str]:
        argv = ["docker", "exec"]
        for name in command.secrets:
            argv.extend(["-e", name])
        argv.append(self.container)
        argv.extend(command.argv)
        return argv

    def copy_argv(self, remote_path: str, local_dir: Path) -> List[str]:
        # La barra final hace que docker cp copie dentro del directorio
        return ["docker", "cp", f"{self.container}:{remote_path}", f"{local_dir}/"]
