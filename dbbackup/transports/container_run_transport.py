"""
Transporte por contenedor efímero (docker run --rm)
"""
from pathlib import Path
from typing import List

from ..builders.command_builder import MOUNT_TARGET, container_image
from ..models import BackupJob, DumpCommand
from ..process_runner import ProcessRunner
from .base_transport import Transport


class EphemeralContainerTransport(Transport):
    """Lanza un contenedor desechable con el directorio de backups montado"""

    name = "docker run"

    def __init__(self, runner: ProcessRunner, image: str, mount_source: Path):
        super().__init__(runner)
        self.image = image
        self.mount_source = mount_source

    @classmethod
    def from_job(cls, job: BackupJob, runner: ProcessRunner, type_dir: Path) -> "EphemeralContainerTransport":
        return cls(
            runner,
            image=container_image(job.database_type, job.connection.version),
            mount_source=type_dir.resolve(),
        )

    def exec_argv(self, command: DumpCommand) -> List[str]:
        argv = ["docker", "run", "--rm"]
        # Sin valor: docker toma cada variable del entorno del cliente
        for name in command.secrets:
            argv.extend(["-e", name])
        argv.extend(["-v", f"{self.mount_source}:{MOUNT_TARGET}", self.image])
        argv.extend(command.argv)
        return argv
