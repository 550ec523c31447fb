"""
Transporte por pod de Kubernetes (kubectl exec / kubectl cp)
"""
import posixpath
from pathlib import Path
from typing import List, Optional

from ..exceptions import ConfigurationError
from ..models import BackupJob, DumpCommand
from ..process_runner import ProcessRunner
from .base_transport import Transport


class PodExecTransport(Transport):
    """
    Ejecuta dentro de un pod en ejecución

    kubectl exec no admite variables de entorno, así que los secretos se
    envían por stdin y un sh remoto los exporta antes de ejecutar el argv.
    Cada secreto ocupa una línea: los que contienen saltos de línea se
    rechazan.
    """

    name = "kubectl exec"
    target_label = "pod"

    def __init__(self, runner: ProcessRunner, namespace: str, pod: str):
        super().__init__(runner)
        self.namespace = namespace
        self.pod = pod

    @classmethod
    def from_job(cls, job: BackupJob, runner: ProcessRunner, type_dir: Path) -> "PodExecTransport":
        return cls(runner, namespace=job.namespace or "default", pod=job.connection.pod)

    def exec_argv(self, command: DumpCommand) -> List[str]:
        argv = ["kubectl", "exec"]
        if command.secrets:
            argv.append("-i")
        argv.extend(["-n", self.namespace, self.pod, "--"])
        if command.secrets:
            steps = [f"IFS= read -r {name} && export {name}" for name in command.secrets]
            steps.append('exec "$@"')
            argv.extend(["sh", "-c", " && ".join(steps), "sh"])
        argv.extend(command.argv)
        return argv

    def exec_stdin(self, command: DumpCommand) -> Optional[bytes]:
        if not command.secrets:
            return None
        for name, value in command.secrets.items():
            if "\n" in value:
                raise ConfigurationError(f"{name} must not contain line breaks for kubectl-exec")
        return "".join(f"{value}\n" for value in command.secrets.values()).encode("utf-8")

    def exec_env(self, command: DumpCommand) -> None:
        return None

    def copy_argv(self, remote_path: str, local_dir: Path) -> List[str]:
        # kubectl cp copia el contenido del origen en la ruta destino
        target = local_dir / posixpath.basename(remote_path.rstrip("/"))
        return ["kubectl", "cp", f"{self.namespace}/{self.pod}:{remote_path}", str(target)]
