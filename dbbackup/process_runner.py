"""
Capacidad única para lanzar procesos externos

docker, kubectl, las utilidades de volcado y du pasan todos por aquí, de modo
que los transportes y el inspector de tamaño se prueban con un runner falso.
"""
import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .logger import LoggerService

# Código que usa el shell cuando no encuentra el ejecutable
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class ProcessResult:
    """Resultado de un proceso externo"""
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        """Mensaje legible del fallo: stderr, o el código de salida si está vacío"""
        text = self.stderr.decode("utf-8", errors="replace").strip()
        return text or f"exit status {self.returncode}"


class ProcessRunner(ABC):
    """Interfaz para ejecutar un argv y capturar su salida"""

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        stdin: Optional[bytes] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> ProcessResult:
        """
        Ejecuta un comando hasta que termina

        Args:
            argv: Comando y argumentos
            stdin: Datos para la entrada estándar
            env: Variables adicionales para el entorno del proceso

        Returns:
            Resultado con código de salida, stdout y stderr
        """
        pass


class SubprocessRunner(ProcessRunner):
    """Implementación basada en subprocess; sin timeout propio"""

    def __init__(self):
        self.logger = LoggerService.get_logger("SubprocessRunner")

    def run(
        self,
        argv: Sequence[str],
        stdin: Optional[bytes] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> ProcessResult:
        process_env = None
        if env:
            process_env = os.environ.copy()
            process_env.update(env)

        self.logger.debug(f"Ejecutando: {' '.join(argv)}")
        try:
            completed = subprocess.run(
                list(argv),
                input=stdin,
                capture_output=True,
                env=process_env,
                check=False,
            )
        except OSError as e:
            self.logger.debug(f"No se pudo lanzar {argv[0]}: {e}")
            return ProcessResult(returncode=COMMAND_NOT_FOUND, stderr=str(e).encode("utf-8"))

        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
        )
