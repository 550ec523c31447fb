"""
Inspector de tamaño de artefactos (du)
"""
from pathlib import Path

from ..exceptions import MeasurementError
from ..logger import LoggerService
from ..process_runner import ProcessRunner

UNKNOWN_SIZE = "unknown"


class SizeInspector:
    """Mide archivos y directorios de backup con du"""

    def __init__(self, runner: ProcessRunner):
        self.runner = runner
        self.logger = LoggerService.get_logger("SizeInspector")

    def measure(self, path: Path, is_directory: bool) -> str:
        """
        Obtiene el tamaño legible de un artefacto, p. ej. "145M"

        Args:
            path: Archivo o directorio local
            is_directory: True para sumar el directorio de forma recursiva

        Returns:
            Tamaño en unidades humanas, o "unknown" si du no devuelve nada

        Raises:
            MeasurementError: si du termina con error
        """
        argv = ["du", "-sh", str(path)] if is_directory else ["du", "-h", str(path)]
        result = self.runner.run(argv)
        if not result.ok:
            raise MeasurementError(f"failed to get file size: {result.error_text()}")

        fields = result.stdout.decode("utf-8", errors="replace").split()
        if not fields:
            self.logger.debug(f"du no devolvió tamaño para {path}")
            return UNKNOWN_SIZE
        return fields[0]
