"""
Modelos de datos del sistema
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .exceptions import ConfigurationError


class DatabaseType(str, Enum):
    """Motores de base de datos soportados"""
    POSTGRES = "postgres"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    MONGODB = "mongodb"

    @classmethod
    def parse(cls, value: Union[str, "DatabaseType"]) -> "DatabaseType":
        """
        Convierte un valor de configuración en DatabaseType

        Raises:
            ConfigurationError: si el valor no pertenece al conjunto
        """
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"unknown database type: {value}") from None

    @property
    def produces_directory(self) -> bool:
        return self is DatabaseType.MONGODB


class ExecutionMethod(str, Enum):
    """Formas de ejecutar la herramienta de volcado"""
    DOCKER_RUN = "docker-run"
    DOCKER_EXEC = "docker-exec"
    KUBECTL_EXEC = "kubectl-exec"

    @classmethod
    def parse(cls, value: Union[str, "ExecutionMethod"]) -> "ExecutionMethod":
        """
        Convierte un valor de configuración en ExecutionMethod

        Raises:
            ConfigurationError: si el valor no pertenece al conjunto
        """
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"unknown backup method: {value}") from None


@dataclass(frozen=True)
class ConnectionSpec:
    """Parámetros de conexión de una base de datos"""
    host: str
    database: str
    user: str = ""
    password: str = field(default="", repr=False)
    version: str = ""
    container: str = ""  # docker-exec
    pod: str = ""        # kubectl-exec

    def target_for(self, method: ExecutionMethod) -> str:
        """
        Devuelve el identificador del destino relevante para el método

        Args:
            method: Método de ejecución

        Returns:
            Nombre del contenedor o pod ('' para docker-run)
        """
        if method is ExecutionMethod.DOCKER_EXEC:
            return self.container
        if method is ExecutionMethod.KUBECTL_EXEC:
            return self.pod
        return ""


@dataclass(frozen=True)
class BackupJob:
    """Trabajo de backup de una base de datos; se consume una sola vez"""
    database_type: Union[DatabaseType, str]
    method: Union[ExecutionMethod, str]
    connection: ConnectionSpec
    backup_dir: Path
    timestamp: datetime
    namespace: str = "default"
    temp_dir: str = "/tmp/db-backups"

    @property
    def type_name(self) -> str:
        if isinstance(self.database_type, DatabaseType):
            return self.database_type.value
        return str(self.database_type)

    @property
    def method_name(self) -> str:
        if isinstance(self.method, ExecutionMethod):
            return self.method.value
        return str(self.method)


@dataclass(frozen=True)
class BackupOutcome:
    """Resultado de una operación de backup"""
    database_type: str
    database_name: str
    success: bool
    artifact_path: Optional[str] = None
    size: Optional[str] = None
    error: Optional[str] = None
    duration_seconds: float = 0.0

    def __post_init__(self):
        """Validación después de inicialización"""
        if self.success and self.error:
            raise ValueError("Un resultado exitoso no puede tener error")
        if not self.success and not self.error:
            raise ValueError("Un resultado fallido debe incluir el detalle del error")
        if self.duration_seconds < 0:
            raise ValueError("duration_seconds no puede ser negativo")

    def __str__(self):
        if self.success:
            return (f"✓ {self.database_type}/{self.database_name}: {self.artifact_path} "
                    f"({self.size}) [{self.duration_seconds:.2f}s]")
        else:
            return f"✗ {self.database_type}/{self.database_name}: {self.error} [{self.duration_seconds:.2f}s]"


@dataclass(frozen=True)
class DumpCommand:
    """
    Comando de volcado que se ejecuta dentro del destino

    Los secretos viajan aparte del argv; cada transporte los inyecta a su manera.
    """
    argv: Tuple[str, ...]
    secrets: Dict[str, str] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class CommandPlan:
    """Plan base: destino local del artefacto"""
    destination: Path


@dataclass(frozen=True)
class SingleCommandPlan(CommandPlan):
    """Un solo comando cuya salida estándar se guarda en el archivo destino"""
    command: Optional[DumpCommand] = None


@dataclass(frozen=True)
class MountedDumpPlan(CommandPlan):
    """Un solo comando que escribe directamente en el volumen montado"""
    command: Optional[DumpCommand] = None


@dataclass(frozen=True)
class StagedDumpPlan(CommandPlan):
    """Crear en el destino remoto, copiar al host y limpiar"""
    create: Optional[DumpCommand] = None
    remote_artifact: str = ""
    remote_dir: str = ""
    cleanup: Optional[DumpCommand] = None


@dataclass
class BackupSettings:
    """Configuración de backups"""
    method: str = "docker-run"
    namespace: str = "default"
    temp_dir: str = "/tmp/db-backups"
    backup_dir: str = "backup"
    schedule: List[str] = field(default_factory=lambda: ["02:00"])

    def __post_init__(self):
        """Validación después de inicialización"""
        ExecutionMethod.parse(self.method)
        if not self.namespace:
            raise ValueError("namespace es obligatorio")
        if not self.temp_dir.startswith("/"):
            raise ValueError("temp_dir debe ser una ruta absoluta")
        if isinstance(self.schedule, str):
            self.schedule = [self.schedule]
        for schedule_time in self.schedule:
            if not self._validate_time_format(schedule_time):
                raise ValueError("El formato de schedule debe ser HH:MM")

    @staticmethod
    def _validate_time_format(time_str: str) -> bool:
        """Valida formato de hora HH:MM"""
        try:
            parts = time_str.split(":")
            if len(parts) != 2 or len(parts[0]) != 2 or len(parts[1]) != 2:
                return False
            hours, minutes = int(parts[0]), int(parts[1])
            return 0 <= hours <= 23 and 0 <= minutes <= 59
        except (ValueError, AttributeError):
            return False


@dataclass
class DatabaseConfig:
    """Configuración de una base de datos"""
    type: str
    connection: ConnectionSpec
    enabled: bool = True

    def __post_init__(self):
        """Validación después de inicialización"""
        if not self.type:
            raise ValueError("El tipo de base de datos es obligatorio")
        if not self.connection.database:
            raise ValueError("El nombre de la base de datos es obligatorio")
