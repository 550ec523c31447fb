"""
Repositorio para manejar configuración (Dependency Inversion)
"""
import json
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Mapping, Optional
from ..config import Config
from ..logger import LoggerService
from ..models import BackupJob, BackupSettings, ConnectionSpec, DatabaseConfig


# Prefijos de las variables de entorno (.env)
ENV_PREFIXES = {
    'postgres': 'PG',
    'mysql': 'MYSQL',
    'mariadb': 'MARIADB',
    'mongodb': 'MONGO',
}

DEFAULT_USERS = {
    'postgres': 'postgres',
    'mysql': 'root',
    'mariadb': 'root',
    'mongodb': '',
}


class ConfigRepository:
    """Repositorio para manejar configuración"""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Inicializa el repositorio de configuración
        
        Args:
            config_file: Ruta al archivo de configuración (opcional)
        """
        self.config_file = config_file or Config.CONFIG_FILE
        self.logger = LoggerService.get_logger("ConfigRepository")
        self._raw_config = None

    def load(self) -> Dict:
        """
        Carga configuración desde archivo JSON
        
        Returns:
            Diccionario con la configuración
        """
        if not self.config_file.exists():
            self.logger.warning(f"El archivo de configuración no existe: {self.config_file}")
            self._raw_config = Config.DEFAULT_CONFIG
            return self._raw_config

        try:
            with open(self.config_file, "r", encoding='utf-8') as f:
                self._raw_config = json.load(f)
            self.logger.info(f"Configuración cargada exitosamente: {self.config_file}")
            return self._raw_config
        except json.JSONDecodeError as e:
            self.logger.error(f"Error al parsear JSON: {e}")
            self._raw_config = Config.DEFAULT_CONFIG
            return self._raw_config
        except OSError as e:
            self.logger.error(f"Error al cargar la configuración: {str(e)}")
            self._raw_config = Config.DEFAULT_CONFIG
            return self._raw_config

    def save(self, config: Dict) -> bool:
        """
        Guarda configuración en archivo JSON
        
        Args:
            config: Diccionario con la configuración
            
        Returns:
            True si se guardó exitosamente
        """
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding='utf-8') as f:
                json.dump(config, f, indent=4, ensure_ascii=False)
            self.logger.info(f"Configuración guardada exitosamente: {self.config_file}")
            return True
        except OSError as e:
            self.logger.error(f"Error al guardar la configuración: {str(e)}")
            return False

    def load_from_environment(self, environ: Optional[Mapping[str, str]] = None) -> Dict:
        """
        Construye la configuración a partir de variables de entorno
        
        Usa la convención PG_*, MYSQL_*, MARIADB_*, MONGO_* (HOST, USER, PASS,
        DB, VERSION, CONTAINER, POD). Los motores sin HOST o DB se omiten.
        
        Args:
            environ: Variables a usar (os.environ por defecto)
            
        Returns:
            Diccionario con la configuración
        """
        environ = os.environ if environ is None else environ
        databases = []
        for db_type, prefix in ENV_PREFIXES.items():
            host = environ.get(f"{prefix}_HOST", "")
            database = environ.get(f"{prefix}_DB", "")
            if not host or not database:
                self.logger.info(f"[{db_type}] Omitido (sin configuración)")
                continue
            databases.append({
                "type": db_type,
                "host": host,
                "user": environ.get(f"{prefix}_USER", DEFAULT_USERS[db_type]),
                "password": environ.get(f"{prefix}_PASS", ""),
                "database": database,
                "version": environ.get(f"{prefix}_VERSION", Config.DEFAULT_VERSIONS[db_type]),
                "container": environ.get(f"{prefix}_CONTAINER", ""),
                "pod": environ.get(f"{prefix}_POD", ""),
                "enabled": True,
            })

        self._raw_config = {
            "databases": databases,
            "backup_settings": {
                "method": environ.get("BACKUP_METHOD", "docker-run"),
                "namespace": environ.get("K8S_NAMESPACE", "default"),
                "temp_dir": environ.get("BACKUP_TEMP_DIR", "/tmp/db-backups"),
                "backup_dir": environ.get("BACKUP_DIR", "backup"),
            },
        }
        return self._raw_config

    def get_databases(self) -> List[DatabaseConfig]:
        """
        Obtiene lista de configuraciones de bases de datos
        
        Returns:
            Lista de objetos DatabaseConfig
        """
        if self._raw_config is None:
            self.load()

        databases = []
        for db_dict in self._raw_config.get('databases', []):
            try:
                db_type = str(db_dict.get('type', '')).lower()
                connection = ConnectionSpec(
                    host=db_dict.get('host', 'localhost'),
                    database=db_dict.get('database', ''),
                    user=self._resolve_credential(db_dict.get('user', DEFAULT_USERS.get(db_type, ''))),
                    password=self._resolve_credential(db_dict.get('password', '')),
                    version=str(db_dict.get('version', '')),
                    container=db_dict.get('container', ''),
                    pod=db_dict.get('pod', ''),
                )
                databases.append(DatabaseConfig(
                    type=db_type,
                    connection=connection,
                    enabled=db_dict.get('enabled', True),
                ))
            except (ValueError, TypeError, AttributeError) as e:
                self.logger.error(f"Error al cargar configuración de base de datos: {str(e)}")
        return databases

    def get_backup_settings(self) -> BackupSettings:
        """
        Obtiene configuración de backups
        
        Returns:
            Objeto BackupSettings
        """
        if self._raw_config is None:
            self.load()

        settings_dict = self._raw_config.get('backup_settings', {})
        try:
            return BackupSettings(
                method=settings_dict.get('method', Config.BACKUP_METHOD),
                namespace=settings_dict.get('namespace', Config.K8S_NAMESPACE),
                temp_dir=settings_dict.get('temp_dir', Config.BACKUP_TEMP_DIR),
                backup_dir=settings_dict.get('backup_dir', str(Config.BACKUP_DIR)),
                schedule=settings_dict.get('schedule', list(Config.BACKUP_SCHEDULE)),
            )
        except Exception as e:  # pylint: disable=broad-except
            self.logger.error(f"Error al cargar configuración de backups: {str(e)}")
            return BackupSettings()

    def build_jobs(
        self,
        timestamp: Optional[datetime] = None,
        method: Optional[str] = None,
        only: Optional[str] = None,
    ) -> List[BackupJob]:
        """
        Construye el lote de trabajos en orden de configuración
        
        Args:
            timestamp: Timestamp común del lote (ahora por defecto)
            method: Método que reemplaza al configurado
            only: Nombre de una base de datos para respaldar solo esa
            
        Returns:
            Lista de BackupJob; las bases deshabilitadas se omiten
        """
        settings = self.get_backup_settings()
        timestamp = timestamp or datetime.now()
        jobs = []
        for db_config in self.get_databases():
            if only and db_config.connection.database != only:
                continue
            if not db_config.enabled:
                self.logger.info(f"Base de datos deshabilitada: {db_config.connection.database}")
                continue
            jobs.append(BackupJob(
                database_type=db_config.type,
                method=method or settings.method,
                connection=db_config.connection,
                backup_dir=Path(settings.backup_dir),
                timestamp=timestamp,
                namespace=settings.namespace,
                temp_dir=settings.temp_dir,
            ))
        return jobs

    def _resolve_credential(self, value: str) -> str:
        """
        Resuelve credencial desde variable de entorno si es necesario
        
        Args:
            value: Valor que puede contener referencia a variable de entorno
            
        Returns:
            Valor resuelto
        """
        if value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            resolved = os.getenv(env_var, "")
            if not resolved:
                self.logger.warning(f"Variable de entorno no encontrada: {env_var}")
            return resolved
        return value

    def create_example_config(self) -> bool:
        """
        Crea un archivo de configuración de ejemplo
        
        Returns:
            True si se creó exitosamente
        """
        return self.save(Config.DEFAULT_CONFIG)
