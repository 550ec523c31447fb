"""
Configuración centralizada de la herramienta de backup
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv, find_dotenv

class Config:
    """Configuración centralizada del sistema"""

    ENV_FILE = find_dotenv()

    # Cargar variables de entorno desde la raíz real del proyecto
    load_dotenv(ENV_FILE)

    # BASE_DIR debe ser la raíz donde está main.py
    BASE_DIR = Path(ENV_FILE).parent if ENV_FILE else Path(__file__).resolve().parents[1]

    # Relativo al directorio de trabajo
    BACKUP_DIR = Path(os.getenv("BACKUP_DIR", "backup"))
    BACKUP_TEMP_DIR = os.getenv("BACKUP_TEMP_DIR", "/tmp/db-backups")
    BACKUP_METHOD = os.getenv("BACKUP_METHOD", "docker-run")
    K8S_NAMESPACE = os.getenv("K8S_NAMESPACE", "default")

    LOG_DIR = BASE_DIR / "Logs"
    CONFIG_FILE = BASE_DIR / "config.json"

    TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
    BACKUP_SCHEDULE = ["02:00"]

    LOG_LEVEL = logging.INFO
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    SUPPORTED_METHODS = ['docker-run', 'docker-exec', 'kubectl-exec']

    # Tag de imagen por defecto para cada motor
    DEFAULT_VERSIONS = {
        'postgres': '15',
        'mysql': '8',
        'mariadb': '11',
        'mongodb': '7',
    }

    DEFAULT_CONFIG = {
        "databases": [
            {
                "type": "postgres",
                "host": "postgres",
                "user": "postgres",
                "password": "${PG_PASS}",
                "database": "mydb",
                "version": "15",
                "container": "test-postgres",
                "pod": "postgres-0",
                "enabled": True
            },
            {
                "type": "mongodb",
                "host": "mongodb",
                "database": "mydb",
                "version": "7",
                "container": "test-mongodb",
                "pod": "mongodb-0",
                "enabled": True
            }
        ],
        "backup_settings": {
            "method": "docker-run",
            "namespace": "default",
            "temp_dir": "/tmp/db-backups",
            "backup_dir": "backup",
            "schedule": ["02:00"]
        }
    }

    @classmethod
    def ensure_directories(cls):
        """Crea los directorios necesarios si no existen"""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
