"""
Factories de la aplicación
"""
from .strategy_factory import BackupStrategyFactory

__all__ = ['BackupStrategyFactory']
