"""
Construcción de comandos de volcado
"""
from .command_builder import build_plan, build_dump_command, container_image

__all__ = ['build_plan', 'build_dump_command', 'container_image']
