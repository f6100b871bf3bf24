# showcase/shared/config/__init__.py
"""
Entry-point ligero para configuración.

Expone un único import estable:
    from showcase.shared.config import get_settings

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

from showcase.shared.config.config_loader import get_settings
from showcase.shared.config.logging_config import setup_logging

__all__ = ["get_settings", "setup_logging"]
# fin del archivo
