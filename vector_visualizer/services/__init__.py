# vector_visualizer/services/__init__.py
"""
Pacote que contém os serviços do visualizador.

Este pacote fornece os seguintes serviços:
- StatePersistenceService: Salva e carrega o estado do visualizador (JSON).
"""

from .state_persistence_service import StatePersistenceService

__all__ = [
    "StatePersistenceService",
]
