# vector_visualizer/services/state_persistence_service.py
import json
import os
from typing import Any, Dict, Optional

from PyQt5.QtCore import QStandardPaths


class StatePersistenceService:
    """
    Serviço responsável por salvar e carregar o estado do visualizador em JSON.

    Responsabilidades:
    - Determinar o arquivo de estado (diretório de dados do aplicativo).
    - Ler o estado salvo, tolerando arquivo ausente ou corrompido.
    - Escrever o estado atual.
    """

    STATE_FILENAME = "state.json"

    def __init__(self, filepath: Optional[str] = None):
        """
        Args:
            filepath: Caminho do arquivo de estado. None usa o diretório de
                      dados do aplicativo (ou o diretório pessoal).
        """
        self._filepath: str = filepath or self.default_filepath()

    @classmethod
    def default_filepath(cls) -> str:
        base_dir = QStandardPaths.writableLocation(
            QStandardPaths.AppDataLocation
        ) or os.path.expanduser("~")
        return os.path.join(base_dir, cls.STATE_FILENAME)

    def filepath(self) -> str:
        return self._filepath

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Lê o estado salvo.

        Returns:
            Optional[Dict]: O dicionário salvo, ou None se o arquivo não existir
            ou não puder ser lido.
        """
        if not os.path.exists(self._filepath):
            return None
        try:
            with open(self._filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"Aviso: Não foi possível ler o estado de '{self._filepath}': {e}")
            return None
        if not isinstance(data, dict):
            print(f"Aviso: Estado em '{self._filepath}' não é um objeto JSON.")
            return None
        return data

    def save(self, data: Dict[str, Any]) -> bool:
        """
        Escreve o estado em disco, criando o diretório se necessário.

        Returns:
            bool: True se o estado foi salvo.
        """
        try:
            directory = os.path.dirname(self._filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except (OSError, TypeError) as e:
            print(f"Aviso: Não foi possível salvar o estado em '{self._filepath}': {e}")
            return False
        return True
