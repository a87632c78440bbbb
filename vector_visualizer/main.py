# vector_visualizer/main.py
import sys
import traceback
from PyQt5.QtWidgets import QApplication, QMessageBox
from PyQt5.QtCore import Qt, QLocale


APPLICATION_NAME = "VectorVisualizer"


def main():
    """Configura e executa o visualizador."""
    # Escala para telas de alta resolução
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    QLocale.setDefault(QLocale.system())

    app = QApplication(sys.argv)
    # Define o diretório de dados usado por StatePersistenceService
    app.setApplicationName(APPLICATION_NAME)

    view_instance = None
    try:
        from .services.state_persistence_service import StatePersistenceService
        from .state_manager import StateManager
        from .view.main_view import VisualizerView

        state_manager = StateManager(StatePersistenceService())
        state_manager.load_state()
        view_instance = VisualizerView(state_manager)

    except ImportError as e:
        print("--- ERRO CRÍTICO DE IMPORTAÇÃO ---", file=sys.stderr)
        traceback.print_exc()
        print("---------------------------------", file=sys.stderr)
        QMessageBox.critical(
            None,
            "Erro de Importação",
            f"Falha ao importar componentes necessários da aplicação.\n\n"
            f"Erro: {e}\n\n"
            f"Verifique a instalação (PyQt5, numpy).\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    except Exception as e:
        print("--- ERRO CRÍTICO INESPERADO ---", file=sys.stderr)
        traceback.print_exc()
        print("-----------------------------", file=sys.stderr)
        QMessageBox.critical(
            None,
            "Erro Inesperado na Inicialização",
            f"Ocorreu um erro inesperado ao iniciar o visualizador:\n\n"
            f"{e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    view_instance.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
