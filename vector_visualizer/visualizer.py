# vector_visualizer/visualizer.py
from PyQt5.QtCore import Qt

from .controllers.drag_controller import DragController
from .controllers.slider_controller import SliderController
from .controllers.transform_pipeline import TransformPipeline
from .input_state import FrameInput
from .scenes.frustum_scene import FrustumScene
from .scenes.lighting_scene import LightingScene
from .state_manager import Demo, StateManager, VisualizerState


class Visualizer:
    """
    Composição das cenas e controladores; executa um quadro por chamada.

    Não depende de uma superfície de exibição: recebe a entrada do quadro e
    um canvas qualquer com as primitivas de desenho, o que permite testar o
    passo de quadro sem janela.
    """

    BACKGROUND_COLOR = "#fff"
    DEMO_KEYS = {Qt.Key_1 + demo.value: demo for demo in Demo}
    RESET_KEY = Qt.Key_P

    def __init__(self, state_manager: StateManager):
        self._state_manager = state_manager
        self._pipeline = TransformPipeline()
        self._drag_controller = DragController()
        self._slider_controller = SliderController()

        self._lighting_scene = LightingScene(
            state_manager, self._pipeline, self._drag_controller
        )
        self._frustum_scene = FrustumScene(
            state_manager, self._pipeline, self._slider_controller
        )

    # --- Getters ---
    def state_manager(self) -> StateManager:
        return self._state_manager

    def pipeline(self) -> TransformPipeline:
        return self._pipeline

    def drag_controller(self) -> DragController:
        return self._drag_controller

    def slider_controller(self) -> SliderController:
        return self._slider_controller

    def run_frame(self, frame_input: FrameInput, canvas) -> VisualizerState:
        """
        Executa um quadro completo: troca de demonstração, atualização da cena e desenho.

        Args:
            frame_input: Entrada amostrada para este quadro.
            canvas: Canvas de desenho em pixels.

        Returns:
            VisualizerState: O estado após o quadro.
        """
        canvas.clear_screen(self.BACKGROUND_COLOR)

        for key, demo in self.DEMO_KEYS.items():
            if frame_input.is_key_triggered(key):
                self._state_manager.set_demo(demo)

        if frame_input.is_key_triggered(self.RESET_KEY):
            self._state_manager.reset_to_default()

        if self._state_manager.demo().is_3d():
            self._frustum_scene.update(frame_input, canvas)
        else:
            self._lighting_scene.update(frame_input, canvas)

        return self._state_manager.state()
