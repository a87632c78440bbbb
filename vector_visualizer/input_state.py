# vector_visualizer/input_state.py
from dataclasses import dataclass, field
from typing import Dict, FrozenSet

import numpy as np


def _frozen_vec2(x: float, y: float) -> np.ndarray:
    arr = np.array([x, y], dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class FrameInput:
    """
    Entrada amostrada uma única vez por quadro.

    Todo o quadro (transformações, arrasto e desenho) usa o mesmo instantâneo,
    evitando divergência entre o teste de acerto e o desenho.

    Atributos:
        canvas_width, canvas_height: Tamanho do canvas em pixels.
        mouse: Posição do ponteiro no canvas (somente leitura).
        mouse_delta: Deslocamento do ponteiro desde o quadro anterior.
        mouse_buttons: Máscara de botões (1=esquerdo, 2=direito, 4=meio).
        mouse_wheel: Soma dos passos da roda; positivo = em direção ao usuário.
        keys_down: Teclas pressionadas.
        keys_triggered: Teclas pressionadas neste quadro (sem auto-repetição).
    """

    canvas_width: float
    canvas_height: float
    mouse: np.ndarray = field(default_factory=lambda: _frozen_vec2(0.0, 0.0))
    mouse_delta: np.ndarray = field(default_factory=lambda: _frozen_vec2(0.0, 0.0))
    mouse_buttons: int = 0
    mouse_wheel: float = 0.0
    keys_down: FrozenSet[int] = frozenset()
    keys_triggered: FrozenSet[int] = frozenset()

    def is_key_triggered(self, key: int) -> bool:
        return key in self.keys_triggered

    def is_key_down(self, key: int) -> bool:
        return key in self.keys_down


class InputState:
    """
    Acumula eventos de entrada entre quadros.

    Teclas têm três estados: ausente (solta), False (pressionada em quadro
    anterior) e True (pressionada neste quadro).
    """

    def __init__(self):
        self._mouse = np.zeros(2, dtype=float)
        self._mouse_last = np.zeros(2, dtype=float)
        self._mouse_delta = np.zeros(2, dtype=float)
        self._mouse_wheel: float = 0.0
        self._mouse_buttons: int = 0
        self._keys_down: Dict[int, bool] = {}

    def update_mouse(self, x: float, y: float, buttons: int):
        self._mouse[:] = (x, y)
        self._mouse_delta[:] = self._mouse - self._mouse_last
        self._mouse_buttons = int(buttons)

    def add_wheel(self, steps: float):
        self._mouse_wheel += steps

    def key_pressed(self, key: int, is_auto_repeat: bool = False):
        self._keys_down[key] = not is_auto_repeat

    def key_released(self, key: int):
        self._keys_down.pop(key, None)

    def release_all(self):
        """Esquece botões e teclas (ex.: a janela perdeu o foco)."""
        self._mouse_buttons = 0
        self._keys_down.clear()

    def snapshot(self, canvas_width: float, canvas_height: float) -> FrameInput:
        return FrameInput(
            canvas_width=float(canvas_width),
            canvas_height=float(canvas_height),
            mouse=_frozen_vec2(*self._mouse),
            mouse_delta=_frozen_vec2(*self._mouse_delta),
            mouse_buttons=self._mouse_buttons,
            mouse_wheel=self._mouse_wheel,
            keys_down=frozenset(self._keys_down),
            keys_triggered=frozenset(k for k, v in self._keys_down.items() if v),
        )

    def end_frame(self):
        """Zera roda e deslocamento e marca todas as teclas como não disparadas."""
        self._mouse_wheel = 0.0
        self._mouse_last[:] = self._mouse
        self._mouse_delta[:] = 0.0
        for key in self._keys_down:
            self._keys_down[key] = False
