# vector_visualizer/controllers/drag_controller.py
from typing import Optional

import numpy as np

from ..models.drag import DragSession, NormalDrag, PositionDrag
from ..utils.scalar_math import VectorLike


class DragController:
    """
    Mantém no máximo uma sessão de arrasto ativa.

    Estados: ocioso (sem sessão) ou arrastando (uma sessão). A cena decide
    quando iniciar um arrasto (teste de acerto); o controlador garante a
    exclusividade e encerra a sessão quando a máscara de botões muda.
    """

    def __init__(self):
        self._session: Optional[DragSession] = None

    def session(self) -> Optional[DragSession]:
        return self._session

    def is_dragging(self) -> bool:
        return self._session is not None

    def is_dragging_value(self, value: np.ndarray) -> bool:
        """Verifica se a sessão ativa escreve exatamente neste array."""
        return self._session is not None and self._session.out is value

    def _can_begin(self, mouse_buttons: int) -> bool:
        return self._session is None and mouse_buttons != 0

    def begin_position_drag(
        self, out: np.ndarray, drag_start: VectorLike, mouse_buttons: int
    ) -> bool:
        """
        Inicia um arrasto de posição sobre `out`.

        Returns:
            bool: False (nenhuma sessão criada) se já houver um arrasto ativo
                  ou se nenhum botão estiver pressionado.
        """
        if not self._can_begin(mouse_buttons):
            return False
        self._session = PositionDrag(out, drag_start, mouse_buttons)
        return True

    def begin_normal_drag(
        self,
        out: np.ndarray,
        origin: VectorLike,
        drag_start: VectorLike,
        mouse_buttons: int,
    ) -> bool:
        """Inicia um arrasto de direção sobre `out` com pivô em `origin`."""
        if not self._can_begin(mouse_buttons):
            return False
        self._session = NormalDrag(out, origin, drag_start, mouse_buttons)
        return True

    def update(self, mouse_world: VectorLike, mouse_buttons: int) -> bool:
        """
        Atualiza a sessão ativa com o ponteiro (coordenadas de mundo).

        Returns:
            bool: True se a sessão foi encerrada nesta atualização.
        """
        if self._session is None:
            return False
        if self._session.update(mouse_world, mouse_buttons):
            self._session = None
            return True
        return False
