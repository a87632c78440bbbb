"""
Módulo que define as sessões de arrasto usadas para manipular valores 2D com o mouse.

Uma sessão não possui o valor arrastado: ela guarda uma referência ao array
NumPy pertencente ao estado da cena e escreve nele IN PLACE a cada atualização.
"""

# vector_visualizer/models/drag.py
from typing import Union

import numpy as np

from ..utils.scalar_math import EPSILON, VectorLike, as_vector, cross_2d


class PositionDrag:
    """
    Arrasto de posição: translada o valor acompanhando o ponteiro.

    O deslocamento entre o valor e o ponto onde o arrasto começou é preservado,
    de modo que o valor não "salta" para a posição do ponteiro.
    """

    def __init__(self, out: np.ndarray, drag_start: VectorLike, mouse_buttons: int):
        """
        Args:
            out: Array (2,) do estado da cena que será modificado.
            drag_start: Posição do ponteiro (coordenadas de mundo) no início do arrasto.
            mouse_buttons: Máscara de botões que disparou o arrasto.
        """
        self.out: np.ndarray = out
        self.mouse_buttons: int = mouse_buttons
        self.offset: np.ndarray = out - as_vector(drag_start, 2)

    def update(self, mouse: VectorLike, mouse_buttons: int) -> bool:
        """
        Move o valor para a posição do ponteiro mais o deslocamento inicial.

        Returns:
            bool: True se a máscara de botões mudou (o arrasto deve ser encerrado).
        """
        self.out[:] = as_vector(mouse, 2) + self.offset
        return self.mouse_buttons != mouse_buttons

    def __repr__(self) -> str:
        return f"PositionDrag(out={self.out}, offset={self.offset}, buttons={self.mouse_buttons})"


class NormalDrag:
    """
    Arrasto de direção: rotaciona o valor em torno de um pivô.

    O valor é rotacionado exatamente pelo ângulo que o ponteiro varreu em torno
    de `origin` desde o início do arrasto. O comprimento do valor é preservado.
    """

    def __init__(
        self,
        out: np.ndarray,
        origin: VectorLike,
        drag_start: VectorLike,
        mouse_buttons: int,
    ):
        self.out: np.ndarray = out
        self.mouse_buttons: int = mouse_buttons
        self.normal_start: np.ndarray = np.array(out, dtype=float)
        self.origin: np.ndarray = np.array(as_vector(origin, 2))
        self.drag_start: np.ndarray = np.array(as_vector(drag_start, 2))

    def update(self, mouse: VectorLike, mouse_buttons: int) -> bool:
        """
        Aplica a rotação varrida pelo ponteiro ao valor inicial.

        Se o início do arrasto ou o ponteiro coincidirem com o pivô, o ângulo é
        indefinido e o valor não é alterado.

        Returns:
            bool: True se a máscara de botões mudou (o arrasto deve ser encerrado).
        """
        to_drag_start = self.drag_start - self.origin
        to_mouse = as_vector(mouse, 2) - self.origin
        len_start = np.linalg.norm(to_drag_start)
        len_mouse = np.linalg.norm(to_mouse)

        if len_start > EPSILON and len_mouse > EPSILON:
            to_drag_start = to_drag_start / len_start
            to_mouse = to_mouse / len_mouse

            sin = cross_2d(to_drag_start, to_mouse)
            cos = float(np.dot(to_drag_start, to_mouse))

            # aplica a rotação
            nx, ny = self.normal_start
            self.out[0] = nx * cos - ny * sin
            self.out[1] = nx * sin + ny * cos

        return self.mouse_buttons != mouse_buttons

    def __repr__(self) -> str:
        return (
            f"NormalDrag(out={self.out}, origin={self.origin}, "
            f"normal_start={self.normal_start}, buttons={self.mouse_buttons})"
        )


# Tipos de sessão que o DragController pode manter ativa
DragSession = Union[PositionDrag, NormalDrag]
