# vector_visualizer/state_manager.py
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np
from PyQt5.QtCore import QObject, pyqtSignal

from .utils.scalar_math import TAU, normalize, vec2


class Demo(Enum):
    """
    Enumeração das cenas de demonstração, na ordem das teclas 1..7.

    Atributos:
        DOT_PRODUCT: Raios de luz paralelos atingindo uma superfície.
        DOT_PRODUCT_NORMAL: Idem, com a normal da superfície e faces traseiras.
        SURFACE_NORMAL: Normal unitária sobre uma grade com suas coordenadas.
        CAMERA_FRUSTUM: Tronco de visão 3D com controles deslizantes.
        CAMERA_FRUSTUM_PROJECTION_MATRIX: Idem, exibindo a matriz de projeção.
        POINT_LIGHT: Luz pontual emitindo raios radiais.
        POINT_LIGHT_PIXEL: Luz pontual iluminando um único "pixel" da superfície.
    """

    DOT_PRODUCT = 0
    DOT_PRODUCT_NORMAL = 1
    SURFACE_NORMAL = 2
    CAMERA_FRUSTUM = 3
    CAMERA_FRUSTUM_PROJECTION_MATRIX = 4
    POINT_LIGHT = 5
    POINT_LIGHT_PIXEL = 6

    def is_3d(self) -> bool:
        return self in (Demo.CAMERA_FRUSTUM, Demo.CAMERA_FRUSTUM_PROJECTION_MATRIX)


@dataclass(frozen=True)
class CameraState3D:
    """
    Câmera orbitando a origem em coordenadas esféricas.

    `distance` é negativa (a câmera fica atrás da origem ao longo da direção
    de visão) e nunca ultrapassa MIN_DISTANCE. `aspect` None usa a proporção
    do canvas.
    """

    MIN_DISTANCE = -10.0
    ORBIT_SENSITIVITY = 0.005  # radianos por pixel
    ZOOM_STEP = 4.0

    latitude: float = -TAU * (0.7 / 4)
    longitude: float = 2.2
    distance: float = -100.0
    fov_y_degrees: float = 360.0 / 4.5
    aspect: Optional[float] = None
    far_plane: float = math.inf

    def __post_init__(self):
        if self.distance > self.MIN_DISTANCE:
            object.__setattr__(self, "distance", self.MIN_DISTANCE)

    def orbited(self, delta_x: float, delta_y: float) -> "CameraState3D":
        """Retorna a câmera girada pelo deslocamento do mouse (pixels)."""
        return replace(
            self,
            latitude=self.latitude + delta_x * self.ORBIT_SENSITIVITY,
            longitude=self.longitude + delta_y * self.ORBIT_SENSITIVITY,
        )

    def zoomed(self, wheel_delta: float) -> "CameraState3D":
        """Retorna a câmera aproximada/afastada um passo no sentido da roda."""
        sign = math.copysign(1.0, wheel_delta) if wheel_delta else 0.0
        # __post_init__ limita a distância
        return replace(self, distance=self.distance - sign * self.ZOOM_STEP)


def _default_surface_normal() -> np.ndarray:
    return normalize(vec2(1.0, 1.0))


def _default_light_dir() -> np.ndarray:
    return vec2(-1.0, 0.0)


def _default_light_pos() -> np.ndarray:
    return vec2(0.75, 0.75)


@dataclass
class VisualizerState:
    """
    Estado persistente do visualizador.

    Os vetores 2D são arrays NumPy mutáveis: sessões de arrasto escrevem neles
    diretamente.
    """

    MIN_LIGHT_RAY_NUM = 2

    demo: Demo = Demo.DOT_PRODUCT
    surface_normal: np.ndarray = field(default_factory=_default_surface_normal)
    light_dir: np.ndarray = field(default_factory=_default_light_dir)
    light_pos: np.ndarray = field(default_factory=_default_light_pos)
    light_ray_num: int = 10
    camera: CameraState3D = field(default_factory=CameraState3D)
    frustum_fovy: float = 360.0 / 4.5
    frustum_aspect: float = 16.0 / 9.0
    frustum_far: float = 15.0
    frustum_cube_lerp: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Converte o estado em um dicionário serializável em JSON."""
        camera = self.camera
        return {
            "demo": self.demo.value,
            "surface_normal": [float(c) for c in self.surface_normal],
            "light_dir": [float(c) for c in self.light_dir],
            "light_pos": [float(c) for c in self.light_pos],
            "light_ray_num": int(self.light_ray_num),
            "camera_latitude": camera.latitude,
            "camera_longitude": camera.longitude,
            "camera_distance": camera.distance,
            "frustum_fovy": self.frustum_fovy,
            "frustum_aspect": self.frustum_aspect,
            "frustum_far": self.frustum_far,
            "frustum_cube_lerp": self.frustum_cube_lerp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VisualizerState":
        """
        Reconstrói o estado a partir de um dicionário.

        Chaves ausentes usam os valores padrão. A normal e a direção da luz
        são normalizadas.

        Raises:
            ValueError: Se algum valor tiver tipo ou formato inválido.
        """
        default = cls()
        try:
            demo = Demo(int(data.get("demo", default.demo.value)))

            def read_vec2(key: str, fallback: np.ndarray) -> np.ndarray:
                raw = data.get(key)
                if raw is None:
                    return np.array(fallback, dtype=float)
                return vec2(float(raw[0]), float(raw[1]))

            camera = CameraState3D(
                latitude=float(data.get("camera_latitude", default.camera.latitude)),
                longitude=float(
                    data.get("camera_longitude", default.camera.longitude)
                ),
                distance=float(data.get("camera_distance", default.camera.distance)),
            )
            state = cls(
                demo=demo,
                surface_normal=normalize(
                    read_vec2("surface_normal", default.surface_normal)
                ),
                light_dir=normalize(read_vec2("light_dir", default.light_dir)),
                light_pos=read_vec2("light_pos", default.light_pos),
                light_ray_num=max(
                    int(data.get("light_ray_num", default.light_ray_num)),
                    cls.MIN_LIGHT_RAY_NUM,
                ),
                camera=camera,
                frustum_fovy=float(data.get("frustum_fovy", default.frustum_fovy)),
                frustum_aspect=float(
                    data.get("frustum_aspect", default.frustum_aspect)
                ),
                frustum_far=float(data.get("frustum_far", default.frustum_far)),
                frustum_cube_lerp=float(
                    data.get("frustum_cube_lerp", default.frustum_cube_lerp)
                ),
            )
        except (TypeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(f"Estado inválido: {e}") from e
        return state


class StateManager(QObject):
    """
    Gerencia o estado central do visualizador.

    Responsável por:
    - Demonstração ativa.
    - Valores manipuláveis das cenas (normal, luz, câmera, tronco).
    - Restaurar o estado padrão.
    - Carregar/salvar o estado através de um serviço de persistência.
    """

    # --- Sinais de Mudança de Estado ---
    demo_changed = pyqtSignal(object)  # Demo
    state_reset = pyqtSignal()

    def __init__(self, persistence=None, parent: Optional[QObject] = None):
        """
        Args:
            persistence: Serviço com métodos load() -> Optional[dict] e
                         save(dict) -> bool. None desativa a persistência.
            parent: Objeto pai opcional.
        """
        super().__init__(parent)
        self._persistence = persistence
        self._state: VisualizerState = VisualizerState()

    # --- Getters ---
    def state(self) -> VisualizerState:
        return self._state

    def demo(self) -> Demo:
        return self._state.demo

    # --- Setters ---
    def set_demo(self, demo: Demo):
        """
        Define a demonstração ativa.

        Args:
            demo: Nova demonstração
        """
        if not isinstance(demo, Demo):
            print(f"Aviso: Tipo de demonstração inválido: {demo}")
            return
        if self._state.demo != demo:
            self._state.demo = demo
            self.demo_changed.emit(demo)
            self.save_state()

    def set_camera(self, camera: CameraState3D):
        self._state.camera = camera

    def reset_to_default(self):
        """Restaura o estado padrão e o salva."""
        self._state = VisualizerState()
        self.save_state()
        self.state_reset.emit()
        self.demo_changed.emit(self._state.demo)

    # --- Persistência ---
    def load_state(self) -> bool:
        """
        Carrega o estado salvo, se houver.

        Returns:
            bool: True se um estado salvo foi aplicado.
        """
        if self._persistence is None:
            return False
        data = self._persistence.load()
        if data is None:
            return False
        try:
            self._state = VisualizerState.from_dict(data)
        except ValueError as e:
            print(f"Aviso: Estado salvo ignorado ({e}). Usando padrão.")
            return False
        self.demo_changed.emit(self._state.demo)
        return True

    def save_state(self) -> bool:
        if self._persistence is None:
            return False
        return self._persistence.save(self._state.to_dict())
