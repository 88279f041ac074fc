#
# PROJECT: text-cube
# MODULE: text_cube/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec4, Mat4, transform_point
from .config import RenderConfig
from .canvas import Canvas
from .camera import Camera, Viewport, ScreenPoint, project
from .culling import is_back_face
from .rasterizer import draw_line
from .mesh import Mesh
from .renderer import Renderer
from .output import AnsiSink, CursesSink, CollectingSink
from .demo import DemoApp
