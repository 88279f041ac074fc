#
# PROJECT: text-cube
# MODULE: text_cube/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging

from .config import RenderConfig
from .canvas import Canvas
from .camera import Camera, project
from .culling import is_back_face
from .mesh import Mesh
from .math_utils import transform_point
from .rasterizer import draw_line

logger = logging.getLogger(__name__)


class Renderer:
    """
    Stateless wireframe renderer.

    render(tick) runs one pass of the pipeline and returns a frozen Canvas.

    Pipeline:
      1. Tick -> rotation angle -> object-to-camera transform
      2. Transform and perspective-project every vertex
      3. Per face: screen-space backface cull on its first three vertices
      4. Per visible face: draw each edge from a vertex to the previous one,
         wrapping the last vertex back to the first
    """

    def __init__(self, config: RenderConfig = None, mesh: Mesh = None):
        self.config = config or RenderConfig()
        self.mesh = mesh or Mesh.cube()
        self.camera = Camera(self.config.angular_rate, self.config.camera_distance)

    def camera_space(self, tick):
        """Mesh vertices after the tick's transform (before projection)."""
        transform = self.camera.transform(tick)
        return [transform_point(transform, v) for v in self.mesh.vertices]

    def project_vertices(self, tick):
        vp = self.config.viewport
        return [project(p, vp.scale_x, vp.scale_y, vp.offset_x, vp.offset_y)
                for p in self.camera_space(tick)]

    def visible_faces(self, screen_pos):
        """Faces that survive backface culling, in mesh order."""
        return [face for face in self.mesh.faces
                if not is_back_face(screen_pos[face[0]],
                                    screen_pos[face[1]],
                                    screen_pos[face[2]])]

    def render(self, tick) -> Canvas:
        config = self.config
        canv = Canvas(config.width, config.height, config.background)

        screen_pos = self.project_vertices(tick)
        faces = self.visible_faces(screen_pos)
        logger.debug("tick %s: drawing %d of %d faces",
                     tick, len(faces), len(self.mesh.faces))

        for face in faces:
            end = face[-1]
            for start in face:
                draw_line(canv, screen_pos[start], screen_pos[end],
                          config.steep_glyph, config.shallow_glyph)
                end = start

        return canv.freeze()
