"""Matrix helpers and the OpenGL renderer."""

from __future__ import annotations

import math

import numpy as np

VERTEX_SHADER = """
#version 330 core
layout (location = 0) in vec3 vertexPosition;
layout (location = 1) in vec2 vertexUV;
layout (location = 2) in vec3 vertexNormal;
uniform mat4 Model;
uniform mat4 View;
uniform mat4 Projection;
out vec2 UV;
out vec3 Normal;
void main() {
    UV = vertexUV;
    Normal = vertexNormal;
    gl_Position = Projection * View * Model * vec4(vertexPosition, 1);
}
"""

FRAGMENT_SHADER = """
#version 330 core
in vec2 UV;
in vec3 Normal;
uniform sampler2D textureSampler;
out vec3 color;
void main() {
    color = texture(textureSampler, UV).rgb;
}
"""

VERTEX_SHADER_2D = """
#version 330 core
layout (location = 0) in vec3 vertexPosition;
layout (location = 1) in vec2 vertexUV;
uniform mat4 Transformation;
out vec2 UV;
void main() {
    UV = vertexUV;
    gl_Position = Transformation * vec4(vertexPosition, 1);
}
"""

FRAGMENT_SHADER_2D = """
#version 330 core
in vec2 UV;
uniform sampler2D texture2d;
out vec4 color;
void main() {
    vec4 pixel = texture(texture2d, UV);
    // Pure white is treated as transparent.
    if (pixel.r + pixel.g + pixel.b == 3) {
        color = vec4(0, 0, 0, 0);
    } else {
        color = pixel;
    }
}
"""

LIGHT_DIRECTION = (0.75, 1.0, 0.50)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` in radians."""
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye, center, up) -> np.ndarray:
    """View matrix placing ``eye`` at the origin looking at ``center``."""
    eye = np.asarray(eye, dtype=np.float64)
    f = np.asarray(center, dtype=np.float64) - eye
    f /= np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=np.float64))
    s /= np.linalg.norm(s)
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -s @ eye
    m[1, 3] = -u @ eye
    m[2, 3] = f @ eye
    return m.astype(np.float32)


def translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.identity(4, dtype=np.float32)
    m[:3, 3] = (x, y, z)
    return m


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0]).astype(np.float32)


def sprite_transform(sprite, width: int, height: int) -> np.ndarray:
    """Clip-space transform for a sprite on a ``width`` x ``height`` screen."""
    x = sprite.pos_x / width
    y = sprite.pos_y / height
    return translation(x, -y, 0.0) @ _scale(sprite.width / width, sprite.height / height, 1.0)


def _gl_matrix(m: np.ndarray) -> tuple[float, ...]:
    return tuple(float(v) for v in m.T.flatten())


class Renderer:
    """Draws models and sprites into the current OpenGL context."""

    def __init__(self, window, camera=None) -> None:
        from pyglet.graphics.shader import Shader, ShaderProgram

        self.window = window
        self.camera = camera
        self.shader = ShaderProgram(
            Shader(VERTEX_SHADER, "vertex"), Shader(FRAGMENT_SHADER, "fragment")
        )
        self.shader_2d = ShaderProgram(
            Shader(VERTEX_SHADER_2D, "vertex"), Shader(FRAGMENT_SHADER_2D, "fragment")
        )
        self._cache: dict[int, tuple] = {}

    @staticmethod
    def _texture(image):
        import pyglet
        from pyglet import gl

        data = pyglet.image.ImageData(image.width, image.height, "BGR", image.pixels)
        texture = data.get_texture()
        gl.glBindTexture(texture.target, texture.id)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glBindTexture(texture.target, 0)
        return texture

    def _resources(self, obj, build):
        key = id(obj)
        if key not in self._cache:
            self._cache[key] = (obj, *build())
        return self._cache[key][1:]

    def update(self) -> None:
        """Clear the colour and depth buffers."""
        from pyglet import gl

        gl.glClearColor(0.0, 0.0, 0.0, 0.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def render_sprite(self, sprite) -> None:
        from pyglet import gl

        program = self.shader_2d

        def build():
            vlist = program.vertex_list(
                6,
                gl.GL_TRIANGLES,
                vertexPosition=("f", tuple(sprite.vertices.flatten())),
                vertexUV=("f", tuple(sprite.uvs.flatten())),
            )
            return vlist, self._texture(sprite.image)

        vlist, texture = self._resources(sprite, build)
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        program.use()
        program["Transformation"] = _gl_matrix(
            sprite_transform(sprite, self.window.width, self.window.height)
        )
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(texture.target, texture.id)
        program["texture2d"] = 0
        vlist.draw(gl.GL_TRIANGLES)
        program.stop()
        gl.glBindTexture(texture.target, 0)
        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_BLEND)

    def render_model(self, model) -> None:
        from pyglet import gl

        program = self.shader
        mesh = model.mesh

        def build():
            vlist = program.vertex_list(
                len(mesh),
                gl.GL_TRIANGLES,
                vertexPosition=("f", tuple(mesh.vertices.flatten())),
                vertexUV=("f", tuple(mesh.uvs.flatten())),
                vertexNormal=("f", tuple(mesh.normals.flatten())),
            )
            return vlist, self._texture(model.texture)

        vlist, texture = self._resources(model, build)
        camera = self.camera
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        program.use()
        projection = perspective(
            math.radians(45.0), self.window.width / self.window.height, 0.1, 100.0
        )
        view = look_at(camera.position, camera.look_at, (0, 1, 0))
        program["Model"] = _gl_matrix(translation(model.pos_x, model.pos_y, model.pos_z))
        program["View"] = _gl_matrix(view)
        program["Projection"] = _gl_matrix(projection)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(texture.target, texture.id)
        program["textureSampler"] = 0
        vlist.draw(gl.GL_TRIANGLES)
        program.stop()
        gl.glBindTexture(texture.target, 0)
        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_CULL_FACE)

    def render_text(self, text) -> None:
        """Draw a text element with its bottom-left corner at its position."""
        import pyglet
        from pyglet import gl

        def build():
            label = pyglet.text.Label(
                text.text,
                font_size=24,
                x=text.pos_x,
                y=text.pos_y,
                anchor_x="left",
                anchor_y="bottom",
            )
            return (label,)

        (label,) = self._resources(text, build)
        label.position = (text.pos_x, text.pos_y, 0)
        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        label.draw()
        gl.glDisable(gl.GL_BLEND)