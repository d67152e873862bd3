# どこで: `src/dragoncurve/interactive/gl/shader.py`。
# 何を: 線分を太さ付きの四角形へ展開して描く GLSL プログラムを生成する。
# なぜ: core profile では glLineWidth が 1px 固定になりうるため、太さをジオメトリシェーダで表現する。

from __future__ import annotations

import moderngl

VERTEX_SHADER = """
#version 410
in vec2 in_vert;
in vec3 in_color;
out vec3 v_color;

void main() {
    v_color = in_color;
    gl_Position = vec4(in_vert, 0.0, 1.0);
}
"""

# GL_LINES の 1 本を、画面ピクセル空間で太さ line_width の矩形（triangle strip）へ展開する。
GEOMETRY_SHADER = """
#version 410
layout(lines) in;
layout(triangle_strip, max_vertices = 4) out;

uniform mat4 projection;
uniform float line_width;

in vec3 v_color[];
out vec3 g_color;

void main() {
    vec2 a = gl_in[0].gl_Position.xy;
    vec2 b = gl_in[1].gl_Position.xy;
    vec2 dir = b - a;
    float len = length(dir);
    vec2 normal = len > 0.0 ? vec2(-dir.y, dir.x) / len : vec2(0.0, 1.0);
    vec2 offset = normal * (line_width * 0.5);

    g_color = v_color[0];
    gl_Position = projection * vec4(a + offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(a - offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(b + offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = projection * vec4(b - offset, 0.0, 1.0);
    EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 410
in vec3 g_color;
out vec4 frag_color;

void main() {
    frag_color = vec4(g_color, 1.0);
}
"""


class Shader:
    """線分描画用のシェーダプログラムを生成する。"""

    @staticmethod
    def create_shader(ctx: moderngl.Context) -> moderngl.Program:
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )
