# どこで: `src/dragoncurve/interactive/gl/draw_renderer.py`。
# 何を: ライブ描画用の ModernGL レンダラーをカプセル化する。
# なぜ: コンテキスト生成・シェーダ設定・メッシュ転送をウィンドウ側のフレーム処理から分離するため。

from __future__ import annotations

import moderngl
import numpy as np
from pyglet.window import Window

from dragoncurve.interactive.gl import utils as render_utils
from dragoncurve.interactive.gl.line_mesh import LineMesh
from dragoncurve.interactive.gl.shader import Shader


class DrawRenderer:
    """色付き線分を描画するシンプルなレンダラー。"""

    def __init__(self, window: Window) -> None:
        window.switch_to()
        self.ctx = moderngl.create_context(require=410)
        self.program = Shader.create_shader(self.ctx)
        # 毎フレーム頂点が作り直されるため、メッシュは 1 つだけ使い回す。
        self._mesh = LineMesh(self.ctx, self.program)
        self._viewport_size: tuple[int, int] | None = None

    def viewport(self, width: int, height: int) -> None:
        """ビューポートと射影行列をウィンドウサイズに合わせて更新する。"""
        size = (int(width), int(height))
        self.ctx.viewport = (0, 0, size[0], size[1])
        if size == self._viewport_size:
            return
        # 射影行列はビューポート寸法にのみ依存するため、寸法が変わったときだけ書き直す。
        projection = render_utils.build_projection(float(size[0]), float(size[1]))
        self.program["projection"].write(projection.tobytes())
        self._viewport_size = size

    def clear(self, color: tuple[float, float, float]) -> None:
        """背景色でクリアする。"""
        self.ctx.clear(*color, 1.0)

    def render_segments(self, vertices: np.ndarray, *, line_width: float) -> None:
        """GL_LINES 用頂点配列（x, y, r, g, b）を描画する。"""
        mesh = self._mesh
        mesh.upload(vertices)
        if mesh.vertex_count == 0:
            return
        self.program["line_width"].value = float(line_width)
        mesh.vao.render(mode=moderngl.LINES, vertices=mesh.vertex_count)

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self._mesh.release()
        self.program.release()
        self.ctx.release()
