"""
どこで: `src/dragoncurve/interactive/gl/line_mesh.py`。
何を: VBO/VAO の確保・更新・解放を担当し、描画可能な LineMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from dragoncurve.interactive.gl.segment_buffer import FLOATS_PER_VERTEX


class LineMesh:
    """
    GPUに線分の頂点（座標 + 色）を送り込む作業を管理
    """

    # in_vert (2f) と in_color (3f) のインターリーブ。
    VERTEX_FORMAT = "2f 3f"
    VERTEX_ATTRIBUTES = ("in_vert", "in_color")

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量を抑制（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: GPUへの描画処理を行うためのモダンOpenGL（moderngl）コンテキスト
        program: GPU側で使うシェーダープログラム。
        VBO (Vertex Buffer Object): GPUに送る「頂点データ」を格納するメモリ。
        VAO (Vertex Array Object): VBOと属性レイアウトを関連付けて、描画命令をシンプルに管理する仕組み。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()

        # 描画ステート
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program,
            [(self.vbo, self.VERTEX_FORMAT, *self.VERTEX_ATTRIBUTES)],
        )

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったらGPUのバッファを再確保"""
        if vbo_size <= self.vbo.size:
            return
        # fold が 1 増えるごとに頂点数はほぼ倍になるため、倍々で確保する。
        reserve = max(vbo_size, int(self.vbo.size) * 2, self.initial_reserve)
        self.vbo.release()
        self.vbo = self.ctx.buffer(reserve=reserve, dynamic=True)
        # VAO は VBO が差し替わるときだけ張り直す（毎フレームは重い）。
        self.vao.release()
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """実際にデータをGPUへ送り込む"""
        vertices_f32 = np.ascontiguousarray(vertices, dtype=np.float32)
        if vertices_f32.ndim != 2 or vertices_f32.shape[1] != FLOATS_PER_VERTEX:
            raise ValueError(
                f"vertices は shape (N,{FLOATS_PER_VERTEX}) である必要がある: got={vertices_f32.shape}"
            )
        self.vertex_count = int(vertices_f32.shape[0])
        if self.vertex_count == 0:
            return

        self._ensure_capacity(vertices_f32.nbytes)
        self.vbo.orphan()
        self.vbo.write(vertices_f32)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
