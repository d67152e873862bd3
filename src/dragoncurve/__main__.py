# どこで: `src/dragoncurve/__main__.py`。
# 何を: `python -m dragoncurve` でプレビューウィンドウを起動する。
# なぜ: 動作確認用の最小エントリポイントとして利用するため。

from __future__ import annotations

import logging

from dragoncurve.api import run


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run()


if __name__ == "__main__":
    main()
