"""
共通設定モジュール

ナンバープレート文字分割で使用する設定を管理する。
環境変数や設定ファイルから値を読み込む。
"""

from pathlib import Path
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = ConfigDict(
        env_prefix="PLATESEG_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # ===== パス設定 =====
    project_root: Path = Path(__file__).parent.parent
    data_dir: Path = project_root / "data"
    output_dir: Path = data_dir / "output"  # 文字画像の保存先

    # ===== プレートグラフ設定 =====
    # 小さいと文字を切りすぎ、大きいと隣接文字を誤って結合しやすい
    plategraph_rel_minpeaksize: float = 0.86  # 最大値に対するピークの最小相対高さ
    plategraph_peakfootconstant: float = 0.7  # ピーク高さに対する裾の相対位置
    plategraph_peak_count: int = 25  # 抽出を試みるギャップの最大数


# シングルトンインスタンス
settings = Settings()
