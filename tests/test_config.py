"""
設定モジュールのテスト
"""

from pathlib import Path


def test_settings_import():
    """設定モジュールがインポートできることを確認"""
    from src.config import settings

    assert settings is not None


def test_settings_default_values():
    """デフォルト値が正しく設定されていることを確認"""
    from src.config import Settings

    defaults = Settings()

    assert defaults.plategraph_rel_minpeaksize == 0.86
    assert defaults.plategraph_peakfootconstant == 0.7
    assert defaults.plategraph_peak_count == 25


def test_settings_paths():
    """パス設定が正しく解決されることを確認"""
    from src.config import settings

    assert isinstance(settings.project_root, Path)
    assert isinstance(settings.data_dir, Path)
    assert isinstance(settings.output_dir, Path)


def test_settings_env_override(monkeypatch):
    """環境変数でのオーバーライドが機能することを確認"""
    monkeypatch.setenv("PLATESEG_PLATEGRAPH_REL_MINPEAKSIZE", "0.5")
    monkeypatch.setenv("PLATESEG_PLATEGRAPH_PEAK_COUNT", "7")

    # 設定を再読み込み
    from src.config import Settings

    new_settings = Settings()

    assert new_settings.plategraph_rel_minpeaksize == 0.5
    assert new_settings.plategraph_peak_count == 7
