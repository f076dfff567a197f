"""
文字分割で発生する例外の定義
"""


class SegmentationError(ValueError):
    """文字分割処理の基底例外"""


class InvalidArgument(SegmentationError):
    """引数が前提条件を満たさない (負のピーク数など)"""


class EmptyProfileError(SegmentationError):
    """サンプル列が空のプロファイルに対して集計値を要求した"""
