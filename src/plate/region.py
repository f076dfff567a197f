"""
区間モジュール

プロファイル上のインデックス区間を表す不変な値型を提供する。
ギャップ (裾付きピーク) と文字領域 (単純な区間) の両方に使用する。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """
    インデックス区間 [left, right] と頂点 apex

    apex を省略した場合は right と一致する (区間形式)。
    これにより文字領域を次の領域の左端としてそのまま連結できる。
    """

    left: int
    right: int
    apex: int | None = None

    def __post_init__(self):
        if self.apex is None:
            object.__setattr__(self, "apex", self.right)

    @classmethod
    def peak(cls, left: int, apex: int, right: int) -> "Region":
        """裾付きピーク形式で生成"""
        return cls(left=left, right=right, apex=apex)

    @classmethod
    def span(cls, left: int, right: int) -> "Region":
        """区間形式で生成 (apex = right)"""
        return cls(left=left, right=right)

    @property
    def width(self) -> int:
        """区間の幅 (right - left)"""
        return self.right - self.left


def by_apex(region: Region) -> int:
    """左から右へ並べるためのソートキー"""
    return region.apex
