"""
プレートモジュール

ナンバープレート画像を保持し、列ごとの輝度射影プロファイルの作成と
文字単位の切り出しを行なう。
"""

from dataclasses import dataclass

import cv2
import numpy as np
from PIL import Image

from src.plate.graph import ProbabilityDistributor, Profile
from src.plate.region import Region
from src.plate.segmenter import PlateSegmenter


@dataclass
class CharacterSlice:
    """切り出された文字"""

    region: Region  # プレート画像内の列範囲
    image: np.ndarray  # 切り出された文字画像


class Plate:
    """
    ナンバープレート画像

    高さは文字間ギャップ幅の上限として分割に使用する。
    """

    # 両端の列は枠の影響を受けやすいので 0 にする
    border_distributor = ProbabilityDistributor(center=0.0, power=0.0, left_margin=2, right_margin=2)

    def __init__(self, image: np.ndarray):
        """
        Args:
            image: グレースケールのプレート画像 (H x W, uint8)
        """
        if image.ndim != 2:
            raise ValueError(f"Plate image must be grayscale, got shape {image.shape}")
        self._image = image

    @classmethod
    def from_image(cls, image: np.ndarray | Image.Image) -> "Plate":
        """PIL Image または numpy 配列からプレートを生成"""
        # PIL Imageの場合はnumpy配列に変換
        if isinstance(image, Image.Image):
            image = np.array(image)

        # グレースケール変換
        if len(image.shape) == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)
        else:
            gray = image.copy()

        return cls(gray.astype(np.uint8))

    @property
    def image(self) -> np.ndarray:
        return self._image

    @property
    def height(self) -> int:
        return self._image.shape[0]

    @property
    def width(self) -> int:
        return self._image.shape[1]

    def binarize(self) -> np.ndarray:
        """二値化 (Otsu法、背景が白になる)"""
        _, binary = cv2.threshold(self._image, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
        return binary

    def histogram(self) -> Profile:
        """
        列ごとの輝度の和からプロファイルを作成

        文字間の明るい隙間がピークになる。
        """
        brightness = self.binarize().astype(float) / 255.0

        profile = Profile()
        for column in brightness.T:
            profile.add_sample(np.sum(column))
        return profile

    def chars(self, segmenter: PlateSegmenter | None = None) -> list[CharacterSlice]:
        """
        プレートを文字単位に切り出す

        Args:
            segmenter: 使用する分割器 (省略時は設定値から生成)

        Returns:
            幅が正の文字領域ごとの切り出し結果
        """
        segmenter = segmenter or PlateSegmenter()

        profile = self.histogram()
        profile.apply_probability_distributor(self.border_distributor)
        regions = segmenter.segment(profile, self.height)

        return [
            CharacterSlice(region=region, image=self._image[:, region.left : region.right])
            for region in regions
            if region.width > 0
        ]
