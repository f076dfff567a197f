"""
プロファイル (グラフ) モジュール．

プレート画像を一方向に射影した輝度プロファイルを保持し，
最大値・平均値の集計値を遅延評価でキャッシュする．
ピーク抽出に必要な基本的な問い合わせ（区間の占有判定，ピークの裾の探索）を提供する．
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from src.plate.errors import EmptyProfileError
from src.plate.region import Region


@dataclass(frozen=True)
class ProbabilityDistributor:
    """
    位置に応じてサンプル値を減衰させる重み付け．

    端から left_margin / right_margin の範囲は 0 に落とし，
    それ以外は center からの相対距離に比例して power だけ減衰させる．
    """

    center: float = 0.0
    power: float = 0.0
    left_margin: int = 0
    right_margin: int = 0

    def distribute(self, samples: np.ndarray) -> np.ndarray:
        """
        サンプル列に重み付けを適用する．

        Args:
            samples (np.ndarray): 元のサンプル列．

        Returns:
            np.ndarray: 重み付け後の新しいサンプル列．
        """
        n = len(samples)
        if n == 0:
            return np.asarray(samples, dtype=float).copy()

        positions = np.arange(n)
        weights = 1.0 - self.power * np.abs(positions / n - self.center)
        distributed = np.asarray(samples, dtype=float) * weights

        # マージン内は 0 にする
        outside = (positions < self.left_margin) | (positions > n - self.right_margin)
        distributed[outside] = 0.0
        return distributed


class Profile:
    """
    輝度プロファイル

    サンプル列を置き換えるとキャッシュは無効化され，
    次に集計値が要求されたときに再計算される．
    """

    def __init__(self, samples: Iterable[float] | None = None):
        self._samples = self._freeze([] if samples is None else samples)
        self._max: float | None = None
        self._average: float | None = None
        # 直近の分割結果
        self.peaks: list[Region] = []

    @staticmethod
    def _freeze(values: Iterable[float]) -> np.ndarray:
        if not isinstance(values, np.ndarray):
            values = list(values)
        array = np.array(values, dtype=float)
        array.setflags(write=False)
        return array

    @property
    def samples(self) -> np.ndarray:
        """現在のサンプル列 (読み取り専用)"""
        return self._samples

    @samples.setter
    def samples(self, values: Iterable[float]) -> None:
        self._samples = self._freeze(values)
        self.invalidate()

    def __len__(self) -> int:
        return len(self._samples)

    def add_sample(self, value: float) -> None:
        """末尾にサンプルを追加"""
        self.samples = np.append(self._samples, float(value))

    def invalidate(self) -> None:
        """集計値のキャッシュを無効化する (再計算は次の問い合わせまで行なわない)"""
        self._max = None
        self._average = None

    def _require_samples(self) -> None:
        if len(self._samples) == 0:
            raise EmptyProfileError("Profile has no samples")

    def max_value(self) -> float:
        """最大値"""
        if self._max is None:
            self._require_samples()
            self._max = float(np.max(self._samples))
        return self._max

    def average_value(self) -> float:
        """平均値"""
        if self._average is None:
            self._require_samples()
            self._average = float(np.mean(self._samples))
        return self._average

    def apply_probability_distributor(self, distributor: ProbabilityDistributor) -> None:
        """サンプル列に位置依存の重み付けを適用する"""
        self.samples = distributor.distribute(self._samples)

    def is_claimed(self, regions: Iterable[Region], index: int) -> bool:
        """
        インデックスが既存の区間のいずれかに含まれるか判定する．

        Args:
            regions (Iterable[Region]): 抽出済みの区間．
            index (int): 判定するインデックス．

        Returns:
            bool: いずれかの [left, right] に含まれれば True．
        """
        return any(region.left <= index <= region.right for region in regions)

    def foot_left(self, apex: int, fraction: float) -> int:
        """
        頂点から左へ進み，値が fraction × 頂点値 を下回る最初のインデックスを返す．

        下回る位置がなければ 0 を返す．
        """
        threshold = fraction * self._samples[apex]
        index = apex
        for i in range(apex, -1, -1):
            index = i
            if self._samples[i] < threshold:
                break
        return max(0, index)

    def foot_right(self, apex: int, fraction: float) -> int:
        """
        頂点から右へ進み，値が fraction × 頂点値 を下回る最初のインデックスを返す．

        下回る位置がなければ n - 1 を返す．
        """
        threshold = fraction * self._samples[apex]
        index = apex
        for i in range(apex, len(self._samples)):
            index = i
            if self._samples[i] < threshold:
                break
        return min(len(self._samples) - 1, index)
