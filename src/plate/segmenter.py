"""
プレート文字分割モジュール

輝度プロファイルから文字間のギャップ (明るいピーク) を貪欲に抽出し、
プレートの高さに基づく形状フィルタを通したうえで文字領域の列に変換する。
"""

from src.config import settings
from src.plate.errors import InvalidArgument
from src.plate.graph import Profile
from src.plate.region import Region, by_apex


def find_gaps(
    profile: Profile,
    count: int,
    plate_height: int,
    rel_min_peak_size: float,
    peak_foot_constant: float,
) -> list[Region]:
    """
    プロファイルから文字間のギャップを抽出

    処理の流れ:
    1. 正規化: shift = 2 * 平均 - 最大 を全サンプルから引く
    2. 占有されていない位置から最大のピークを最大 count 個まで貪欲に抽出
    3. 幅がプレートの高さ以上のピークを除外
    4. 頂点の位置で左から右へ整列

    Args:
        profile: 輝度プロファイル (サンプル列は正規化で置き換えられる)
        count: 抽出を試みるピークの最大数
        plate_height: プレートの高さ (ギャップ幅の上限)
        rel_min_peak_size: 最大値に対するピークの最小相対高さ
        peak_foot_constant: ピーク高さに対する裾の相対位置

    Returns:
        左から右へ並んだ裾付きピーク形式のギャップ
    """
    if count < 0:
        raise InvalidArgument(f"count must be non-negative, got {count}")

    # 1. 正規化
    shift = 2 * profile.average_value() - profile.max_value()
    profile.samples = profile.samples - shift
    samples = profile.samples
    last_index = len(samples) - 1

    # 2. 貪欲なピーク抽出
    candidates: list[Region] = []
    for _ in range(count):
        free = [i for i in range(len(samples)) if not profile.is_claimed(candidates, i)]
        if not free:
            break

        # 同値なら最も左を採用 (>= で左から走査して最も右を選ぶ方式とは平坦部の頂点が異なる)
        apex = max(free, key=lambda i: samples[i])
        if samples[apex] < rel_min_peak_size * profile.max_value():
            break

        left = profile.foot_left(apex, peak_foot_constant)
        right = profile.foot_right(apex, peak_foot_constant)
        candidates.append(Region.peak(max(0, left), apex, min(last_index, right)))

    # 3. ギャップはプレートの高さほど広くはならない
    spaces = [peak for peak in candidates if peak.width < plate_height]

    # 4. 左から右へ整列
    return sorted(spaces, key=by_apex)


def gaps_to_chars(spaces: list[Region], length: int) -> list[Region]:
    """
    整列済みのギャップを文字領域に変換

    ギャップがなければ文字領域も返さない。
    """
    last_index = length - 1
    chars: list[Region] = []
    if spaces:
        first = Region.span(0, spaces[0].apex)
        if first.width > 0:
            chars.append(first)

    for current, following in zip(spaces, spaces[1:]):
        chars.append(Region.span(current.apex, following.apex))

    if spaces:
        last = Region.span(spaces[-1].apex, last_index)
        if last.width > 0:
            chars.append(last)

    return chars


def segment(
    profile: Profile,
    count: int,
    plate_height: int,
    rel_min_peak_size: float,
    peak_foot_constant: float,
) -> list[Region]:
    """
    プロファイルを文字領域に分割

    引数は find_gaps と同じ。

    Returns:
        左から右へ並んだ文字領域のリスト (profile.peaks にも保存される)
    """
    spaces = find_gaps(profile, count, plate_height, rel_min_peak_size, peak_foot_constant)
    chars = gaps_to_chars(spaces, len(profile))

    profile.peaks = chars
    return chars


class PlateSegmenter:
    """
    設定値を束ねたプレート文字分割器

    閾値を省略した場合は settings の値を使用する。
    """

    def __init__(
        self,
        rel_min_peak_size: float | None = None,
        peak_foot_constant: float | None = None,
        peak_count: int | None = None,
    ):
        """
        分割器を初期化

        Args:
            rel_min_peak_size: 最大値に対するピークの最小相対高さ
            peak_foot_constant: ピーク高さに対する裾の相対位置
            peak_count: 抽出を試みるギャップの最大数
        """
        self.rel_min_peak_size = (
            settings.plategraph_rel_minpeaksize if rel_min_peak_size is None else rel_min_peak_size
        )
        self.peak_foot_constant = (
            settings.plategraph_peakfootconstant if peak_foot_constant is None else peak_foot_constant
        )
        self.peak_count = settings.plategraph_peak_count if peak_count is None else peak_count

    def segment(self, profile: Profile, plate_height: int, count: int | None = None) -> list[Region]:
        """プロファイルを文字領域に分割"""
        return segment(
            profile,
            self.peak_count if count is None else count,
            plate_height,
            self.rel_min_peak_size,
            self.peak_foot_constant,
        )
