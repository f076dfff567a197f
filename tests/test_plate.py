"""
プレートモジュールのテスト
"""

import numpy as np
import pytest
from PIL import Image

from src.plate.plate import Plate
from src.plate.region import Region
from src.plate.segmenter import PlateSegmenter


@pytest.fixture
def plate_image():
    """サンプルプレート画像のフィクスチャ (3文字分)"""
    # 白背景に黒い矩形を3つ配置
    width, height = 60, 20
    img = np.ones((height, width), dtype=np.uint8) * 255

    for x_start in (10, 25, 40):
        img[4:16, x_start : x_start + 10] = 0  # 黒い矩形

    return img


def test_plate_dimensions(plate_image):
    plate = Plate(plate_image)

    assert plate.height == 20
    assert plate.width == 60


def test_plate_rejects_color_array(plate_image):
    with pytest.raises(ValueError):
        Plate(np.stack([plate_image] * 3, axis=-1))


def test_from_pil_rgb_image(plate_image):
    """PIL Imageでの入力テスト"""
    rgb = Image.fromarray(plate_image).convert("RGB")

    plate = Plate.from_image(rgb)

    assert plate.image.shape == (20, 60)
    assert plate.image.dtype == np.uint8


def test_histogram_counts_bright_pixels(plate_image):
    """列ごとの白画素数がプロファイルになる"""
    profile = Plate(plate_image).histogram()

    assert len(profile) == 60
    assert profile.samples[0] == pytest.approx(20.0)
    assert profile.samples[12] == pytest.approx(8.0)
    assert profile.max_value() == pytest.approx(20.0)
    assert profile.average_value() == pytest.approx((30 * 20 + 30 * 8) / 60)


def test_chars(plate_image):
    segmenter = PlateSegmenter(rel_min_peak_size=0.86, peak_foot_constant=0.7, peak_count=25)

    chars = Plate(plate_image).chars(segmenter)

    assert [c.region for c in chars] == [
        Region.span(0, 2),
        Region.span(2, 20),
        Region.span(20, 35),
        Region.span(35, 50),
        Region.span(50, 59),
    ]
    for char in chars:
        assert char.image.shape == (20, char.region.width)


def test_blank_plate_has_no_chars():
    """空画像のテスト"""
    blank = np.ones((20, 60), dtype=np.uint8) * 255
    segmenter = PlateSegmenter(rel_min_peak_size=0.86, peak_foot_constant=0.7, peak_count=25)

    # 余白を除いた平坦な区間はプレートの高さより広いので除外される
    assert Plate(blank).chars(segmenter) == []
