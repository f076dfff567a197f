"""
ナンバープレート文字分割

輝度プロファイルのピーク (文字間の隙間) を検出し、
プレートを左から右へ並んだ文字領域に分割するモジュール。
"""

from src.plate.errors import EmptyProfileError, InvalidArgument, SegmentationError
from src.plate.graph import ProbabilityDistributor, Profile
from src.plate.plate import CharacterSlice, Plate
from src.plate.region import Region, by_apex
from src.plate.segmenter import PlateSegmenter, find_gaps, gaps_to_chars, segment

__all__ = [
    "CharacterSlice",
    "EmptyProfileError",
    "InvalidArgument",
    "Plate",
    "PlateSegmenter",
    "ProbabilityDistributor",
    "Profile",
    "Region",
    "SegmentationError",
    "by_apex",
    "find_gaps",
    "gaps_to_chars",
    "segment",
]
