"""
プレート文字分割のエントリポイントモジュール．

ナンバープレート画像を読み込み，文字領域の検出結果を表示する．
"""

import sys
from pathlib import Path

import click
from PIL import Image

from src.config import settings
from src.plate.errors import SegmentationError
from src.plate.plate import Plate
from src.plate.segmenter import PlateSegmenter


@click.command()
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--count", "-n", type=int, default=None, help="抽出を試みるギャップの最大数")
@click.option("--rel-min-peak-size", type=float, default=None, help="ピークの最小相対高さ")
@click.option("--peak-foot-constant", type=float, default=None, help="ピークの裾の相対位置")
@click.option("--save", is_flag=True, help="文字画像を保存する")
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="出力ディレクトリ",
)
def main(
    image_path: str,
    count: int | None,
    rel_min_peak_size: float | None,
    peak_foot_constant: float | None,
    save: bool,
    output: str | None,
) -> None:
    """
    プレート画像を文字領域に分割

    IMAGE_PATH: 入力プレート画像
    """
    click.echo(f"📄 処理中: {image_path}")

    plate = Plate.from_image(Image.open(image_path).convert("L"))
    segmenter = PlateSegmenter(
        rel_min_peak_size=rel_min_peak_size,
        peak_foot_constant=peak_foot_constant,
        peak_count=count,
    )

    try:
        chars = plate.chars(segmenter)
    except SegmentationError as e:
        click.echo(f"❌ 文字分割に失敗: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ 完了: {len(chars)} 文字領域を検出 (プレート高さ {plate.height}px)")
    for char in chars:
        click.echo(f"  [{char.region.left}, {char.region.right}]")

    if save:
        output_dir = Path(output) if output else settings.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        for idx, char in enumerate(chars):
            Image.fromarray(char.image).save(output_dir / f"char_{idx:03d}.png")
        click.echo(f"📂 出力先: {output_dir}")


if __name__ == "__main__":
    main()
