"""Tests for the Android drawable emitter."""

from pathlib import Path

from mobile_assets.common.schemas import LogicalSize
from mobile_assets.platforms.android import to_android
from mobile_assets.platforms.density import ANDROID_BUCKETS
from tests.conftest import FailingCodec, MakePng, image_size

DIRECTORIES = [
    "drawable-mdpi",
    "drawable-hdpi",
    "drawable-xdpi",
    "drawable-xxhdpi",
    "drawable-xxxhdpi",
]


def _outputs(output_dir: Path, stem: str, name: str) -> list[Path]:
    return [output_dir / stem / directory / name for directory in DIRECTORIES]


def test_bucket_table():
    """Test bucket order, multipliers and directory names."""
    assert [b.location for b in ANDROID_BUCKETS] == DIRECTORIES
    assert [b.multiplier for b in ANDROID_BUCKETS] == [1.0, 1.5, 2.0, 3.0, 4.0]


def test_explicit_target(make_png: MakePng, output_dir: Path):
    """Test five files sized target * multiplier."""
    source = make_png("logo.png", size=(96, 96))

    assert to_android(source, output_dir, LogicalSize.of(24, 24))

    outputs = _outputs(output_dir, "logo", "logo.png")
    assert all(path.exists() for path in outputs)
    assert [image_size(path) for path in outputs] == [
        (24, 24),
        (36, 36),
        (48, 48),
        (72, 72),
        (96, 96),
    ]
    assert sorted(p.name for p in (output_dir / "logo").iterdir()) == sorted(DIRECTORIES)


def test_explicit_target_with_padding(make_png: MakePng, output_dir: Path):
    """Test padding scales with the bucket multiplier."""
    source = make_png("logo.png", size=(50, 50))

    assert to_android(source, output_dir, LogicalSize.of(10, 10), padding=2)

    sizes = [image_size(path) for path in _outputs(output_dir, "logo", "logo.png")]
    assert sizes == [(14, 14), (21, 21), (28, 28), (42, 42), (56, 56)]


def test_source_is_xxxhdpi(make_png: MakePng, output_dir: Path):
    """Test without a target the source is the 4x rendition."""
    source = make_png("logo.png", size=(100, 100))

    assert to_android(source, output_dir)

    outputs = _outputs(output_dir, "logo", "logo.png")
    assert [image_size(path) for path in outputs] == [
        (25, 25),
        (38, 38),
        (50, 50),
        (75, 75),
        (100, 100),
    ]
    assert outputs[-1].read_bytes() == source.read_bytes()


def test_legacy_single_bucket(make_png: MakePng, output_dir: Path):
    """Test the compatibility mode stops after mdpi."""
    source = make_png("logo.png", size=(100, 100))

    assert to_android(source, output_dir, legacy_single_bucket=True)

    assert (output_dir / "logo" / "drawable-mdpi" / "logo.png").exists()
    assert not (output_dir / "logo" / "drawable-hdpi").exists()


def test_missing_input(tmp_path: Path, output_dir: Path):
    """Test a missing file fails without creating directories."""
    assert not to_android(tmp_path / "nope.png", output_dir, LogicalSize.of(10, 10))
    assert list(output_dir.iterdir()) == []


def test_failed_bucket_does_not_stop_others(make_png: MakePng, output_dir: Path):
    """Test a failing bucket marks failure while the others are written."""
    source = make_png("logo.png", size=(40, 40))
    codec = FailingCodec(fail_on={2})

    assert not to_android(source, output_dir, LogicalSize.of(10, 10), codec=codec)

    assert codec.encode_calls == 5
    existing = [path.exists() for path in _outputs(output_dir, "logo", "logo.png")]
    assert existing == [True, False, True, True, True]


def test_overwrites_previous_output(make_png: MakePng, output_dir: Path):
    """Test stale files are replaced."""
    source = make_png("logo.png", size=(40, 40))
    stale = output_dir / "logo" / "drawable-mdpi" / "logo.png"
    stale.parent.mkdir(parents=True)
    _ = stale.write_bytes(b"stale")

    assert to_android(source, output_dir, LogicalSize.of(10, 10))

    assert image_size(stale) == (10, 10)


def test_blocked_bucket_does_not_stop_others(make_png: MakePng, output_dir: Path):
    """Test a bucket whose output path cannot be prepared fails alone."""
    source = make_png("logo.png", size=(40, 40))
    blocked = output_dir / "logo" / "drawable-hdpi" / "logo.png"
    blocked.mkdir(parents=True)

    assert not to_android(source, output_dir, LogicalSize.of(10, 10))

    outputs = _outputs(output_dir, "logo", "logo.png")
    assert [path.is_file() for path in outputs] == [True, False, True, True, True]
    assert image_size(outputs[-1]) == (40, 40)
