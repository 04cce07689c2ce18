"""
End-to-end raster editing demo:
scene → RasterImage → ops → metrics

Module contracts (refresher):
- raster_editor.scenes.scene_generator.generate_scene(kind: str, size: int) -> int64 gray levels [0..255]
- raster_editor.scenes.scene_generator.generate_color_bars(width, height) -> packed 0xAARRGGBB grid
- raster_editor.image.raster_image.RasterImage(color_model, pixels, params)
    - mutators: lighten, darken, negative, enhance_contrast, reduce_contrast,
      flip_*, shift_*, rotate, halve, double_size, apply_filter, encrypt_decrypt
    - calculate_histogram() -> 256 counts
- raster_editor.utils.metrics_module: compute_psnr, histogram_summary, plot_histogram

This file provides:
- run_pipeline(): build an image, apply an op sequence, plot + save results
- Quick galleries:
    test_geometry()
    test_filters()
  Run via:  python main.py --test <geometry|filters|all>
"""

import argparse
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import numpy as np
import matplotlib.pyplot as plt

from raster_editor import EditorParams, RasterImage, get_kernel
from raster_editor.scenes.scene_generator import generate_color_bars, generate_scene
from raster_editor.utils.metrics_module import compute_psnr, histogram_summary, plot_histogram


# -----------------------------------------------------------------------------
# Op sequence parsing
# -----------------------------------------------------------------------------
_SIMPLE_OPS: Dict[str, Callable[[RasterImage], None]] = {
    "lighten": RasterImage.lighten,
    "darken": RasterImage.darken,
    "negative": RasterImage.negative,
    "contrast+": RasterImage.enhance_contrast,
    "contrast-": RasterImage.reduce_contrast,
    "flip_h": RasterImage.flip_horizontally,
    "flip_v": RasterImage.flip_vertically,
    "shift_left": lambda img: img.shift_horizontally(-1),
    "shift_right": lambda img: img.shift_horizontally(1),
    "shift_up": lambda img: img.shift_vertically(-1),
    "shift_down": lambda img: img.shift_vertically(1),
    "rotate": RasterImage.rotate,
    "halve": RasterImage.halve,
    "double": RasterImage.double_size,
}


def parse_ops(op_string: str) -> List[Tuple[str, Callable[[RasterImage], None]]]:
    """
    Turn "lighten,rotate,filter:blur,encrypt:42" into (label, callable) pairs.

    `filter:<preset>` applies a kernel preset, `encrypt:<key>` the XOR cipher.
    """
    ops = []
    for token in (t.strip() for t in (op_string or "").split(",")):
        if not token:
            continue
        name, _, arg = token.partition(":")
        name = name.lower()
        if name in _SIMPLE_OPS:
            ops.append((token, _SIMPLE_OPS[name]))
        elif name == "filter":
            kernel = get_kernel(arg or "blur")
            ops.append((token, lambda img, k=kernel: img.apply_filter(k)))
        elif name == "encrypt":
            key = int(arg or 0)
            ops.append((token, lambda img, k=key: img.encrypt_decrypt(k)))
        else:
            raise ValueError(f"Unknown op {token!r}; choose from {sorted(_SIMPLE_OPS)} or filter:<name>, encrypt:<key>")
    return ops


def build_image(scene_kind: str, size: int, mode: str, params: EditorParams) -> RasterImage:
    if mode == "color":
        return RasterImage.color(generate_color_bars(width=size, height=max(4, size // 2)), params)
    return RasterImage.grayscale(generate_scene(kind=scene_kind, size=size), params)


def _show(ax, image: RasterImage, title: str) -> None:
    ax.imshow(image.to_rgb_array(), interpolation="nearest")
    ax.set_title(title)
    ax.axis("off")


# -----------------------------------------------------------------------------
# Full Pipeline
# -----------------------------------------------------------------------------
def run_pipeline(
    scene_kind: str = "gradient",
    size: int = 64,
    mode: str = "gray",
    ops: str = "lighten,contrast+",
    params: EditorParams | None = None,
    outdir: str | Path = "outputs",
) -> RasterImage:
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    params = params or EditorParams()

    original = build_image(scene_kind, size, mode, params)
    image = original.copy()
    for label, op in parse_ops(ops):
        op(image)
        print(f"[OK] {label:<14} -> {image.width}x{image.height}")

    # PSNR only makes sense when the op chain kept the geometry
    if (image.width, image.height) == (original.width, original.height):
        psnr_db = compute_psnr(image, original)
        psnr_txt = f"PSNR vs original ≈ {psnr_db:.2f} dB"
    else:
        psnr_txt = "PSNR skipped (size changed)"

    counts = image.calculate_histogram()
    summary = histogram_summary(counts)

    # --- Plots / Saves ---------------------------------------------------------
    fig = plt.figure(figsize=(8, 4))
    _show(fig.add_subplot(1, 2, 1), original, f"Original {original.width}x{original.height}")
    _show(fig.add_subplot(1, 2, 2), image, f"Edited {image.width}x{image.height}")
    fig.suptitle(f"{ops} — {psnr_txt}")
    fig.tight_layout()
    fig.savefig(outdir / "before_after.png", dpi=150)
    plt.close(fig)

    plot_histogram(counts, title="Edited Image Histogram")
    plt.savefig(outdir / "histogram.png", dpi=150)
    plt.close()

    np.save(outdir / "original.npy", original.pixels)
    np.save(outdir / "edited.npy", image.pixels)

    print(f"[OK] Saved outputs to: {outdir.resolve()}")
    print(f"{psnr_txt} | levels [{summary['min_level']} .. {summary['max_level']}] "
          f"mean {summary['mean']:.1f} median {summary['median']:.0f}")
    return image


# -----------------------------------------------------------------------------
# Quick galleries (each focuses on one family of ops)
# -----------------------------------------------------------------------------
def test_geometry(size: int = 48, outdir: str | Path = "outputs_test_geometry"):
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    base = RasterImage.grayscale(generate_scene("slanted_edge", size, angle_deg=20.0))

    steps = [
        ("original", None),
        ("flip_h", RasterImage.flip_horizontally),
        ("flip_v", RasterImage.flip_vertically),
        ("rotate", RasterImage.rotate),
        ("halve", RasterImage.halve),
        ("double", RasterImage.double_size),
    ]
    fig, axs = plt.subplots(1, len(steps), figsize=(3 * len(steps), 3))
    for ax, (label, op) in zip(axs, steps):
        img = base.copy()
        if op is not None:
            op(img)
        _show(ax, img, f"{label} {img.width}x{img.height}")
    fig.tight_layout()
    fig.savefig(outdir / "geometry_gallery.png", dpi=150)
    plt.close(fig)
    print("[TEST geometry] saved:", (outdir / "geometry_gallery.png").resolve())


def test_filters(size: int = 64, outdir: str | Path = "outputs_test_filters"):
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    base = RasterImage.grayscale(generate_scene("siemens_star", size))

    names = ["identity", "blur", "gaussian", "sharpen", "edge", "emboss"]
    fig, axs = plt.subplots(1, len(names), figsize=(3 * len(names), 3))
    for ax, name in zip(axs, names):
        img = base.copy()
        img.apply_filter(get_kernel(name))
        _show(ax, img, f"{name} ({compute_psnr(img, base):.1f} dB)")
    fig.tight_layout()
    fig.savefig(outdir / "filter_gallery.png", dpi=150)
    plt.close(fig)
    print("[TEST filters] saved:", (outdir / "filter_gallery.png").resolve())


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------
def parse_args():
    p = argparse.ArgumentParser(description="Raster editor: scene → RasterImage → ops → metrics")
    p.add_argument("--scene", default="gradient",
                   help="scene kind: slanted_edge, barcode, gradient, siemens_star, checker, noise")
    p.add_argument("--size", type=int, default=64, help="scene size (pixels)")
    p.add_argument("--mode", default="gray", choices=["gray", "color"],
                   help="gray: scene as 8-bit levels; color: packed RGB color bars")
    p.add_argument("--ops", default="lighten,contrast+,filter:sharpen",
                   help="comma list, e.g. lighten,rotate,halve,filter:blur,encrypt:42")
    p.add_argument("--lighten_amount", type=int, default=3, help="levels per lighten/darken")
    p.add_argument("--contrast_step", type=int, default=1, help="levels per contrast step")
    p.add_argument("--outdir", default="outputs", help="output directory")
    p.add_argument("--test", default=None, choices=["geometry", "filters", "all"],
                   help="render quick galleries instead of the op sequence")
    return p.parse_args()


if __name__ == "__main__":
    args = parse_args()

    if args.test:
        if args.test in ("geometry", "all"):
            test_geometry(size=min(args.size, 96))
        if args.test in ("filters", "all"):
            test_filters(size=min(args.size, 128))
    else:
        if args.size < 3:
            print("[WARN] --size below 3 leaves no room for 3x3 filters. Using 3.")
            args.size = 3
        run_pipeline(
            scene_kind=args.scene,
            size=args.size,
            mode=args.mode,
            ops=args.ops,
            params=EditorParams(
                lighten_darken_amount=args.lighten_amount,
                contrast_step=args.contrast_step,
            ),
            outdir=args.outdir,
        )

# Gradient — tone steps and histogram shift
# python main.py --scene gradient --ops lighten,lighten,contrast+

# Siemens star — blur vs. sharpen
# python main.py --scene siemens_star --size 128 --ops filter:blur
# python main.py --scene siemens_star --size 128 --ops filter:sharpen

# Color bars — geometry on packed RGB
# python main.py --mode color --ops rotate,flip_h,double

# Round trip through the cipher (PSNR should be inf)
# python main.py --scene noise --ops encrypt:42,encrypt:42
