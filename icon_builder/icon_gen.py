# icon_builder/icon_gen.py
import os
import sys
from typing import NamedTuple

from PIL import Image


class Tier(NamedTuple):
    folder: str
    size: int


# =========================
# Launcher tiers
# =========================
TIERS = (
    Tier('mipmap-mdpi', 48),
    Tier('mipmap-hdpi', 72),
    Tier('mipmap-xhdpi', 96),
    Tier('mipmap-xxhdpi', 144),
    Tier('mipmap-xxxhdpi', 192),
)

LAUNCHER_NAMES = ('ic_launcher.png', 'ic_launcher_round.png')

BANNER_SIZE = (320, 180)
BANNER_FOLDER = 'mipmap-xhdpi'
BANNER_NAME = 'ic_banner.png'

USAGE = "Usage: icon-gen <logo-path> <res-dir-path>"


def load_logo(input_path):
    if not os.path.exists(input_path):
        raise FileNotFoundError(f"Logo file not found: {os.path.abspath(input_path)}")
    with Image.open(input_path) as src:
        return src.convert('RGBA')


def export_tier(img, out_res_dir, tier: Tier) -> list[str]:
    """
    Resize the logo to one square tier and write it under both launcher names
    """
    dst = os.path.join(out_res_dir, tier.folder)
    os.makedirs(dst, exist_ok=True)

    icon = img.resize((tier.size, tier.size), Image.LANCZOS)
    written = []
    for name in LAUNCHER_NAMES:
        out = os.path.join(dst, name)
        icon.save(out, format='PNG')
        written.append(out)
    return written


def fit_within(src_size, box=BANNER_SIZE):
    """
    Aspect-fit src_size into box.

    Returns ((width, height), (x, y)) where (x, y) centres the scaled
    image inside the box.
    """
    w, h = src_size
    bw, bh = box
    # integer cross-multiplication; float ratios truncate 320 to 319 for some widths
    if w * bh >= h * bw:
        nw, nh = bw, h * bw // w
    else:
        nw, nh = w * bh // h, bh
    # a sliver-shaped logo must still keep one pixel on the short axis
    nw = max(1, nw)
    nh = max(1, nh)
    return (nw, nh), ((bw - nw) // 2, (bh - nh) // 2)


def render_banner(img):
    (nw, nh), offset = fit_within(img.size)
    banner = Image.new('RGBA', BANNER_SIZE, (0, 0, 0, 0))
    # canvas is fully transparent, so a plain paste is the same as source-over
    banner.paste(img.resize((nw, nh), Image.LANCZOS), offset)
    return banner


def export_banner(img, out_res_dir) -> str:
    dst = os.path.join(out_res_dir, BANNER_FOLDER)
    os.makedirs(dst, exist_ok=True)
    out = os.path.join(dst, BANNER_NAME)
    render_banner(img).save(out, format='PNG')
    return out


def generate_icons(input_path, out_res_dir) -> list[str]:
    img = load_logo(input_path)

    written = []
    for tier in TIERS:
        written.extend(export_tier(img, out_res_dir, tier))
        print(f"[ICONS] Generated icons for {tier.folder}", flush=True)

    written.append(export_banner(img, out_res_dir))
    print(f"[ICONS] Generated {BANNER_NAME} in {BANNER_FOLDER}", flush=True)
    return written


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(USAGE, flush=True)
        return 1

    logo_path, res_dir = args[0], args[1]
    if not os.path.exists(logo_path):
        print(f"[ERROR] Logo file not found: {os.path.abspath(logo_path)}", flush=True)
        return 1

    generate_icons(logo_path, res_dir)
    print("Done!", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
