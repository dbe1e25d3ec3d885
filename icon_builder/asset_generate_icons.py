#!/usr/bin/env python3
"""
Regenerate the launcher icons of an Android project from docs/logo.png.

Writes into app/src/main/res/ under the project root (current directory
unless a root is given).

Usage: asset-generate-icons [project-root]
"""
import os
import sys

from .icon_gen import generate_icons

LOGO_REL = os.path.join('docs', 'logo.png')
RES_REL = os.path.join('app', 'src', 'main', 'res')


def project_paths(root):
    root = os.path.abspath(root)
    return os.path.join(root, LOGO_REL), os.path.join(root, RES_REL)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logo, res_dir = project_paths(args[0] if args else os.getcwd())

    if not os.path.exists(logo):
        print(f"[ERROR] Logo file not found at {logo}", flush=True)
        return 1

    print(f"[ICONS] Generating Android icons from: {os.path.basename(logo)}", flush=True)
    generate_icons(logo, res_dir)
    print("Done!", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
