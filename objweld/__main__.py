# objweld/__main__.py
"""Командная строка: загрузить OBJ, вывести сводку, при желании сохранить меш в JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from objweld.errors import ObjError
from objweld.loader import load_from_file
from objweld.math import Mat4
from objweld.utils.config import LoaderConfig
from objweld.utils.logger import logger, set_log_level


def build_transform(args) -> Mat4:
    m = Mat4.translate(*args.translate)
    m = m @ Mat4.from_euler(*args.rotate)
    m = m @ Mat4.scale(args.scale, args.scale, args.scale)
    return m


def summarize(mesh, faces) -> dict:
    summary = {
        "vertices": mesh.vertex_count,
        "triangles": int(len(faces)),
        "normals": mesh.has_normals,
        "texcoords": mesh.has_texcoords,
        "bounds": None,
    }
    bounds = mesh.bounds()
    if bounds is not None:
        summary["bounds"] = [bounds[0].tolist(), bounds[1].tolist()]
    return summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="objweld", description="Load a Wavefront OBJ file into a welded, indexed triangle mesh")
    parser.add_argument("path", type=Path)
    parser.add_argument("--translate", type=float, nargs=3, default=[0.0, 0.0, 0.0], metavar=("X", "Y", "Z"))
    parser.add_argument("--rotate", type=float, nargs=3, default=[0.0, 0.0, 0.0], metavar=("PITCH", "YAW", "ROLL"),
                        help="Euler angles in degrees")
    parser.add_argument("--scale", type=float, default=1.0)
    parser.add_argument("--config", type=Path, default=None, help="JSON loader configuration")
    parser.add_argument("--json", type=Path, default=None, help="write the welded mesh to this file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        config = LoaderConfig(args.config) if args.config is not None else LoaderConfig()
    except ValueError as exc:
        logger.error(f"[Config] {exc}")
        return 1
    set_log_level("DEBUG" if args.verbose else config["log_level"])

    try:
        mesh, faces = load_from_file(args.path, build_transform(args), config)
    except ObjError as exc:
        print(f"error [{exc.kind}]: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    summary = summarize(mesh, faces)
    print(json.dumps(summary, indent=2))

    if args.json is not None:
        payload = mesh.to_dict()
        payload["triangles"] = faces.tolist()
        args.json.write_text(json.dumps(payload), encoding="utf-8")
        logger.info(f"Wrote {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
