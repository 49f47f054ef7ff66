"""Reading vertices and triangles from Wavefront OBJ files."""

from __future__ import annotations

import os

from softraster.vector import Triangle, Vector3D


def _face_index(token: str, lineno: int) -> int:
    head = token.split("/", 1)[0]
    try:
        return int(head) - 1
    except ValueError:
        raise ValueError(f"line {lineno}: bad face index {token!r}") from None


def load_obj(path: str | os.PathLike[str]) -> tuple[list[Vector3D], list[Triangle]]:
    """Load vertex positions and triangles from an OBJ file.

    Only ``v`` and ``f`` records are read; other records are ignored. Face
    indices become zero-based and only the first three of a face are kept.
    Raises OSError if the file cannot be opened and ValueError on a
    malformed record.
    """
    vertices: list[Vector3D] = []
    triangles: list[Triangle] = []
    with open(path, encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            fields = line.split()
            if not fields:
                continue
            prefix, args = fields[0], fields[1:]
            if prefix == "v":
                if len(args) < 3:
                    raise ValueError(f"line {lineno}: vertex needs three coordinates")
                try:
                    x, y, z = (float(a) for a in args[:3])
                except ValueError:
                    raise ValueError(f"line {lineno}: bad vertex {line.strip()!r}") from None
                vertices.append(Vector3D(x, y, z))
            elif prefix == "f":
                if len(args) < 3:
                    raise ValueError(f"line {lineno}: face needs three indices")
                a, b, c = (_face_index(tok, lineno) for tok in args[:3])
                triangles.append(Triangle(a, b, c))
    return vertices, triangles