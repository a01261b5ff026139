#!/usr/bin/env python3
"""Generate the API reference pages for probcalc.

Writes one ``index.rst`` per package (a toctree of its subpackages and
modules) and one page per public module under ``docs/source/api/probcalc``.

Run:
    python docs/source/generate_api.py
"""

from __future__ import annotations

import shutil
from pathlib import Path

DOCS_SOURCE = Path(__file__).resolve().parent
SRC_ROOT = DOCS_SOURCE.parents[1] / "src"
PKG_NAME = "probcalc"
PKG_DIR = SRC_ROOT / PKG_NAME
API_ROOT = DOCS_SOURCE / "api"
GENERATED_ROOT = API_ROOT / PKG_NAME


def _is_package(path: Path) -> bool:
    return path.is_dir() and (path / "__init__.py").exists()


def _public_modules(package: Path) -> list[Path]:
    return sorted(
        p for p in package.glob("*.py") if p.name != "__init__.py" and not p.name.startswith("_")
    )


def _subpackages(package: Path) -> list[Path]:
    return sorted(p for p in package.iterdir() if _is_package(p))


def _dotted(path: Path) -> str:
    return ".".join(path.relative_to(SRC_ROOT).with_suffix("").parts)


def _heading(title: str) -> list[str]:
    return [title, "=" * len(title), ""]


def _write(path: Path, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _write_package(package: Path) -> None:
    rel = package.relative_to(PKG_DIR)
    out_dir = GENERATED_ROOT / rel
    title = PKG_NAME if rel == Path(".") else rel.name

    # Package pages hold only a toctree so the sidebar mirrors the package tree
    lines = _heading(title) + [f".. automodule:: {_dotted(package)}", "   :no-index:", ""]
    children = [f"{sub.name}/index" for sub in _subpackages(package)]
    children += [mod.stem for mod in _public_modules(package)]
    if children:
        lines += [".. toctree::", "   :maxdepth: 2", ""]
        lines += [f"   {child}" for child in children]
    _write(out_dir / "index.rst", lines)

    for module in _public_modules(package):
        _write(
            out_dir / f"{module.stem}.rst",
            _heading(module.stem)
            + [
                f".. automodule:: {_dotted(module)}",
                "   :members:",
                "   :show-inheritance:",
                "   :member-order: bysource",
            ],
        )

    for sub in _subpackages(package):
        _write_package(sub)


def main() -> None:
    if not PKG_DIR.exists():
        raise SystemExit(f"Package directory not found: {PKG_DIR}")

    if GENERATED_ROOT.exists():
        shutil.rmtree(GENERATED_ROOT)
    _write_package(PKG_DIR)

    _write(
        API_ROOT / "index.rst",
        _heading("API Reference")
        + [
            f"Engines, families and numeric primitives of :mod:`{PKG_NAME}`.",
            "",
            ".. toctree::",
            "   :maxdepth: 1",
            "",
            f"   {PKG_NAME}/index",
        ],
    )


if __name__ == "__main__":
    main()
