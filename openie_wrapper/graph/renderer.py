"""
Render extractions to an image with Graphviz.

Writes the DOT description of the relation graph into the run workspace and
calls the `dot` layout tool on it.

Functions:
 - render_graph(extractions, workspace, dot_bin="dot", image_format="png") -> (dot_path, image_path)

Requires: Graphviz (`dot`) installed in PATH.
"""
from __future__ import annotations
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from ..config import DOT_BIN, IMAGE_FORMAT, OUT_DOT
from ..exceptions import GraphRenderError
from .relation_graph import RelationGraph

logger = logging.getLogger(__name__)


def _find_dot_exe(dot_bin: str) -> Optional[str]:
    candidates = [shutil.which(dot_bin), shutil.which(dot_bin + ".exe")]
    for c in candidates:
        if c:
            return os.path.abspath(c)
    return None


def render_graph(
    extractions: Iterable[Sequence[str]],
    workspace: Path,
    dot_bin: str = DOT_BIN,
    image_format: str = IMAGE_FORMAT,
    verbose: bool = False,
) -> Tuple[Path, Path]:
    """
    Write the DOT description of `extractions` and render it with Graphviz.

    Args:
        extractions: (subject, relation, object) triples
        workspace: Directory receiving out.dot and the rendered image
        dot_bin: Name or path of the Graphviz layout binary
        image_format: Graphviz output format, also used as the image suffix
        verbose: Print the executed command

    Returns:
        (dot_path, image_path)

    Raises:
        GraphRenderError: If `dot` is not installed or exits non-zero
    """
    workspace = Path(workspace)
    dot_path = workspace / OUT_DOT
    image_path = dot_path.with_suffix(f".{image_format}")

    graph = RelationGraph().build_from_extractions(extractions)
    graph.save(dot_path)
    logger.debug("Wrote DOT description with %d edges to %s", graph.stats()["edges"], dot_path)

    dot_exe = _find_dot_exe(dot_bin)
    if not dot_exe:
        raise GraphRenderError(f"{dot_bin} not found. Install Graphviz to render graphs")

    cmd = [dot_exe, f"-T{image_format}", str(dot_path), "-o", str(image_path)]
    if verbose:
        print(f"Executing command = {' '.join(cmd)}", file=sys.stderr)
    logger.debug("Executing command: %s", cmd)

    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        raise GraphRenderError(
            f"{dot_bin} exited with status {result.returncode}: {result.stderr.strip()}"
        )

    print(f"Wrote graph to {dot_path} and {image_path}")
    return dot_path, image_path
