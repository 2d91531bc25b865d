"""
Run the Stanford OpenIE engine over a batch of text files.

The engine is started as a Java subprocess inside its installation directory.
Its ollie-format stdout is copied into a per-run workspace, read back, parsed
into extractions and optionally rendered with Graphviz.

Every call to run() gets its own workspace directory, so concurrent runs
never share output files.
"""
from __future__ import annotations
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from collections import deque
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..cli.config import merge_config, validate_config
from ..config import (
    DEFAULT_INPUT_FILES,
    ERR_FILE,
    OUT_FILE,
    STDERR_TAIL_LINES,
    WORKSPACE_PREFIX,
    default_classpath,
)
from ..exceptions import EngineError, EngineNotFoundError
from ..graph import renderer
from .parser import Extraction, parse_ollie_output

logger = logging.getLogger(__name__)


class ExtractionRunner:
    """Configure once, then run() the engine and collect its extractions."""

    def __init__(
        self,
        input_files: Optional[Sequence[str]] = None,
        verbose: bool = False,
        render_graph: bool = False,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            input_files: Text files to extract from, or a single path. Relative paths are resolved
                against the input root (default: the directory containing the
                engine installation). Defaults to samples.txt.
            verbose: Echo engine stdout and executed commands to the console
            render_graph: Render the extractions with Graphviz after parsing
            config: Nested overrides for DEFAULT_CONFIG (engine, graphviz,
                workspace, input sections)
        """
        settings = merge_config(config or {})
        validate_config(settings)
        self.settings = settings

        engine = settings["engine"]
        self.engine_home = Path(engine["home"]).expanduser().resolve()
        self.java_bin = engine["java_bin"]
        self.heap = engine["heap"]
        classpath = engine["classpath"]
        if isinstance(classpath, list):
            classpath = os.pathsep.join(classpath)
        self.classpath = classpath or default_classpath()
        self.main_class = engine["main_class"]
        self.output_format = engine["format"]

        graphviz = settings["graphviz"]
        self.render_graph = render_graph or graphviz["enabled"]
        self.dot_bin = graphviz["dot_bin"]
        self.image_format = graphviz["format"]

        self.verbose = verbose

        input_root = settings["input"]["root"]
        self.input_root = (
            Path(input_root).expanduser().resolve() if input_root else self.engine_home.parent
        )
        if isinstance(input_files, (str, os.PathLike)):
            input_files = [input_files]
        files = list(input_files or []) or settings["input"]["files"] or DEFAULT_INPUT_FILES
        self.input_files = tuple(os.fspath(f) for f in files)

        workspace_root = settings["workspace"]["root"]
        self.workspace_root = (
            Path(workspace_root).expanduser()
            if workspace_root
            else Path(tempfile.gettempdir()) / "openie"
        )
        self.workspace_root.mkdir(parents=True, exist_ok=True)

        # Workspace of the most recent run
        self.workspace: Optional[Path] = None

    def _resolve_input(self, path: str) -> str:
        p = Path(path).expanduser()
        if p.is_absolute():
            return str(p)
        return str(self.input_root / p)

    @property
    def input_paths(self) -> List[str]:
        return [self._resolve_input(f) for f in self.input_files]

    def build_command(self) -> List[str]:
        """Return the engine invocation as an argument list."""
        return [
            self.java_bin,
            f"-mx{self.heap}",
            "-cp",
            self.classpath,
            self.main_class,
            *self.input_paths,
            "-format",
            self.output_format,
        ]

    def _find_java_exe(self) -> str:
        java = shutil.which(self.java_bin)
        if not java:
            raise EngineNotFoundError(
                f"{self.java_bin} not found. Install a Java runtime or set engine.java_bin"
            )
        return os.path.abspath(java)

    @staticmethod
    def _stderr_tail(err_path: Path) -> str:
        try:
            with err_path.open("r", encoding="utf-8", errors="replace") as f:
                return "".join(deque(f, maxlen=STDERR_TAIL_LINES)).rstrip()
        except OSError:
            return ""

    def _execute(self, cmd: List[str], out_path: Path, err_path: Path) -> int:
        with out_path.open("w", encoding="utf-8") as out_fh, err_path.open("w", encoding="utf-8") as err_fh:
            proc = subprocess.Popen(
                cmd,
                cwd=str(self.engine_home),
                stdout=subprocess.PIPE,
                stderr=err_fh,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
            for line in proc.stdout:
                out_fh.write(line)
                if self.verbose:
                    sys.stdout.write(line)
                    sys.stdout.flush()
            proc.stdout.close()
            return proc.wait()

    def run(self) -> List[Extraction]:
        """
        Run the engine, parse its output and optionally render a graph.

        Returns:
            Extractions in engine output order

        Raises:
            EngineNotFoundError: If the engine directory or Java binary is missing
            EngineError: If the engine exits with a non-zero status
            FileNotFoundError: If no engine output file was produced
            OutputParseError: If a line of output is not in ollie format
            GraphRenderError: If rendering was requested and Graphviz failed
        """
        if not self.engine_home.is_dir():
            raise EngineNotFoundError(
                f"Engine directory not found: {self.engine_home}\n"
                f"Unpack Stanford OpenIE there or set engine.home / OPENIE_HOME"
            )
        cmd = self.build_command()
        cmd[0] = self._find_java_exe()

        workspace = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=str(self.workspace_root)))
        self.workspace = workspace
        out_path = workspace / OUT_FILE
        err_path = workspace / ERR_FILE
        logger.debug("Workspace: %s", workspace)

        if self.verbose:
            print(f"Executing command = {' '.join(cmd)}", file=sys.stderr)
        logger.debug("Executing command: %s (cwd=%s)", cmd, self.engine_home)

        returncode = self._execute(cmd, out_path, err_path)
        if returncode != 0:
            raise EngineError(returncode, self._stderr_tail(err_path))
        err_path.unlink()

        try:
            result_str = out_path.read_text(encoding="utf-8")
            out_path.unlink()

            extractions = parse_ollie_output(result_str)
            logger.info(
                "Parsed %d extractions from %d input files", len(extractions), len(self.input_files)
            )

            if self.render_graph:
                renderer.render_graph(
                    extractions,
                    workspace,
                    dot_bin=self.dot_bin,
                    image_format=self.image_format,
                    verbose=self.verbose,
                )
        finally:
            if workspace.is_dir() and not any(workspace.iterdir()):
                workspace.rmdir()

        return extractions
