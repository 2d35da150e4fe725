"""Adapters that drive SVGO, SVGR, and Prettier through ``npx``."""

from __future__ import annotations

import json
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, List, Sequence, Type

from ..errors import AdapterError, FormattingFailed, OptimizationFailed, TransformationFailed
from ..logging import get_logger
from .base import FORMATTER_PARSER, SVGO_MULTIPASS, SVGO_PLUGINS

SVGO_PACKAGE = "svgo"
SVGR_PACKAGE = "@svgr/cli"
PRETTIER_PACKAGE = "prettier"

_SVGR_TEMPLATE = (
    "module.exports = (variables, { tpl }) => "
    "tpl`export default () => (${variables.jsx});`;\n"
)

ToolRunner = Callable[[Sequence[str], str], str]


def _svgo_config() -> str:
    config = {"multipass": SVGO_MULTIPASS, "plugins": list(SVGO_PLUGINS)}
    return f"export default {json.dumps(config, indent=2)};\n"


class NodeToolRunner:
    """Runs an npm package binary via ``npx`` with stdin/stdout plumbing."""

    def __init__(self, executable: str = "npx", *, runner: ToolRunner | None = None) -> None:
        self.executable = executable
        self.logger = get_logger("adapters")
        self._runner = runner or self._subprocess_runner

    def command(self, package: str, args: Sequence[str]) -> List[str]:
        return [self.executable, "--yes", package, *args]

    def run(
        self,
        package: str,
        args: Sequence[str],
        stdin: str,
        *,
        error: Type[AdapterError] = AdapterError,
    ) -> str:
        command = self.command(package, args)
        self.logger.debug("Running %s", " ".join(command))
        try:
            return self._runner(command, stdin)
        except FileNotFoundError as exc:
            raise error(
                f"Unable to locate '{self.executable}'. Install Node.js or configure tools.npx."
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            raise error(f"{package} failed with exit code {exc.returncode}: {stderr}") from exc

    @staticmethod
    def _subprocess_runner(command: Sequence[str], stdin: str) -> str:
        completed = subprocess.run(
            list(command),
            input=stdin,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
        return completed.stdout


class SvgoOptimizer:
    """Optimizes markup with SVGO using the fixed icon plugin set."""

    def __init__(self, tool: NodeToolRunner | None = None) -> None:
        self.tool = tool or NodeToolRunner()

    def optimize(self, svg: str) -> str:
        with tempfile.TemporaryDirectory(prefix="ikonik-svgo-") as workdir:
            config_path = Path(workdir) / "svgo.config.mjs"
            config_path.write_text(_svgo_config(), encoding="utf-8")
            return self.tool.run(
                SVGO_PACKAGE,
                ["--config", str(config_path), "--input", "-", "--output", "-"],
                svg,
                error=OptimizationFailed,
            )


class SvgrTransformer:
    """Converts SVG to a single-expression JSX module with SVGR."""

    def __init__(self, tool: NodeToolRunner | None = None) -> None:
        self.tool = tool or NodeToolRunner()

    def transform(self, svg: str) -> str:
        with tempfile.TemporaryDirectory(prefix="ikonik-svgr-") as workdir:
            template_path = Path(workdir) / "template.cjs"
            template_path.write_text(_SVGR_TEMPLATE, encoding="utf-8")
            return self.tool.run(
                SVGR_PACKAGE,
                [
                    "--no-svgo",
                    "--no-prettier",
                    "--jsx-runtime",
                    "classic",
                    "--expand-props",
                    "none",
                    "--template",
                    str(template_path),
                    "--stdin-filepath",
                    "Temp.svg",
                ],
                svg,
                error=TransformationFailed,
            )


class PrettierFormatter:
    """Formats TypeScript sources with Prettier's ``babel-ts`` parser."""

    def __init__(self, tool: NodeToolRunner | None = None) -> None:
        self.tool = tool or NodeToolRunner()

    def format(self, source: str) -> str:
        return self.tool.run(
            PRETTIER_PACKAGE,
            ["--parser", FORMATTER_PARSER],
            source,
            error=FormattingFailed,
        )


__all__ = [
    "NodeToolRunner",
    "PrettierFormatter",
    "SvgoOptimizer",
    "SvgrTransformer",
]
