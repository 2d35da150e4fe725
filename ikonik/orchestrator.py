"""Pipeline orchestration for icon generation runs."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from .adapters import (
    Formatter,
    IdentityFormatter,
    NodeToolRunner,
    Optimizer,
    PrettierFormatter,
    SvgoOptimizer,
    SvgrTransformer,
    Transformer,
)
from .config import GenerationOptions
from .errors import AdapterError, InvalidDocument, NoInputFiles
from .extraction import BodyExtractor
from .logging import get_logger
from .manifest import ManifestBuilder
from .models import IconRecord, Manifest, SourceFile
from .naming import derive_names
from .rendering import (
    COMPONENT_EXTENSION,
    INDEX_FILENAME,
    METADATA_FILENAME,
    ComponentRenderer,
    StyleOptions,
)
from .reporting import LoggingReporter, Reporter
from .source_scanner import SourceScanner
from .validation import DocumentValidator


class Orchestrator:
    """Coordinates enumeration, per-file generation, and batch artifacts."""

    def __init__(
        self,
        scanner: SourceScanner | None = None,
        validator: DocumentValidator | None = None,
        optimizer: Optimizer | None = None,
        transformer: Transformer | None = None,
        extractor: BodyExtractor | None = None,
        formatter: Formatter | None = None,
        reporter: Reporter | None = None,
        *,
        npx: str = "npx",
    ) -> None:
        tool = NodeToolRunner(npx)
        self.scanner = scanner or SourceScanner()
        self.validator = validator or DocumentValidator()
        self.optimizer = optimizer or SvgoOptimizer(tool)
        self.transformer = transformer or SvgrTransformer(tool)
        self.extractor = extractor or BodyExtractor()
        self.formatter = formatter or PrettierFormatter(tool)
        self.reporter = reporter or LoggingReporter()
        self.logger = get_logger("orchestrator")

    def generate(self, options: GenerationOptions) -> Manifest:
        """Generate components, ``index.ts``, and ``metadata.json`` for ``options``."""
        out_dir = options.out_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        files = self.scanner.scan(options.src_dir)
        if not files:
            raise NoInputFiles(options.src_dir)

        self.reporter.info(f"Found {len(files)} SVG file(s)")

        formatter = self.formatter if options.format_output else IdentityFormatter()
        renderer = ComponentRenderer(
            StyleOptions(
                size=options.default_size,
                stroke_width=options.default_stroke_width,
                filled=options.filled,
            )
        )
        builder = ManifestBuilder()
        written: Dict[str, str] = {}

        for relative_path in files:
            source = self._read(options.src_dir, relative_path)
            try:
                self.validator.validate(source)
                record, base = self._generate_icon(source, options, renderer, formatter, written)
            except InvalidDocument as exc:
                self.reporter.warn(f"Skipping invalid SVG: {relative_path}")
                self.logger.debug("Validation failure: %s", exc)
                continue
            except AdapterError as exc:
                if not options.keep_going:
                    raise
                self.reporter.warn(f"Skipping {relative_path}: {exc.stage} failed: {exc}")
                continue

            builder.add(record)
            self.reporter.info(f"{base} -> {record.name}")

        self._write(out_dir / INDEX_FILENAME, formatter.format(builder.render_index()))
        self._write(out_dir / METADATA_FILENAME, builder.render_metadata())

        manifest = builder.build()
        self.reporter.info(f"Generated {INDEX_FILENAME} with {manifest.count} exports")
        return manifest

    def _generate_icon(
        self,
        source: SourceFile,
        options: GenerationOptions,
        renderer: ComponentRenderer,
        formatter: Formatter,
        written: Dict[str, str],
    ) -> tuple[IconRecord, str]:
        names = derive_names(source.relative_path, options.prefix)
        optimized = self.optimizer.optimize(source.content)
        jsx = self.transformer.transform(optimized)
        body = self.extractor.extract(jsx)
        source_text = formatter.format(renderer.render(names.name, body))

        filename = f"{names.file}{COMPONENT_EXTENSION}"
        previous = written.get(names.file)
        if previous is not None:
            # Last write wins; the manifest keeps both entries.
            self.reporter.warn(
                f"{source.relative_path} overwrites {filename} written for {previous}"
            )
        self._write(options.out_dir / filename, source_text)
        written[names.file] = source.relative_path

        record = IconRecord(name=names.name, file=names.file, tags=names.tags)
        return record, names.base

    @staticmethod
    def _read(src_dir: Path, relative_path: str) -> SourceFile:
        absolute_path = src_dir / relative_path
        # Undecodable bytes become U+FFFD; validation still sees the markup.
        content = absolute_path.read_text(encoding="utf-8", errors="replace")
        return SourceFile(relative_path=relative_path, absolute_path=absolute_path, content=content)

    def _write(self, path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")
        self.logger.debug("Wrote %s", path)


def generate(options: GenerationOptions, **collaborators: object) -> Manifest:
    """Run a generation pass with default collaborators unless overridden."""
    return Orchestrator(**collaborators).generate(options)  # type: ignore[arg-type]


__all__ = ["Orchestrator", "generate"]
