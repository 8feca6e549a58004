"""Emission of generated operation modules.

Selects the requested operations, builds one artifact per operation and
routes the artifacts to stdout or to the filesystem.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorSettings
from .introspection import fetch_schema
from .ir import GeneratedArtifact, IROperation, IRSchema
from .parser import SchemaParser
from .policies import WriteConflictPolicy
from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)


@dataclass
class EmissionResult:
    """Outcome of writing a batch of artifacts."""
    written: list[Path] = field(default_factory=list)
    # Targets that already existed when the batch was checked
    conflicts: list[Path] = field(default_factory=list)
    # Targets not written because of the conflicts
    skipped: list[Path] = field(default_factory=list)


class EmissionDriver:
    """Generates artifacts for requested operations and emits them."""

    def __init__(
        self,
        schema: IRSchema,
        builder: QueryBuilder | None = None,
        file_extension: str = ".ts",
    ):
        self.schema = schema
        self.builder = builder or QueryBuilder(schema.types)
        self.file_extension = file_extension

    @classmethod
    def from_settings(cls, schema: IRSchema, settings: GeneratorSettings) -> "EmissionDriver":
        builder = QueryBuilder(
            schema.types,
            selection=settings.field_selection(),
            tag_module=settings.tag_module,
            tag_name=settings.tag_name,
        )
        return cls(schema, builder, file_extension=settings.file_extension)

    def select_operations(self, kind: str, names: list[str]) -> list[IROperation]:
        """Return operations of kind whose name was requested, in schema order."""
        selected = [op for op in self.schema.operations_of(kind) if op.name in names]

        unknown = set(names) - {op.name for op in selected}
        if unknown:
            logger.debug("No %s named %s, skipping", kind, ", ".join(sorted(unknown)))
        return selected

    def generate(self, kind: str, names: list[str]) -> list[GeneratedArtifact]:
        """Build one artifact per requested operation.

        Raises:
            FormatterError: If any generated document is invalid
        """
        artifacts = []
        for operation in self.select_operations(kind, names):
            logger.debug("Generating %s", operation.logical_name)
            artifacts.append(
                GeneratedArtifact(
                    logical_name=operation.logical_name,
                    file_name=f"{operation.logical_name}{self.file_extension}",
                    source=self.builder.build(operation),
                )
            )
        return artifacts

    @staticmethod
    def render_listing(artifacts: list[GeneratedArtifact]) -> str:
        """Render artifacts for stdout, each headed by a file name comment."""
        return "".join(f"// {artifact.file_name}\n{artifact.source}" for artifact in artifacts)

    @staticmethod
    def write(
        artifacts: list[GeneratedArtifact],
        output_dir: Path = Path("."),
        policy: WriteConflictPolicy = WriteConflictPolicy.ALL_OR_NOTHING,
    ) -> EmissionResult:
        """Write artifacts into output_dir according to the conflict policy."""
        targets = [(Path(output_dir) / artifact.file_name, artifact) for artifact in artifacts]
        result = EmissionResult(conflicts=[path for path, _ in targets if path.exists()])

        if result.conflicts and policy is WriteConflictPolicy.ALL_OR_NOTHING:
            logger.debug(
                "Not writing any file, already present: %s",
                ", ".join(str(path) for path in result.conflicts),
            )
            result.skipped = [path for path, _ in targets]
            return result

        for path, artifact in targets:
            if path in result.conflicts and policy is WriteConflictPolicy.SKIP_EXISTING:
                logger.debug("Skipping existing %s", path)
                result.skipped.append(path)
                continue
            path.write_text(artifact.source, encoding="utf-8")
            result.written.append(path)
        return result


async def load_schema(url: str, settings: GeneratorSettings) -> IRSchema:
    """Fetch the schema at url and build its IR."""
    document = await fetch_schema(url, timeout=settings.timeout)
    return SchemaParser(document).parse()


async def list_operations(url: str, kind: str, settings: GeneratorSettings | None = None) -> list[str]:
    """Return the names of the operations of one kind."""
    schema = await load_schema(url, settings or GeneratorSettings())
    return [op.name for op in schema.operations_of(kind)]


async def generate_artifacts(
    url: str,
    kind: str,
    names: list[str],
    settings: GeneratorSettings | None = None,
) -> list[GeneratedArtifact]:
    """Fetch the schema and generate artifacts for the requested operations.

    Nothing is fetched when no operation is requested.
    """
    if not names:
        return []

    settings = settings or GeneratorSettings()
    schema = await load_schema(url, settings)
    return EmissionDriver.from_settings(schema, settings).generate(kind, names)
