"""Settings for a generation run."""

from pydantic import BaseModel, Field

from .policies import TruncationPolicy, WriteConflictPolicy
from .query_builder import FieldSelection


class GeneratorSettings(BaseModel):
    """Validated options shared by the CLI commands."""

    max_depth: int = Field(default=2, ge=0)
    truncation: TruncationPolicy = TruncationPolicy.BARE_FIELD
    conflict_policy: WriteConflictPolicy = WriteConflictPolicy.ALL_OR_NOTHING
    tag_module: str = "graphql-tag"
    tag_name: str = Field(default="gql", pattern=r"^[A-Za-z_$][\w$]*$")
    file_extension: str = ".ts"
    timeout: float = Field(default=30.0, gt=0)

    def field_selection(self) -> FieldSelection:
        return FieldSelection(max_depth=self.max_depth, truncation=self.truncation)
