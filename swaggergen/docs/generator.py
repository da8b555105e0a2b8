"""
OpenAPI annotation generator for CRUD endpoints.

Generates swagger-php style doc-comments (`@OA\\Schema`, `@OA\\Post`, ...)
describing a model's schema and its create, update, view, list and delete
endpoints. The annotation vocabulary is consumed by third-party scanners, so
the literal text is part of the contract.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from ..exceptions import ConfigurationError
from ..schema.interface import SchemaProvider
from ..schema.types import ColumnDescriptor, ModelDescriptor
from .types import describe_column, has_file_upload_columns, map_type

ID_COLUMN = "id"
MULTIPART = "multipart/form-data"


class _DocBlock:
    """Writer for one `/** ... */` doc-comment."""

    INDENT = "    "

    def __init__(self) -> None:
        self._out = StringIO()
        self._out.write("/**\n")

    def line(self, text: str, depth: int = 0) -> None:
        self._out.write(f" * {self.INDENT * depth}{text}\n")

    def close(self) -> str:
        self._out.write(" */\n")
        return self._out.getvalue()


class DocsGenerator:
    """
    Generate OpenAPI annotations for a model's CRUD endpoints.

    The constructor resolves the model and its table columns through the
    schema provider and fails if anything is missing; after that, generating
    documentation cannot fail.

    Example:
        from swaggergen.docs import DocsGenerator

        generator = DocsGenerator("app.models.Product", provider)

        # Schema plus all five endpoints
        annotations = generator.generate_crud_docs()

        # Write to file
        generator.generate_to_file(Path("docs/Product.php"))
    """

    def __init__(self, model: str | type, provider: SchemaProvider) -> None:
        """
        Initialize the generator.

        Args:
            model: Dotted path of the model class, or the class itself
            provider: Source of model and table metadata

        Raises:
            UnknownModelError: If the model does not exist
            UnsupportedModelError: If the model has no table name
            ConfigurationError: If there is no connection, the table does not
                exist, or it has no columns
        """
        if provider is None:
            raise ValueError("Schema provider cannot be None")

        ref = provider.resolve_model(model)
        columns = provider.get_columns(ref.table_name)

        if columns is None:
            raise ConfigurationError(
                f"Table '{ref.table_name}' does not exist in the database.",
                model=ref.identifier,
            )
        if not columns:
            raise ConfigurationError(
                f"The table '{ref.table_name}' does not have any columns defined.",
                model=ref.identifier,
            )

        self._descriptor = ModelDescriptor(
            model_class_identifier=ref.identifier,
            model_name=ref.name,
            table_name=ref.table_name,
            columns=tuple(columns),
        )

    @property
    def descriptor(self) -> ModelDescriptor:
        return self._descriptor

    @property
    def model_name(self) -> str:
        return self._descriptor.model_name

    @property
    def table_name(self) -> str:
        return self._descriptor.table_name

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._descriptor.columns

    @property
    def has_file_uploads(self) -> bool:
        """Whether create and update requests are multipart forms."""
        return has_file_upload_columns(self.columns)

    @property
    def _ref(self) -> str:
        return f"#/components/schemas/{self.model_name}"

    def _data_columns(self) -> list[ColumnDescriptor]:
        """Columns in declaration order, without the primary key."""
        return [col for col in self.columns if col.name != ID_COLUMN]

    def generate_crud_docs(self) -> str:
        """
        Generate the complete CRUD documentation.

        Returns:
            Schema block followed by the Create, Update, View, List and
            Delete endpoint blocks
        """
        return "".join(
            [
                self.generate_schema_component(),
                self.generate_create_endpoint(),
                self.generate_update_endpoint(),
                self.generate_view_endpoint(),
                self.generate_list_endpoint(),
                self.generate_delete_endpoint(),
            ]
        )

    def generate_to_file(self, output_path: Path) -> None:
        """
        Generate documentation and write to file.

        Args:
            output_path: Path of the file to write
        """
        docs = self.generate_crud_docs()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(docs)

    def generate_schema_component(self) -> str:
        """Generate the `@OA\\Schema` block describing every column."""
        block = _DocBlock()
        block.line("@OA\\Schema(")
        block.line(f'schema="{self.model_name}",', 1)
        block.line(f'title="{self.model_name} Model",', 1)
        block.line(
            '@OA\\Property(property="id", type="integer", description="Unique identifier"),',
            1,
        )
        for col in self._data_columns():
            required = ", required=true" if col.required else ""
            block.line("@OA\\Property(", 1)
            block.line(f'property="{col.name}",', 2)
            block.line(f'type="{map_type(col.type)}"{required},', 2)
            block.line(f'description="{describe_column(col)}"', 2)
            block.line("),", 1)
        block.line(")")
        return block.close()

    def _write_header(
        self, block: _DocBlock, method: str, path: str, summary: str
    ) -> None:
        """Write the operation opener, path, summary, tags and security."""
        block.line(f"@OA\\{method}(")
        block.line(f'path="{path}",', 1)
        block.line(f'summary="{summary}",', 1)
        block.line(f'tags={{"{self.model_name}"}},', 1)
        block.line('security={{"bearerAuth": {}}},', 1)

    def _write_id_parameter(
        self, block: _DocBlock, description: str | None = None
    ) -> None:
        block.line("@OA\\Parameter(", 1)
        block.line('name="id",', 2)
        block.line('in="path",', 2)
        block.line("required=true,", 2)
        if description:
            block.line(f'description="{description}",', 2)
        block.line('@OA\\Schema(type="integer")', 2)
        block.line("),", 1)

    def _write_responses(
        self, block: _DocBlock, responses: list[tuple[int, str, bool]]
    ) -> None:
        """
        Write the response list closing an operation.

        Args:
            block: Block being written
            responses: (status, description, returns model) tuples
        """
        for i, (status, description, with_body) in enumerate(responses):
            sep = "," if i < len(responses) - 1 else ""
            if not with_body:
                block.line(
                    f'@OA\\Response(response={status}, description="{description}"){sep}',
                    1,
                )
                continue
            block.line("@OA\\Response(", 1)
            block.line(f"response={status},", 2)
            block.line(f'description="{description}",', 2)
            block.line(f'@OA\\JsonContent(ref="{self._ref}")', 2)
            block.line(f"){sep}", 1)
        block.line(")")

    def generate_create_endpoint(self) -> str:
        """Generate the POST endpoint; the request body references the schema."""
        block = _DocBlock()
        self._write_header(
            block, "Post", f"/{self.table_name}", f"Create new {self.model_name}"
        )

        block.line("@OA\\RequestBody(", 1)
        block.line("required=true,", 2)
        if self.has_file_uploads:
            block.line("@OA\\MediaType(", 2)
            block.line(f'mediaType="{MULTIPART}",', 3)
            block.line(f'@OA\\Schema(ref="{self._ref}")', 3)
            block.line(")", 2)
        else:
            block.line(f'@OA\\JsonContent(ref="{self._ref}")', 2)
        block.line("),", 1)

        self._write_responses(
            block,
            [
                (201, f"{self.model_name} created successfully", True),
                (400, "Invalid input", False),
            ],
        )
        return block.close()

    def _write_inline_body(self, block: _DocBlock, depth: int) -> None:
        """
        Write the required list and one property per column.

        Required-ness is only expressed by the list here; properties never
        carry `required=true`.
        """
        data_columns = self._data_columns()
        required = [f'"{col.name}"' for col in data_columns if col.required]
        if required:
            block.line(f"required={{{', '.join(required)}}},", depth)

        for col in data_columns:
            block.line("@OA\\Property(", depth)
            block.line(f'property="{col.name}",', depth + 1)
            block.line(f'type="{map_type(col.type)}",', depth + 1)
            block.line(f'description="{describe_column(col)}"', depth + 1)
            block.line("),", depth)

    def generate_update_endpoint(self) -> str:
        """Generate the PUT endpoint with an inline request body."""
        block = _DocBlock()
        self._write_header(
            block, "Put", f"/{self.table_name}/{{id}}", f"Update {self.model_name}"
        )
        self._write_id_parameter(block, f"ID of {self.model_name} to update")

        block.line("@OA\\RequestBody(", 1)
        block.line("required=true,", 2)
        if self.has_file_uploads:
            block.line("@OA\\MediaType(", 2)
            block.line(f'mediaType="{MULTIPART}",', 3)
            block.line("@OA\\Schema(", 3)
            self._write_inline_body(block, 4)
            block.line(")", 3)
            block.line(")", 2)
        else:
            block.line("@OA\\JsonContent(", 2)
            self._write_inline_body(block, 3)
            block.line(")", 2)
        block.line("),", 1)

        self._write_responses(
            block,
            [
                (200, f"{self.model_name} updated successfully", True),
                (400, "Invalid input", False),
                (404, f"{self.model_name} not found", False),
            ],
        )
        return block.close()

    def generate_view_endpoint(self) -> str:
        """Generate the GET endpoint for a single record."""
        block = _DocBlock()
        self._write_header(
            block,
            "Get",
            f"/{self.table_name}/{{id}}",
            f"View {self.model_name} details",
        )
        self._write_id_parameter(block)
        self._write_responses(
            block,
            [
                (200, f"{self.model_name} details", True),
                (404, f"{self.model_name} not found", False),
            ],
        )
        return block.close()

    def _write_query_parameter(self, block: _DocBlock, name: str, default: int) -> None:
        block.line("@OA\\Parameter(", 1)
        block.line(f'name="{name}",', 2)
        block.line('in="query",', 2)
        block.line(f'@OA\\Schema(type="integer", default={default})', 2)
        block.line("),", 1)

    def generate_list_endpoint(self) -> str:
        """Generate the paginated GET endpoint for the collection."""
        block = _DocBlock()
        # Plural is the model name plus "s", whatever the word
        self._write_header(
            block, "Get", f"/{self.table_name}", f"List all {self.model_name}s"
        )
        self._write_query_parameter(block, "page", 1)
        self._write_query_parameter(block, "per_page", 10)

        block.line("@OA\\Response(", 1)
        block.line("response=200,", 2)
        block.line(f'description="List of {self.model_name}s",', 2)
        block.line("@OA\\JsonContent(", 2)
        block.line('type="object",', 3)
        block.line(
            f'@OA\\Property(property="items", type="array", @OA\\Items(ref="{self._ref}")),',
            3,
        )
        block.line('@OA\\Property(property="_meta", type="object",', 3)
        meta = ["totalCount", "pageCount", "currentPage", "perPage"]
        for i, name in enumerate(meta):
            sep = "," if i < len(meta) - 1 else ""
            block.line(f'@OA\\Property(property="{name}", type="integer"){sep}', 4)
        block.line(")", 3)
        block.line(")", 2)
        block.line(")", 1)
        block.line(")")
        return block.close()

    def generate_delete_endpoint(self) -> str:
        """Generate the DELETE endpoint."""
        block = _DocBlock()
        self._write_header(
            block, "Delete", f"/{self.table_name}/{{id}}", f"Delete {self.model_name}"
        )
        self._write_id_parameter(block)
        self._write_responses(
            block,
            [
                (200, f"{self.model_name} deleted successfully", False),
                (404, f"{self.model_name} not found", False),
            ],
        )
        return block.close()
