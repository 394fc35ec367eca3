"""Run-scoped schema registry and compiler.

The engine collects every schema of a run in a `referencing` registry
(seeded with the bundled meta-schemas, so no network access is needed)
and compiles schemas one at a time against that full set.

Compiling a schema means:

1. checking it against the meta-schema of its dialect, with format
   checking enabled;
2. resolving every `$ref`/`$dynamicRef` it contains, following nested
   `$id` scopes, JSON pointers and anchors;
3. building a validator bound to the registry.

Step 1 runs when a schema is registered, together with collecting the
`$id`s it claims; its outcome is reported when the schema is compiled.
Registration never resolves references, so schemas may be registered in
any order.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from urllib.parse import urljoin, urlsplit

from jsonschema import Draft202012Validator, FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for
from jsonschema_specifications import REGISTRY as SPECIFICATIONS
from referencing import Registry, Resource, Specification
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012

from schema_compile.constants import (
    DIALECT_KEYWORD,
    ID_KEYWORD,
    REFERENCE_KEYWORDS,
)
from schema_compile.exceptions import (
    DuplicateIdentifierError,
    SchemaCompilationError,
    UnresolvedReferenceError,
)
from schema_compile.logger import get_logger

logger = get_logger(__name__)


def schema_identifier(document: Any) -> str | None:
    """Return the `$id` of a parsed document, or None when absent.

    Non-object documents, non-string and empty identifiers all count as
    absent. A trailing empty fragment is dropped, so "urn:x#" and "urn:x"
    name the same schema.
    """
    if not isinstance(document, dict):
        return None
    identifier = document.get(ID_KEYWORD)
    if not isinstance(identifier, str):
        return None
    identifier = identifier.removesuffix("#")
    return identifier or None


class SchemaEngine:
    """Registry of a run's schemas plus the compile step.

    One engine is created per run and passed explicitly to the loader and
    the compiler pass. Each schema is checked against its meta-schema when
    it is registered; the outcome is reported when it is compiled. Only
    schemas that pass the check are indexed for reference lookup, so one
    malformed schema cannot break resolution for the rest of the run.

    Args:
        default_validator: Validator class for schemas without a known
            `$schema`
        format_checker: Format checker used for meta-schema checks and by
            compiled validators

    """

    def __init__(
        self,
        default_validator: type[Validator] = Draft202012Validator,
        format_checker: FormatChecker | None = None,
    ) -> None:
        self.default_validator = default_validator
        self.format_checker = format_checker or FormatChecker()
        self._default_specification: Specification = DRAFT202012
        self._resources: dict[str, Resource] = {}
        self._checks: dict[str, SchemaCompilationError | None] = {}
        # every claimed $id, top-level or embedded, to its top-level owner
        self._owners: dict[str, str] = {}
        self._crawled: Registry | None = None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Identifiers registered so far, in registration order."""
        return tuple(self._resources)

    def owner_of(self, identifier: str) -> str | None:
        """Return the top-level identifier of the schema holding an `$id`."""
        return self._owners.get(identifier.removesuffix("#"))

    def register(self, identifier: str, document: Any) -> None:
        """Register a parsed schema under its identifier.

        The dialect is taken from `$schema` when it names a known draft;
        anything else is treated as Draft 2020-12. Unknown keywords are
        ignored. Identifiers of embedded schemas are claimed along with the
        top-level one.

        Raises:
            ValueError: If the identifier is empty or `$schema` is not a
                string
            DuplicateIdentifierError: If the schema, or a schema embedded
                in it, claims an identifier that is already registered

        """
        if not identifier:
            msg = "Cannot register a schema without an identifier"
            raise ValueError(msg)
        dialect = (
            document.get(DIALECT_KEYWORD)
            if isinstance(document, dict)
            else None
        )
        if dialect is not None and not isinstance(dialect, str):
            msg = f"{DIALECT_KEYWORD} must be a string"
            raise ValueError(msg)

        resource = Resource.from_contents(
            document,
            default_specification=self._default_specification,
        )
        error, claimed = self._inspect(identifier, resource)
        for uri in claimed:
            owner = self._owners.get(uri)
            if owner is not None:
                raise DuplicateIdentifierError(uri, owner)

        self._resources[identifier] = resource
        self._checks[identifier] = error
        for uri in claimed:
            self._owners.setdefault(uri, identifier)
        self._crawled = None
        logger.debug(
            "Registered schema %s (%d embedded ids)",
            identifier,
            len(claimed) - 1,
        )

    @property
    def registry(self) -> Registry:
        """Meta-schemas plus every well-formed registered schema.

        Anchors and embedded `$id`s are indexed.
        """
        if self._crawled is None:
            resources = [
                (identifier, resource)
                for identifier, resource in self._resources.items()
                if self._checks[identifier] is None
            ]
            self._crawled = SPECIFICATIONS.with_resources(resources).crawl()
        return self._crawled

    def compile(self, identifier: str) -> Validator:
        """Compile a registered schema.

        Returns:
            A validator for the schema, bound to the full registry

        Raises:
            KeyError: If the identifier was never registered
            SchemaCompilationError: If the schema is not a valid schema
            UnresolvedReferenceError: If a reference cannot be resolved

        """
        resource = self._resources[identifier]
        error = self._checks[identifier]
        if error is not None:
            raise error

        registry = self.registry
        self._resolve_references(
            resource, registry.resolver(base_uri=identifier), identifier
        )

        validator_cls = validator_for(
            resource.contents, default=self.default_validator
        )
        return validator_cls(
            resource.contents,
            registry=registry,
            format_checker=self.format_checker,
        )

    def _inspect(
        self, identifier: str, resource: Resource
    ) -> tuple[SchemaCompilationError | None, tuple[str, ...]]:
        """Check a schema and collect the identifiers it claims.

        A schema failing its meta-schema check, or holding an `$id` that is
        not a parseable URI, claims only its own identifier.
        """
        contents = resource.contents
        validator_cls = validator_for(
            contents, default=self.default_validator
        )
        try:
            validator_cls.check_schema(
                contents, format_checker=self.format_checker
            )
        except SchemaError as e:
            error = SchemaCompilationError(
                _format_schema_error(e), target=identifier
            )
            error.__cause__ = e
            return error, (identifier,)

        try:
            urlsplit(identifier)
            embedded = set(_embedded_identifiers(resource, identifier))
        except ValueError as e:
            error = SchemaCompilationError(
                f"schema has an invalid $id: {e}", target=identifier
            )
            error.__cause__ = e
            return error, (identifier,)

        embedded.discard(identifier)
        return None, (identifier, *sorted(embedded))

    def _resolve_references(
        self, resource: Resource, resolver, base_uri: str
    ) -> None:
        """Resolve every reference in resource and its subschemas.

        base_uri tracks the resolver's scope for error messages only.
        """
        contents = resource.contents
        if isinstance(contents, dict):
            for keyword in REFERENCE_KEYWORDS:
                ref = contents.get(keyword)
                if not isinstance(ref, str):
                    continue
                try:
                    resolver.lookup(ref)
                except (Unresolvable, ValueError) as e:
                    msg = f"can't resolve reference {ref} from id {base_uri}"
                    raise UnresolvedReferenceError(msg, target=ref) from e

        for subresource in resource.subresources():
            sub_id = subresource.id()
            try:
                sub_resolver = resolver.in_subresource(subresource)
                sub_base = urljoin(base_uri, sub_id) if sub_id else base_uri
            except ValueError as e:
                msg = f"invalid $id {sub_id} under {base_uri}: {e}"
                raise SchemaCompilationError(msg, target=sub_id) from e
            self._resolve_references(subresource, sub_resolver, sub_base)


def _embedded_identifiers(resource: Resource, base_uri: str) -> Iterator[str]:
    """Yield the absolute `$id` of every schema embedded in resource.

    Raises:
        ValueError: If an identifier is not a parseable URI

    """
    for subresource in resource.subresources():
        sub_id = subresource.id()
        uri = urljoin(base_uri, sub_id) if sub_id else base_uri
        if sub_id:
            yield uri.removesuffix("#")
        yield from _embedded_identifiers(subresource, uri)


def _format_schema_error(error: SchemaError) -> str:
    """Format a meta-schema violation as a one-line message."""
    path = "/".join(str(p) for p in error.absolute_path)
    if path:
        return f"schema is invalid: {error.message} (at '{path}')"
    return f"schema is invalid: {error.message}"
