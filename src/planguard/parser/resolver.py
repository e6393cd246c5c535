"""Builds a typed ``DataObject`` from the raw YAML of a data object source."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from planguard.models.domain import Annotation, DataObject, ObjectField
from planguard.models.errors import LoadError
from planguard.parser.loader import SourceMap


class DataObjectResolver:
    """Turns a raw YAML value into a ``DataObject``, collecting every shape error.

    Accepted shape::

        name: Schedule
        package: org.acme.schedule
        annotations:
          PlanningSolution: {}
        fields:
          score:
            type: org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScore
            annotations:
              PlanningScore: {}
          label: java.lang.String        # shorthand: field -> type name

    ``annotations`` may also be a list of bare annotation names.
    """

    def resolve(
        self,
        raw: Any,
        source_map: SourceMap | None = None,
    ) -> tuple[DataObject | None, list[LoadError]]:
        """Return ``(data_object, errors)``.

        ``data_object`` is ``None`` when the document has no usable name or is
        not a mapping at all; otherwise it holds whatever could be parsed.
        """
        errors: list[LoadError] = []

        def _error(code: str, message: str, path: str) -> None:
            span = source_map.get(path) if source_map else None
            errors.append(LoadError(code=code, message=message, path=path, span=span))

        if not isinstance(raw, dict):
            errors.append(
                LoadError(
                    code="DOCUMENT_NOT_MAPPING",
                    message="A data object source must be a YAML mapping",
                )
            )
            return None, errors

        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            _error("MISSING_NAME", "Data object is missing a non-empty 'name'", "name")
            return None, errors

        package = raw.get("package") or ""
        if not isinstance(package, str):
            _error("INVALID_PACKAGE", "'package' must be a string", "package")
            package = ""

        annotations = self._resolve_annotations(raw.get("annotations"), "annotations", _error)

        fields: dict[str, ObjectField] = {}
        raw_fields = raw.get("fields") or {}
        if not isinstance(raw_fields, dict):
            _error("INVALID_FIELDS", "'fields' must be a YAML mapping", "fields")
            raw_fields = {}
        for field_name, raw_field in raw_fields.items():
            path = f"fields.{field_name}"
            if isinstance(raw_field, str):
                fields[field_name] = ObjectField(name=field_name, type_name=raw_field)
                continue
            if not isinstance(raw_field, dict):
                _error(
                    "INVALID_FIELD",
                    f"Field '{field_name}' must be a type name or a mapping",
                    path,
                )
                continue
            type_name = raw_field.get("type")
            if not isinstance(type_name, str) or not type_name.strip():
                _error("MISSING_FIELD_TYPE", f"Field '{field_name}' has no 'type'", path)
                continue
            fields[field_name] = ObjectField(
                name=field_name,
                type_name=type_name.strip(),
                annotations=self._resolve_annotations(
                    raw_field.get("annotations"), f"{path}.annotations", _error
                ),
            )

        data_object = DataObject(
            name=name.strip(),
            package_name=package.strip(),
            annotations=annotations,
            fields=fields,
        )
        return data_object, errors

    @staticmethod
    def _resolve_annotations(
        raw: Any, path: str, report: Callable[[str, str, str], None]
    ) -> dict[str, Annotation]:
        if raw is None:
            return {}
        if isinstance(raw, list):
            raw = {item: None for item in raw if isinstance(item, str)}
        if not isinstance(raw, dict):
            report("INVALID_ANNOTATIONS", f"'{path}' must be a mapping or a list", path)
            return {}
        annotations: dict[str, Annotation] = {}
        for class_name, values in raw.items():
            if values is not None and not isinstance(values, dict):
                report(
                    "INVALID_ANNOTATION_VALUES",
                    f"Annotation '{class_name}' values must be a mapping",
                    f"{path}.{class_name}",
                )
                values = None
            annotations[class_name] = Annotation(class_name=class_name, values=values or {})
        return annotations
