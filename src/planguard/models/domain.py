"""Data object types: annotations, fields, and the objects that carry them."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

PLANNING_SOLUTION_ANNOTATION = "org.optaplanner.core.api.domain.solution.PlanningSolution"
PLANNING_SCORE_ANNOTATION = "org.optaplanner.core.api.domain.solution.PlanningScore"


class ResourceType(StrEnum):
    DATA_OBJECT = "data_object"
    RULE = "rule"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES: dict[ResourceType, str] = {
    ResourceType.DATA_OBJECT: ".src",
    ResourceType.RULE: ".rule",
}


def simple_name(class_name: str) -> str:
    """Return the last dotted segment of a (possibly qualified) type name."""
    return class_name.rsplit(".", 1)[-1]


class Annotation(BaseModel):
    """An annotation applied to a data object or to one of its fields."""

    class_name: str
    values: dict[str, Any] = {}

    def matches(self, class_name: str) -> bool:
        """True for the exact name, or when either side is the other's simple name."""
        if self.class_name == class_name:
            return True
        if "." in self.class_name and "." in class_name:
            return False
        return simple_name(self.class_name) == simple_name(class_name)


class _Annotated(BaseModel):
    annotations: dict[str, Annotation] = {}

    def get_annotation(self, class_name: str) -> Annotation | None:
        for annotation in self.annotations.values():
            if annotation.matches(class_name):
                return annotation
        return None


class ObjectField(_Annotated):
    """A field declared on a data object."""

    name: str
    type_name: str = Field(alias="type")

    model_config = {"populate_by_name": True}


class DataObject(_Annotated):
    """A parsed data object: its name, package, fields, and annotations."""

    name: str
    package_name: str = Field("", alias="package")
    fields: dict[str, ObjectField] = {}

    model_config = {"populate_by_name": True}

    @property
    def class_name(self) -> str:
        """Fully-qualified name: package.name (or just name in the default package)."""
        return f"{self.package_name}.{self.name}" if self.package_name else self.name

    def get_field(self, name: str) -> ObjectField | None:
        return self.fields.get(name)
