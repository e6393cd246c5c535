"""Score type to score holder type mapping for planning solutions."""

from __future__ import annotations

from planguard.models.domain import PLANNING_SCORE_ANNOTATION, DataObject, simple_name

SCORE_FIELD_NAME = "score"

_BUILDIN_PACKAGE = "org.optaplanner.core.api.score.buildin"

BUILDIN_SCORE_TYPES: tuple[str, ...] = tuple(
    f"{_BUILDIN_PACKAGE}.{package}.{name}"
    for package, name in (
        ("simple", "SimpleScore"),
        ("simplelong", "SimpleLongScore"),
        ("simplebigdecimal", "SimpleBigDecimalScore"),
        ("hardsoft", "HardSoftScore"),
        ("hardsoftlong", "HardSoftLongScore"),
        ("hardsoftbigdecimal", "HardSoftBigDecimalScore"),
        ("hardmediumsoft", "HardMediumSoftScore"),
        ("hardmediumsoftlong", "HardMediumSoftLongScore"),
        ("hardmediumsoftbigdecimal", "HardMediumSoftBigDecimalScore"),
        ("bendable", "BendableScore"),
        ("bendablelong", "BendableLongScore"),
        ("bendablebigdecimal", "BendableBigDecimalScore"),
    )
)

# Each built-in score type is accumulated by a holder class of the same
# package named <Score>Holder.
_SCORE_HOLDER_TYPES: dict[str, str] = {fqn: f"{fqn}Holder" for fqn in BUILDIN_SCORE_TYPES}
_SCORE_HOLDER_TYPES_BY_SIMPLE_NAME: dict[str, str] = {
    simple_name(fqn): holder for fqn, holder in _SCORE_HOLDER_TYPES.items()
}


class ScoreHolderUtils:
    """Finds a solution's score type and the score holder type that services it."""

    @staticmethod
    def extract_score_type_fqn(data_object: DataObject) -> str | None:
        """Type name of the solution's score field.

        The field annotated ``PlanningScore`` wins; otherwise the field named
        ``score``. ``None`` when the object declares neither.
        """
        for object_field in data_object.fields.values():
            if object_field.get_annotation(PLANNING_SCORE_ANNOTATION) is not None:
                return object_field.type_name
        score_field = data_object.get_field(SCORE_FIELD_NAME)
        return score_field.type_name if score_field is not None else None

    @staticmethod
    def get_score_holder_type_fqn(score_type_fqn: str | None) -> str | None:
        """Fully-qualified score holder type for a built-in score type, else ``None``.

        A bare simple name such as ``HardSoftScore`` is matched against the
        simple names of the built-in score types.
        """
        if not score_type_fqn:
            return None
        if "." not in score_type_fqn:
            return _SCORE_HOLDER_TYPES_BY_SIMPLE_NAME.get(score_type_fqn)
        return _SCORE_HOLDER_TYPES.get(score_type_fqn)
