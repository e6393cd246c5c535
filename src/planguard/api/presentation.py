"""Human-readable text for validation message kinds."""

from __future__ import annotations

from planguard.models.messages import MessageKind, ValidationMessage

MESSAGE_TEMPLATES: dict[MessageKind, str] = {
    MessageKind.SCORE_HOLDER_GLOBAL_TYPE_NOT_RECOGNIZED: (
        "The score type of this Planning Solution is not recognized. "
        "The type of the 'scoreHolder' global variable cannot be determined, "
        "so rules referencing it may break after the delete."
    ),
    MessageKind.SCORE_HOLDER_GLOBAL_TO_BE_REMOVED: (
        "Deleting this Planning Solution removes the 'scoreHolder' global variable. "
        "Rules that reference 'scoreHolder' will no longer compile."
    ),
}


def render(message: ValidationMessage) -> str:
    return MESSAGE_TEMPLATES[message.kind]
