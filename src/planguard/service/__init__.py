"""Service layer: data object loading and the delete guard facade."""
