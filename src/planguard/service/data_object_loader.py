"""Parses data object source text into a ``DataObject``."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from ruamel.yaml.error import YAMLError

from planguard.models.errors import GenerationResult, LoadError
from planguard.parser.loader import TrackedLoader, YAMLSafetyError
from planguard.parser.resolver import DataObjectResolver

logger = logging.getLogger("planguard.service")


class DataObjectLoader:
    """Stateless loader: YAML parsing followed by data object resolution.

    Problems with the source itself never raise; they come back as errors on
    the ``GenerationResult``.
    """

    def __init__(self) -> None:
        self._loader = TrackedLoader()
        self._resolver = DataObjectResolver()

    def load_data_object(
        self,
        path: PurePosixPath,
        source: str,
        context_path: PurePosixPath | None = None,
    ) -> GenerationResult:
        """Load the data object stored at ``path`` from its ``source`` text.

        ``context_path`` names the location errors are reported against; it
        defaults to ``path``.
        """
        filename = str(context_path or path)
        try:
            raw, source_map = self._loader.load_string(source, filename=filename)
        except YAMLSafetyError as exc:
            return GenerationResult(errors=[LoadError(code="YAML_SAFETY_ERROR", message=str(exc))])
        except (YAMLError, ValueError) as exc:
            # ruamel.yaml constructors raise plain ValueError for bad tagged scalars
            return GenerationResult(errors=[LoadError(code="YAML_PARSE_ERROR", message=str(exc))])

        data_object, errors = self._resolver.resolve(raw, source_map)
        if errors:
            logger.debug("%s loaded with %d error(s)", filename, len(errors))
        return GenerationResult(data_object=data_object, errors=errors)
