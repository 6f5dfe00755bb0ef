# topmark:header:start
#
#   project      : CMDA
#   file         : classifier.py
#   file_relpath : src/cmda/analyzer/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classifiers map digital objects to content models.

A classifier must return *equal* content models for objects that belong to
the same class; the analyzer groups by equality, never by identity.

The default classifier derives a structural signature from each object and
caches one `ContentModel` per signature. It also remembers which behavior
mechanisms (BMechs) members of each model use, so that a downstream generator
can ask for BMech directives::

    OLD_BMECH demo:BMech1
    NEW_BMECH changeme:BMech1
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from cmda.config.logging import get_logger
from cmda.constants import (
    DEFAULT_BMECH_PID_PREFIX,
    DEFAULT_CMODEL_LABEL_PREFIX,
    DEFAULT_CMODEL_PID_PREFIX,
)
from cmda.model.cmodel import ContentModel, DatastreamSpec

if TYPE_CHECKING:
    from cmda.config.logging import CmdaLogger
    from cmda.model.objects import DigitalObject

logger: CmdaLogger = get_logger(__name__)


class Classifier(Protocol):
    """Protocol for content model classifiers."""

    def get_content_model(self, obj: DigitalObject) -> ContentModel:
        """Return a content model describing the class ``obj`` belongs to.

        Must not mutate ``obj``. Objects of the same class must yield equal
        (not necessarily identical) content models.
        """
        ...

    def get_directives(self, cmodel_pid: str) -> str | None:
        """Return BMech directives for a content model previously returned.

        Args:
            cmodel_pid (str): PID of the content model.

        Returns:
            str | None: Directive text, or ``None`` if no directives exist.
        """
        ...


class DefaultClassifier:
    """Classify objects by their datastream layout and behavior definitions.

    Args:
        pid_prefix (str): Prefix for generated content model PIDs.
        label_prefix (str): Prefix for generated content model labels.
        bmech_pid_prefix (str): Prefix for the new BMech PIDs named in directives.
        explicit_only (bool): Group objects that declare content models by the
            declared PIDs alone, ignoring their structure.
        ignore_mime_types (bool): Leave MIME types out of the signature.
        ignore_format_uris (bool): Leave format URIs out of the signature.
    """

    def __init__(
        self,
        *,
        pid_prefix: str = DEFAULT_CMODEL_PID_PREFIX,
        label_prefix: str = DEFAULT_CMODEL_LABEL_PREFIX,
        bmech_pid_prefix: str = DEFAULT_BMECH_PID_PREFIX,
        explicit_only: bool = False,
        ignore_mime_types: bool = False,
        ignore_format_uris: bool = False,
    ) -> None:
        self.pid_prefix: str = pid_prefix
        self.label_prefix: str = label_prefix
        self.bmech_pid_prefix: str = bmech_pid_prefix
        self.explicit_only: bool = explicit_only
        self.ignore_mime_types: bool = ignore_mime_types
        self.ignore_format_uris: bool = ignore_format_uris

        self._cmodels: dict[ContentModel, ContentModel] = {}
        self._by_pid: dict[str, ContentModel] = {}
        # cmodel pid -> old bmech pid -> bdef pid, in first-seen order
        self._bmechs: dict[str, dict[str, str]] = {}
        self._new_bmech_pids: dict[str, str] = {}

    def _signature(self, obj: DigitalObject) -> ContentModel:
        if self.explicit_only and obj.content_models:
            return ContentModel(declared=obj.content_models)
        specs = [
            DatastreamSpec(
                id=ds.id,
                mime_type="" if self.ignore_mime_types else ds.mime_type,
                format_uri="" if self.ignore_format_uris else (ds.format_uri or ""),
            )
            for ds in obj.datastreams
        ]
        return ContentModel(
            datastreams=tuple(specs),
            bdef_pids=tuple(d.bdef_pid for d in obj.disseminators),
        )

    def get_content_model(self, obj: DigitalObject) -> ContentModel:
        """Return the cached content model for the object's signature.

        Args:
            obj (DigitalObject): Object to classify.

        Returns:
            ContentModel: The (shared) content model for the object's class.
        """
        key: ContentModel = self._signature(obj)
        cmodel: ContentModel | None = self._cmodels.get(key)
        if cmodel is None:
            n: int = len(self._cmodels) + 1
            cmodel = ContentModel(
                datastreams=key.datastreams,
                bdef_pids=key.bdef_pids,
                declared=key.declared,
                pid=f"{self.pid_prefix}{n}",
                label=f"{self.label_prefix} {n}",
            )
            self._cmodels[key] = cmodel
            self._by_pid[cmodel.pid] = cmodel
            self._bmechs[cmodel.pid] = {}
            logger.debug("New content model %s for %s", cmodel.pid, obj.pid)

        bmechs: dict[str, str] = self._bmechs[cmodel.pid]
        for diss in obj.disseminators:
            if diss.bmech_pid not in bmechs:
                bmechs[diss.bmech_pid] = diss.bdef_pid
            if diss.bmech_pid not in self._new_bmech_pids:
                self._new_bmech_pids[diss.bmech_pid] = (
                    f"{self.bmech_pid_prefix}{len(self._new_bmech_pids) + 1}"
                )
        return cmodel

    def get_directives(self, cmodel_pid: str) -> str | None:
        """Return BMech directives for a content model this classifier produced.

        Args:
            cmodel_pid (str): PID of a content model returned by this classifier.

        Returns:
            str | None: One ``OLD_BMECH``/``NEW_BMECH`` pair per mechanism used by
            members of the model, or ``None`` if the model is unknown or its
            members have no disseminators.
        """
        bmechs: dict[str, str] | None = self._bmechs.get(cmodel_pid)
        if not bmechs:
            return None
        lines: list[str] = []
        for old_pid in bmechs:
            lines.append(f"OLD_BMECH {old_pid}")
            lines.append(f"NEW_BMECH {self._new_bmech_pids[old_pid]}")
        return "\n".join(lines) + "\n"

    def content_models(self) -> tuple[ContentModel, ...]:
        """Return all content models produced so far, in first-seen order."""
        return tuple(self._by_pid.values())
