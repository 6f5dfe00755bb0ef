# topmark:header:start
#
#   project      : CMDA
#   file         : engine.py
#   file_relpath : src/cmda/analyzer/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grouping engine: classify a stream of objects and write one artifact per class.

The analyzer performs a single pass over an object source:

1. The output directory is validated (see `prepare_output_dir`).
2. Each object is classified; the first time a content model is seen it
   receives the next sequence number (starting at 1) and a membership list
   ``cmodel-<n>.members.txt`` is opened for it.
3. The object's PID is appended to its model's membership list.
4. Once the source is exhausted, every membership list is flushed and every
   distinct content model is serialized to ``cmodel-<n><suffix>``.
5. All membership lists are closed, whether or not the run succeeded.

Design goals:
  - No CLI dependencies: this module only logs and raises `cmda.core.errors`
    exceptions; presentation and exit codes belong to `cmda.cli`.
  - No partial success: `classify_all` either returns an `AnalysisResult` or
    raises. An aborted run may leave partial output on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from cmda.analyzer.outdir import prepare_output_dir
from cmda.config.logging import get_logger
from cmda.constants import CMODEL_PREFIX, DEFAULT_ENCODING, MEMBER_PREFIX, MEMBER_SUFFIX
from cmda.core.errors import ClassificationError, CmdaError, OutputError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cmda.analyzer.classifier import Classifier
    from cmda.analyzer.serializers import Serializer
    from cmda.config.logging import CmdaLogger
    from cmda.config.model import AnalyzerConfig
    from cmda.model.cmodel import ContentModel
    from cmda.model.objects import DigitalObject

logger: CmdaLogger = get_logger(__name__)


@dataclass
class _ClassEntry:
    """Registry entry for one distinct content model."""

    number: int
    cmodel: ContentModel
    members: TextIO
    member_count: int = 0


@dataclass(frozen=True)
class ContentModelSummary:
    """Per-class outcome of a successful run."""

    number: int
    pid: str
    member_count: int
    cmodel_path: Path
    members_path: Path


@dataclass(frozen=True)
class AnalysisResult:
    """Summary of a successful run.

    Attributes:
        output_dir (Path): Directory the artifacts were written to.
        object_count (int): Number of objects classified.
        cmodels (tuple[ContentModelSummary, ...]): One entry per class, by sequence number.
    """

    output_dir: Path
    object_count: int
    cmodels: tuple[ContentModelSummary, ...]

    @property
    def cmodel_count(self) -> int:
        """Number of distinct content models."""
        return len(self.cmodels)


def cmodel_filename(number: int, suffix: str) -> str:
    """Return the artifact file name for content model ``number``."""
    return f"{CMODEL_PREFIX}{number}{suffix}"


def members_filename(number: int) -> str:
    """Return the membership list file name for content model ``number``."""
    return f"{MEMBER_PREFIX}{number}{MEMBER_SUFFIX}"


class Analyzer:
    """Classify objects and write content models plus membership lists.

    Args:
        classifier (Classifier): Maps objects to content models.
        serializer (Serializer): Writes content model artifacts.
        encoding (str): Text encoding for artifacts and membership lists.
    """

    def __init__(
        self,
        classifier: Classifier,
        serializer: Serializer,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.classifier: Classifier = classifier
        self.serializer: Serializer = serializer
        self.encoding: str = encoding
        self._output_dir: Path = Path()
        self._entries: dict[ContentModel, _ClassEntry] = {}
        self._object_count: int = 0

    @classmethod
    def from_config(cls, config: AnalyzerConfig) -> Analyzer:
        """Construct an analyzer whose components are named by ``config``.

        Raises:
            ConfigurationError: If a component cannot be constructed.
        """
        from cmda.config.factory import construct

        return cls(
            construct("classifier", config.classifier),
            construct("serializer", config.serializer),
            encoding=config.encoding,
        )

    def classify_all(
        self,
        objects: Iterable[DigitalObject],
        output_dir: str | Path,
    ) -> AnalysisResult:
        """Classify every object and write the results to ``output_dir``.

        Args:
            objects (Iterable[DigitalObject]): Object source; consumed exactly once.
            output_dir (str | Path): Output directory. Must be empty; it is
                created if missing.

        Returns:
            AnalysisResult: Summary of the written artifacts.

        Raises:
            ConfigurationError: The output directory cannot be created.
            PreconditionError: The output directory is not empty.
            ObjectLoadError: The object source failed.
            ClassificationError: The classifier failed on an object.
            OutputError: A membership list or content model could not be written.
        """
        self._clear_state()
        self._output_dir = prepare_output_dir(output_dir)
        logger.info("Analyzing objects into %s", self._output_dir)
        try:
            for obj in objects:
                self._object_count += 1
                cmodel: ContentModel = self._classify(obj)
                self._record_membership(obj, cmodel)
            self._flush_member_lists()
            self._serialize_cmodels()
            result = AnalysisResult(
                output_dir=self._output_dir,
                object_count=self._object_count,
                cmodels=tuple(self._summaries()),
            )
        finally:
            self._close_member_lists()
        logger.info(
            "Classified %d object(s) into %d content model(s)",
            result.object_count,
            result.cmodel_count,
        )
        return result

    def _classify(self, obj: DigitalObject) -> ContentModel:
        logger.trace("Classifying %s", obj.pid)
        try:
            return self.classifier.get_content_model(obj)
        except CmdaError:
            raise
        except Exception as e:
            raise ClassificationError(f"Classifier failed on {obj.pid}: {e}", pid=obj.pid) from e

    def _record_membership(self, obj: DigitalObject, cmodel: ContentModel) -> None:
        entry: _ClassEntry | None = self._entries.get(cmodel)
        if entry is None:
            number: int = len(self._entries) + 1
            path: Path = self._output_dir / members_filename(number)
            try:
                members: TextIO = path.open("w", encoding=self.encoding, newline="\n")
            except OSError as e:
                raise OutputError(f"Unable to create membership list {path}: {e}") from e
            entry = _ClassEntry(number=number, cmodel=cmodel, members=members)
            self._entries[cmodel] = entry
            logger.debug("Content model %d (%s) first seen at %s", number, cmodel.pid, obj.pid)
        try:
            entry.members.write(obj.pid + "\n")
        except (OSError, ValueError) as e:
            raise OutputError(f"Unable to append to membership list {entry.number}: {e}") from e
        entry.member_count += 1

    def _flush_member_lists(self) -> None:
        # Buffered write errors surface here, not in close().
        for entry in self._entries.values():
            try:
                entry.members.flush()
            except OSError as e:
                raise OutputError(f"Unable to write membership list {entry.number}: {e}") from e

    def _serialize_cmodels(self) -> None:
        for entry in self._entries.values():
            path: Path = self._output_dir / cmodel_filename(entry.number, self.serializer.suffix)
            try:
                with path.open("wb") as out:
                    self.serializer.serialize(entry.cmodel, out, self.encoding)
            except (OSError, ValueError, TypeError) as e:
                raise OutputError(f"Unable to serialize content model to {path}: {e}") from e
            logger.debug("Wrote %s", path)

    def _summaries(self) -> list[ContentModelSummary]:
        return [
            ContentModelSummary(
                number=entry.number,
                pid=entry.cmodel.pid,
                member_count=entry.member_count,
                cmodel_path=self._output_dir
                / cmodel_filename(entry.number, self.serializer.suffix),
                members_path=self._output_dir / members_filename(entry.number),
            )
            for entry in self._entries.values()
        ]

    def _close_member_lists(self) -> None:
        for entry in self._entries.values():
            try:
                entry.members.close()
            except OSError as e:
                logger.error("Unable to close membership list %d: %s", entry.number, e)
        self._entries.clear()

    def _clear_state(self) -> None:
        self._entries = {}
        self._object_count = 0
