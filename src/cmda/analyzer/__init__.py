# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/analyzer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content model analysis: classifier, object sources, serializers and the engine.

Typical usage:

    ```python
    from cmda.analyzer import Analyzer, DefaultClassifier, DirObjectSource, JsonSerializer

    analyzer = Analyzer(DefaultClassifier(), JsonSerializer())
    result = analyzer.classify_all(DirObjectSource("objects"), Path("out"))
    ```
"""

from __future__ import annotations

from .classifier import Classifier, DefaultClassifier
from .engine import AnalysisResult, Analyzer, ContentModelSummary
from .outdir import prepare_output_dir
from .serializers import JsonSerializer, Serializer, TomlSerializer
from .sources import DirObjectSource, IterableObjectSource, ObjectSource

__all__ = [
    "AnalysisResult",
    "Analyzer",
    "Classifier",
    "ContentModelSummary",
    "DefaultClassifier",
    "DirObjectSource",
    "IterableObjectSource",
    "JsonSerializer",
    "ObjectSource",
    "Serializer",
    "TomlSerializer",
    "prepare_output_dir",
]
