"""
Named, ordered sets of request targets.

The built-in ``internal-research`` set holds the portal searches exported to
``internal-research.json``. Further sets can be described in YAML files::

    name: internal-research
    filename: internal-research.json
    targets:
      - id: published-0
        url: portal/search-result?...&page=0
      - portal/search-result?...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .fetch.fetcher_base import RequestTarget
from .sinks.sink_base import DEFAULT_FILENAME

logger = logging.getLogger(__name__)


class TargetSet(BaseModel):
    """
    An ordered list of request targets exported together.
    """

    name: str
    filename: str = DEFAULT_FILENAME
    description: Optional[str] = None
    targets: List[RequestTarget] = Field(default_factory=list)

    @property
    def urls(self) -> List[str]:
        return [t.url for t in self.targets]


_SEARCH = "portal/search-result?fulltext=&title=&autocomplete="

INTERNAL_RESEARCH = TargetSet(
    name="internal-research",
    filename="internal-research.json",
    description="Research published on the Royal Conservatoire portal",
    targets=[
        RequestTarget(
            id="published-0",
            description="Published research, page 0",
            url=_SEARCH + "&keyword=&portal=6&statusprogress=0&statuspublished=0"
            "&statuspublished=1&includelimited=0&includelimited=1&includeprivate=0"
            "&type_research=research&resulttype=research&format=json&limit=250&page=0",
        ),
        RequestTarget(
            id="published-1",
            description="Published research, page 1",
            url=_SEARCH + "&keyword=&portal=6&statusprogress=0&statuspublished=0"
            "&statuspublished=1&includelimited=0&includelimited=1&includeprivate=0"
            "&type_research=research&resulttype=research&format=json&limit=250&page=1",
        ),
        RequestTarget(
            id="published-2",
            description="Published research, page 2",
            url=_SEARCH + "&keyword=&portal=6&statusprogress=0&statuspublished=0"
            "&statuspublished=1&includelimited=0&includelimited=1&includeprivate=0"
            "&type_research=research&resulttype=research&format=json&limit=250&page=2",
        ),
        RequestTarget(
            id="lectorate",
            description="Research tagged KonCon Lectorate",
            url=_SEARCH + "&keyword=KonCon+Lectorate&portal=&statusprogress=0"
            "&statusprogress=1&statuspublished=0&statuspublished=1&includelimited=0"
            "&includelimited=1&includeprivate=0&type_research=research"
            "&resulttype=research&format=json&limit=250&page=0",
        ),
        RequestTarget(
            id="sonology",
            description="Research tagged sonology",
            url=_SEARCH + "&keyword=sonology&portal=6&statusprogress=0"
            "&statusprogress=1&statuspublished=0&includelimited=0&includeprivate=0"
            "&type_research=research&resulttype=research&format=json&limit=50&page=0",
        ),
        RequestTarget(
            id="teachers",
            description="Research by teachers of the Royal Conservatoire",
            url=_SEARCH + "&keyword=Research+by+teachers+of+the+Royal+Conservatoire"
            "&portal=&statusprogress=0&statusprogress=1&statuspublished=0"
            "&statuspublished=1&includelimited=0&includelimited=1&includeprivate=0"
            "&type_research=research&resulttype=research&format=json&limit=50&page=0",
        ),
    ],
)

_BUILTIN: Dict[str, TargetSet] = {INTERNAL_RESEARCH.name: INTERNAL_RESEARCH}


def list_target_sets() -> List[str]:
    """List the names of the built-in target sets."""
    return sorted(_BUILTIN)


def get_target_set(name: str) -> TargetSet:
    """Return a built-in target set by name."""
    if name not in _BUILTIN:
        raise KeyError(name)
    return _BUILTIN[name]


def _parse_target_set(cfg: dict, default_name: str) -> TargetSet:
    if not isinstance(cfg, dict):
        raise ValueError("Target set must be a mapping")

    entries = cfg.get("targets")
    if not isinstance(entries, list) or not entries:
        raise ValueError("Target set must list at least one target")

    targets = []
    for index, entry in enumerate(entries):
        if isinstance(entry, str):
            entry = {"id": f"target-{index}", "url": entry}
        targets.append(entry)

    try:
        return TargetSet(
            name=cfg.get("name", default_name),
            filename=cfg.get("filename", DEFAULT_FILENAME),
            description=cfg.get("description"),
            targets=targets,
        )
    except ValidationError as e:
        raise ValueError(f"Invalid target set: {e}") from e


def load_target_set(path: Union[str, Path]) -> TargetSet:
    """
    Load a target set from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a valid target set.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Target set file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    target_set = _parse_target_set(cfg, default_name=path.stem)
    logger.info(f"Loaded {len(target_set.targets)} targets from {path}")
    return target_set
