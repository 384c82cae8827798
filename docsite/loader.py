"""Load an analysis result from its JSON index file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .logging import get_logger
from .models import (
    AnalysisError,
    AnalysisResult,
    DeclarationInfo,
    FieldInfo,
    ModuleInfo,
    Name,
    TypeFragment,
    parse_name,
)

logger = get_logger("loader")


def load_analysis(path: Path) -> AnalysisResult:
    """Read ``path`` and build the analysis result with its hierarchy."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise AnalysisError(f"Failed to parse {path.name}: {exc}") from exc
    result = analysis_from_dict(data)
    logger.debug("Loaded %d modules from %s", len(result.modules), path)
    return result


def analysis_from_dict(data: Any) -> AnalysisResult:
    if not isinstance(data, dict):
        raise AnalysisError("Analysis index must be a JSON object")
    modules = data.get("modules")
    if not isinstance(modules, list):
        raise AnalysisError("Analysis index must contain a 'modules' list")
    return AnalysisResult.from_modules(_module_from_dict(payload) for payload in modules)


def _module_from_dict(payload: Any) -> ModuleInfo:
    if not isinstance(payload, dict):
        raise AnalysisError("Module entries must be objects")
    name = _require_name(payload, "module")
    members = payload.get("members", [])
    if not isinstance(members, list):
        raise AnalysisError(f"Module {payload['name']} has a non-list 'members'")
    return ModuleInfo(
        name=name,
        members=tuple(_declaration_from_dict(member) for member in members),
        doc=_optional_str(payload.get("doc")),
    )


def _declaration_from_dict(payload: Any) -> DeclarationInfo:
    if not isinstance(payload, dict):
        raise AnalysisError("Declaration entries must be objects")
    name = _require_name(payload, "declaration")
    kind = payload.get("kind", "def")
    if not isinstance(kind, str) or not kind:
        raise AnalysisError(f"Declaration {payload['name']} has an invalid 'kind'")
    return DeclarationInfo(
        kind=kind,
        name=name,
        type=_type_from_payload(payload.get("type")),
        doc=_optional_str(payload.get("doc")),
        fields=_fields_from_list(payload.get("fields"), payload["name"]),
        constructors=_fields_from_list(payload.get("constructors"), payload["name"]),
    )


def _fields_from_list(value: Any, owner: str) -> Tuple[FieldInfo, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise AnalysisError(f"Declaration {owner} has a non-list field or constructor entry")
    fields: List[FieldInfo] = []
    for payload in value:
        if not isinstance(payload, dict):
            raise AnalysisError(f"Field entries of {owner} must be objects")
        fields.append(
            FieldInfo(name=_require_name(payload, "field"), type=_type_from_payload(payload.get("type")))
        )
    return tuple(fields)


def _type_from_payload(value: Any) -> Tuple[TypeFragment, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (TypeFragment(value),)
    if not isinstance(value, list):
        raise AnalysisError("Types must be a string or a list of fragments")
    fragments: List[TypeFragment] = []
    for item in value:
        if isinstance(item, str):
            fragments.append(TypeFragment(item))
            continue
        if not isinstance(item, dict) or not isinstance(item.get("text"), str):
            raise AnalysisError("Type fragments must be strings or objects with 'text'")
        ref = item.get("ref")
        fragments.append(
            TypeFragment(item["text"], parse_name(ref) if isinstance(ref, str) and ref else None)
        )
    return tuple(fragments)


def _require_name(payload: dict, what: str) -> Name:
    name = payload.get("name")
    if not isinstance(name, str):
        raise AnalysisError(f"Every {what} entry needs a string 'name'")
    return parse_name(name)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = ["analysis_from_dict", "load_analysis"]
