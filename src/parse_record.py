"""Logic for turning raw extractor output into symbol records."""

from typing import Any

from src.symbol_record import (
    DocParam,
    DocType,
    SourceMeta,
    SymbolRecord,
    TemplateParam,
)


def parse_record(raw: dict[str, Any]) -> SymbolRecord:
    """Build a SymbolRecord from one raw doclet mapping."""
    longname = str(raw.get("longname") or "")
    name = str(raw.get("name") or longname)
    code = (raw.get("meta") or {}).get("code") or {}
    return SymbolRecord(
        longname=longname,
        name=name,
        kind=str(raw.get("kind") or "").strip() or "unknown",
        memberof=_opt_str(raw.get("memberof")),
        scope=_opt_str(raw.get("scope")),
        alias=_opt_str(raw.get("alias")),
        augments=_str_list(raw.get("augments")),
        implements=_str_list(raw.get("implements")),
        overrides=_str_list(raw.get("overrides")),
        templates=_parse_templates(raw.get("templates")),
        description=_text(raw.get("description")),
        summary=_text(raw.get("summary")),
        classdesc=_text(raw.get("classdesc")),
        examples=_str_list(raw.get("examples")),
        see=_str_list(raw.get("see")),
        params=_parse_params(raw.get("params")),
        properties=_parse_params(raw.get("properties")),
        type=_parse_type(raw.get("type")),
        returns=_parse_params(raw.get("returns")),
        yields=_parse_params(raw.get("yields")),
        exceptions=_parse_params(raw.get("exceptions")),
        access=_opt_str(raw.get("access")),
        virtual=bool(raw.get("virtual")),
        readonly=bool(raw.get("readonly")),
        nullable=raw.get("nullable") if isinstance(raw.get("nullable"), bool) else None,
        async_=bool(raw.get("async")),
        generator=bool(raw.get("generator")),
        undocumented=bool(raw.get("undocumented")),
        ignore=bool(raw.get("ignore")),
        code_type=_opt_str(code.get("type")) if isinstance(code, dict) else None,
        meta=_parse_meta(raw.get("meta")),
    )


def _opt_str(v: object) -> str | None:
    return str(v) if v not in (None, "") else None


def _text(v: object) -> str:
    if v is None:
        return ""
    if isinstance(v, list):
        return "\n".join(str(x) for x in v if x)
    return str(v)


def _str_list(v: object) -> list[str]:
    """Normalise a scalar or list value into a list of strings."""
    if v is None or v == "":
        return []
    if isinstance(v, list):
        return [str(x) for x in v if x not in (None, "")]
    return [str(v)]


def _parse_type(v: object) -> DocType | None:
    if isinstance(v, dict):
        return DocType(names=_str_list(v.get("names")))
    if isinstance(v, str) and v:
        return DocType(names=[v])
    return None


def _parse_params(v: object) -> list[DocParam]:
    params: list[DocParam] = []
    for p in v if isinstance(v, list) else []:
        if not isinstance(p, dict):
            continue
        default = p.get("defaultvalue")
        params.append(
            DocParam(
                name=str(p.get("name") or ""),
                type=_parse_type(p.get("type")),
                description=_text(p.get("description")),
                optional=bool(p.get("optional")),
                nullable=p.get("nullable") if isinstance(p.get("nullable"), bool) else None,
                variable=bool(p.get("variable")),
                default_value=None if default is None else str(default),
            ),
        )
    return params


def _parse_templates(v: object) -> dict[str, TemplateParam]:
    """Parse type parameters given as a mapping or as a list of named entries."""
    entries: list[tuple[str, Any]] = []
    if isinstance(v, dict):
        entries = list(v.items())
    elif isinstance(v, list):
        entries = [(str(t.get("name")), t) for t in v if isinstance(t, dict) and t.get("name")]

    templates: dict[str, TemplateParam] = {}
    for key, value in entries:
        value = value if isinstance(value, dict) else {}
        doc_type = _parse_type(value.get("type"))
        default = value.get("defaultvalue")
        templates[str(key)] = TemplateParam(
            type_names=doc_type.names if doc_type else [],
            default_value=None if default is None else str(default),
        )
    return templates


def _parse_meta(v: object) -> SourceMeta | None:
    if not isinstance(v, dict) or not v.get("filename"):
        return None
    lineno = v.get("lineno")
    return SourceMeta(
        filename=str(v["filename"]),
        path=str(v.get("path") or ""),
        lineno=int(lineno) if isinstance(lineno, int) else None,
    )
